from __future__ import annotations


class Scoreboard:
    """Food eaten since the last restart."""

    def __init__(self):
        self._score = 0

    @property
    def score(self) -> int:
        return self._score

    def increment(self) -> int:
        self._score += 1
        return self._score

    def reset(self) -> None:
        self._score = 0

    def __repr__(self):
        return f"Scoreboard(score={self._score})"
