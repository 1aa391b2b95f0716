"""Shared constants and enumerations for the crossword solving core."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Word orientations; every square belongs to at most one word of each."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    def other(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS

    @property
    def across(self) -> bool:
        return self is Direction.ACROSS

    @classmethod
    def from_across(cls, across: bool) -> "Direction":
        return cls.ACROSS if across else cls.DOWN


# (d_col, d_row) applied when stepping forward along a word.
FORWARD_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.ACROSS: (1, 0),
    Direction.DOWN: (0, 1),
}

SQUARE_KEY_FORMAT = "c{col}r{row}"
