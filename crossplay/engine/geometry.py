"""Square keys and word footprints."""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.constants import FORWARD_STEPS, SQUARE_KEY_FORMAT
from ..core.models import Clue, Square


def square_key(square: Square) -> str:
    """Canonical mapping key for ``square``, shared by cursor and game-state lookups."""

    return SQUARE_KEY_FORMAT.format(col=square.col, row=square.row)


def squares_in_word(clue: Clue) -> Tuple[Square, ...]:
    """Return the squares covered by ``clue`` in reading order."""

    d_col, d_row = FORWARD_STEPS[clue.direction]
    return tuple(
        Square(col=clue.start_col + d_col * i, row=clue.start_row + d_row * i)
        for i in range(clue.length)
    )


def is_square_in_word(square: Square, clue: Optional[Clue]) -> bool:
    if clue is None:
        return False
    return square in squares_in_word(clue)


def word_end(clue: Clue) -> Square:
    d_col, d_row = FORWARD_STEPS[clue.direction]
    offset = max(clue.length - 1, 0)
    return clue.start.shifted(d_col * offset, d_row * offset)
