"""Cursor transitions: clicks and single-square moves."""

from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import FORWARD_STEPS, Direction
from ..core.models import Clue, Cursor, Puzzle, Square
from .word_index import direction_allowed


def valid_cursor_position(square: Square, puzzle: Optional[Puzzle]) -> bool:
    """Check if the square exists on the puzzle grid."""

    return puzzle is not None and puzzle.has_square(square)


def _settle(cursor: Cursor, clues: Optional[Sequence[Clue]]) -> Cursor:
    # Flip at most once so the cursor lands on a word when the square has one.
    if direction_allowed(cursor, clues):
        return cursor
    return cursor.with_direction(cursor.direction.other())


def click_square(
    square: Square,
    clues: Optional[Sequence[Clue]],
    previous: Optional[Cursor] = None,
) -> Cursor:
    """Cursor after a click; clicking the focused square toggles orientation."""

    if previous is None:
        direction = Direction.ACROSS
    elif previous.square == square:
        direction = previous.direction.other()
    else:
        direction = previous.direction
    return _settle(Cursor(square=square, direction=direction), clues)


def _step(cursor: Cursor, puzzle: Optional[Puzzle], sign: int) -> Cursor:
    if puzzle is None:
        return cursor
    d_col, d_row = FORWARD_STEPS[cursor.direction]
    candidate = cursor.square.shifted(d_col * sign, d_row * sign)
    # Never leave the grid; no wrapping onto the next clue.
    if not valid_cursor_position(candidate, puzzle):
        return cursor
    return _settle(Cursor(square=candidate, direction=cursor.direction), puzzle.clues)


def advance(cursor: Cursor, puzzle: Optional[Puzzle]) -> Cursor:
    return _step(cursor, puzzle, 1)


def retreat(cursor: Cursor, puzzle: Optional[Puzzle]) -> Cursor:
    return _step(cursor, puzzle, -1)


def initial_cursor(puzzle: Optional[Puzzle]) -> Optional[Cursor]:
    """Starting cursor: the first across clue, else the first clue of any kind."""

    if puzzle is None or not puzzle.clues:
        return None
    across = [clue for clue in puzzle.clues if clue.across]
    first = min(across or puzzle.clues, key=lambda clue: clue.number)
    return Cursor(square=first.start, direction=first.direction)
