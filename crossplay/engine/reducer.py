"""Pure reduction of one text-edit event into a cursor move and a letter change."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..core.models import Cursor, GameState, LetterChange, Puzzle
from ..utils.logger import get_logger
from .evaluator import square_correct
from .navigator import advance, retreat
from .word_index import rendered_word


LOGGER = get_logger(__name__)

LETTER_RE = re.compile(r"[a-zA-Z]")


@dataclass(frozen=True)
class InputOutcome:
    """Next cursor plus the change, if any, the store should apply."""

    cursor: Optional[Cursor]
    change: Optional[LetterChange] = None


def reduce_input(
    cursor: Optional[Cursor],
    puzzle: Optional[Puzzle],
    game_state: GameState,
    new_text: str,
    prior_text: Optional[str] = None,
) -> InputOutcome:
    """Reduce an edit of the active word's text.

    Growth by one letter writes it at the cursor and advances. Shrinking (or
    an edit that keeps the length) clears the cursor square and retreats.
    Squares already inside a solved word are never rewritten, but the cursor
    still moves. Anything else is ignored.
    """

    if cursor is None or puzzle is None:
        return InputOutcome(cursor=cursor)

    if prior_text is None:
        prior_text = rendered_word(cursor, puzzle.clues, game_state)
    locked = square_correct(cursor.square, puzzle.clues, game_state)

    grown = len(new_text) - len(prior_text)
    if grown > 0:
        letter = new_text[-1]
        if grown > 1 or not LETTER_RE.fullmatch(letter):
            LOGGER.debug("Ignoring edit %r at %s", new_text[len(prior_text):], cursor.square)
            return InputOutcome(cursor=cursor)
        change = None if locked else LetterChange(square=cursor.square, letter=letter.lower())
        return InputOutcome(cursor=advance(cursor, puzzle), change=change)

    change = None if locked else LetterChange(square=cursor.square, letter=None)
    return InputOutcome(cursor=retreat(cursor, puzzle), change=change)
