"""Per-client solving session that owns the cursor."""

from __future__ import annotations

from typing import Optional

from ..core.models import Clue, Cursor, GameState, LetterChange, Puzzle, Square
from ..utils.logger import get_logger
from .navigator import advance, click_square, initial_cursor, retreat, valid_cursor_position
from .reducer import reduce_input
from .word_index import selected_word


LOGGER = get_logger(__name__)


class SolvingSession:
    """Threads cursor state through the pure navigation and input functions.

    Each event replaces ``cursor`` with a new value in one step. Sessions are
    independent; two windows on the same puzzle each hold their own session.
    """

    def __init__(self, puzzle: Optional[Puzzle], cursor: Optional[Cursor] = None) -> None:
        self.puzzle = puzzle
        if cursor is not None and not valid_cursor_position(cursor.square, puzzle):
            LOGGER.debug("Discarding off-grid starting cursor %s", cursor)
            cursor = None
        self.cursor: Optional[Cursor] = cursor or initial_cursor(puzzle)

    def load(self, puzzle: Optional[Puzzle]) -> None:
        """Switch puzzles and reset the cursor.

        The shared word-index cache is keyed by clue content, so the new
        puzzle gets its own entry and other sessions keep theirs.
        """

        self.puzzle = puzzle
        self.cursor = initial_cursor(puzzle)

    def active_clue(self) -> Optional[Clue]:
        if self.puzzle is None:
            return None
        return selected_word(self.cursor, self.puzzle.clues)

    def click(self, square: Square) -> Optional[Cursor]:
        if not valid_cursor_position(square, self.puzzle):
            return self.cursor
        self.cursor = click_square(square, self.puzzle.clues, self.cursor)
        return self.cursor

    def move_next(self) -> Optional[Cursor]:
        if self.cursor is not None:
            self.cursor = advance(self.cursor, self.puzzle)
        return self.cursor

    def move_prev(self) -> Optional[Cursor]:
        if self.cursor is not None:
            self.cursor = retreat(self.cursor, self.puzzle)
        return self.cursor

    def handle_text(
        self,
        new_text: str,
        game_state: GameState,
        prior_text: Optional[str] = None,
    ) -> Optional[LetterChange]:
        """Reduce one edit event and return the change for the store to apply."""

        outcome = reduce_input(self.cursor, self.puzzle, game_state, new_text, prior_text)
        self.cursor = outcome.cursor
        return outcome.change
