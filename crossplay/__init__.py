"""Collaborative crossword solving core.

This package exposes the public API surface via:

- ``crossplay.engine.navigator``: cursor clicks and single-square moves.
- ``crossplay.engine.evaluator``: word, square and puzzle correctness.
- ``crossplay.engine.reducer.reduce_input``: text-edit events to letter changes.
- ``crossplay.engine.session.SolvingSession``: per-client cursor ownership.
- ``crossplay.io.puzzle_loader``: puzzle JSON from files or HTTP.
"""

from .core.constants import Direction
from .core.models import Clue, Cursor, GridCell, LetterChange, Puzzle, Square, SquareEntry
from .engine.evaluator import puzzle_complete, square_correct, word_correct
from .engine.navigator import advance, click_square, retreat
from .engine.reducer import InputOutcome, reduce_input
from .engine.session import SolvingSession

__all__ = [
    "Clue",
    "Cursor",
    "Direction",
    "GridCell",
    "InputOutcome",
    "LetterChange",
    "Puzzle",
    "SolvingSession",
    "Square",
    "SquareEntry",
    "advance",
    "click_square",
    "puzzle_complete",
    "reduce_input",
    "retreat",
    "square_correct",
    "word_correct",
]

__version__ = "0.1.0"
