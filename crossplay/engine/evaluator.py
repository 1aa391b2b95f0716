"""Correctness checks for words, squares and whole puzzles."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.models import Clue, GameState, Progress, Puzzle, Square
from .geometry import square_key, squares_in_word
from .word_index import words_containing_square


def _stored_letter(game_state: GameState, square: Square) -> Optional[str]:
    entry = game_state.get(square_key(square))
    return entry.letter if entry is not None else None


def word_correct(clue: Clue, game_state: GameState) -> bool:
    """Pair each square of the word with its answer letter and require a match."""

    for square, correct_letter in zip(squares_in_word(clue), clue.answer):
        stored = _stored_letter(game_state, square)
        if not stored or stored.lower() != correct_letter.lower():
            return False
    return True


def square_correct(square: Square, clues: Optional[Sequence[Clue]], game_state: GameState) -> bool:
    """True once either word through ``square`` is fully solved."""

    return any(word_correct(clue, game_state) for clue in words_containing_square(square, clues))


def puzzle_complete(puzzle: Optional[Puzzle], game_state: GameState) -> bool:
    if puzzle is None:
        return False
    return all(word_correct(clue, game_state) for clue in puzzle.clues)


def solved_clues(puzzle: Optional[Puzzle], game_state: GameState) -> List[Clue]:
    if puzzle is None:
        return []
    return [clue for clue in puzzle.clues if word_correct(clue, game_state)]


def progress(puzzle: Optional[Puzzle], game_state: GameState) -> Progress:
    """Count solved clues and filled squares."""

    if puzzle is None:
        return Progress()
    solved = solved_clues(puzzle, game_state)
    squares = {square for clue in puzzle.clues for square in squares_in_word(clue)}
    filled = sum(1 for square in squares if _stored_letter(game_state, square))
    return Progress(
        solved=len(solved),
        total=len(puzzle.clues),
        filled=filled,
        squares=len(squares),
        solved_labels=tuple(clue.label for clue in solved),
    )
