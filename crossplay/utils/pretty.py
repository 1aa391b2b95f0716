"""Plain-text rendering of a board for terminals and logs."""

from __future__ import annotations

import sys
from typing import Optional

from ..core.models import Clue, Cursor, GameState, Puzzle, Square
from ..engine.evaluator import progress, puzzle_complete, square_correct
from ..engine.geometry import is_square_in_word, square_key
from ..engine.word_index import selected_word


def cell_symbol(puzzle: Puzzle, game_state: GameState, square: Square) -> str:
    if not puzzle.has_square(square):
        return "#"
    entry = game_state.get(square_key(square))
    if entry is not None and entry.letter:
        return entry.letter.upper()
    return "."


def format_board(puzzle: Puzzle, game_state: GameState, cursor: Optional[Cursor] = None) -> str:
    """Grid with column/row headers.

    The cursor square is bracketed, the rest of the active word is marked with
    ``:`` and squares in solved words get a trailing ``*``.
    """

    size = puzzle.grid_size
    active = selected_word(cursor, puzzle.clues)
    lines = ["    " + "".join(f"{c:^4}" for c in range(size))]
    lines.append("    " + "-" * (4 * size))
    for r in range(size):
        cells = []
        for c in range(size):
            square = Square(col=c, row=r)
            symbol = cell_symbol(puzzle, game_state, square)
            if cursor is not None and cursor.square == square:
                left, right = "[", "]"
            elif is_square_in_word(square, active):
                left, right = ":", " "
            else:
                left, right = " ", " "
            if symbol != "#" and square_correct(square, puzzle.clues, game_state):
                right = "*" if right == " " else right
            cells.append(f"{left}{symbol}{right} ")
        lines.append(f"{r:>2} |" + "".join(cells).rstrip())
    return "\n".join(lines)


def format_clue(clue: Optional[Clue]) -> str:
    """Clue line for the active word; empty when there is none."""

    if clue is None:
        return ""
    return f"{clue.label}. {clue.text} ({clue.length})"


def pretty_print_board(
    puzzle: Puzzle,
    game_state: GameState,
    cursor: Optional[Cursor] = None,
    *,
    stream=None,
) -> None:
    """Print the board, the active clue and a progress line."""

    stream = stream or sys.stdout
    if puzzle.title:
        print(puzzle.title, file=stream)
    print(format_board(puzzle, game_state, cursor), file=stream)
    clue_line = format_clue(selected_word(cursor, puzzle.clues))
    if clue_line:
        print(clue_line, file=stream)
    stats = progress(puzzle, game_state)
    print(
        f"Solved {stats.solved}/{stats.total} words, {stats.filled}/{stats.squares} squares filled",
        file=stream,
    )
    if puzzle_complete(puzzle, game_state):
        print("Puzzle solved!", file=stream)
