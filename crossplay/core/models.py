"""Data models shared by the solving core and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Square:
    """A single grid cell addressed by column and row."""

    col: int
    row: int

    def shifted(self, d_col: int, d_row: int) -> "Square":
        return Square(col=self.col + d_col, row=self.row + d_row)


@dataclass(frozen=True)
class Clue:
    """One crossword entry. The footprint is derived from the start and answer."""

    number: int
    text: str
    answer: str
    start_row: int
    start_col: int
    direction: Direction

    @property
    def across(self) -> bool:
        return self.direction.across

    @property
    def length(self) -> int:
        return len(self.answer)

    @property
    def start(self) -> Square:
        return Square(col=self.start_col, row=self.start_row)

    @property
    def label(self) -> str:
        return f"{self.number}{'A' if self.across else 'D'}"


@dataclass(frozen=True)
class GridCell:
    """A playable cell; ``number`` is set on cells where a clue starts."""

    number: Optional[int] = None


@dataclass(frozen=True)
class Puzzle:
    """Immutable puzzle definition for one solving session."""

    grid: Mapping[int, Mapping[int, GridCell]]
    clues: Tuple[Clue, ...]
    grid_size: int
    title: str = ""

    def __post_init__(self) -> None:
        # Rows and the outer mapping are both read-only views over private copies.
        frozen = {row: MappingProxyType(dict(cells)) for row, cells in self.grid.items()}
        object.__setattr__(self, "grid", MappingProxyType(frozen))
        object.__setattr__(self, "clues", tuple(self.clues))

    def __hash__(self) -> int:
        return hash((self.clues, self.grid_size, self.title))

    def cell(self, square: Square) -> Optional[GridCell]:
        return self.grid.get(square.row, {}).get(square.col)

    def has_square(self, square: Square) -> bool:
        return self.cell(square) is not None


@dataclass(frozen=True)
class Cursor:
    """User focus square plus the orientation letters are entered in."""

    square: Square
    direction: Direction = Direction.ACROSS

    @property
    def across(self) -> bool:
        return self.direction.across

    def with_direction(self, direction: Direction) -> "Cursor":
        return Cursor(square=self.square, direction=direction)


@dataclass(frozen=True)
class SquareEntry:
    """A filled-in letter and the user who last wrote it."""

    letter: Optional[str] = None
    user: Optional[str] = None


# Keyed by ``engine.geometry.square_key``.
GameState = Mapping[str, SquareEntry]


@dataclass(frozen=True)
class LetterChange:
    """Effect proposed to the store: write ``letter`` at ``square`` or clear it."""

    square: Square
    letter: Optional[str] = None

    @property
    def is_clear(self) -> bool:
        return self.letter is None


@dataclass(frozen=True)
class Progress:
    """Summary counts for a game state against a puzzle."""

    solved: int = 0
    total: int = 0
    filled: int = 0
    squares: int = 0
    solved_labels: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def complete(self) -> bool:
        return self.solved == self.total
