"""Puzzle JSON parsing, local loading and HTTP fetching.

Puzzle documents use the shape the game server broadcasts::

    {
      "title": "Mini",
      "grid-size": 3,
      "grid": {"0": {"0": {"number": 1}, "1": {}, "2": {}}},
      "clues": [{"number": 1, "clue": "Pet", "answer": "CAT",
                 "start-row": 0, "start-col": 0, "across?": true}]
    }

Row and column keys are stringified integers; a ``null`` cell is treated as
absent. Snake-case aliases are accepted on input, kebab-case is written on
output.
"""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urljoin

import requests

from ..core.constants import Direction
from ..core.exceptions import PuzzleFetchError, PuzzleLoadError
from ..core.models import Clue, GridCell, Puzzle
from ..engine.geometry import squares_in_word
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

# Same letters the input reducer accepts.
ANSWER_RE = re.compile(r"[A-Za-z]+")


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-numeric %s=%r", name, raw)
        return default


@dataclass
class LoaderConfig:
    """Settings for fetching remote puzzles."""

    base_url: Optional[str] = field(default_factory=lambda: os.environ.get("CROSSPLAY_PUZZLE_URL"))
    timeout_seconds: float = field(default_factory=lambda: _env_float("CROSSPLAY_TIMEOUT", 10.0))


# ----------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------
def _first(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise PuzzleLoadError(f"Expected integer for {what}, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise PuzzleLoadError(f"Expected integer for {what}, got {value!r}") from exc


def _parse_direction(data: Mapping[str, Any], number: Any) -> Direction:
    flag = _first(data, "across?", "across")
    if flag is not None:
        if not isinstance(flag, bool):
            raise PuzzleLoadError(f"Clue {number} across flag must be true or false, got {flag!r}")
        return Direction.from_across(flag)
    raw = data.get("direction")
    if raw is None:
        raise PuzzleLoadError(f"Clue {number} has no orientation")
    try:
        return Direction(str(raw).upper())
    except ValueError as exc:
        raise PuzzleLoadError(f"Clue {number} has unknown direction {raw!r}") from exc


def clue_from_dict(data: Mapping[str, Any]) -> Clue:
    if not isinstance(data, Mapping):
        raise PuzzleLoadError(f"Clue entry must be an object, got {data!r}")
    number = _as_int(data.get("number"), "clue number")
    answer = str(_first(data, "answer", default="")).strip()
    if not ANSWER_RE.fullmatch(answer):
        raise PuzzleLoadError(f"Clue {number} has invalid answer {answer!r}")
    start_row = _as_int(_first(data, "start-row", "start_row"), f"clue {number} start row")
    start_col = _as_int(_first(data, "start-col", "start_col"), f"clue {number} start column")
    if start_row < 0 or start_col < 0:
        raise PuzzleLoadError(f"Clue {number} starts outside the grid")
    return Clue(
        number=number,
        text=str(_first(data, "clue", "text", default="")),
        answer=answer,
        start_row=start_row,
        start_col=start_col,
        direction=_parse_direction(data, number),
    )


def _parse_grid(raw: Mapping[str, Any]) -> Dict[int, Dict[int, GridCell]]:
    grid: Dict[int, Dict[int, GridCell]] = {}
    for row_key, row in raw.items():
        if row is None:
            continue
        if not isinstance(row, Mapping):
            raise PuzzleLoadError(f"Grid row {row_key!r} must be an object")
        cells: Dict[int, GridCell] = {}
        for col_key, cell in row.items():
            if cell is None:
                continue
            number = cell.get("number") if isinstance(cell, Mapping) else None
            cells[_as_int(col_key, "grid column")] = GridCell(
                number=_as_int(number, "cell number") if number is not None else None
            )
        if cells:
            grid[_as_int(row_key, "grid row")] = cells
    return grid


def grid_from_clues(clues: List[Clue]) -> Dict[int, Dict[int, GridCell]]:
    """Derive the playable cells from clue footprints, numbering the starts."""

    grid: Dict[int, Dict[int, GridCell]] = {}
    for clue in clues:
        for square in squares_in_word(clue):
            grid.setdefault(square.row, {}).setdefault(square.col, GridCell())
    for clue in clues:
        grid[clue.start_row][clue.start_col] = GridCell(number=clue.number)
    return grid


def _validate(grid: Mapping[int, Mapping[int, GridCell]], clues: List[Clue], grid_size: int) -> None:
    for row, cells in grid.items():
        for col in cells:
            if not (0 <= row < grid_size and 0 <= col < grid_size):
                raise PuzzleLoadError(f"Grid cell ({row},{col}) outside grid size {grid_size}")
    for clue in clues:
        for square in squares_in_word(clue):
            if square.col >= grid_size or square.row >= grid_size:
                raise PuzzleLoadError(f"Clue {clue.label} runs past grid size {grid_size}")
            if square.col not in grid.get(square.row, {}):
                raise PuzzleLoadError(
                    f"Clue {clue.label} covers missing cell ({square.row},{square.col})"
                )


def puzzle_from_dict(data: Mapping[str, Any]) -> Puzzle:
    """Build and validate a :class:`Puzzle` from decoded JSON."""

    if not isinstance(data, Mapping):
        raise PuzzleLoadError("Puzzle document must be a JSON object")
    raw_clues = data.get("clues")
    if not isinstance(raw_clues, list):
        raise PuzzleLoadError("Puzzle document has no clue list")
    clues = [clue_from_dict(entry) for entry in raw_clues]

    raw_grid = data.get("grid")
    if raw_grid is None:
        grid = grid_from_clues(clues)
    elif isinstance(raw_grid, Mapping):
        grid = _parse_grid(raw_grid)
    else:
        raise PuzzleLoadError("Puzzle grid must be an object keyed by row")

    size_value = _first(data, "grid-size", "grid_size")
    if size_value is None:
        extent = [row for row in grid] + [col for cells in grid.values() for col in cells]
        grid_size = max(extent) + 1 if extent else 0
    else:
        grid_size = _as_int(size_value, "grid size")

    _validate(grid, clues, grid_size)
    return Puzzle(
        grid=grid,
        clues=tuple(clues),
        grid_size=grid_size,
        title=str(data.get("title") or ""),
    )


def puzzle_to_jsonable(puzzle: Puzzle) -> Dict[str, Any]:
    grid: Dict[str, Dict[str, Dict[str, int]]] = {}
    for row in sorted(puzzle.grid):
        grid[str(row)] = {
            str(col): ({"number": cell.number} if cell.number is not None else {})
            for col, cell in sorted(puzzle.grid[row].items())
        }
    return {
        "title": puzzle.title,
        "grid-size": puzzle.grid_size,
        "grid": grid,
        "clues": [
            {
                "number": clue.number,
                "clue": clue.text,
                "answer": clue.answer,
                "start-row": clue.start_row,
                "start-col": clue.start_col,
                "across?": clue.across,
            }
            for clue in puzzle.clues
        ],
    }


# ----------------------------------------------------------------------
# Sources
# ----------------------------------------------------------------------
def load_puzzle(path: Path | str) -> Puzzle:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PuzzleLoadError(f"Cannot read puzzle {path}: {exc}") from exc
    puzzle = puzzle_from_dict(data)
    LOGGER.info("Loaded puzzle %r from %s (%d clues)", puzzle.title, path, len(puzzle.clues))
    return puzzle


def fetch_puzzle(url: str, config: Optional[LoaderConfig] = None) -> Puzzle:
    """GET a puzzle document; relative URLs resolve against ``config.base_url``."""

    config = config or LoaderConfig()
    if config.base_url and not _is_url(url):
        url = urljoin(config.base_url, url)
    try:
        response = requests.get(url, timeout=config.timeout_seconds)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as exc:
        raise PuzzleFetchError(f"Puzzle request failed: {exc}") from exc
    except ValueError as exc:
        raise PuzzleFetchError(f"Puzzle response from {url} is not JSON") from exc
    puzzle = puzzle_from_dict(data)
    LOGGER.info("Fetched puzzle %r from %s (%d clues)", puzzle.title, url, len(puzzle.clues))
    return puzzle


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def open_puzzle(source: str, config: Optional[LoaderConfig] = None) -> Puzzle:
    """Load from a URL, a local path, or a path relative to the configured base URL."""

    config = config or LoaderConfig()
    if _is_url(source):
        return fetch_puzzle(source, config)
    if Path(source).exists() or not config.base_url:
        return load_puzzle(source)
    return fetch_puzzle(source, config)


__all__ = [
    "LoaderConfig",
    "clue_from_dict",
    "fetch_puzzle",
    "grid_from_clues",
    "load_puzzle",
    "open_puzzle",
    "puzzle_from_dict",
    "puzzle_to_jsonable",
]
