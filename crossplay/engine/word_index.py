"""Square-to-word lookups with a clue-set keyed cache."""

from __future__ import annotations

from collections import OrderedDict, defaultdict
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.models import Clue, Cursor, GameState, Square
from ..utils.logger import get_logger
from .geometry import square_key, squares_in_word


LOGGER = get_logger(__name__)

ClueKey = Tuple[Clue, ...]

_EMPTY: FrozenSet[Clue] = frozenset()


class WordIndex:
    """Immutable map from each square to the clues whose footprint covers it."""

    def __init__(self, clues: Iterable[Clue]) -> None:
        self.clues: ClueKey = tuple(clues)
        covering: Dict[Square, Set[Clue]] = defaultdict(set)
        for clue in self.clues:
            for square in squares_in_word(clue):
                covering[square].add(clue)
        self._covering: Dict[Square, FrozenSet[Clue]] = {
            square: frozenset(found) for square, found in covering.items()
        }

    def words_containing(self, square: Square) -> FrozenSet[Clue]:
        return self._covering.get(square, _EMPTY)

    def __len__(self) -> int:
        return len(self._covering)


class WordIndexCache:
    """Bounded LRU of word indexes keyed by clue set.

    The cache key is the clue tuple itself (frozen clues compare by value), so
    a different puzzle never sees a stale index. Several puzzles in use at
    once each keep their entry up to ``max_entries``. Every update builds a
    new mapping and installs it in a single assignment, so a reader that
    already fetched ``_entries`` keeps a consistent view.
    """

    def __init__(self, max_entries: int = 8) -> None:
        self.max_entries = max(1, max_entries)
        self._entries: "OrderedDict[ClueKey, WordIndex]" = OrderedDict()
        self.builds = 0

    def get(self, clues: Sequence[Clue]) -> WordIndex:
        key = clues if isinstance(clues, tuple) else tuple(clues)
        entries = self._entries
        index = entries.get(key)
        if index is not None:
            if next(reversed(entries)) != key:
                updated = OrderedDict(entries)
                updated.move_to_end(key)
                self._entries = updated
            return index

        index = WordIndex(key)
        updated = OrderedDict(entries)
        updated[key] = index
        while len(updated) > self.max_entries:
            updated.popitem(last=False)
        self._entries = updated
        self.builds += 1
        LOGGER.debug("Built word index for %d clues covering %d squares", len(key), len(index))
        return index

    def discard(self, clues: Optional[Sequence[Clue]]) -> None:
        """Forget one clue set, leaving other puzzles' indexes in place."""

        if not clues:
            return
        key = clues if isinstance(clues, tuple) else tuple(clues)
        if key in self._entries:
            updated = OrderedDict(self._entries)
            del updated[key]
            self._entries = updated

    def invalidate(self) -> None:
        self._entries = OrderedDict()

    def __contains__(self, clues: Sequence[Clue]) -> bool:
        return tuple(clues) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_CACHE = WordIndexCache()


def invalidate_word_index() -> None:
    """Drop every cached index."""

    DEFAULT_CACHE.invalidate()


def words_containing_square(
    square: Optional[Square],
    clues: Optional[Sequence[Clue]],
    cache: Optional[WordIndexCache] = None,
) -> FrozenSet[Clue]:
    if square is None or not clues:
        return _EMPTY
    if cache is None:
        cache = DEFAULT_CACHE
    return cache.get(clues).words_containing(square)


def selected_word(
    cursor: Optional[Cursor],
    clues: Optional[Sequence[Clue]],
    cache: Optional[WordIndexCache] = None,
) -> Optional[Clue]:
    """Return the clue under the cursor in the cursor's orientation, if any."""

    if cursor is None:
        return None
    matches = [
        clue
        for clue in words_containing_square(cursor.square, clues, cache)
        if clue.direction == cursor.direction
    ]
    if not matches:
        return None
    # Well-formed puzzles have one match; keep ties deterministic.
    return min(matches, key=lambda clue: (clue.number, clue.start_row, clue.start_col))


def direction_allowed(
    cursor: Cursor,
    clues: Optional[Sequence[Clue]],
    cache: Optional[WordIndexCache] = None,
) -> bool:
    return any(
        clue.direction == cursor.direction
        for clue in words_containing_square(cursor.square, clues, cache)
    )


def word_letters(
    cursor: Optional[Cursor],
    clues: Optional[Sequence[Clue]],
    game_state: GameState,
) -> List[Optional[str]]:
    """Stored letters along the active word, ``None`` for blank squares."""

    clue = selected_word(cursor, clues)
    if clue is None:
        return []
    letters: List[Optional[str]] = []
    for square in squares_in_word(clue):
        entry = game_state.get(square_key(square))
        letters.append(entry.letter if entry is not None else None)
    return letters


def rendered_word(
    cursor: Optional[Cursor],
    clues: Optional[Sequence[Clue]],
    game_state: GameState,
) -> str:
    """Text the edit widget shows for the active word."""

    return "".join(letter for letter in word_letters(cursor, clues, game_state) if letter)
