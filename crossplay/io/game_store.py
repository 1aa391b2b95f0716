"""In-memory game store applying letter changes proposed by the reducer.

Stands in for the shared multi-user store: it owns the game state, applies
``LetterChange`` effects tagged with the writing user, and notifies
subscribers with the new snapshot.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Callable, Dict, List, Optional

from ..core.models import GameState, LetterChange, SquareEntry
from ..engine.geometry import square_key
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Subscriber = Callable[[GameState, LetterChange], None]


class LocalGameStore:
    """Single-process game store with subscription callbacks."""

    def __init__(self, initial: Optional[GameState] = None) -> None:
        self._state: Dict[str, SquareEntry] = dict(initial or {})
        self._subscribers: List[Subscriber] = []

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def snapshot(self) -> GameState:
        """Read-only copy of the current state; later writes do not leak into it."""

        return MappingProxyType(dict(self._state))

    def apply(self, change: Optional[LetterChange], user: Optional[str] = None) -> GameState:
        if change is None:
            return self.snapshot()
        key = square_key(change.square)
        if change.is_clear:
            self._state.pop(key, None)
        else:
            self._state[key] = SquareEntry(letter=change.letter, user=user)
        LOGGER.debug("Applied %s at %s for %s", change.letter or "clear", key, user)
        snapshot = self.snapshot()
        for subscriber in list(self._subscribers):
            subscriber(snapshot, change)
        return snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; the returned callable unsubscribes it."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def scores(self) -> Dict[str, int]:
        """Letters currently on the board per user."""

        counts = Counter(
            entry.user for entry in self._state.values() if entry.letter and entry.user
        )
        return dict(counts)

    def reset(self) -> None:
        self._state.clear()
