import unittest

from crossplay.core.constants import Direction
from crossplay.core.models import Clue, Cursor, Square, SquareEntry
from crossplay.engine.geometry import is_square_in_word, square_key
from crossplay.engine.word_index import (
    WordIndexCache,
    direction_allowed,
    rendered_word,
    selected_word,
    word_letters,
    words_containing_square,
)

CAT = Clue(number=1, text="Pet", answer="CAT", start_row=0, start_col=0, direction=Direction.ACROSS)
CAR = Clue(number=1, text="Vehicle", answer="CAR", start_row=0, start_col=0, direction=Direction.DOWN)
CLUES = (CAT, CAR)


class WordsContainingSquareTests(unittest.TestCase):
    def test_crossing_square_has_both_words(self) -> None:
        self.assertEqual(words_containing_square(Square(col=0, row=0), CLUES), frozenset({CAT, CAR}))

    def test_single_word_square(self) -> None:
        self.assertEqual(words_containing_square(Square(col=2, row=0), CLUES), frozenset({CAT}))
        self.assertEqual(words_containing_square(Square(col=0, row=2), CLUES), frozenset({CAR}))

    def test_uncovered_square(self) -> None:
        self.assertEqual(words_containing_square(Square(col=1, row=1), CLUES), frozenset())

    def test_members_contain_square(self) -> None:
        for col in range(3):
            for row in range(3):
                square = Square(col=col, row=row)
                found = words_containing_square(square, CLUES)
                for clue in CLUES:
                    self.assertEqual(clue in found, is_square_in_word(square, clue))

    def test_absent_clues(self) -> None:
        self.assertEqual(words_containing_square(Square(col=0, row=0), None), frozenset())
        self.assertEqual(words_containing_square(Square(col=0, row=0), ()), frozenset())

    def test_returns_every_match(self) -> None:
        overlapping = Clue(number=7, text="Also", answer="CA", start_row=0, start_col=0, direction=Direction.ACROSS)
        found = words_containing_square(Square(col=1, row=0), CLUES + (overlapping,))
        self.assertEqual(found, frozenset({CAT, overlapping}))


class WordIndexCacheTests(unittest.TestCase):
    def test_same_clue_set_reuses_index(self) -> None:
        cache = WordIndexCache()
        first = cache.get(CLUES)
        self.assertIs(cache.get(CLUES), first)
        self.assertIs(cache.get(list(CLUES)), first)
        self.assertEqual(cache.builds, 1)

    def test_new_clue_set_rebuilds(self) -> None:
        cache = WordIndexCache()
        cache.get(CLUES)
        other = (Clue(number=1, text="Dog", answer="DOG", start_row=2, start_col=0, direction=Direction.ACROSS),)
        index = cache.get(other)
        self.assertEqual(cache.builds, 2)
        self.assertEqual(index.words_containing(Square(col=0, row=0)), frozenset())
        self.assertEqual(len(index.words_containing(Square(col=1, row=2))), 1)

    def test_switching_back_does_not_serve_stale_results(self) -> None:
        cache = WordIndexCache()
        other = (Clue(number=1, text="Dog", answer="DOG", start_row=0, start_col=0, direction=Direction.ACROSS),)
        cache.get(CLUES)
        cache.get(other)
        found = words_containing_square(Square(col=0, row=0), CLUES, cache)
        self.assertEqual(found, frozenset({CAT, CAR}))

    def test_alternating_clue_sets_stay_cached(self) -> None:
        cache = WordIndexCache()
        other = (Clue(number=1, text="Dog", answer="DOG", start_row=2, start_col=0, direction=Direction.ACROSS),)
        for _ in range(10):
            cache.get(CLUES)
            cache.get(other)
        self.assertEqual(cache.builds, 2)
        self.assertEqual(len(cache), 2)

    def test_least_recently_used_entry_is_evicted(self) -> None:
        cache = WordIndexCache(max_entries=2)
        sets = [
            (Clue(number=n, text="w", answer="AB", start_row=n, start_col=0, direction=Direction.ACROSS),)
            for n in range(3)
        ]
        cache.get(sets[0])
        cache.get(sets[1])
        cache.get(sets[0])
        cache.get(sets[2])
        self.assertIn(sets[0], cache)
        self.assertNotIn(sets[1], cache)
        self.assertEqual(len(cache), 2)

    def test_discard_leaves_other_entries(self) -> None:
        cache = WordIndexCache()
        other = (Clue(number=1, text="Dog", answer="DOG", start_row=2, start_col=0, direction=Direction.ACROSS),)
        cache.get(CLUES)
        cache.get(other)
        cache.discard(CLUES)
        self.assertNotIn(CLUES, cache)
        self.assertIn(other, cache)

    def test_invalidate_forces_rebuild(self) -> None:
        cache = WordIndexCache()
        first = cache.get(CLUES)
        cache.invalidate()
        self.assertIsNot(cache.get(CLUES), first)
        self.assertEqual(cache.builds, 2)


class SelectedWordTests(unittest.TestCase):
    def test_matches_cursor_orientation(self) -> None:
        self.assertEqual(selected_word(Cursor(Square(0, 0), Direction.ACROSS), CLUES), CAT)
        self.assertEqual(selected_word(Cursor(Square(0, 0), Direction.DOWN), CLUES), CAR)

    def test_absent_when_orientation_has_no_word(self) -> None:
        self.assertIsNone(selected_word(Cursor(Square(2, 0), Direction.DOWN), CLUES))
        self.assertIsNone(selected_word(None, CLUES))
        self.assertIsNone(selected_word(Cursor(Square(0, 0)), None))

    def test_direction_allowed(self) -> None:
        self.assertTrue(direction_allowed(Cursor(Square(1, 0), Direction.ACROSS), CLUES))
        self.assertFalse(direction_allowed(Cursor(Square(1, 0), Direction.DOWN), CLUES))
        self.assertFalse(direction_allowed(Cursor(Square(1, 1), Direction.ACROSS), CLUES))


class RenderedWordTests(unittest.TestCase):
    def test_letters_along_active_word(self) -> None:
        state = {
            square_key(Square(0, 0)): SquareEntry("c", "ana"),
            square_key(Square(2, 0)): SquareEntry("t", "bo"),
        }
        cursor = Cursor(Square(1, 0), Direction.ACROSS)
        self.assertEqual(word_letters(cursor, CLUES, state), ["c", None, "t"])
        self.assertEqual(rendered_word(cursor, CLUES, state), "ct")

    def test_no_active_word_renders_empty(self) -> None:
        self.assertEqual(rendered_word(Cursor(Square(1, 1)), CLUES, {}), "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
