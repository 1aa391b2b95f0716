import unittest

from crossplay.core.constants import Direction
from crossplay.core.models import Clue, Cursor, Puzzle, Square
from crossplay.engine.navigator import (
    advance,
    click_square,
    initial_cursor,
    retreat,
    valid_cursor_position,
)
from crossplay.io.puzzle_loader import grid_from_clues


def build_puzzle(*clues: Clue, size: int = 3) -> Puzzle:
    return Puzzle(grid=grid_from_clues(list(clues)), clues=tuple(clues), grid_size=size)


def across(number: int, answer: str, row: int, col: int) -> Clue:
    return Clue(number, f"{answer} across", answer, row, col, Direction.ACROSS)


def down(number: int, answer: str, row: int, col: int) -> Clue:
    return Clue(number, f"{answer} down", answer, row, col, Direction.DOWN)


# C A T
# A R E
# R E D
FULL = build_puzzle(
    across(1, "CAT", 0, 0),
    across(4, "ARE", 1, 0),
    across(5, "RED", 2, 0),
    down(1, "CAR", 0, 0),
    down(2, "ARE", 0, 1),
    down(3, "TED", 0, 2),
)

# C A T
# A
# R
CORNER = build_puzzle(across(1, "CAT", 0, 0), down(1, "CAR", 0, 0))


class ClickTests(unittest.TestCase):
    def test_click_same_square_flips_to_down(self) -> None:
        cursor = Cursor(Square(0, 0), Direction.ACROSS)
        self.assertEqual(
            click_square(Square(0, 0), CORNER.clues, cursor),
            Cursor(Square(0, 0), Direction.DOWN),
        )

    def test_click_same_square_without_down_word_stays_across(self) -> None:
        cursor = Cursor(Square(1, 0), Direction.ACROSS)
        self.assertEqual(
            click_square(Square(1, 0), CORNER.clues, cursor),
            Cursor(Square(1, 0), Direction.ACROSS),
        )

    def test_click_new_square_keeps_orientation(self) -> None:
        cursor = Cursor(Square(0, 0), Direction.DOWN)
        self.assertEqual(
            click_square(Square(1, 1), FULL.clues, cursor),
            Cursor(Square(1, 1), Direction.DOWN),
        )

    def test_click_new_square_falls_back_to_available_word(self) -> None:
        cursor = Cursor(Square(0, 0), Direction.DOWN)
        self.assertEqual(
            click_square(Square(2, 0), CORNER.clues, cursor),
            Cursor(Square(2, 0), Direction.ACROSS),
        )

    def test_first_click_defaults_to_across(self) -> None:
        self.assertEqual(click_square(Square(0, 2), CORNER.clues), Cursor(Square(0, 2), Direction.DOWN))
        self.assertEqual(click_square(Square(1, 1), FULL.clues), Cursor(Square(1, 1), Direction.ACROSS))


class StepTests(unittest.TestCase):
    def test_advance_across_and_down(self) -> None:
        self.assertEqual(advance(Cursor(Square(0, 0), Direction.ACROSS), FULL), Cursor(Square(1, 0), Direction.ACROSS))
        self.assertEqual(advance(Cursor(Square(0, 0), Direction.DOWN), FULL), Cursor(Square(0, 1), Direction.DOWN))

    def test_retreat_across_and_down(self) -> None:
        self.assertEqual(retreat(Cursor(Square(2, 1), Direction.ACROSS), FULL), Cursor(Square(1, 1), Direction.ACROSS))
        self.assertEqual(retreat(Cursor(Square(1, 2), Direction.DOWN), FULL), Cursor(Square(1, 1), Direction.DOWN))

    def test_round_trip_away_from_edges(self) -> None:
        for direction in Direction:
            cursor = Cursor(Square(1, 1), direction)
            self.assertEqual(retreat(advance(cursor, FULL), FULL), cursor)
            self.assertEqual(advance(retreat(cursor, FULL), FULL), cursor)

    def test_advance_at_right_edge_is_noop(self) -> None:
        cursor = Cursor(Square(2, 0), Direction.ACROSS)
        self.assertEqual(advance(cursor, CORNER), cursor)
        self.assertEqual(advance(cursor, FULL), cursor)

    def test_retreat_at_top_edge_is_noop(self) -> None:
        cursor = Cursor(Square(0, 0), Direction.DOWN)
        self.assertEqual(retreat(cursor, CORNER), cursor)

    def test_step_into_missing_cell_is_noop(self) -> None:
        cursor = Cursor(Square(0, 1), Direction.ACROSS)
        self.assertEqual(advance(cursor, CORNER), cursor)

    def test_landing_without_word_flips_orientation(self) -> None:
        # A B D
        #     E
        puzzle = build_puzzle(across(1, "AB", 0, 0), down(2, "DE", 0, 2))
        moved = advance(Cursor(Square(1, 0), Direction.ACROSS), puzzle)
        self.assertEqual(moved, Cursor(Square(2, 0), Direction.DOWN))

    def test_no_wrap_past_word_end(self) -> None:
        # A B . D E: the gap stops the cursor even though another word follows.
        puzzle = build_puzzle(across(1, "AB", 0, 0), across(2, "DE", 0, 3), size=5)
        cursor = Cursor(Square(1, 0), Direction.ACROSS)
        self.assertEqual(advance(cursor, puzzle), cursor)

    def test_absent_puzzle_is_noop(self) -> None:
        cursor = Cursor(Square(0, 0), Direction.ACROSS)
        self.assertEqual(advance(cursor, None), cursor)
        self.assertEqual(retreat(cursor, None), cursor)

    def test_cursor_never_leaves_grid(self) -> None:
        for square in [Square(0, 0), Square(2, 0), Square(0, 2)]:
            for direction in Direction:
                cursor = Cursor(square, direction)
                for _ in range(4):
                    cursor = advance(cursor, CORNER)
                    self.assertTrue(valid_cursor_position(cursor.square, CORNER))
                for _ in range(4):
                    cursor = retreat(cursor, CORNER)
                    self.assertTrue(valid_cursor_position(cursor.square, CORNER))


class InitialCursorTests(unittest.TestCase):
    def test_starts_on_first_across_clue(self) -> None:
        self.assertEqual(initial_cursor(FULL), Cursor(Square(0, 0), Direction.ACROSS))

    def test_falls_back_to_down_clue(self) -> None:
        puzzle = build_puzzle(down(3, "ON", 0, 1))
        self.assertEqual(initial_cursor(puzzle), Cursor(Square(1, 0), Direction.DOWN))

    def test_no_puzzle_no_cursor(self) -> None:
        self.assertIsNone(initial_cursor(None))
        self.assertIsNone(initial_cursor(build_puzzle()))

    def test_valid_position(self) -> None:
        self.assertTrue(valid_cursor_position(Square(0, 2), CORNER))
        self.assertFalse(valid_cursor_position(Square(1, 1), CORNER))
        self.assertFalse(valid_cursor_position(Square(0, 0), None))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
