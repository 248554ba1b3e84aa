"""Tests for the slide/merge engine and the move reduction."""

import unittest

import numpy as np

from console2048.board_rules import (
    DIRECTION_NAMES,
    apply_move,
    as_grid,
    game_over,
    rotate,
    simulate_move,
    slide_line,
    valid_moves,
)

NO_MOVES_LEFT = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
]

MIXED = [
    [1, 0, 0, 1],
    [0, 0, 0, 0],
    [0, 2, 0, 2],
    [0, 0, 0, 3],
]


def tile_total(grid) -> int:
    return sum(1 << int(v) for v in np.asarray(grid).flat if v)


class SlideLineTests(unittest.TestCase):
    """Covers single-line merges toward index 0."""

    def check(self, line_in, line_out, points) -> None:
        line = np.array(line_in, dtype=np.uint8)
        result = slide_line(line)
        self.assertEqual(line.tolist(), line_out)
        self.assertEqual(result.score, points)
        self.assertTrue(result.changed)

    def test_single_tile_slides_home(self) -> None:
        self.check([0, 0, 0, 1], [1, 0, 0, 0], 0)

    def test_pair_merges(self) -> None:
        self.check([0, 0, 1, 1], [2, 0, 0, 0], 4)
        self.check([1, 0, 0, 1], [2, 0, 0, 0], 4)

    def test_four_equal_tiles_merge_pairwise(self) -> None:
        """Four equal tiles give two merged tiles, never one tile two steps up."""
        self.check([1, 1, 1, 1], [2, 2, 0, 0], 8)

    def test_three_equal_tiles_merge_the_leading_pair(self) -> None:
        self.check([1, 0, 1, 1], [2, 1, 0, 0], 4)
        self.check([1, 1, 0, 1], [2, 1, 0, 0], 4)
        self.check([1, 1, 1, 0], [2, 1, 0, 0], 4)

    def test_merged_tile_does_not_absorb_equal_neighbour(self) -> None:
        self.check([2, 1, 1, 0], [2, 2, 0, 0], 4)

    def test_two_pairs(self) -> None:
        self.check([2, 2, 1, 1], [3, 2, 0, 0], 12)
        self.check([1, 1, 2, 2], [2, 3, 0, 0], 12)

    def test_blocked_tile_stops_behind_different_value(self) -> None:
        self.check([3, 0, 1, 1], [3, 2, 0, 0], 4)

    def test_packed_line_is_unchanged(self) -> None:
        line = [3, 1, 2, 0]
        result = slide_line(line)
        self.assertEqual(line, [3, 1, 2, 0])
        self.assertFalse(result.changed)
        self.assertEqual(result.score, 0)

    def test_plain_lists_are_accepted(self) -> None:
        line = [0, 2, 0, 2]
        self.assertEqual(slide_line(line).score, 8)
        self.assertEqual(line, [3, 0, 0, 0])


class RotateTests(unittest.TestCase):
    def test_quarter_turn_is_clockwise(self) -> None:
        grid = np.arange(16, dtype=np.uint8).reshape(4, 4)
        expected = np.rot90(grid, k=-1).copy()
        self.assertIs(rotate(grid), grid)
        np.testing.assert_array_equal(grid, expected)

    def test_four_turns_are_identity(self) -> None:
        rng = np.random.default_rng(3)
        for _ in range(20):
            grid = rng.integers(0, 12, size=(4, 4)).astype(np.uint8)
            original = grid.copy()
            for _ in range(4):
                rotate(grid)
            np.testing.assert_array_equal(grid, original)


class MoveTests(unittest.TestCase):
    """Every direction goes through the same rotate / move-up path."""

    def test_left(self) -> None:
        grid = as_grid(MIXED)
        result = apply_move(grid, "LEFT")
        self.assertEqual(
            grid.tolist(),
            [[2, 0, 0, 0], [0, 0, 0, 0], [3, 0, 0, 0], [3, 0, 0, 0]],
        )
        self.assertEqual(result.score, 12)
        self.assertTrue(result.changed)

    def test_right(self) -> None:
        grid = as_grid(MIXED)
        result = apply_move(grid, "RIGHT")
        self.assertEqual(
            grid.tolist(),
            [[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 3], [0, 0, 0, 3]],
        )
        self.assertEqual(result.score, 12)

    def test_up(self) -> None:
        grid = as_grid(MIXED)
        result = apply_move(grid, "UP")
        self.assertEqual(
            grid.tolist(),
            [[1, 2, 0, 1], [0, 0, 0, 2], [0, 0, 0, 3], [0, 0, 0, 0]],
        )
        self.assertEqual(result.score, 0)
        self.assertTrue(result.changed)

    def test_down(self) -> None:
        grid = as_grid(MIXED)
        result = apply_move(grid, "DOWN")
        self.assertEqual(
            grid.tolist(),
            [[0, 0, 0, 0], [0, 0, 0, 1], [0, 0, 0, 2], [1, 2, 0, 3]],
        )
        self.assertEqual(result.score, 0)

    def test_blocked_move_reports_no_change(self) -> None:
        grid = as_grid([[1, 2, 0, 0], [3, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        original = grid.copy()
        result = apply_move(grid, "LEFT")
        self.assertFalse(result.changed)
        self.assertEqual(result.score, 0)
        np.testing.assert_array_equal(grid, original)

    def test_unknown_direction(self) -> None:
        with self.assertRaises(ValueError):
            apply_move(as_grid(MIXED), "SIDEWAYS")

    def test_moves_keep_tile_total_and_never_lose_points(self) -> None:
        rng = np.random.default_rng(11)
        for _ in range(50):
            grid = rng.integers(0, 5, size=(4, 4)).astype(np.uint8)
            for direction in DIRECTION_NAMES:
                moved, result = simulate_move(grid, direction)
                self.assertEqual(tile_total(moved), tile_total(grid))
                self.assertGreaterEqual(result.score, 0)
                self.assertEqual(result.changed, not np.array_equal(moved, grid))

    def test_simulate_move_leaves_input_alone(self) -> None:
        grid = as_grid(MIXED)
        simulate_move(grid, "RIGHT")
        np.testing.assert_array_equal(grid, as_grid(MIXED))


class GameOverTests(unittest.TestCase):
    def test_full_grid_without_pairs_is_over(self) -> None:
        grid = as_grid(NO_MOVES_LEFT)
        self.assertTrue(game_over(grid))
        self.assertEqual(valid_moves(grid), [])

    def test_empty_cell_keeps_game_alive(self) -> None:
        rows = [row[:] for row in NO_MOVES_LEFT]
        rows[2][1] = 0
        self.assertFalse(game_over(as_grid(rows)))

    def test_horizontal_pair_keeps_game_alive(self) -> None:
        rows = [row[:] for row in NO_MOVES_LEFT]
        rows[3][3] = 15
        grid = as_grid(rows)
        self.assertFalse(game_over(grid))
        self.assertEqual(valid_moves(grid), ["LEFT", "RIGHT"])

    def test_vertical_pair_keeps_game_alive(self) -> None:
        rows = [row[:] for row in NO_MOVES_LEFT]
        rows[1][2] = 3
        grid = as_grid(rows)
        self.assertFalse(game_over(grid))
        self.assertEqual(valid_moves(grid), ["UP", "DOWN"])

    def test_check_leaves_grid_orientation_intact(self) -> None:
        for rows in (NO_MOVES_LEFT, [[1, 2, 3, 4], [5, 6, 3, 8], [9, 10, 11, 12], [13, 14, 15, 16]]):
            grid = as_grid(rows)
            game_over(grid)
            self.assertEqual(grid.tolist(), rows)

    def test_agrees_with_valid_moves(self) -> None:
        rng = np.random.default_rng(5)
        for _ in range(200):
            grid = rng.integers(1, 5, size=(4, 4)).astype(np.uint8)
            self.assertEqual(game_over(grid), valid_moves(grid) == [])


class AsGridTests(unittest.TestCase):
    def test_rejects_wrong_shape(self) -> None:
        with self.assertRaises(ValueError):
            as_grid([[1, 2, 3], [4, 5, 6]])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
