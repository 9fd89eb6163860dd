from __future__ import annotations

import unittest

import numpy as np

from cookiemilk.game.board import Board
from cookiemilk.utils import (GameResult, Tile, candidate_lines, check_win_at_position,
                              render_board)
from tests.helpers import C, M, EMPTY_BOARD


class TestRendering(unittest.TestCase):
    def test_empty_board(self):
        self.assertEqual(Board().render(), EMPTY_BOARD)

    def test_rows_are_drawn_top_first(self):
        board = Board()
        board.drop_piece(0, C)
        board.drop_piece(0, M)
        lines = board.render().splitlines()
        self.assertEqual(lines[3], "⬜🍪⬛⬛⬛⬜")
        self.assertEqual(lines[2], "⬜🥛⬛⬛⬛⬜")
        self.assertEqual(lines[4], "⬜⬜⬜⬜⬜⬜")
        self.assertEqual(len(lines), 5)

    def test_outcome_line(self):
        grid = np.zeros((4, 4), dtype=int)
        self.assertTrue(render_board(grid, GameResult.DRAW).endswith("⬜⬜⬜⬜⬜⬜\nNo winner.\n"))
        self.assertTrue(render_board(grid, GameResult.MILK_WIN).endswith("\n🥛 wins!\n"))
        self.assertTrue(render_board(grid, GameResult.COOKIE_WIN).endswith("\n🍪 wins!\n"))
        self.assertEqual(render_board(grid, GameResult.IN_PROGRESS), EMPTY_BOARD)


class TestBoard(unittest.TestCase):
    def test_get_tile_out_of_range(self):
        board = Board()
        with self.assertRaises(IndexError):
            board.get_tile(4, 0)
        with self.assertRaises(IndexError):
            board.get_tile(0, -1)

    def test_pieces_stack_from_the_bottom(self):
        board = Board()
        for expected_row in range(4):
            self.assertEqual(board.drop_piece(2, C if expected_row % 2 else M), expected_row)
            self.assertEqual(board.column_height(2), expected_row + 1)
        self.assertEqual(board.get_tile(2, 0), M)
        self.assertEqual(board.get_tile(2, 1), C)
        self.assertEqual(board.get_tile(1, 0), Tile.EMPTY)

    def test_full_column_is_untouched(self):
        board = Board()
        for tile in (C, M, C, M):
            board.drop_piece(0, tile)
        before = board.grid.copy()
        self.assertIsNone(board.drop_piece(0, C))
        self.assertTrue(np.array_equal(board.grid, before))

    def test_empty_tile_cannot_be_placed(self):
        with self.assertRaises(ValueError):
            Board().drop_piece(0, Tile.EMPTY)

    def test_is_full(self):
        board = Board()
        self.assertFalse(board.is_full())
        board.grid[:, :] = C.value
        self.assertTrue(board.is_full())


class TestWinDetection(unittest.TestCase):
    def test_candidate_lines(self):
        self.assertEqual(len(candidate_lines(1, 2)), 3)
        self.assertEqual(len(candidate_lines(0, 0)), 3)
        self.assertEqual(len(candidate_lines(1, 0)), 2)
        self.assertEqual(len(candidate_lines(0, 3)), 3)
        for line in candidate_lines(2, 2):
            self.assertIn((2, 2), line)
            self.assertEqual(len(line), 4)

    def test_empty_cell_never_wins(self):
        self.assertFalse(check_win_at_position(np.zeros((4, 4), dtype=int), 0, 0))

    def test_row_win(self):
        board = Board()
        for column in range(4):
            board.drop_piece(column, M)
        self.assertEqual(board.game_result, GameResult.MILK_WIN)

    def test_column_win(self):
        board = Board()
        for _ in range(4):
            board.drop_piece(3, C)
        self.assertEqual(board.game_result, GameResult.COOKIE_WIN)

    def test_ascending_diagonal_win(self):
        board = Board()
        for column, tiles in enumerate([[M], [C, M], [C, C, M], [C, C, C]]):
            for tile in tiles:
                board.drop_piece(column, tile)
        self.assertEqual(board.game_result, GameResult.IN_PROGRESS)
        board.drop_piece(3, M)
        self.assertEqual(board.game_result, GameResult.MILK_WIN)

    def test_descending_diagonal_win(self):
        board = Board()
        for column, tiles in [(3, [C]), (2, [M, C]), (1, [M, M, C]), (0, [M, M, M])]:
            for tile in tiles:
                board.drop_piece(column, tile)
        self.assertEqual(board.game_result, GameResult.IN_PROGRESS)
        board.drop_piece(0, C)
        self.assertEqual(board.game_result, GameResult.COOKIE_WIN)

    def test_three_in_a_row_is_not_a_win(self):
        board = Board()
        for column in range(3):
            board.drop_piece(column, C)
        board.drop_piece(3, M)
        self.assertEqual(board.game_result, GameResult.IN_PROGRESS)

    def test_find_winner_prefers_first_cell_in_scan_order(self):
        board = Board()
        board.grid[:, :] = np.array([
            [C.value] * 4,
            [C.value, M.value, C.value, M.value],
            [M.value, C.value, M.value, C.value],
            [M.value] * 4,
        ])
        self.assertEqual(board.find_winner(), GameResult.COOKIE_WIN)

    def test_find_winner_reports_milk(self):
        board = Board()
        board.grid[:, :] = np.array([
            [C.value, C.value, M.value, M.value],
            [M.value, M.value, C.value, C.value],
            [C.value, C.value, M.value, M.value],
            [M.value] * 4,
        ])
        self.assertEqual(board.find_winner(), GameResult.MILK_WIN)


if __name__ == "__main__":
    unittest.main()
