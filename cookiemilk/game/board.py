"""
board.py - Board representation and placement mechanics

This module implements the Board class which holds the 4x4 grid and the
game outcome, drops pieces into columns and detects finished games.
"""

from typing import Optional

import numpy as np

from cookiemilk.debug import debug
from cookiemilk.utils import (SIZE, Tile, GameResult, check_win_at_position,
                              empty_grid, is_valid_position, render_board)


class Board:
    """
    Represents the game board.

    Pieces fall to the lowest empty row of their column when dropped;
    nothing moves afterwards.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.trace("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to an empty, in-progress state."""
        self.grid = empty_grid()
        self.game_result = GameResult.IN_PROGRESS

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.game_result = self.game_result
        return new_board

    def get_tile(self, column: int, row: int) -> Tile:
        """
        Get the contents of a cell.

        Raises:
            IndexError: If the position is outside the board
        """
        if not is_valid_position(column, row):
            raise IndexError(f"Position ({column}, {row}) is outside the board")
        return Tile(int(self.grid[column, row]))

    def is_full(self) -> bool:
        return not np.any(self.grid == Tile.EMPTY.value)

    def column_height(self, column: int) -> int:
        """Number of pieces stacked in a column."""
        return int(np.count_nonzero(self.grid[column] != Tile.EMPTY.value))

    def drop_piece(self, column: int, tile: Tile) -> Optional[int]:
        """
        Drop a piece into a column and update the game result.

        The caller is responsible for refusing moves on a finished game.

        Args:
            column: The column to place a piece (0-indexed, assumed valid)
            tile: The marker to place

        Returns:
            Row the piece landed on, or None if the column is full
        """
        if tile == Tile.EMPTY:
            raise ValueError("Cannot place an empty tile")

        row = self.column_height(column)
        if row >= SIZE:
            debug.debug(f"Column {column} is full", "board")
            return None

        debug.trace(f"Placing {tile.name} at ({column}, {row})", "board")
        self.grid[column, row] = tile.value
        self.update_result(column, row)
        return row

    def update_result(self, column: int, row: int):
        """
        Re-evaluate the outcome after a piece landed at (column, row).

        A full board is marked as a draw first; a completed line then
        overrides it, so the last piece of a full board can still win.
        """
        if self.is_full():
            self.game_result = GameResult.DRAW

        if check_win_at_position(self.grid, column, row):
            self.game_result = GameResult.win_for(self.get_tile(column, row))

        if self.game_result.is_game_over():
            debug.info(f"Game over: {self.game_result.name}", "board")

    def find_winner(self) -> GameResult:
        """
        Scan the whole board for a completed line.

        Cells are visited column by column, bottom to top; the first cell
        that completes a line decides the winner.

        Returns:
            The winning result, or DRAW if no line exists
        """
        for column in range(SIZE):
            for row in range(SIZE):
                if check_win_at_position(self.grid, column, row):
                    return GameResult.win_for(self.get_tile(column, row))
        return GameResult.DRAW

    def render(self) -> str:
        """Render the board and, once finished, its outcome."""
        return render_board(self.grid, self.game_result)

    def __str__(self) -> str:
        return self.render()
