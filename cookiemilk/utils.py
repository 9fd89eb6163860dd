"""
utils.py - Constants, enumerations and board helpers for the cookies & milk game

The board is a SIZE x SIZE numpy array indexed as ``grid[column, row]`` where
row 0 is the bottom. Every column, row and main diagonal spans the whole
board, so a winning line is always one of these full-length lines.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
SIZE = 4
SEED = 2024  # fixed seed for the random-board generator
WALL = "⬜"

Position = Tuple[int, int]  # (column, row)


class Tile(Enum):
    """Cell contents; COOKIE and MILK are the two placeable markers."""
    EMPTY = 0
    COOKIE = 1
    MILK = 2

    def __str__(self):
        if self == Tile.COOKIE:
            return "🍪"
        elif self == Tile.MILK:
            return "🥛"
        return "⬛"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    COOKIE_WIN = auto()
    MILK_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    def message(self) -> str:
        """Line shown under a finished board; empty while in progress."""
        if self == GameResult.COOKIE_WIN:
            return f"{Tile.COOKIE} wins!"
        elif self == GameResult.MILK_WIN:
            return f"{Tile.MILK} wins!"
        elif self == GameResult.DRAW:
            return "No winner."
        return ""

    @staticmethod
    def win_for(tile: Tile) -> 'GameResult':
        if tile == Tile.COOKIE:
            return GameResult.COOKIE_WIN
        elif tile == Tile.MILK:
            return GameResult.MILK_WIN
        raise ValueError("An empty cell cannot win")


class MoveStatus(Enum):
    """Result of a drop-piece attempt."""
    PLACED = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()

    def is_unavailable(self) -> bool:
        return self != MoveStatus.PLACED


# Diagonals of the board, each listed left to right
DESCENDING_DIAGONAL: List[Position] = [(i, SIZE - 1 - i) for i in range(SIZE)]
ASCENDING_DIAGONAL: List[Position] = [(i, i) for i in range(SIZE)]


def empty_grid() -> np.ndarray:
    return np.full((SIZE, SIZE), Tile.EMPTY.value, dtype=int)


def is_valid_position(column: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column index
        row: Row index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= column < SIZE and 0 <= row < SIZE


def candidate_lines(column: int, row: int) -> List[List[Position]]:
    """
    Get every full-length line passing through a position.

    The column and the row always qualify; a diagonal only when it
    contains the position.

    Args:
        column: Column index
        row: Row index

    Returns:
        Between two and four lines of SIZE positions each
    """
    lines = [
        [(column, r) for r in range(SIZE - 1, -1, -1)],
        [(c, row) for c in range(SIZE)],
    ]
    for diagonal in (DESCENDING_DIAGONAL, ASCENDING_DIAGONAL):
        if (column, row) in diagonal:
            lines.append(diagonal)
    return lines


def check_win_at_position(grid: np.ndarray, column: int, row: int) -> bool:
    """
    Check if the piece at the given position completes a line.

    Args:
        grid: The game board
        column: Column index of the piece
        row: Row index of the piece

    Returns:
        True if some full line through the position holds only that
        piece's marker, False otherwise (always False for an empty cell)
    """
    value = grid[column, row]
    if value == Tile.EMPTY.value:
        return False

    for line in candidate_lines(column, row):
        if all(grid[c, r] == value for c, r in line):
            return True

    return False


def render_board(grid: np.ndarray, result: GameResult) -> str:
    """
    Render a board snapshot as text.

    Rows are drawn top to bottom between walls, followed by a bottom wall
    and, for a finished game, the outcome line.

    Args:
        grid: The game board
        result: Outcome of the game shown on the board

    Returns:
        Text representation ending with a newline
    """
    lines = []
    for row in range(SIZE - 1, -1, -1):
        cells = "".join(str(Tile(int(grid[column, row]))) for column in range(SIZE))
        lines.append(f"{WALL}{cells}{WALL}\n")
    lines.append(WALL * (SIZE + 2) + "\n")

    if result.is_game_over():
        lines.append(f"{result.message()}\n")

    return "".join(lines)
