"""
shared.py - Process-wide game handle guarded by a lock

Every request goes through SharedGame, which serializes access to the single
CookieMilkGame. Operations are short and synchronous, so a plain
threading.Lock is held for the whole operation, rendering included.
"""

import threading
from typing import NamedTuple, Union

from cookiemilk.debug import debug
from cookiemilk.utils import SEED, SIZE, Tile, MoveStatus
from cookiemilk.game.board import Board
from cookiemilk.game.rules import CookieMilkGame


class InvalidMoveError(ValueError):
    """Raised for a team or column that does not name a valid move."""


TEAMS = {
    "cookie": Tile.COOKIE,
    "milk": Tile.MILK,
}


def parse_team(name: str) -> Tile:
    """Map a team name to its marker."""
    try:
        return TEAMS[name]
    except KeyError:
        raise InvalidMoveError(f"Unknown team: {name!r}") from None


def parse_column(value: Union[int, str]) -> int:
    """
    Convert a 1-based column number to a 0-based index.

    Args:
        value: Column as an int or a decimal string

    Returns:
        Column index in range(SIZE)

    Raises:
        InvalidMoveError: If the value is not a column number from 1 to SIZE
    """
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise InvalidMoveError(f"Column is not a number: {value!r}")
        value = int(value)

    if not 1 <= value <= SIZE:
        raise InvalidMoveError(f"Column must be between 1 and {SIZE}, got {value}")
    return value - 1


class PlaceOutcome(NamedTuple):
    status: MoveStatus
    board: str


class SharedGame:
    """Owns the game and runs each operation under one exclusive lock."""

    def __init__(self, seed: int = SEED):
        self._game = CookieMilkGame(seed)
        self._lock = threading.Lock()

    def view(self) -> str:
        with self._lock:
            return self._game.render()

    def reset(self) -> str:
        with self._lock:
            self._game.reset()
            return self._game.render()

    def place(self, tile: Tile, column: int) -> PlaceOutcome:
        """
        Drop a marker and render the board while still holding the lock.

        Args:
            tile: Marker to place
            column: 0-based column index

        Returns:
            Move status and the board as it is after the attempt
        """
        with self._lock:
            status = self._game.drop_piece(column, tile)
            if status.is_unavailable():
                debug.info(f"{tile.name} in column {column + 1} unavailable: {status.name}", "shared")
            return PlaceOutcome(status, self._game.render())

    def randomize(self) -> str:
        with self._lock:
            self._game.randomize()
            return self._game.render()

    def snapshot(self) -> Board:
        """Copy of the current board, safe to inspect without the lock."""
        with self._lock:
            return self._game.board.copy()
