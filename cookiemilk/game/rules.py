"""
rules.py - Game state management for the cookies & milk game

CookieMilkGame bundles the board with the seeded generator used for random
boards and enforces the rule that a finished game accepts no more pieces.
"""

from cookiemilk.debug import debug
from cookiemilk.utils import SIZE, SEED, Tile, GameResult, MoveStatus
from cookiemilk.game.board import Board
from cookiemilk.game.rng import ChaCha12Rng


class CookieMilkGame:
    """
    Complete state of one game: board, outcome and random generator.

    The generator is seeded with a fixed value, so the sequence of random
    boards is the same for every process and after every reset.
    """

    def __init__(self, seed: int = SEED):
        debug.debug("Initializing CookieMilkGame", "game")
        self.seed = seed
        self.board = Board()
        self.rng = ChaCha12Rng.seed_from_u64(seed)

    def reset(self) -> None:
        """Clear the board and reseed the generator."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.rng = ChaCha12Rng.seed_from_u64(self.seed)

    @property
    def game_result(self) -> GameResult:
        return self.board.game_result

    def is_game_over(self) -> bool:
        return self.board.game_result.is_game_over()

    def drop_piece(self, column: int, tile: Tile) -> MoveStatus:
        """
        Drop a marker into a column.

        Args:
            column: Column to place a piece (0-indexed)
            tile: Marker to place

        Returns:
            PLACED on success; GAME_OVER or COLUMN_FULL when refused, in
            which case nothing changed
        """
        if self.is_game_over():
            debug.debug(f"Refusing move in column {column}: game is over", "game")
            return MoveStatus.GAME_OVER

        if self.board.drop_piece(column, tile) is None:
            return MoveStatus.COLUMN_FULL

        return MoveStatus.PLACED

    def randomize(self) -> None:
        """
        Fill every cell with a random marker and decide the outcome.

        Cells are drawn row by row from the top, left to right within a
        row, one coin flip each. The result is always terminal.
        """
        for row in range(SIZE - 1, -1, -1):
            for column in range(SIZE):
                tile = Tile.COOKIE if self.rng.gen_bool() else Tile.MILK
                self.board.grid[column, row] = tile.value

        self.board.game_result = self.board.find_winner()
        debug.debug(f"Random board result: {self.board.game_result.name}", "game")

    def render(self) -> str:
        return self.board.render()
