"""
cli.py - Command-line interface for the cookies & milk game

Lets a user play on a local shared game from the terminal, or print a
random board.
"""

from typing import Optional, Callable, TextIO
import sys

from cookiemilk.debug import debug
from cookiemilk.game.shared import SharedGame, InvalidMoveError, parse_team, parse_column

HELP_TEXT = (
    "Commands: '<cookie|milk> <column 1-4>' to drop a piece, "
    "'b' board, 'r' reset, 'x' random board, 'q' quit."
)


class SimpleCLI:
    """Simple command-line interface around a SharedGame."""

    def __init__(self, game: Optional[SharedGame] = None,
                 input_func: Callable[[str], str] = input,
                 output: TextIO = None):
        self.game = game if game is not None else SharedGame()
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout

    def write(self, text: str) -> None:
        self.output.write(text if text.endswith("\n") else text + "\n")

    def handle_command(self, line: str) -> bool:
        """
        Execute one line of user input.

        Returns:
            False when the user asked to quit, True otherwise
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command = parts[0]
        if command == 'q':
            return False
        elif command == 'b':
            self.write(self.game.view())
        elif command == 'r':
            self.write(self.game.reset())
        elif command == 'x':
            self.write(self.game.randomize())
        elif len(parts) == 2:
            self.place(parts[0], parts[1])
        else:
            self.write(HELP_TEXT)
        return True

    def place(self, team: str, column: str) -> None:
        try:
            tile = parse_team(team)
            index = parse_column(column)
        except InvalidMoveError as e:
            self.write(f"Invalid move: {e}")
            return

        outcome = self.game.place(tile, index)
        self.write(outcome.board)
        if outcome.status.is_unavailable():
            self.write("Move unavailable.")

    def play(self) -> None:
        """Read commands until 'q' or end of input."""
        debug.debug("Starting interactive session", "cli")
        self.write(HELP_TEXT)
        self.write(self.game.view())

        while True:
            try:
                line = self.input_func("> ")
            except EOFError:
                break
            if not self.handle_command(line):
                break

        self.write("Bye.")

    def random_board(self) -> None:
        self.write(self.game.randomize())
