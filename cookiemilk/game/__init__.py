"""
cookiemilk.game - Core game mechanics

This package contains the board representation, the game rules and the
lock-guarded handle shared by all callers.
"""

from cookiemilk.game.board import Board
from cookiemilk.game.rules import CookieMilkGame
from cookiemilk.game.shared import (SharedGame, PlaceOutcome, InvalidMoveError,
                                    parse_team, parse_column)

__all__ = ['Board', 'CookieMilkGame', 'SharedGame', 'PlaceOutcome',
           'InvalidMoveError', 'parse_team', 'parse_column']
