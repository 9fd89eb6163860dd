from __future__ import annotations

from cookiemilk.utils import SIZE, Tile

C = Tile.COOKIE
M = Tile.MILK

EMPTY_BOARD = "⬜⬛⬛⬛⬛⬜\n" * 4 + "⬜⬜⬜⬜⬜⬜\n"

# Full board without any line, listed per column from the bottom up
DRAW_COLUMNS = [
    [C, C, M, M],
    [M, M, C, C],
    [C, C, M, M],
    [M, M, C, C],
]


def fill_by_columns(game, columns):
    """Drop each column's tiles bottom-up, column by column; return the statuses."""
    statuses = []
    for column, tiles in enumerate(columns):
        for tile in tiles:
            statuses.append(game.drop_piece(column, tile))
    return statuses


def all_lines():
    lines = [[(c, r) for r in range(SIZE)] for c in range(SIZE)]
    lines += [[(c, r) for c in range(SIZE)] for r in range(SIZE)]
    lines.append([(i, i) for i in range(SIZE)])
    lines.append([(i, SIZE - 1 - i) for i in range(SIZE)])
    return lines


# First two boards drawn after start-up or reset
FIRST_RANDOM_BOARD = (
    "⬜🍪🍪🍪🍪⬜\n"
    "⬜🥛🍪🍪🥛⬜\n"
    "⬜🥛🥛🥛🥛⬜\n"
    "⬜🍪🥛🍪🥛⬜\n"
    "⬜⬜⬜⬜⬜⬜\n"
    "🥛 wins!\n"
)
SECOND_RANDOM_BOARD = (
    "⬜🍪🥛🍪🍪⬜\n"
    "⬜🥛🍪🥛🍪⬜\n"
    "⬜🥛🍪🍪🍪⬜\n"
    "⬜🍪🥛🥛🥛⬜\n"
    "⬜⬜⬜⬜⬜⬜\n"
    "No winner.\n"
)
