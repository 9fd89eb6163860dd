"""
cookiemilk - Four-in-a-row with cookies and milk

This package provides a 4x4 four-in-a-row game with a seeded random-board
generator, a lock-guarded shared game handle, an HTTP interface and a
command-line interface.
"""

__version__ = '0.1.0'
