"""
cookiemilk.interfaces - User interfaces for the game

This package contains the command-line and HTTP interfaces.
"""

# Don't import anything here; the web module pulls in FastAPI
__all__ = []
