"""
Exceptions raised by the Minesweeper engine.
"""


class MinefieldError(Exception):
    """Base class for engine errors."""


class InvalidConfig(MinefieldError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class IndexOutOfRange(MinefieldError, IndexError):
    """Cell index or position outside the board."""
