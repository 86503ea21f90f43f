"""
Exceptions raised by the Othello engine.

Illegal moves are not errors: they are reported through return values.
The exceptions below signal broken preconditions the caller has to handle.
"""


class OthelloError(Exception):
    """Base class for all engine errors."""


class BoardSizeError(OthelloError, ValueError):
    """Raised when a board is created with an odd or too small size."""


class SnapshotFormatError(OthelloError, ValueError):
    """Raised when a text snapshot cannot be parsed."""


class GameOverError(OthelloError):
    """Raised when a move is attempted on a finished game."""
