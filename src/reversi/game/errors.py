"""
Exception hierarchy for Reversi.
"""


class ReversiError(Exception):
    """Base exception for the package."""


class OutOfBoundsError(ReversiError):
    """A position has a coordinate outside 0..7 or is not a (row, col) pair."""


class IllegalMoveError(ReversiError):
    """Move not legal under the current board state."""


class GameNotOverError(ReversiError):
    """Winner or final score requested while moves remain."""


class MoveParseError(ReversiError):
    """Console input that cannot be read as a (row, col) pair."""


class SessionClosedError(ReversiError):
    """A console session was used after it was closed."""


class ConfigError(ReversiError):
    """Invalid configuration value."""
