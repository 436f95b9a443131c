"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board, Cell, Color, Occupant, Position, DIRECTIONS, SIZE
from .errors import (
    ConfigError,
    GameNotOverError,
    IllegalMoveError,
    MoveParseError,
    OutOfBoundsError,
    ReversiError,
    SessionClosedError,
)
from .game import GameOutcome, MoveResult, ReversiGame, decide_winner

__all__ = [
    'Board', 'Cell', 'Color', 'Occupant', 'Position', 'DIRECTIONS', 'SIZE',
    'ReversiGame', 'MoveResult', 'GameOutcome', 'decide_winner',
    'ReversiError', 'OutOfBoundsError', 'IllegalMoveError', 'GameNotOverError',
    'MoveParseError', 'SessionClosedError', 'ConfigError',
]
