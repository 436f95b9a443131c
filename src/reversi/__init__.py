"""
Reversi (Othello) rules engine with console play against a human or a random AI.
"""
from .game import Board, Cell, Color, Position, ReversiGame, GameOutcome, MoveResult

__version__ = "0.1"

__all__ = ['Board', 'Cell', 'Color', 'Position', 'ReversiGame', 'GameOutcome', 'MoveResult']
