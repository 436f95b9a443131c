"""
Console front end: session handling, move notation and the turn loop.
"""
from .session import ConsoleSession
from .notation import format_move, format_moves, parse_move
from .loop import announce_outcome, play_game

__all__ = ['ConsoleSession', 'parse_move', 'format_move', 'format_moves',
           'announce_outcome', 'play_game']
