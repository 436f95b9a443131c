"""
Players that choose moves for one side of a game.
"""
from .players import HumanPlayer, Player, RandomPlayer, create_player

__all__ = ['Player', 'HumanPlayer', 'RandomPlayer', 'create_player']
