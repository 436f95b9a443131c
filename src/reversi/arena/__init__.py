"""
Arena module for running matches between players.
"""
from .arena import Arena

__all__ = ['Arena']
