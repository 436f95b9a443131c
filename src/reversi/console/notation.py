"""
Text form of moves typed at the console.
"""
import re
from typing import Sequence

from ..game.board import Position
from ..game.errors import MoveParseError

# "[3,4]", "3,4" and "3 4"
_MOVE_PATTERNS = (
    re.compile(r'\[\s*(-?\d+)\s*,\s*(-?\d+)\s*\]'),
    re.compile(r'(-?\d+)\s*,\s*(-?\d+)'),
    re.compile(r'(-?\d+)\s+(-?\d+)'),
)


def parse_move(text: str) -> Position:
    """
    Parse console input into a position.

    Coordinates are not range-checked here; the board rejects positions
    that are off the grid.

    Raises:
        MoveParseError: if text is not a pair of integers
    """
    stripped = text.strip()
    for pattern in _MOVE_PATTERNS:
        match = pattern.fullmatch(stripped)
        if match:
            return Position(int(match.group(1)), int(match.group(2)))
    raise MoveParseError(f"Not a move: {text!r}")


def format_move(pos: Sequence[int]) -> str:
    return f"[{pos[0]}, {pos[1]}]"


def format_moves(moves: Sequence[Sequence[int]]) -> str:
    return ", ".join(format_move(m) for m in moves)
