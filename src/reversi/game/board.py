"""
Board module for Reversi.
Handles the 8x8 grid, move validation, captures and move application.
The grid is held as a numpy array of Cell values.
"""
import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import IllegalMoveError, OutOfBoundsError

logger = logging.getLogger(__name__)

# Board dimensions
SIZE = 8


class Color(Enum):
    """The two sides of the game."""
    BLACK = 1
    WHITE = 2

    @property
    def opposite(self) -> 'Color':
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class Cell(Enum):
    """Occupancy of a single square."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @staticmethod
    def occupied(color: Color) -> 'Cell':
        return Cell(color.value)

    @property
    def color(self) -> Optional[Color]:
        if self is Cell.EMPTY:
            return None
        return Color(self.value)


class Occupant(Enum):
    """Classification of a square relative to the side that is scanning."""
    MINE = 1
    OPPONENT = -1
    EMPTY = 0  # empty square or off the board


class Position(NamedTuple):
    row: int
    col: int


PositionLike = Union[Position, Tuple[int, int], Sequence[int]]

# All eight unit vectors: {-1, 0, 1}^2 minus (0, 0)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

DEFAULT_SYMBOLS: Dict[Cell, str] = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}
_CHAR_TO_CELL = {'.': Cell.EMPTY, 'B': Cell.BLACK, 'W': Cell.WHITE}


def _coerce_position(pos) -> Optional[Position]:
    """Turn a (row, col) pair into a Position, or None if it has the wrong shape."""
    try:
        row, col = pos
    except (TypeError, ValueError):
        return None
    for value in (row, col):
        # bool is an int subclass but never a coordinate
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            return None
    return Position(int(row), int(col))


class Board:
    """
    Represents the Reversi game board.

    The board is always 8x8 and starts with the standard four discs:
    white on (3, 3) and (4, 4), black on (3, 4) and (4, 3).
    Occupied squares never become empty again; a capture only changes
    the color on a square.
    """

    SIZE = SIZE

    def __init__(self):
        """Initialize a new board in the starting position."""
        self._board = np.zeros((SIZE, SIZE), dtype=np.int8)
        mid = SIZE // 2
        self._board[mid - 1, mid - 1] = Cell.WHITE.value
        self._board[mid, mid] = Cell.WHITE.value
        self._board[mid - 1, mid] = Cell.BLACK.value
        self._board[mid, mid - 1] = Cell.BLACK.value

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Union[Cell, str]]]) -> 'Board':
        """
        Build a board from 8 rows of 8 cells.

        Args:
            rows: Each cell is either a Cell or one of the characters '.', 'B', 'W'

        Returns:
            A new Board holding exactly the given cells
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Board must be 8x8")
        board = cls()
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                if not isinstance(cell, Cell):
                    if cell not in _CHAR_TO_CELL:
                        raise ValueError(f"Invalid cell: {cell!r}")
                    cell = _CHAR_TO_CELL[cell]
                board._board[r, c] = cell.value
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board._board = self._board.copy()
        return new_board

    def to_rows(self) -> List[List[Cell]]:
        return [[Cell(int(v)) for v in row] for row in self._board]

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            8x8 int8 array of Cell values (0 empty, 1 black, 2 white)
        """
        return self._board.copy()

    # ------------------------------------------------------------------
    # Positions and cells
    # ------------------------------------------------------------------

    @staticmethod
    def is_valid_position(pos) -> bool:
        """Check if a position is on the board. Never raises."""
        position = _coerce_position(pos)
        if position is None:
            return False
        return 0 <= position.row < SIZE and 0 <= position.col < SIZE

    @staticmethod
    def require_position(pos) -> Position:
        """Return pos as an on-board Position, raising OutOfBoundsError otherwise."""
        position = _coerce_position(pos)
        if position is None or not Board.is_valid_position(position):
            raise OutOfBoundsError(f"Not a valid position: {pos!r}")
        return position

    def get_cell(self, pos: PositionLike) -> Cell:
        """Return the cell at pos, raising OutOfBoundsError if pos is off the board."""
        position = self.require_position(pos)
        return Cell(int(self._board[position.row, position.col]))

    def is_occupied(self, pos: PositionLike) -> bool:
        return self.get_cell(pos) is not Cell.EMPTY

    def occupant(self, pos: PositionLike, color: Color) -> Occupant:
        """
        Classify a square for a capture scan by `color`.

        Off-board and empty squares both end a scan, so they are
        reported as Occupant.EMPTY.
        """
        if not self.is_valid_position(pos):
            return Occupant.EMPTY
        cell = self.get_cell(pos)
        if cell is Cell.EMPTY:
            return Occupant.EMPTY
        return Occupant.MINE if cell.color is color else Occupant.OPPONENT

    # ------------------------------------------------------------------
    # Move legality and captures
    # ------------------------------------------------------------------

    def captures_in_direction(self, pos: PositionLike, color: Color,
                              direction: Tuple[int, int]) -> Optional[List[Position]]:
        """
        Walk away from pos along direction, collecting opponent pieces.

        Args:
            pos: Square the piece would be placed on
            color: Side that would place the piece
            direction: One of DIRECTIONS

        Returns:
            The opponent positions bracketed by a piece of `color`, or None
            if the walk hits an empty square, leaves the board, or meets
            `color` before any opponent piece.
        """
        start = self.require_position(pos)
        if tuple(direction) not in DIRECTIONS:
            raise ValueError(f"Not a unit direction: {direction!r}")
        dr, dc = direction

        captured: List[Position] = []
        # A run can be at most SIZE - 1 squares long
        for step in range(1, SIZE):
            current = Position(start.row + dr * step, start.col + dc * step)
            occupant = self.occupant(current, color)
            if occupant is Occupant.OPPONENT:
                captured.append(current)
            elif occupant is Occupant.MINE:
                return captured if captured else None
            else:
                return None
        return None

    def is_legal_move(self, pos: PositionLike, color: Color) -> bool:
        """Check that pos is empty and placing `color` there captures something."""
        if not self.is_valid_position(pos) or self.is_occupied(pos):
            return False
        for direction in DIRECTIONS:
            if self.captures_in_direction(pos, color, direction):
                return True
        return False

    def legal_moves(self, color: Color) -> List[Position]:
        """
        Get all legal moves for the given color.

        Returns:
            List of positions in row-major order, recomputed on every call
        """
        return [Position(r, c)
                for r in range(SIZE)
                for c in range(SIZE)
                if self.is_legal_move((r, c), color)]

    def flips_for_move(self, pos: PositionLike, color: Color) -> List[Position]:
        """All pieces that placing `color` at pos would flip; [] if the move is illegal."""
        if not self.is_legal_move(pos, color):
            return []
        flips: List[Position] = []
        for direction in DIRECTIONS:
            captured = self.captures_in_direction(pos, color, direction)
            if captured:
                flips.extend(captured)
        return flips

    def apply_move(self, pos: PositionLike, color: Color) -> List[Position]:
        """
        Place a piece of `color` at pos and flip every captured run.

        Returns:
            The positions that were flipped

        Raises:
            OutOfBoundsError: pos is not on the board
            IllegalMoveError: pos is occupied or captures nothing
        """
        position = self.require_position(pos)
        flips = self.flips_for_move(position, color)
        if not flips:
            raise IllegalMoveError(f"Illegal move for {color} at {tuple(position)}")

        self._board[position.row, position.col] = Cell.occupied(color).value
        for row, col in flips:
            flipped = Cell(int(self._board[row, col])).color.opposite
            self._board[row, col] = Cell.occupied(flipped).value

        logger.debug("%s placed at %s, flipped %d", color, tuple(position), len(flips))
        return flips

    # ------------------------------------------------------------------
    # Counting and terminal state
    # ------------------------------------------------------------------

    def piece_count(self, color: Color) -> int:
        """Number of squares held by `color` over the full 8x8 grid."""
        return int(np.count_nonzero(self._board == color.value))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._board != Cell.EMPTY.value))

    def score(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.piece_count(Color.BLACK), self.piece_count(Color.WHITE)

    def has_any_move(self, color: Color) -> bool:
        return len(self.legal_moves(color)) > 0

    def is_game_over(self) -> bool:
        """The game is over when neither side has a legal move."""
        return not self.has_any_move(Color.BLACK) and not self.has_any_move(Color.WHITE)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, symbols: Optional[Dict[Cell, str]] = None) -> str:
        """
        Render the board as text, one line per row.

        The first line holds the column indices 0-7 and every following
        line starts with its row index.

        Args:
            symbols: Mapping from Cell to the text drawn for it (default: . B W)
        """
        symbols = symbols or DEFAULT_SYMBOLS
        width = max(len(s) for s in symbols.values())
        header = "  " + " ".join(str(c).center(width) for c in range(SIZE))
        lines = [header.rstrip()]
        for r in range(SIZE):
            cells = [symbols[Cell(int(v))].center(width) for v in self._board[r]]
            lines.append(f"{r} " + " ".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
