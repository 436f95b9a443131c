"""
Reversi game module.
Handles turn order, forced passes, game end and the winner.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, Color, Position, PositionLike
from .errors import GameNotOverError, IllegalMoveError, OutOfBoundsError

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Outcome of a single attempt_move call."""
    success: bool
    color: Color
    position: Optional[Position] = None
    flipped: List[Position] = field(default_factory=list)
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class GameOutcome:
    """
    Final result of a finished game.

    `winner` follows the tie policy: White wins only with strictly more
    pieces, otherwise Black is reported as the winner. `is_tie` marks the
    case where Black "won" on equal counts.
    """
    black_count: int
    white_count: int
    winner: Color
    is_tie: bool


def decide_winner(black_count: int, white_count: int) -> Color:
    """Apply the tie policy: White needs a strict majority, ties go to Black."""
    return Color.WHITE if white_count > black_count else Color.BLACK


class ReversiGame:
    """
    Main game class for Reversi that manages turns over a single Board.
    """

    def __init__(self, board: Optional[Board] = None, turn: Color = Color.BLACK):
        """
        Initialize a new Reversi game.

        Args:
            board: Board to play on (default: a fresh starting board)
            turn: Color to move first (default: Black)
        """
        self.board = board if board is not None else Board()
        self._turn = turn
        self.consecutive_passes = 0
        self.move_history: List[Tuple[Color, Optional[Position]]] = []

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self._turn = Color.BLACK
        self.consecutive_passes = 0
        self.move_history = []

    @property
    def current_turn(self) -> Color:
        return self._turn

    def _flip_turn(self) -> None:
        self._turn = self._turn.opposite

    def legal_moves(self) -> List[Position]:
        """Legal moves for the side to move."""
        return self.board.legal_moves(self._turn)

    def attempt_move(self, pos: PositionLike) -> MoveResult:
        """
        Try to play pos for the side to move.

        On success the board is updated and the turn passes to the
        opponent. A rejected move leaves the board and the turn as they
        were, so the caller can simply ask the same side again.

        Args:
            pos: (row, col) pair

        Returns:
            MoveResult describing what happened
        """
        color = self._turn
        try:
            # Read pos exactly once; everything below uses the coerced Position
            position = self.board.require_position(pos)
            flipped = self.board.apply_move(position, color)
        except (IllegalMoveError, OutOfBoundsError) as e:
            logger.debug("Rejected move %r for %s: %s", pos, color, e)
            return MoveResult(success=False, color=color, error=str(e))

        self.move_history.append((color, position))
        self.consecutive_passes = 0
        self._flip_turn()
        return MoveResult(success=True, color=color, position=position, flipped=flipped)

    def advance_if_no_move(self) -> bool:
        """
        Pass the turn if the side to move has no legal move.

        Returns:
            True if a forced pass happened
        """
        if self.board.has_any_move(self._turn):
            return False
        logger.info("%s has no move, passing", self._turn)
        self.move_history.append((self._turn, None))
        self.consecutive_passes += 1
        self._flip_turn()
        return True

    def is_over(self) -> bool:
        """Check if the game is over."""
        return self.board.is_game_over()

    def score(self) -> Tuple[int, int]:
        """
        Get the current score.

        Returns:
            Tuple of (black_count, white_count)
        """
        return self.board.score()

    def winner(self) -> Color:
        """
        Get the winner of a finished game.

        Ties are reported as Black; see GameOutcome.

        Raises:
            GameNotOverError: if either side can still move
        """
        if not self.is_over():
            raise GameNotOverError("The game is not over yet")
        black_count, white_count = self.score()
        return decide_winner(black_count, white_count)

    def outcome(self) -> GameOutcome:
        """Final piece counts and winner of a finished game."""
        winner = self.winner()
        black_count, white_count = self.score()
        outcome = GameOutcome(
            black_count=black_count,
            white_count=white_count,
            winner=winner,
            is_tie=black_count == white_count,
        )
        logger.info("Game over: black=%d white=%d winner=%s", black_count, white_count, winner)
        return outcome

    def __str__(self) -> str:
        black_count, white_count = self.score()
        return "\n".join([
            self.board.render(),
            f"Current player: {self._turn.name.capitalize()}",
            f"Score - Black: {black_count}, White: {white_count}",
        ])
