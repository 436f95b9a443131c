"""
Interactive turn loop for console play.
"""
import logging
from typing import TYPE_CHECKING, Dict, Optional

from ..config import Config
from ..game.board import Color
from ..game.game import GameOutcome, ReversiGame
from .notation import format_move, format_moves
from .session import ConsoleSession

if TYPE_CHECKING:
    from ..players import Player

logger = logging.getLogger(__name__)


def announce_outcome(session: ConsoleSession, outcome: GameOutcome) -> None:
    """Print the final piece counts and the winner."""
    session.say("The game is over!")
    session.say(f"White had {outcome.white_count} pieces.")
    session.say(f"Black had {outcome.black_count} pieces.")
    if outcome.is_tie:
        session.say("It's a tie on pieces; ties go to black.")
    session.say(f"{outcome.winner} won!")


def play_game(game: ReversiGame, players: Dict[Color, 'Player'], session: ConsoleSession,
              config: Optional[Config] = None) -> Optional[GameOutcome]:
    """
    Run a game to completion on the console.

    Each pass through the loop either ends the game, forces a pass for a
    side with no legal move, or asks the player owning the current color
    for one move. A rejected move is reported and the same side is asked
    again.

    Args:
        game: Game to play; it is mutated in place
        players: Player for each color
        session: Open console session
        config: Display settings (default: Config())

    Returns:
        The final outcome, or None if a player quit
    """
    config = config or Config()
    symbols = config.symbols

    while True:
        if game.is_over():
            outcome = game.outcome()
            session.say(game.board.render(symbols))
            announce_outcome(session, outcome)
            return outcome

        if game.advance_if_no_move():
            session.say(f"{game.current_turn.opposite} has no move!")
            continue

        color = game.current_turn
        player = players[color]
        session.say(game.board.render(symbols))
        if player.is_human and config.game.show_legal_moves:
            session.say(f"Legal moves: {format_moves(game.legal_moves())}")

        move = player.get_move(game)
        if move is None:
            logger.info("%s (%s) left the game", player.name, color)
            session.say(f"{color} left the game.")
            return None

        result = game.attempt_move(move)
        if not result:
            session.say("Invalid move!")
            continue

        if not player.is_human:
            session.say(f"{color} has played to {format_move(result.position)}.")
