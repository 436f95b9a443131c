"""
Move-selection strategies: console humans and a random AI.
"""
import random
from typing import Optional

from ..console.notation import format_moves, parse_move
from ..console.session import ConsoleSession
from ..game.board import Position
from ..game.errors import MoveParseError
from ..game.game import ReversiGame

QUIT_COMMANDS = {'q', 'quit', 'exit'}
MOVES_COMMANDS = {'m', 'moves'}
HELP_COMMANDS = {'h', 'help', '?'}

HELP_TEXT = ("Enter a move as [row,col], row,col or 'row col' with 0-7 indices. "
             "'moves' lists legal moves, 'quit' leaves the game.")


class Player:
    """Base class for anything that can choose moves."""

    is_human = False

    def __init__(self, name: str):
        self.name = name

    def get_move(self, game: ReversiGame) -> Optional[Position]:
        """
        Choose a move for game.current_turn.

        Returns:
            The chosen position, or None to leave the game
        """
        raise NotImplementedError

    def reset(self):
        """Reset any per-game state."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class RandomPlayer(Player):
    """Picks uniformly among the legal moves."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        super().__init__(name)
        self.seed = seed
        self.rng = random.Random(seed)

    def get_move(self, game: ReversiGame) -> Optional[Position]:
        valid_moves = game.legal_moves()
        return self.rng.choice(valid_moves) if valid_moves else None


class HumanPlayer(Player):
    """Reads moves typed at the console."""

    is_human = True

    def __init__(self, session: ConsoleSession, name: str = "human"):
        super().__init__(name)
        self.session = session

    def get_move(self, game: ReversiGame) -> Optional[Position]:
        # Only the shape of the input is checked here; legality is up to the game
        while True:
            answer = self.session.ask(f"{game.current_turn}, where do you want to move? ")
            if answer is None:
                return None
            command = answer.strip().lower()
            if command in QUIT_COMMANDS:
                return None
            if command in MOVES_COMMANDS:
                self.session.say(f"Legal moves: {format_moves(game.legal_moves())}")
                continue
            if command in HELP_COMMANDS:
                self.session.say(HELP_TEXT)
                continue
            try:
                return parse_move(answer)
            except MoveParseError:
                self.session.say("That doesn't look like a move to me.")


def create_player(kind: str, session: Optional[ConsoleSession] = None,
                  name: Optional[str] = None, seed: Optional[int] = None) -> Player:
    """
    Build a player by kind.

    Args:
        kind: "human" or "random"
        session: Console session, required for humans
        name: Display name (default: the kind)
        seed: Seed for random players

    Returns:
        The new player
    """
    if kind == 'human':
        if session is None:
            raise ValueError("A human player needs a console session")
        return HumanPlayer(session, name=name or kind)
    if kind == 'random':
        return RandomPlayer(name=name or kind, seed=seed)
    raise ValueError(f"Unknown player kind: {kind!r}")
