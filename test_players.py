"""
Tests for human and random players.
"""
import io
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from reversi.console import ConsoleSession
from reversi.game import Board, Color, ReversiGame
from reversi.players import HumanPlayer, RandomPlayer, create_player


def _session(text: str):
    output = io.StringIO()
    return ConsoleSession(io.StringIO(text), output), output


def test_random_player_picks_legal_moves():
    game = ReversiGame()
    player = RandomPlayer(seed=0)
    for _ in range(10):
        assert player.get_move(game) in game.legal_moves()


def test_random_player_is_reproducible():
    game = ReversiGame()
    first = [RandomPlayer(seed=5).get_move(game) for _ in range(3)]
    assert len(set(first)) == 1


def test_random_player_without_moves():
    rows = [["B"] * 8 for _ in range(8)]
    rows[3][3] = "W"
    rows[4][4] = "."
    game = ReversiGame(Board.from_rows(rows), turn=Color.WHITE)
    assert RandomPlayer().get_move(game) is None


def test_human_player_reads_move():
    session, output = _session("[2,3]\n")
    move = HumanPlayer(session).get_move(ReversiGame())
    assert move == (2, 3)
    assert "black, where do you want to move?" in output.getvalue()


def test_human_player_reprompts_on_garbage():
    session, output = _session("hello\n\n3 2\n")
    assert HumanPlayer(session).get_move(ReversiGame()) == (3, 2)
    assert output.getvalue().count("doesn't look like a move") == 2


def test_human_player_does_not_check_legality():
    session, _ = _session("0,0\n")
    assert HumanPlayer(session).get_move(ReversiGame()) == (0, 0)


def test_human_player_commands():
    session, output = _session("moves\nhelp\n4 5\n")
    assert HumanPlayer(session).get_move(ReversiGame()) == (4, 5)
    text = output.getvalue()
    assert "Legal moves: [2, 3], [3, 2], [4, 5], [5, 4]" in text
    assert "[row,col]" in text


def test_human_player_quits():
    session, _ = _session("quit\n")
    assert HumanPlayer(session).get_move(ReversiGame()) is None
    session, _ = _session("")
    assert HumanPlayer(session).get_move(ReversiGame()) is None


def test_create_player():
    session, _ = _session("")
    human = create_player("human", session)
    assert isinstance(human, HumanPlayer) and human.is_human
    assert human.name == "human"

    bot = create_player("random", name="bot", seed=3)
    assert isinstance(bot, RandomPlayer) and not bot.is_human
    assert bot.name == "bot"
    assert bot.seed == 3

    with pytest.raises(ValueError):
        create_player("human")
    with pytest.raises(ValueError):
        create_player("minimax")


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
