"""
Tests for the console session, move parsing and the interactive loop.
"""
import io
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

import play
from reversi.config import get_default_config
from reversi.console import ConsoleSession, format_moves, parse_move, play_game
from reversi.game import Board, Color, MoveParseError, ReversiGame, SessionClosedError
from reversi.players import HumanPlayer, RandomPlayer


def test_parse_move_forms():
    assert parse_move("[3,4]") == (3, 4)
    assert parse_move("[ 3 , 4 ]") == (3, 4)
    assert parse_move("3,4") == (3, 4)
    assert parse_move("  5 6 ") == (5, 6)
    # Range is left to the board
    assert parse_move("-1,9") == (-1, 9)


def test_parse_move_rejects_garbage():
    for text in ["", "d3", "[3,4", "3", "3,4,5", "a,b", "[3;4]"]:
        with pytest.raises(MoveParseError):
            parse_move(text)


def test_format_moves():
    assert format_moves([(2, 3), (3, 2)]) == "[2, 3], [3, 2]"
    assert format_moves([]) == ""


def test_session_ask_and_say():
    output = io.StringIO()
    session = ConsoleSession(io.StringIO("first\r\nsecond\n"), output)
    assert session.ask("> ") == "first"
    assert session.ask("> ") == "second"
    assert session.ask("> ") is None
    session.say("done")
    assert output.getvalue() == "> > > done\n"


def test_session_closes_on_every_exit_path():
    session = ConsoleSession(io.StringIO(""), io.StringIO())
    with pytest.raises(RuntimeError):
        with session:
            raise RuntimeError("boom")
    assert session.closed

    with pytest.raises(SessionClosedError):
        session.say("hello")
    with pytest.raises(SessionClosedError):
        session.ask("> ")
    # Closing twice is fine
    session.close()


def test_play_game_pass_reprompt_and_outcome():
    """White must pass, black types an off-board move, then finishes the game."""
    rows = [["B"] * 8 for _ in range(8)]
    rows[3][3] = "W"
    rows[4][4] = "."
    game = ReversiGame(Board.from_rows(rows), turn=Color.WHITE)

    output = io.StringIO()
    with ConsoleSession(io.StringIO("9,9\n[4,4]\n"), output) as session:
        players = {Color.BLACK: HumanPlayer(session), Color.WHITE: HumanPlayer(session)}
        outcome = play_game(game, players, session)

    text = output.getvalue()
    assert "white has no move!" in text
    assert "Invalid move!" in text
    assert text.count("black, where do you want to move?") == 2
    assert "The game is over!" in text
    assert "White had 0 pieces." in text
    assert "Black had 64 pieces." in text
    assert "black won!" in text
    assert outcome.winner is Color.BLACK
    assert (outcome.black_count, outcome.white_count) == (64, 0)


def test_play_game_illegal_move_is_retried():
    output = io.StringIO()
    with ConsoleSession(io.StringIO("0,0\n3,3\n2,3\nq\n"), output) as session:
        players = {Color.BLACK: HumanPlayer(session), Color.WHITE: HumanPlayer(session)}
        game = ReversiGame()
        assert play_game(game, players, session) is None

    text = output.getvalue()
    assert text.count("Invalid move!") == 2
    assert game.move_history == [(Color.BLACK, (2, 3))]
    assert "white, where do you want to move?" in text
    assert "white left the game." in text


def test_play_game_ai_vs_ai():
    output = io.StringIO()
    config = get_default_config()
    config.display.empty_symbol = "-"
    with ConsoleSession(io.StringIO(""), output) as session:
        players = {Color.BLACK: RandomPlayer("b", seed=11), Color.WHITE: RandomPlayer("w", seed=12)}
        outcome = play_game(ReversiGame(), players, session, config)

    text = output.getvalue()
    assert outcome is not None
    assert outcome.black_count + outcome.white_count <= 64
    assert "black has played to [" in text
    assert "The game is over!" in text
    assert "3 - - - W B - - -" in text


def test_play_game_reports_tie_policy():
    board = Board.from_rows([["B"] * 8 for _ in range(4)] + [["W"] * 8 for _ in range(4)])
    output = io.StringIO()
    with ConsoleSession(io.StringIO(""), output) as session:
        outcome = play_game(ReversiGame(board), {}, session)
    assert outcome.is_tie
    assert "ties go to black" in output.getvalue()


def test_main_two_humans_quit():
    output = io.StringIO()
    code = play.main(["--mode", "human"], input_stream=io.StringIO("2,3\nquit\n"), output_stream=output)
    assert code == 0
    text = output.getvalue()
    assert "white left the game." in text


def test_main_human_against_ai():
    output = io.StringIO()
    code = play.main(["--human-color", "white", "--seed", "4", "--show-moves"],
                     input_stream=io.StringIO(""), output_stream=output)
    assert code == 0
    text = output.getvalue()
    # Computer holds black and moves first, then the human's input runs out
    assert "black has played to [" in text
    assert "Legal moves:" in text
    assert "white left the game." in text


def test_main_rejects_bad_config(tmp_path, capsys):
    config = get_default_config()
    config.game.mode = "online"
    path = str(tmp_path / "bad.json")
    config.save(path)
    assert play.main(["--config", path]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_main_rejects_unknown_log_level(capsys):
    code = play.main(["--log-level", "LOUD"], input_stream=io.StringIO(""),
                     output_stream=io.StringIO())
    assert code == 2
    assert "Unknown log level" in capsys.readouterr().err


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
