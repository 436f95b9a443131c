"""
Tests for unattended matches between players.
"""
import json
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

import run_arena
from reversi.arena import Arena
from reversi.game import Color, ReversiError, decide_winner
from reversi.players import Player, RandomPlayer


class CornerPlayer(Player):
    """Always asks for (0, 0), which is never legal early on."""

    def get_move(self, game):
        return (0, 0)


def _arena(seed: int = 0) -> Arena:
    return Arena(RandomPlayer("random-1", seed=seed), RandomPlayer("random-2", seed=seed + 1))


def test_players_need_distinct_names():
    with pytest.raises(ValueError):
        Arena(RandomPlayer("same"), RandomPlayer("same"))


def test_play_game():
    outcome = _arena().play_game()
    assert 0 < outcome.black_count + outcome.white_count <= 64
    assert outcome.winner is decide_winner(outcome.black_count, outcome.white_count)


def test_play_game_rejects_illegal_player():
    arena = Arena(CornerPlayer("corner"), RandomPlayer("random"))
    with pytest.raises(ReversiError):
        arena.play_game()


def test_run_matches():
    arena = _arena(seed=10)
    results = arena.run_matches(num_games=6, show_progress=False)

    assert results['games_played'] == 6
    assert sum(results['wins'].values()) == 6
    assert results['black_wins'] + results['white_wins'] == 6
    assert results['ties'] <= results['black_wins']
    assert len(results['games']) == 6
    # Colors alternate between games
    assert results['games'][0]['black'] == "random-1"
    assert results['games'][1]['black'] == "random-2"
    assert 0 < results['avg_black_count'] + results['avg_white_count'] <= 64
    assert arena.last_results is results


def test_run_matches_fixed_colors():
    results = _arena().run_matches(num_games=3, alternate_colors=False, show_progress=False)
    assert all(g['black'] == "random-1" for g in results['games'])
    for g in results['games']:
        expected = Color.WHITE if g['white_count'] > g['black_count'] else Color.BLACK
        assert g['winner'] == (g['black'] if expected is Color.BLACK else g['white'])


def test_run_matches_needs_games():
    with pytest.raises(ValueError):
        _arena().run_matches(num_games=0, show_progress=False)


def test_save_results(tmp_path):
    arena = _arena()
    with pytest.raises(ValueError):
        arena.save_results(str(tmp_path / "none.json"))

    arena.run_matches(num_games=2, show_progress=False)
    path = tmp_path / "out" / "results.json"
    arena.save_results(str(path))
    with open(path) as f:
        assert json.load(f)['games_played'] == 2


def test_print_summary(capsys):
    arena = _arena()
    results = arena.run_matches(num_games=2, show_progress=False)
    arena.print_summary(results)
    out = capsys.readouterr().out
    assert "Match Summary" in out
    assert "random-1" in out and "random-2" in out


def test_run_arena_script(tmp_path, capsys):
    path = tmp_path / "results.json"
    code = run_arena.main(["--games", "2", "--seed", "1", "--no-progress", "--output", str(path)])
    assert code == 0
    assert path.exists()
    assert "Playing 2 games" in capsys.readouterr().out


def test_run_arena_script_reports_bad_config(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"game": {"nope": 1}}))
    assert run_arena.main(["--config", str(path), "--no-progress"]) == 2
    assert "Configuration error" in capsys.readouterr().err

    path.write_text(json.dumps({"logging": {"log_level": "LOUD"}}))
    assert run_arena.main(["--config", str(path), "--no-progress"]) == 2


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
