"""
Arena for running unattended matches between two players.
"""
import json
import logging
import os
import time
from typing import Dict, Optional

from tqdm import tqdm

from ..game import Color, GameOutcome, ReversiError, ReversiGame
from ..players import Player

logger = logging.getLogger(__name__)


class Arena:
    """Plays repeated games between two non-interactive players."""

    def __init__(self, black: Player, white: Player):
        """
        Initialize the arena.

        Args:
            black: Player holding Black in the first game
            white: Player holding White in the first game
        """
        if black.name == white.name:
            raise ValueError(f"Players need distinct names, both are {black.name!r}")
        self.black = black
        self.white = white
        self.last_results: Optional[Dict] = None

    def play_game(self, black: Optional[Player] = None, white: Optional[Player] = None,
                  verbose: bool = False) -> GameOutcome:
        """
        Play a single game.

        Args:
            black: Player for Black (default: self.black)
            white: Player for White (default: self.white)
            verbose: Whether to print game progress

        Returns:
            The final outcome of the game
        """
        players = {Color.BLACK: black or self.black, Color.WHITE: white or self.white}
        for player in players.values():
            player.reset()

        game = ReversiGame()
        while not game.is_over():
            if game.advance_if_no_move():
                if verbose:
                    print(f"{players[game.current_turn.opposite].name} passes")
                continue

            player = players[game.current_turn]
            move = player.get_move(game)
            if move is None:
                raise ReversiError(f"{player.name} returned no move with moves available")

            result = game.attempt_move(move)
            if not result:
                raise ReversiError(f"{player.name} played an illegal move: {result.error}")
            if verbose:
                print(f"{player.name} plays at ({move[0]}, {move[1]})")
                print(game)

        outcome = game.outcome()
        if verbose:
            print(f"Game over. Black: {outcome.black_count}, White: {outcome.white_count}")
        return outcome

    def run_matches(self, num_games: int = 100, alternate_colors: bool = True,
                    show_progress: bool = True, verbose: bool = False) -> Dict:
        """
        Play a series of games and tally the results.

        Ties are credited to whoever held Black, following the game's tie
        policy, and are also counted under 'ties'.

        Args:
            num_games: Number of games to play
            alternate_colors: Swap colors after every game
            show_progress: Show a progress bar
            verbose: Whether to print game progress

        Returns:
            Dictionary with match results
        """
        if num_games < 1:
            raise ValueError("Need at least one game")

        results = {
            'games_played': 0,
            'wins': {self.black.name: 0, self.white.name: 0},
            'ties': 0,
            'black_wins': 0,
            'white_wins': 0,
            'avg_black_count': 0.0,
            'avg_white_count': 0.0,
            'start_time': time.time(),
            'end_time': None,
            'games': []
        }
        total_black = total_white = 0

        for game_idx in tqdm(range(num_games), desc="Games", disable=not show_progress):
            black, white = self.black, self.white
            if alternate_colors and game_idx % 2 == 1:
                black, white = white, black

            outcome = self.play_game(black, white, verbose=verbose)
            winner = black if outcome.winner is Color.BLACK else white

            results['games_played'] += 1
            results['wins'][winner.name] += 1
            if outcome.winner is Color.BLACK:
                results['black_wins'] += 1
            else:
                results['white_wins'] += 1
            if outcome.is_tie:
                results['ties'] += 1
            total_black += outcome.black_count
            total_white += outcome.white_count

            results['games'].append({
                'game': game_idx + 1,
                'black': black.name,
                'white': white.name,
                'black_count': outcome.black_count,
                'white_count': outcome.white_count,
                'winner': winner.name,
                'tie': outcome.is_tie
            })

        results['avg_black_count'] = total_black / results['games_played']
        results['avg_white_count'] = total_white / results['games_played']
        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']

        logger.info("Played %d games: %s (ties: %d)",
                    results['games_played'], results['wins'], results['ties'])
        self.last_results = results
        return results

    @staticmethod
    def print_summary(results: Dict):
        """Print a summary of match results."""
        print("\nMatch Summary:")
        print("Player                  Wins  Win rate")
        print("----------------------  ----  --------")
        games = results['games_played']
        for name, wins in sorted(results['wins'].items(), key=lambda x: x[1], reverse=True):
            print(f"{name:22s}  {wins:4d}  {wins / games:8.1%}")
        print(f"\nGames: {games}  Ties (credited to black): {results['ties']}")
        print(f"Average pieces - Black: {results['avg_black_count']:.1f}, "
              f"White: {results['avg_white_count']:.1f}")

    def save_results(self, filepath: str, results: Optional[Dict] = None):
        """Save match results to a JSON file."""
        results = results if results is not None else self.last_results
        if results is None:
            raise ValueError("No results to save; run_matches has not been called")
        directory = os.path.dirname(os.path.abspath(filepath))
        os.makedirs(directory, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(results, f, indent=2)
