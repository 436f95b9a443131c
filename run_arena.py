"""
Script for running matches between random Reversi players.
"""
import os
import sys
import argparse
from pathlib import Path
from typing import List, Optional

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from reversi.arena import Arena
from reversi.config import Config, get_default_config
from reversi.game import ConfigError
from reversi.logger import setup_logger
from reversi.players import RandomPlayer


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Run matches between random Reversi players')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the first player; the second uses seed + 1')
    parser.add_argument('--no-alternate', action='store_true',
                        help='Keep the same player on Black for every game')
    parser.add_argument('--no-progress', action='store_true',
                        help='Hide the progress bar')
    parser.add_argument('--output', type=str, default=None,
                        help='File to save results to (JSON)')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every move')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.config and os.path.exists(args.config):
            config = Config.load(args.config)
        else:
            config = get_default_config()
        if args.games is not None:
            config.arena.num_games = args.games
        if args.seed is not None:
            config.arena.seed = args.seed
        if args.no_alternate:
            config.arena.alternate_colors = False
        if args.no_progress:
            config.arena.show_progress = False
        config.validate()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger = setup_logger(config)
    try:
        seed = config.arena.seed
        arena = Arena(
            RandomPlayer("random-1", seed=seed),
            RandomPlayer("random-2", seed=None if seed is None else seed + 1),
        )

        print(f"Playing {config.arena.num_games} games...")
        results = arena.run_matches(
            num_games=config.arena.num_games,
            alternate_colors=config.arena.alternate_colors,
            show_progress=config.arena.show_progress,
            verbose=args.verbose,
        )
        arena.print_summary(results)

        if args.output:
            arena.save_results(args.output, results)
            print(f"\nResults saved to {args.output}")
    finally:
        logger.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
