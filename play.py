"""
Main script to play Reversi on the console.
"""
import os
import sys
import argparse
from pathlib import Path
from typing import Dict, List, Optional, TextIO

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from reversi.config import Config, get_default_config
from reversi.console import ConsoleSession, play_game
from reversi.game import Color, ConfigError, ReversiGame
from reversi.logger import setup_logger
from reversi.players import Player, create_player


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Play Reversi on the console')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--mode', choices=['human', 'ai'], default=None,
                        help='"human" for two players, "ai" to play the random AI')
    parser.add_argument('--human-color', choices=['black', 'white'], default=None,
                        help='Side the human plays against the AI')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random AI')
    parser.add_argument('--show-moves', action='store_true',
                        help='List legal moves before each human turn')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file, if any, and apply command line overrides."""
    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        if args.config:
            print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.mode is not None:
        config.game.mode = args.mode
    if args.human_color is not None:
        config.game.human_color = args.human_color
    if args.seed is not None:
        config.game.seed = args.seed
    if args.show_moves:
        config.game.show_legal_moves = True
    if args.log_level is not None:
        config.logging.log_level = args.log_level
    return config.validate()


def build_players(config: Config, session: ConsoleSession) -> Dict[Color, Player]:
    """Assign a player to each color according to the game mode."""
    if config.game.mode == 'human':
        return {
            Color.BLACK: create_player('human', session, name='black'),
            Color.WHITE: create_player('human', session, name='white'),
        }
    human = config.human_color
    return {
        human: create_player('human', session, name='human'),
        human.opposite: create_player('random', name='computer', seed=config.game.seed),
    }


def main(argv: Optional[List[str]] = None, input_stream: Optional[TextIO] = None,
         output_stream: Optional[TextIO] = None) -> int:
    """Play one game on the console."""
    args = parse_args(argv)
    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger = setup_logger(config)
    try:
        with ConsoleSession(input_stream, output_stream) as session:
            players = build_players(config, session)
            play_game(ReversiGame(), players, session, config)
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
