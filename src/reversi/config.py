"""
Configuration parameters for Reversi.
"""
import os
import logging
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

from .game.board import Cell, Color
from .game.errors import ConfigError

GAME_MODES = ('human', 'ai')
COLOR_NAMES = ('black', 'white')


@dataclass
class GameConfig:
    """Configuration for an interactive game."""
    mode: str = "ai"  # "human" for two humans, "ai" for human vs random AI
    human_color: str = "black"  # Side the human plays in "ai" mode
    seed: Optional[int] = None  # Seed for the random AI
    show_legal_moves: bool = False  # Print legal moves before each human turn


@dataclass
class DisplayConfig:
    """Configuration for the console board rendering."""
    empty_symbol: str = "."
    black_symbol: str = "B"
    white_symbol: str = "W"


@dataclass
class ArenaConfig:
    """Configuration for unattended AI-vs-AI matches."""
    num_games: int = 100
    alternate_colors: bool = True  # Swap sides every game
    show_progress: bool = True
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def human_color(self) -> Color:
        return Color[self.game.human_color.upper()]

    @property
    def symbols(self) -> Dict[Cell, str]:
        return {
            Cell.EMPTY: self.display.empty_symbol,
            Cell.BLACK: self.display.black_symbol,
            Cell.WHITE: self.display.white_symbol,
        }

    def validate(self) -> 'Config':
        """
        Check the values that cannot be expressed by the field types.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigError: on the first invalid value found
        """
        if self.game.mode not in GAME_MODES:
            raise ConfigError(f"Unknown game mode {self.game.mode!r}, expected one of {GAME_MODES}")
        if self.game.human_color not in COLOR_NAMES:
            raise ConfigError(f"Unknown color {self.game.human_color!r}, expected one of {COLOR_NAMES}")
        symbols = list(self.symbols.values())
        if any(not s for s in symbols):
            raise ConfigError("Display symbols must not be empty")
        if len(set(symbols)) != len(symbols):
            raise ConfigError(f"Display symbols must be distinct, got {symbols}")
        # getLevelName maps known names to ints and anything else to "Level X"
        if not isinstance(logging.getLevelName(str(self.logging.log_level).upper()), int):
            raise ConfigError(f"Unknown log level {self.logging.log_level!r}")
        if self.arena.num_games < 1:
            raise ConfigError(f"arena.num_games must be positive, got {self.arena.num_games}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        try:
            return cls(
                project_name=config_dict.get('project_name', 'Reversi'),
                game=GameConfig(**config_dict.get('game', {})),
                display=DisplayConfig(**config_dict.get('display', {})),
                arena=ArenaConfig(**config_dict.get('arena', {})),
                logging=LoggingConfig(**config_dict.get('logging', {}))
            )
        except TypeError as e:
            raise ConfigError(f"Invalid config: {e}") from e

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
