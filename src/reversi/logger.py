"""
Logging utilities for Reversi.
"""
import os
import logging
from datetime import datetime
from typing import Optional

from .config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Installs console and optional file handlers on the package logger."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.log_file = None
        self.handlers = []

        level = logging.DEBUG if config.logging.verbose else config.logging.log_level.upper()
        formatter = logging.Formatter(LOG_FORMAT)

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers.append(self.console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.log_dir, exist_ok=True)
            self.log_file = os.path.join(self.log_dir, f"{self.run_name}.log")
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger, leaving the root logger alone
        self.logger = logging.getLogger('reversi')
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def close(self):
        """Remove and close the handlers installed by this logger."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def __enter__(self) -> 'Logger':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
