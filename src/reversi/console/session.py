"""
Console session used by the interactive game loop.
"""
import logging
import sys
from typing import Optional, TextIO

from ..game.errors import SessionClosedError

logger = logging.getLogger(__name__)


class ConsoleSession:
    """
    Line-based request/response channel to the players.

    A session is handed to whatever needs to talk to the console instead
    of living in a module-level variable. Use it as a context manager so
    it is closed on every exit path:

        with ConsoleSession() as session:
            play_game(game, players, session)
    """

    def __init__(self, input_stream: Optional[TextIO] = None,
                 output_stream: Optional[TextIO] = None):
        """
        Args:
            input_stream: Where answers are read from (default: sys.stdin)
            output_stream: Where prompts and messages go (default: sys.stdout)
        """
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout
        self.closed = False

    def _check_open(self):
        if self.closed:
            raise SessionClosedError("Console session is closed")

    def ask(self, prompt: str) -> Optional[str]:
        """
        Write a prompt and read one line.

        Returns:
            The line without its trailing newline, or None at end of input
        """
        self._check_open()
        self._output.write(prompt)
        self._output.flush()
        line = self._input.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def say(self, text: str = "") -> None:
        self._check_open()
        self._output.write(text + "\n")
        self._output.flush()

    def close(self) -> None:
        """Release the session. Safe to call more than once."""
        if self.closed:
            return
        self._output.flush()
        self.closed = True
        logger.debug("Console session closed")

    def __enter__(self) -> 'ConsoleSession':
        self._check_open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
