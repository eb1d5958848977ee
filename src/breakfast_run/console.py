"""Input and output for the game loop.

The session talks to a GameIO rather than to stdin/stdout directly, so tests
can feed it a script of commands and read back what was printed.
"""

import sys
from typing import Protocol, TextIO


class GameIO(Protocol):
    """Where commands come from and where responses go."""

    def read_line(self, prompt: str) -> str | None:
        """Return the next line of input, or None when input is exhausted."""
        ...

    def write(self, text: str) -> None: ...


class ConsoleIO:
    """GameIO over the process's standard streams."""

    def __init__(self, stdout: TextIO | None = None):
        self.stdout = stdout or sys.stdout

    def read_line(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except EOFError:
            return None

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
