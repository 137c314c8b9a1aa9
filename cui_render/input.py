"""
Keyboard Input
===============
Blocking key and line reads on top of blessed.
"""

from typing import Callable, Optional, TypeVar

from blessed import Terminal
from blessed.keyboard import Keystroke


T = TypeVar('T')


class KeyboardInput:
    """Reads keys and lines from the user, blocking until input arrives."""

    def __init__(self, term: Optional[Terminal] = None):
        self.term = term if term is not None else Terminal()

    def read_key(self) -> Keystroke:
        """Wait for a single key press."""
        with self.term.cbreak():
            return self.term.inkey()

    def read_line(self) -> str:
        """Wait for one line of text, without its trailing newline."""
        return input()

    def parse_line(self, convert: Callable[[str], T]) -> T:
        """
        Read a line and convert it, e.g. ``parse_line(int)``.

        Errors raised by the conversion propagate to the caller.
        """
        return convert(self.read_line())
