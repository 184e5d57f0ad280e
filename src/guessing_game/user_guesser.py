from __future__ import annotations
"""Interactive guesser that reads one line per guess from a text stream (stdin by default)."""
import sys
from typing import TextIO

from .errors import InputClosedError


class StreamGuesser:
    name = "Human"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def next_line(self, prompt: str = "") -> str:
        """Return the next raw line; the prompt has already been written by the game."""
        stream = self.stream if self.stream is not None else sys.stdin
        line = stream.readline()
        # readline() returns "" only at EOF; a blank line is still "\n"
        if line == "":
            raise InputClosedError()
        return line

    def close(self):
        return
