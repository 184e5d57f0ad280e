"""
RandomGuesser: picks a uniformly random number that is still possible.

- Low-skill baseline for bulk runs; the interval shrinks with each verdict so it always terminates.
- No external resources; close() is a no-op.
"""
from __future__ import annotations
import random

from .errors import InputClosedError
from .referee import Verdict
from .secret_source import SECRET_MIN, SECRET_MAX


class RandomGuesser:
    """Guess uniformly inside the interval not yet ruled out by feedback."""
    name: str = "Random"

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)
        self.low = SECRET_MIN
        self.high = SECRET_MAX

    def next_line(self, prompt: str = "") -> str:
        if self.low > self.high:
            raise InputClosedError(message="Random guesser ran out of candidates")
        return f"{self._rng.randint(self.low, self.high)}\n"

    def observe(self, guess: int, verdict: Verdict) -> None:
        if verdict is Verdict.TOO_SMALL:
            self.low = max(self.low, guess + 1)
        elif verdict is Verdict.TOO_BIG:
            self.high = min(self.high, guess - 1)

    def close(self):
        # Nothing to release
        pass
