"""
BisectGuesser: binary search over the still-possible interval.

- Always guesses the midpoint; observe() narrows the interval from the verdict.
- Solves any secret in [1, 100] within 7 guesses. Useful as a deterministic baseline.
"""
from __future__ import annotations

from .errors import InputClosedError
from .referee import Verdict
from .secret_source import SECRET_MIN, SECRET_MAX


class BisectGuesser:
    name: str = "Bisect"

    def __init__(self, low: int = SECRET_MIN, high: int = SECRET_MAX):
        self.low = low
        self.high = high

    def next_line(self, prompt: str = "") -> str:
        if self.low > self.high:
            raise InputClosedError(message=f"No candidates left in [{self.low}, {self.high}]")
        return f"{(self.low + self.high) // 2}\n"

    def observe(self, guess: int, verdict: Verdict) -> None:
        if verdict is Verdict.TOO_SMALL:
            self.low = max(self.low, guess + 1)
        elif verdict is Verdict.TOO_BIG:
            self.high = min(self.high, guess - 1)

    def close(self):
        pass
