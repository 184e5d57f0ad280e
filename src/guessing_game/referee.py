"""
Referee: owns the session secret and judges guesses against it.

- The secret is fixed at construction and kept private for the session's lifetime.
- judge() records every parsed guess and returns a Verdict.
- status() is the two-state machine: "guessing" until a WIN has been judged, then "won".
- reveal() hands the secret out only once the session is over (won, or ended by the runner).
"""
from __future__ import annotations
from enum import Enum


class Verdict(str, Enum):
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    WIN = "win"


class Referee:
    def __init__(self, secret: int):
        self._secret = secret
        self._won = False
        self._ended = False
        self.history: list[tuple[int, Verdict]] = []

    @property
    def attempts(self) -> int:
        return len(self.history)

    def judge(self, guess: int) -> Verdict:
        if guess < self._secret:
            verdict = Verdict.TOO_SMALL
        elif guess > self._secret:
            verdict = Verdict.TOO_BIG
        else:
            verdict = Verdict.WIN
            self._won = True
        self.history.append((guess, verdict))
        return verdict

    def status(self) -> str:
        return "won" if self._won else "guessing"

    def end(self) -> None:
        """Mark the session over without a win (input closed, attempts exhausted)."""
        self._ended = True

    def reveal(self) -> int:
        if not (self._won or self._ended):
            raise RuntimeError("Secret stays hidden while the session is in progress")
        return self._secret
