"""Exception types raised across the game package."""
from __future__ import annotations


class GuessGameError(Exception):
    """Base class for errors raised by the guessing game."""


class InputClosedError(GuessGameError, EOFError):
    """The guess input ran dry before the secret was found."""

    def __init__(self, attempts: int = 0, message: str | None = None):
        self.attempts = attempts
        self.detail = message
        super().__init__(message or f"Input closed before a winning guess (after {attempts} guesses)")


class SecretOutOfRangeError(GuessGameError, ValueError):
    """A secret source returned a value outside the allowed range."""
