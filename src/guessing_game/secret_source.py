"""
Secret sources: where a session's hidden number comes from.

- RandomSecretSource: uniform draw over the inclusive range via random.Random.
- FixedSecretSource: always returns the same value; used to pin a session in tests and demos.
- draw_secret(): draws once over [SECRET_MIN, SECRET_MAX] and rejects misbehaving sources.

Any callable (low, high) -> int can stand in for a source.
"""
from __future__ import annotations
import random
from typing import Callable

from .errors import SecretOutOfRangeError

SECRET_MIN = 1
SECRET_MAX = 100

SecretSource = Callable[[int, int], int]


class RandomSecretSource:
    """Uniform pseudo-random source. Pass a seed for reproducible sessions."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def __call__(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


class FixedSecretSource:
    def __init__(self, value: int):
        if not SECRET_MIN <= value <= SECRET_MAX:
            raise ValueError(f"Fixed secret {value} outside [{SECRET_MIN}, {SECRET_MAX}]")
        self.value = value
        self.calls = 0

    def __call__(self, low: int, high: int) -> int:
        self.calls += 1
        return self.value


def draw_secret(source: SecretSource) -> int:
    value = source(SECRET_MIN, SECRET_MAX)
    if not isinstance(value, int) or isinstance(value, bool) or not SECRET_MIN <= value <= SECRET_MAX:
        raise SecretOutOfRangeError(f"Secret source returned {value!r}; expected an int in [{SECRET_MIN}, {SECRET_MAX}]")
    return value
