"""
Guess parsing helpers.

A guess is a non-negative integer that fits an unsigned 32-bit value. parse_guess() never
raises: it returns a ParsedGuess with ok=False and a reason when the line is unusable,
so the game loop can drop the line and re-prompt.
"""
from __future__ import annotations

import re
from typing import TypedDict

GUESS_MAX = 2 ** 32 - 1
DIGITS_RE = re.compile(r"^[0-9]+$")


class ParsedGuess(TypedDict, total=False):
    ok: bool
    value: int
    raw: str
    reason: str


def parse_guess(line: str) -> ParsedGuess:
    """Trim the line and convert it to a guess, or describe why it cannot be one."""
    raw = line if isinstance(line, str) else ""
    text = raw.strip()
    if not text:
        return {"ok": False, "raw": raw, "reason": "empty"}
    # str.isdigit() accepts non-ASCII digits and superscripts; keep to 0-9
    if not DIGITS_RE.match(text):
        return {"ok": False, "raw": raw, "reason": "not_a_number"}
    # int() refuses very long digit strings, so bound the length first
    if len(text.lstrip("0")) > len(str(GUESS_MAX)):
        return {"ok": False, "raw": raw, "reason": "overflow"}
    value = int(text)
    if value > GUESS_MAX:
        return {"ok": False, "raw": raw, "reason": "overflow"}
    return {"ok": True, "raw": raw, "value": value}


def is_valid_guess(line: str) -> bool:
    return bool(parse_guess(line).get("ok"))
