"""
Prompt builders and config for LLM guess requests using a modular template.

Callers supply system instructions and a template string with placeholders
({LOW}, {HIGH}, {HISTORY}, {ATTEMPT}) that are substituted per guess.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

DEFAULT_SYSTEM = "You are playing a number guessing game. When asked for a guess, reply with a single whole number and nothing else."
DEFAULT_TEMPLATE = """I am thinking of a whole number between {LOW} and {HIGH} (inclusive).
Your previous guesses and my answers:
{HISTORY}
This is guess number {ATTEMPT}. Reply with only your next guess as digits."""


@dataclass
class PromptConfig:
    """Configuration for shaping guess prompts using a custom template."""

    system_instructions: str = DEFAULT_SYSTEM
    template: str = DEFAULT_TEMPLATE


def render_custom_prompt(template: str, values: Dict[str, str]) -> str:
    """Replace known placeholders in the template. Unknown tokens are left intact."""
    rendered = template or ""
    for key, val in values.items():
        rendered = rendered.replace(f"{{{key}}}", val)
    return rendered


def format_history(history: Iterable[Tuple[int, str]]) -> str:
    lines = [f"- {guess}: {verdict.replace('_', ' ')}" for guess, verdict in history]
    return "\n".join(lines) if lines else "(none yet)"


def build_guess_messages(cfg: PromptConfig, low: int, high: int, history: list[tuple[int, str]]) -> list[dict]:
    user = render_custom_prompt(cfg.template, {
        "LOW": str(low),
        "HIGH": str(high),
        "HISTORY": format_history(history),
        "ATTEMPT": str(len(history) + 1),
    })
    return [
        {"role": "system", "content": cfg.system_instructions},
        {"role": "user", "content": user},
    ]
