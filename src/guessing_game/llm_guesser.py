from __future__ import annotations
"""LLM-backed guesser: asks a chat model for the next number given the feedback so far."""
import logging
from dataclasses import dataclass, field
from typing import Optional

from .errors import InputClosedError
from .llm_client import ask_for_guess
from .prompting import PromptConfig, build_guess_messages
from .referee import Verdict
from .secret_source import SECRET_MIN, SECRET_MAX

log = logging.getLogger("llm_guesser")


@dataclass
class LLMGuesser:
    model: str
    prompt_cfg: PromptConfig = field(default_factory=PromptConfig)
    name: Optional[str] = None
    # Give up after this many replies in a row that the game could not use
    max_unusable_replies: int = 5
    history: list = field(default_factory=list, init=False)
    _unused: int = field(default=0, init=False, repr=False)

    def label(self) -> str:
        return self.name or self.model

    def next_line(self, prompt: str = "") -> str:
        if self._unused >= self.max_unusable_replies:
            raise InputClosedError(
                attempts=len(self.history),
                message=f"{self.label()} produced {self._unused} unusable replies in a row",
            )
        messages = build_guess_messages(self.prompt_cfg, SECRET_MIN, SECRET_MAX, self.history)
        raw = ask_for_guess(messages, model=self.model)
        self._unused += 1
        log.debug("LLM %s replied %r", self.model, raw[:80])
        # Only the first line is offered as a guess; the game parser decides if it is usable
        return (raw.splitlines() or [""])[0] + "\n"

    def observe(self, guess: int, verdict: Verdict) -> None:
        self._unused = 0
        self.history.append((guess, verdict.value))

    def close(self):
        # Nothing to release for API-based guessers
        return
