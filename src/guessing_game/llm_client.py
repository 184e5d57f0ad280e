from __future__ import annotations
"""
LLM client facade over an OpenAI-compatible chat completions endpoint (configurable base URL).

The rest of the code should not care which SDK is in use. This module sends `model` + `messages`
and returns raw text responses.
"""
from typing import Optional, List, Dict
import logging
import random
import time

from openai import OpenAI, OpenAIError

from .config import SETTINGS

log = logging.getLogger("llm_client")

_CLIENT: OpenAI | None = None


def _client() -> OpenAI:
    # Built on first use so importing the package does not require credentials
    global _CLIENT
    if _CLIENT is None:
        _CLIENT = OpenAI(api_key=SETTINGS.llm_api_key or None, base_url=SETTINGS.api_base or None)
    return _CLIENT


def ask_for_guess(messages: List[Dict[str, str]], model: Optional[str] = None) -> str:
    """Given a chat-style conversation (including system message), request the next guess."""
    if not model:
        raise ValueError("Model is required; set it in your JSON config (key 'model') or CLI.")
    delay = 0.5
    timeout = SETTINGS.responses_timeout_s
    for attempt in range(SETTINGS.responses_retries + 1):
        try:
            rsp = _client().chat.completions.create(
                model=model,
                messages=messages,
                timeout=timeout,
            )
            text = _extract_text(rsp)
            if text:
                return text.strip()
        except OpenAIError:
            if attempt >= SETTINGS.responses_retries:
                log.exception("Chat request failed after %d attempts", attempt + 1)
                break
            sleep_s = delay * (2 ** attempt) * (0.8 + 0.4 * random.random())
            time.sleep(min(sleep_s, 10.0))
    return ""


def _extract_text(rsp) -> str:
    choices = getattr(rsp, "choices", None)
    if not choices:
        return ""
    content = getattr(choices[0].message, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for c in content:
            if isinstance(c, dict):
                if c.get("type") == "text" and isinstance(c.get("text"), str):
                    parts.append(c["text"])
                continue
            t = getattr(c, "text", None)
            if isinstance(t, str):
                parts.append(t)
        return "\n".join(parts)
    return ""
