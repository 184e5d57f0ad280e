"""
Configuration and environment loading for the guessing game.

- Loads settings.yml (YAML) from repo root if present; falls back to environment variables (.env honoured).
- Exposes SETTINGS with keys used across the project (LLM endpoint, retry knobs, log level).
"""
from dataclasses import dataclass
import logging
import os
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("config")


def _repo_root() -> str:
    # this file: src/guessing_game/config.py → repo root is two levels up
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _load_yaml(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        log.exception("Failed to read settings file %s; using environment only", path)
        return {}
    return data if isinstance(data, dict) else {}


_cfg = _load_yaml(os.path.join(_repo_root(), "settings.yml"))


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    if name in _cfg:
        val = _cfg[name]
        return cast(val) if cast else val
    env = os.environ.get(name)
    if env is not None:
        return cast(env) if cast else env
    return default


@dataclass(frozen=True)
class Settings:
    # Auth / endpoint (OpenAI-compatible wire format)
    llm_api_key: str
    api_base: str

    # Tuning knobs
    responses_timeout_s: float
    responses_retries: int

    log_level: str


SETTINGS = Settings(
    llm_api_key=_get("GUESSGAME_LLM_API_KEY", _get("OPENAI_API_KEY", "")),
    api_base=_get("GUESSGAME_LLM_BASE_URL", "https://api.openai.com/v1"),
    responses_timeout_s=float(_get("GUESSGAME_RESPONSES_TIMEOUT_S", 60.0, cast=float)),
    responses_retries=int(_get("GUESSGAME_RESPONSES_RETRIES", 3, cast=int)),
    log_level=str(_get("GUESSGAME_LOG_LEVEL", "WARNING")),
)
