"""
Command-line entry point: play one or more sessions of Guess the Number.

- Interactive by default (guesser=user reads stdin); bisect/random/llm guessers play on their own.
- Options may come from a JSON config file; CLI flags take precedence, then config, then defaults.
- With --games > 1 a summary of attempts across sessions is printed at the end.
"""
import argparse
import json
import logging
import statistics
import sys

from .config import SETTINGS
from .errors import InputClosedError
from .game import GameConfig, GameRunner
from .bisect_guesser import BisectGuesser
from .llm_guesser import LLMGuesser
from .random_guesser import RandomGuesser
from .secret_source import FixedSecretSource, RandomSecretSource
from .user_guesser import StreamGuesser

log = logging.getLogger("guess_the_number")

GUESSERS = ["user", "bisect", "random", "llm"]


def load_json_config(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.error("Failed to read config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="guess-the-number", description="Guess a hidden number between 1 and 100.")
    ap.add_argument("--config", default=None, help="Optional JSON config file to load defaults from.")
    ap.add_argument("--guesser", choices=GUESSERS, default=None, help="Who makes the guesses")
    ap.add_argument("--model", default=None, help="Model name for the llm guesser")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the secret (and the random guesser)")
    ap.add_argument("--secret", type=int, default=None, help="Use a fixed secret instead of a random one")
    ap.add_argument("--games", type=int, default=None, help="Number of sessions to play")
    ap.add_argument("--max-attempts", type=int, default=None, help="Give up after this many parsed guesses")
    ap.add_argument("--history-out", default=None, help="JSON file or directory for per-session records")
    ap.add_argument("--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)")
    return ap


def make_guesser(kind: str, model: str | None, seed: int | None):
    if kind == "bisect":
        return BisectGuesser()
    if kind == "random":
        return RandomGuesser(seed=seed)
    if kind == "llm":
        if not model:
            raise ValueError("Model is required for the llm guesser. Provide --model or set 'model' in the JSON config.")
        return LLMGuesser(model=model)
    return StreamGuesser(sys.stdin)


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    cfg_dict = load_json_config(args.config) if args.config else {}

    # Resolve values with precedence: CLI arg if provided -> config -> default
    def pick(*keys, default=None):
        for k in keys:
            v = getattr(args, k, None)
            if v is not None:
                return v
            if k in cfg_dict and cfg_dict[k] is not None:
                return cfg_dict[k]
        return default

    log_level = str(pick("log_level", default=SETTINGS.log_level)).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Config files may carry strings; coerce here so bad values become usage errors
    def pick_int(key, default=None):
        v = pick(key, default=default)
        if v is None:
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            ap.error(f"{key} must be an integer, got {v!r}")

    kind = pick("guesser", default="user")
    model = pick("model", default=None)
    seed = pick_int("seed")
    secret = pick_int("secret")
    games = pick_int("games", default=1)
    max_attempts = pick_int("max_attempts")
    history_out = pick("history_out", default=None)

    if kind not in GUESSERS:
        ap.error(f"guesser must be one of {', '.join(GUESSERS)}, got {kind!r}")
    if games < 1:
        ap.error("--games must be at least 1")
    if kind == "user" and games > 1:
        ap.error("--games > 1 needs an automated guesser (bisect, random or llm)")

    try:
        source = FixedSecretSource(secret) if secret is not None else RandomSecretSource(seed)
    except ValueError as e:
        ap.error(str(e))

    gcfg = GameConfig(
        max_attempts=max_attempts,
        history_path=history_out,
        game_log=kind != "user",
    )

    summaries = []
    for i in range(games):
        try:
            guesser = make_guesser(kind, model, None if seed is None else seed + i)
        except ValueError as e:
            ap.error(str(e))
        runner = GameRunner(guesser=guesser, secret_source=source, cfg=gcfg, stdout=sys.stdout)
        log.info("Starting session %d/%d guesser=%s", i + 1, games, kind)
        try:
            runner.play()
        except InputClosedError as e:
            reason = f": {e.detail}" if e.detail else "."
            print(f"Input closed before the number was guessed ({e.attempts} guesses made){reason}", file=sys.stderr)
            return 1
        finally:
            guesser.close()
        summaries.append(runner.metrics())

    if kind != "user":
        attempts = [m["attempts"] for m in summaries]
        won = sum(1 for m in summaries if m["result"] == "won")
        print(f"Sessions: {games}  won: {won}  attempts avg: {statistics.mean(attempts):.2f}  max: {max(attempts)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
