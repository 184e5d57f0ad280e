"""
Single-session runner and config.

- GameConfig: texts, optional attempt cap, and logging/history knobs.
- GameRunner: orchestrates one session between a hidden secret and a guesser.
  - Draws the secret once via an injectable source, then loops: prompt, read a line, parse,
    echo, judge, and report feedback until a guess matches.
  - Unparseable lines are dropped silently and cost one prompt cycle.
  - Keeps per-guess records, exposes metrics(), and can write a structured history JSON.
- guess_the_number(): zero-argument entry point playing one session on stdin/stdout.

"""
from __future__ import annotations
import time, logging, json
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from .errors import InputClosedError
from .guess_parser import parse_guess
from .referee import Referee, Verdict
from .secret_source import RandomSecretSource, SecretSource, draw_secret, SECRET_MIN, SECRET_MAX
from .user_guesser import StreamGuesser

FEEDBACK = {
    Verdict.TOO_SMALL: "Too small!",
    Verdict.TOO_BIG: "Too big!",
}


@dataclass
class GameConfig:
    announce: str = "Guess the number!"
    prompt: str = "Please input your guess."
    echo_template: str = "You guessed: {guess}"
    win_message: str = "You win!"
    echo_guess: bool = True
    # None keeps the loop unbounded; a number ends the session as "gave_up" once reached
    max_attempts: int | None = None
    # Optional path or directory for the structured session record
    history_path: str | None = None
    # Console logging of guesses as they happen
    game_log: bool = False


class GameRunner:
    def __init__(self, guesser=None, secret_source: SecretSource | None = None, cfg: GameConfig | None = None,
                 stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.log = logging.getLogger("GameRunner")
        self.cfg = cfg or GameConfig()
        self.guesser = guesser if guesser is not None else StreamGuesser(stdin)
        self.secret_source = secret_source or RandomSecretSource()
        self.out = stdout
        self.ref: Referee | None = None
        self.records: list[dict] = []  # one dict per parsed guess
        self.rejected = 0
        self.termination_reason: str | None = None
        self.start_ts = time.time()
        self.end_ts: float | None = None

    def _write(self, text: str) -> None:
        out = self.out if self.out is not None else sys.stdout
        out.write(text + "\n")
        out.flush()

    def _guesser_name(self) -> str:
        if hasattr(self.guesser, "label"):
            return self.guesser.label()
        return getattr(self.guesser, "name", None) or "Guesser"

    # ---------------- Session -----------------
    def status(self) -> str:
        if self.termination_reason == "max_attempts_reached":
            return "gave_up"
        if self.ref is None:
            return "not_started"
        return self.ref.status()

    def step(self, line: str) -> Verdict | None:
        """Handle one raw input line. Returns the verdict, or None if the line was discarded."""
        parsed = parse_guess(line)
        if not parsed["ok"]:
            self.rejected += 1
            self.log.debug("Discarding input %r (%s)", line, parsed["reason"])
            return None
        guess = parsed["value"]
        if self.cfg.echo_guess:
            self._write(self.cfg.echo_template.format(guess=guess))
        verdict = self.ref.judge(guess)
        self.records.append({"attempt": self.ref.attempts, "raw": line.strip(), "guess": guess, "verdict": verdict.value})
        if self.cfg.game_log:
            self.log.info("[guess %d] %s: %d -> %s", self.ref.attempts, self._guesser_name(), guess, verdict.value)
        if verdict is Verdict.WIN:
            self._write(self.cfg.win_message)
        else:
            self._write(FEEDBACK[verdict])
        observe = getattr(self.guesser, "observe", None)
        if observe:
            observe(guess, verdict)
        return verdict

    def play(self) -> str:
        self.start_ts = time.time()
        self._write(self.cfg.announce)
        self.ref = Referee(draw_secret(self.secret_source))
        self.log.debug("Session started secret_range=[%d, %d] guesser=%s", SECRET_MIN, SECRET_MAX, self._guesser_name())
        try:
            while self.ref.status() == "guessing":
                if self.cfg.max_attempts is not None and self.ref.attempts >= self.cfg.max_attempts:
                    self.termination_reason = "max_attempts_reached"
                    self.ref.end()
                    break
                self._write(self.cfg.prompt)
                line = self.guesser.next_line(self.cfg.prompt)
                self.step(line)
        except InputClosedError as e:
            self.termination_reason = "input_closed"
            self.ref.end()
            self.end_ts = time.time()
            self.log.error("Input closed after %d guesses (%d discarded lines)", self.ref.attempts, self.rejected)
            self.dump_structured_history_json()
            raise InputClosedError(self.ref.attempts, message=e.detail) from e
        if self.ref.status() == "won":
            self.termination_reason = "correct_guess"
        self.end_ts = time.time()
        result = self.status()
        self.log.info("Session finished result=%s reason=%s attempts=%d rejected=%d",
                      result, self.termination_reason, self.ref.attempts, self.rejected)
        self.dump_structured_history_json()
        return result

    # ---------------- Metrics -----------------
    def metrics(self) -> dict:
        end = self.end_ts or time.time()
        return {
            "attempts": self.ref.attempts if self.ref else 0,
            "rejected_lines": self.rejected,
            "result": self.status(),
            "termination_reason": self.termination_reason,
            "duration_s": round(end - self.start_ts, 2),
            "guesser": self._guesser_name(),
        }

    # --------------- Structured history export ---------------
    def export_structured_history(self) -> dict:
        """Return the session as a dict: range, secret (once finished), result and per-guess entries."""
        finished = self.termination_reason is not None
        return {
            "range": [SECRET_MIN, SECRET_MAX],
            "secret": self.ref.reveal() if (self.ref and finished) else None,
            "result": self.status(),
            "termination_reason": self.termination_reason,
            "guesser": self._guesser_name(),
            "rejected_lines": self.rejected,
            "guesses": list(self.records),
        }

    def _structured_history_path(self) -> str | None:
        p = self.cfg.history_path
        if not p:
            return None
        _, ext = os.path.splitext(p)
        if os.path.isdir(p) or ext == "":
            ts = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
            return os.path.join(p, f"session_{ts}.json")
        return p

    def dump_structured_history_json(self) -> str | None:
        path = self._structured_history_path()
        if not path:
            return None
        try:
            dir_path = os.path.dirname(path)
            if dir_path:
                os.makedirs(dir_path, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.export_structured_history(), f, indent=2)
            self.log.info("Wrote structured history to %s", path)
        except OSError:
            self.log.exception("Failed writing structured history")
            return None
        return path


def guess_the_number() -> None:
    """Play one session on stdin/stdout with a random secret. Returns once the number is guessed."""
    GameRunner(stdin=sys.stdin, stdout=sys.stdout).play()
