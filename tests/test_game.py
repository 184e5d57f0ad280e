import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from guessing_game.errors import InputClosedError, SecretOutOfRangeError
from guessing_game.game import GameConfig, GameRunner, guess_the_number
from guessing_game.secret_source import FixedSecretSource, RandomSecretSource, SECRET_MIN, SECRET_MAX


def run_session(secret: int, lines: list[str], cfg: GameConfig | None = None):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    runner = GameRunner(secret_source=FixedSecretSource(secret), cfg=cfg, stdin=stdin, stdout=stdout)
    result = runner.play()
    return runner, result, stdout.getvalue().splitlines()


class GameLoopTests(unittest.TestCase):
    def test_secret_fifty_small_big_win(self):
        runner, result, out = run_session(50, ["25", "75", "50"])
        self.assertEqual(result, "won")
        self.assertEqual(out[0], "Guess the number!")
        feedback = [line for line in out if line in ("Too small!", "Too big!", "You win!")]
        self.assertEqual(feedback, ["Too small!", "Too big!", "You win!"])
        self.assertEqual(len(runner.records), 3)
        self.assertEqual([r["guess"] for r in runner.records], [25, 75, 50])
        self.assertIn("You guessed: 75", out)
        self.assertEqual(out[-1], "You win!")

    def test_secret_one_wins_on_first_guess(self):
        runner, result, out = run_session(1, ["1"])
        self.assertEqual(result, "won")
        self.assertEqual(out, ["Guess the number!", "Please input your guess.", "You guessed: 1", "You win!"])
        self.assertEqual(runner.ref.attempts, 1)

    def test_secret_hundred(self):
        runner, result, out = run_session(100, ["1", "100"])
        self.assertEqual(result, "won")
        self.assertEqual([r["verdict"] for r in runner.records], ["too_small", "win"])

    def test_malformed_lines_are_discarded_silently(self):
        runner, result, out = run_session(7, ["abc", "", "3.5", "-1", "+2", "99999999999", "  7  "])
        self.assertEqual(result, "won")
        self.assertEqual(runner.rejected, 6)
        self.assertEqual(len(runner.records), 1)
        self.assertEqual(runner.records[0]["guess"], 7)
        # One prompt per line read, nothing else written for discarded lines
        self.assertEqual(out.count("Please input your guess."), 7)
        self.assertEqual(out[-2:], ["You guessed: 7", "You win!"])

    def test_huge_digit_line_is_discarded(self):
        runner, result, out = run_session(7, ["9" * 5000, "7"])
        self.assertEqual(result, "won")
        self.assertEqual(runner.rejected, 1)
        self.assertEqual([r["guess"] for r in runner.records], [7])
        self.assertEqual(out.count("Please input your guess."), 2)

    def test_repeated_guess_gets_same_feedback(self):
        runner, result, out = run_session(42, ["500", "500", "500", "0", "0", "42"])
        verdicts = [r["verdict"] for r in runner.records]
        self.assertEqual(verdicts, ["too_big", "too_big", "too_big", "too_small", "too_small", "win"])
        self.assertEqual(runner.ref.reveal(), 42)

    def test_feedback_direction_matches_ordering(self):
        for secret in (1, 37, 100):
            guesses = [g for g in range(0, 102, 3) if g != secret]
            stdin = io.StringIO("".join(f"{g}\n" for g in guesses))
            runner = GameRunner(secret_source=FixedSecretSource(secret), stdin=stdin, stdout=io.StringIO())
            with self.assertRaises(InputClosedError):
                runner.play()
            self.assertEqual(runner.ref.status(), "guessing")
            for rec in runner.records:
                expected = "too_small" if rec["guess"] < secret else "too_big"
                self.assertEqual(rec["verdict"], expected)

    def test_input_closed_raises_structured_error(self):
        stdin = io.StringIO("10\nnope\n")
        runner = GameRunner(secret_source=FixedSecretSource(60), stdin=stdin, stdout=io.StringIO())
        with self.assertRaises(InputClosedError) as ctx:
            runner.play()
        self.assertEqual(ctx.exception.attempts, 1)
        self.assertIn("after 1 guesses", str(ctx.exception))
        self.assertIsInstance(ctx.exception, EOFError)
        self.assertEqual(runner.termination_reason, "input_closed")

    def test_max_attempts_gives_up(self):
        cfg = GameConfig(max_attempts=2)
        runner, result, out = run_session(50, ["1", "2", "50"], cfg=cfg)
        self.assertEqual(result, "gave_up")
        self.assertEqual(runner.ref.attempts, 2)
        self.assertNotIn("You win!", out)

    def test_secret_drawn_in_range(self):
        source = RandomSecretSource(seed=1234)
        for _ in range(500):
            runner = GameRunner(secret_source=source, stdin=io.StringIO(""), stdout=io.StringIO())
            with self.assertRaises(InputClosedError):
                runner.play()
            self.assertTrue(SECRET_MIN <= runner.ref.reveal() <= SECRET_MAX)

    def test_misbehaving_source_rejected(self):
        runner = GameRunner(secret_source=lambda low, high: high + 1, stdin=io.StringIO("1\n"), stdout=io.StringIO())
        with self.assertRaises(SecretOutOfRangeError):
            runner.play()

    def test_history_json_written(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out", "session.json")
            runner, result, _ = run_session(30, ["x", "20", "30"], cfg=GameConfig(history_path=path))
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        self.assertEqual(data["secret"], 30)
        self.assertEqual(data["result"], "won")
        self.assertEqual(data["rejected_lines"], 1)
        self.assertEqual([g["guess"] for g in data["guesses"]], [20, 30])

    def test_metrics(self):
        runner, _, _ = run_session(3, ["1", "oops", "3"])
        m = runner.metrics()
        self.assertEqual(m["attempts"], 2)
        self.assertEqual(m["rejected_lines"], 1)
        self.assertEqual(m["result"], "won")
        self.assertEqual(m["termination_reason"], "correct_guess")
        self.assertEqual(m["guesser"], "Human")

    def test_duration_counts_from_play(self):
        runner = GameRunner(secret_source=FixedSecretSource(5), stdin=io.StringIO("5\n"), stdout=io.StringIO())
        runner.start_ts -= 3600
        runner.play()
        self.assertLess(runner.metrics()["duration_s"], 60)

    def test_secret_not_exported_mid_session(self):
        seen = []
        case = self

        class PeekingGuesser:
            name = "Peek"

            def next_line(self, prompt=""):
                seen.append(runner.export_structured_history()["secret"])
                with case.assertRaises(RuntimeError):
                    runner.ref.reveal()
                return "12\n"

        runner = GameRunner(guesser=PeekingGuesser(), secret_source=FixedSecretSource(12), stdout=io.StringIO())
        runner.play()
        self.assertEqual(seen, [None])
        self.assertEqual(runner.export_structured_history()["secret"], 12)

    def test_guess_the_number_uses_process_streams(self):
        stdout = io.StringIO()
        with patch("sys.stdin", io.StringIO("50\n")), patch("sys.stdout", stdout), \
                patch("guessing_game.game.RandomSecretSource", return_value=FixedSecretSource(50)):
            self.assertIsNone(guess_the_number())
        self.assertTrue(stdout.getvalue().endswith("You win!\n"))


if __name__ == "__main__":
    unittest.main()
