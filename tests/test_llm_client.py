import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from openai import OpenAIError

from guessing_game import llm_client
from guessing_game.prompting import PromptConfig, build_guess_messages, render_custom_prompt


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _fake_client(side_effect):
    client = MagicMock()
    client.chat.completions.create.side_effect = side_effect
    return client


class AskForGuessTests(unittest.TestCase):
    def test_retries_then_succeeds(self):
        client = _fake_client([OpenAIError("boom"), OpenAIError("boom"), _response("  42 \n")])
        with patch("guessing_game.llm_client._client", return_value=client), \
                patch("guessing_game.llm_client.time.sleep") as sleep:
            text = llm_client.ask_for_guess([{"role": "user", "content": "guess"}], model="dummy")
        self.assertEqual(text, "42")
        self.assertEqual(client.chat.completions.create.call_count, 3)
        self.assertEqual(sleep.call_count, 2)
        kwargs = client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "dummy")

    def test_exhausted_retries_return_empty(self):
        retries = llm_client.SETTINGS.responses_retries
        client = _fake_client(OpenAIError("down"))
        with patch("guessing_game.llm_client._client", return_value=client), \
                patch("guessing_game.llm_client.time.sleep"):
            with self.assertLogs("llm_client", level="ERROR"):
                text = llm_client.ask_for_guess([{"role": "user", "content": "guess"}], model="dummy")
        self.assertEqual(text, "")
        self.assertEqual(client.chat.completions.create.call_count, retries + 1)

    def test_model_required(self):
        with self.assertRaises(ValueError):
            llm_client.ask_for_guess([], model=None)


class ExtractTextTests(unittest.TestCase):
    def test_string_content(self):
        self.assertEqual(llm_client._extract_text(_response("17")), "17")

    def test_list_of_parts_content(self):
        parts = [
            {"type": "text", "text": "first"},
            {"type": "image_url", "image_url": "ignored"},
            SimpleNamespace(text="second"),
        ]
        self.assertEqual(llm_client._extract_text(_response(parts)), "first\nsecond")

    def test_missing_choices(self):
        self.assertEqual(llm_client._extract_text(SimpleNamespace(choices=[])), "")
        self.assertEqual(llm_client._extract_text(_response(None)), "")


class PromptingTests(unittest.TestCase):
    def test_unknown_placeholders_left_intact(self):
        out = render_custom_prompt("{LOW}-{HIGH} {MYSTERY}", {"LOW": "1", "HIGH": "100"})
        self.assertEqual(out, "1-100 {MYSTERY}")

    def test_guess_messages_include_history(self):
        msgs = build_guess_messages(PromptConfig(), 1, 100, [(50, "too_big")])
        self.assertEqual(msgs[0]["role"], "system")
        self.assertIn("between 1 and 100", msgs[1]["content"])
        self.assertIn("- 50: too big", msgs[1]["content"])
        self.assertIn("guess number 2", msgs[1]["content"])


if __name__ == "__main__":
    unittest.main()
