"""
Guess the Number package.

Components:
- game: single-session Game Loop (GameRunner) and the zero-argument guess_the_number() entry point
- referee/secret_source: session secret ownership and judging of guesses
- guess_parser: fallible text -> guess conversion
- user_guesser/bisect_guesser/random_guesser/llm_guesser: players that feed guess lines to the loop
- llm_client: minimal OpenAI-compatible chat transport used by the LLM guesser
"""
from .game import guess_the_number

__all__ = ["guess_the_number"]
