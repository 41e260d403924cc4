"""A number guessing game."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Iterator
from enum import Enum

LOWEST = 1
HIGHEST = 100
PROMPT = f"Guess the number between {LOWEST} and {HIGHEST}: "


class Hint(Enum):
    """The answer to a guess; the value is the message shown."""

    LOWER = "Lower Number please"
    HIGHER = "Higher Number please"
    CORRECT = "Congrats you guessed it right"


def judge(secret: int, guess: int) -> Hint:
    """Compare a guess with the secret number."""
    if guess > secret:
        return Hint.LOWER
    if guess < secret:
        return Hint.HIGHER
    return Hint.CORRECT


def play(secret: int, guesses: Iterable[int]) -> Iterator[Hint]:
    """Yield a hint for each guess, stopping after the correct one."""
    for guess in guesses:
        hint = judge(secret, guess)
        yield hint
        if hint is Hint.CORRECT:
            return


def _read_guesses() -> Iterator[int]:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return
        try:
            guess = int(line.strip())
        except ValueError:
            print("Please enter a whole number")
            continue
        yield guess


def main(argv: list[str] | None = None) -> int:
    """Play the game on standard input and output."""
    parser = argparse.ArgumentParser(description="Guess the secret number.")
    parser.add_argument(
        "--secret",
        type=int,
        default=None,
        help="secret number to use instead of a random one",
    )
    args = parser.parse_args(argv)
    secret = (
        args.secret if args.secret is not None else random.randint(LOWEST, HIGHEST)
    )

    count = 0
    last = None
    for hint in play(secret, _read_guesses()):
        print(hint.value)
        count += 1
        last = hint
    if last is not Hint.CORRECT:
        return 1
    print(f"You guessed the number in {count} guesses")
    return 0