#!/usr/bin/env python3
import logging
import random
import re
import sys
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# ------------------ Constants ------------------
LOW = 1
HIGH = 100

BANNER = """
=================================
        Guess the number!
=================================
Guess a number between {low} and {high}.
Press Ctrl+C to quit.
"""

PROMPT = "Please input your guess, between {low} and {high}: "
NOT_A_NUMBER = "Please input a number."
BELOW_MIN = "Your guess must be at least {low}."
ABOVE_MAX = "Your guess must be at most {high}."

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class Outcome(Enum):
    TOO_SMALL = "Too small!"
    TOO_BIG = "Too big!"
    CORRECT = "You win!"


# ------------------ Input ------------------
def _check_bounds(low: int, high: int) -> None:
    if low > high:
        raise ValueError(f"Invalid range: low={low} is greater than high={high}")

def ask_int(prompt: str) -> int:
    """Read lines until one parses as an integer. EOFError is left to the caller."""
    while True:
        val = input(prompt).strip()
        if INT_PATTERN.fullmatch(val):
            return int(val)
        logger.debug("Rejected non-numeric input %r", val)
        print(NOT_A_NUMBER)

def ask_in_range(low: int, high: int, prompt: Optional[str] = None) -> int:
    """Keep asking until the answer lies in [low, high]."""
    _check_bounds(low, high)
    if prompt is None:
        prompt = PROMPT.format(low=low, high=high)
    while True:
        guess = ask_int(prompt)
        if guess < low:
            print(BELOW_MIN.format(low=low))
        elif guess > high:
            print(ABOVE_MAX.format(high=high))
        else:
            return guess
        logger.debug("Rejected out-of-range guess %d", guess)

def draw_secret(low: int, high: int) -> int:
    _check_bounds(low, high)
    return random.randint(low, high)

def compare(guess: int, secret: int) -> Outcome:
    if guess < secret:
        return Outcome.TOO_SMALL
    if guess > secret:
        return Outcome.TOO_BIG
    return Outcome.CORRECT


# ------------------ Game ------------------
def play_round(low: int = LOW, high: int = HIGH, secret: Optional[int] = None) -> int:
    """Play until the secret is guessed and return the number of attempts."""
    if secret is None:
        secret = draw_secret(low, high)
    elif not low <= secret <= high:
        raise ValueError(f"Secret {secret} is outside [{low}, {high}]")

    logger.debug("Round started, range [%d, %d]", low, high)
    tries = 0
    print(BANNER.format(low=low, high=high))
    while True:
        guess = ask_in_range(low, high)
        tries += 1
        print(f"You guessed: {guess}")

        outcome = compare(guess, secret)
        print(outcome.value)
        if outcome is Outcome.CORRECT:
            print(f"It took you {tries} {'try' if tries == 1 else 'tries'}.")
            logger.debug("Round finished after %d tries", tries)
            return tries

def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    random.seed()
    try:
        play_round()
    except KeyboardInterrupt:
        print("\nAborted. Bye!")
        return 130
    except EOFError:
        logger.error("Input ended before the number was guessed.")
        return 1
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
