"""Interactive number-guessing game.

Usage
-----
    python src/guessing_game.py             # random secret
    python src/guessing_game.py --seed 7    # reproducible secret

The game draws one secret number between 1 and 100 and keeps prompting until a
guess matches it. Lines that do not parse as an unsigned integer are ignored
and the prompt is repeated. Running out of input is fatal.
"""

from __future__ import annotations

import argparse
import io
import logging
import os
import random
import re
import sys
from enum import Enum
from typing import Callable, Iterable, Iterator

SECRET_MIN = 1
SECRET_MAX = 100
GUESS_MAX = 2**32 - 1

GREETING = "Guess the number!"
PROMPT = "Please, type a number"
TOO_SMALL = "Too small"
TOO_BIG = "Too big"
WIN = "You win"

SEED_ENV = "GUESSING_GAME_SEED"
VERBOSE_ENV = "GUESSING_GAME_VERBOSE"

_UNSIGNED = re.compile(r"\+?[0-9]+")

logger = logging.getLogger(__name__)


class InputStreamError(RuntimeError):
    """Standard input could not supply another line."""


class Ordering(Enum):
    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"


def env_enabled(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() not in {"0", "false", "no", "off"}


def draw_secret(rng: random.Random | None = None) -> int:
    """Return a secret drawn uniformly from [SECRET_MIN, SECRET_MAX]."""

    source = rng if rng is not None else random.Random()
    return source.randint(SECRET_MIN, SECRET_MAX)


def parse_guess(text: str) -> int | None:
    """Parse one input line as an unsigned 32-bit integer.

    Surrounding whitespace is ignored. Returns ``None`` when the remaining text
    is empty, contains anything but an optional ``+`` and ASCII digits, or is
    larger than ``GUESS_MAX``.
    """

    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        return None
    value = int(stripped)
    if value > GUESS_MAX:
        return None
    return value


def compare(guess: int, secret: int) -> Ordering:
    if guess < secret:
        return Ordering.LESS
    if guess > secret:
        return Ordering.GREATER
    return Ordering.EQUAL


def read_line(lines: Iterator[str]) -> str:
    """Return the next line from ``lines``.

    Raises:
        InputStreamError:   when the stream is exhausted or the read fails.
    """

    try:
        return next(lines)
    except StopIteration:
        raise InputStreamError("Error in reading line: end of input") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise InputStreamError(f"Error in reading line: {exc}") from exc


def play(secret: int, lines: Iterable[str], write: Callable[[str], None] = print) -> int:
    """Run one game against ``secret`` and return the number of parsed guesses.

    ``lines`` supplies one line of input per prompt (``sys.stdin`` when run from
    the command line) and ``write`` receives every line of output.
    """

    source = iter(lines)
    attempts = 0
    write(GREETING)

    while True:
        write(PROMPT)
        line = read_line(source)
        guess = parse_guess(line)
        if guess is None:
            logger.debug("discarded input %r", line)
            continue

        attempts += 1
        write(f"You guess number: {guess}")

        outcome = compare(guess, secret)
        logger.debug("guess #%d: %d is %s", attempts, guess, outcome.value)
        if outcome is Ordering.LESS:
            write(TOO_SMALL)
        elif outcome is Ordering.GREATER:
            write(TOO_BIG)
        else:
            write(WIN)
            return attempts


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Guess a secret number between 1 and 100.")
    parser.add_argument(
        "--seed",
        type=int,
        default=os.getenv(SEED_ENV),
        help=f"Seed for the secret number (default: ${SEED_ENV}, otherwise random)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=env_enabled(VERBOSE_ENV),
        help="Log debug details to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    secret = draw_secret(rng)
    logger.debug("secret drawn: %d", secret)

    # undecodable input must fail the read, whatever the locale's error handler
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="strict")

    try:
        play(secret, sys.stdin)
    except InputStreamError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
