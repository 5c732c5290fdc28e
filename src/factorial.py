"""Recursive factorial with a small CLI entrypoint.

Usage
-----
    python src/factorial.py      # prints "Factorial of 5 is 120"
    python src/factorial.py 7    # prints 5040
"""

from __future__ import annotations

import argparse
import sys

DEMO_INPUT = 5


def factorial(n: int) -> int:
    """Return n! for a non-negative integer ``n``, computed recursively.

    Raises:
        TypeError:      when ``n`` is not an integer.
        ValueError:     when ``n`` is negative.
        RecursionError: when ``n`` exceeds the interpreter recursion limit.
    """

    if not isinstance(n, int):
        raise TypeError("factorial() requires an integer input")
    if n < 0:
        raise ValueError("factorial() is undefined for negative integers")

    if n == 0:
        return 1
    return n * factorial(n - 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute n! for a non-negative integer n.")
    parser.add_argument("n", type=int, nargs="?", help="Target integer (omit for the demo)")
    args = parser.parse_args(argv)

    target = DEMO_INPUT if args.n is None else args.n
    try:
        result = factorial(target)
    except (TypeError, ValueError, RecursionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.n is None:
        print(f"Factorial of {target} is {result}")
    else:
        print(result)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
