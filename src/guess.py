"""A guess value that is guaranteed to lie between 1 and 100."""

from __future__ import annotations

GUESS_MIN = 1
GUESS_MAX = 100


class Guess:
    __slots__ = ("_value",)

    def __init__(self, value: int):
        if value < GUESS_MIN or value > GUESS_MAX:
            raise ValueError(f"Guess value must be between {GUESS_MIN} and {GUESS_MAX}, got {value}.")
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Guess):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Guess({self._value})"
