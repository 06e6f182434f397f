"""Reading the integers to sort from command-line arguments."""

from __future__ import annotations

from typing import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """The arguments do not describe a valid set of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def is_valid_number(text: str) -> bool:
    """Return True for an optional sign followed by one or more ASCII digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(char in _DIGITS for char in body)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn arguments into the list of integers for stack a.

    A single argument is split on spaces. Raises InputError for a malformed
    number, one outside the 32-bit signed range, or a repeated value.
    """
    words = split_words(args[0]) if len(args) == 1 else list(args)
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        if not is_valid_number(word):
            raise InputError()
        number = int(word)
        if not INT_MIN <= number <= INT_MAX or number in seen:
            raise InputError()
        seen.add(number)
        values.append(number)
    return values