"""Reading and validating the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
OVERFLOW = 9_999_999_999_999
"""Value :func:`parse_long` gives back when the digits overflow a 64-bit long."""

_LONG_MAX = 2**63 - 1
_WHITESPACE = " \t\n\v\f\r"
_LEADING_NUMBER = re.compile(r"([+-]?)([0-9]*)")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def parse_long(text: str) -> int:
    """Read the leading integer of ``text`` the way ``atol`` would.

    Leading whitespace is skipped, one sign is accepted and reading stops at
    the first non-digit. Overflow of a 64-bit long yields :data:`OVERFLOW`.
    """
    match = _LEADING_NUMBER.match(text.lstrip(_WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if value > _LONG_MAX:
        return OVERFLOW
    return -value if sign == "-" else value


def has_content(text: str | None) -> bool:
    """True if ``text`` holds anything besides whitespace."""
    return bool(text) and bool(text.strip(_WHITESPACE))


def all_integers(tokens: Iterable[str]) -> bool:
    """True if every token is an optional sign followed by decimal digits."""
    return all(_INTEGER.fullmatch(token) for token in tokens)


def all_in_range(tokens: Iterable[str]) -> bool:
    """True if every token reads as a value that fits a 32-bit int."""
    for token in tokens:
        value = parse_long(token)
        if value == OVERFLOW or not INT_MIN <= value <= INT_MAX:
            return False
    return True


def no_duplicates(tokens: Iterable[str]) -> bool:
    """True if no two tokens read as the same value."""
    seen: set[int] = set()
    for token in tokens:
        value = parse_long(token)
        if value in seen:
            return False
        seen.add(value)
    return True


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers for stack ``a``.

    Each argument may hold several numbers separated by spaces. Raises
    :class:`ParseError` on an empty argument, a token that is not an integer,
    a value outside the 32-bit range, or a repeated value.
    """
    for arg in args:
        if not has_content(arg):
            raise ParseError(f"empty argument: {arg!r}")
    joined = "".join(f"{arg} " for arg in args)
    tokens = [token for token in joined.split(" ") if token]
    if not tokens:
        raise ParseError("no numbers given")
    if not all_integers(tokens):
        raise ParseError("not an integer")
    if not all_in_range(tokens):
        raise ParseError("value out of range")
    if not no_duplicates(tokens):
        raise ParseError("duplicate value")
    return [parse_long(token) for token in tokens]