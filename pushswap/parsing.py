"""Reading the starting stack from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable

ERROR_TEXT = "\033[31mError\n\033[0m"

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset(" \t\n\v\f\r")
_SIGNS = frozenset("+-")


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def _wrap(value: int, bits: int) -> int:
    """Reduce an integer to a signed value of the given width."""
    span = 1 << bits
    value %= span
    return value - span if value >= span // 2 else value


def _leading_number(text: str) -> int:
    """Read optional whitespace, an optional sign and digits; stop at anything else."""
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in _SIGNS and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        result = result * 10 + (ord(char) - ord("0"))
    return sign * result


def atol(text: str) -> int:
    """Convert the leading number of ``text`` as a 64-bit signed integer."""
    return _wrap(_leading_number(text), 64)


def atoi(text: str) -> int:
    """Convert the leading number of ``text`` as a 32-bit signed integer."""
    return _wrap(_leading_number(text), 32)


def split_arguments(args: Iterable[str]) -> list[str]:
    """Split every argument on spaces and gather the non-empty words in order."""
    return [word for arg in args for word in arg.split(" ") if word]


def allow_char(word: str) -> bool:
    """Return True when ``word`` holds only digits and sign characters."""
    return all(char.isascii() and (char.isdigit() or char in _SIGNS) for char in word)


def check_symbols(word: str) -> bool:
    """Return True when every sign in ``word`` is followed by a digit and not preceded by one."""
    for position, char in enumerate(word):
        if char not in _SIGNS:
            continue
        following = word[position + 1 : position + 2]
        if following in _SIGNS and following:
            return False
        if not ("0" <= following <= "9") or not following:
            return False
        if position and "0" <= word[position - 1] <= "9":
            return False
    return True


def check_limits(word: str) -> bool:
    """Return True when the number in ``word`` fits a 32-bit signed integer."""
    return INT_MIN <= atol(word) <= INT_MAX


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn arguments into the values of stack a, top first.

    No arguments at all give an empty list. Arguments holding no number, a
    malformed word, a value out of the 32-bit range or a repeated value raise
    ParseError.
    """
    args = list(args)
    if not args:
        return []
    words = split_arguments(args)
    if not words:
        raise ParseError("no numbers given")
    for word in words:
        if not allow_char(word):
            raise ParseError(f"invalid character in {word!r}")
        if not check_symbols(word):
            raise ParseError(f"misplaced sign in {word!r}")
        if not check_limits(word):
            raise ParseError(f"{word!r} is out of range")
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        value = atoi(word)
        if value in seen:
            raise ParseError(f"duplicate value {value}")
        seen.add(value)
        values.append(value)
    return values