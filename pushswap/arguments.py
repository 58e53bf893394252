"""Command-line argument splitting, validation and parsing."""

from itertools import combinations, takewhile
from typing import List, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.strings import INT_MAX, INT_MIN, str_dup, str_len, str_ncmp
from pushswap.libft.text import split

_WHITESPACE = " \t\n\v\f\r"
_MAX_ARG_LENGTH = 11
_COMPARE_LENGTH = 15


class ArgumentError(ValueError):
    """Raised when the numbers given on the command line are invalid."""


def parse_long(text: str) -> int:
    """Parse a leading decimal integer without range limits.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit, and text without digits gives 0.
    """
    rest = str_dup(text).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    return sign * int(digits) if digits else 0


def split_arguments(argv: Sequence[str]) -> List[str]:
    """Tokens from the arguments after the program name.

    A single argument is split on spaces; several are taken as they are.
    """
    args = list(argv)
    if len(args) == 1:
        return split(args[0], " ")
    return args


def is_duplicated(args: Sequence[str]) -> bool:
    """True when two arguments agree in their first 15 characters."""
    return any(
        str_ncmp(first, second, _COMPARE_LENGTH) == 0
        for first, second in combinations(args, 2)
    )


def validate_arguments(args: Sequence[str]) -> List[int]:
    """Check every argument and return the numbers they hold.

    Each must be at most 11 characters, an optional sign followed by
    digits, distinct from the others and within the 32-bit range.
    """
    if is_duplicated(args):
        raise ArgumentError("duplicate argument")
    values = []
    for arg in args:
        text = str_dup(arg)
        if str_len(text) > _MAX_ARG_LENGTH:
            raise ArgumentError(f"argument too long: {arg!r}")
        if not text or not (text[0] in "+-" or is_digit(text[0])):
            raise ArgumentError(f"not a number: {arg!r}")
        if not all(is_digit(ch) for ch in text[1:]):
            raise ArgumentError(f"not a number: {arg!r}")
        value = parse_long(text)
        if not INT_MIN <= value <= INT_MAX:
            raise ArgumentError(f"out of range: {arg!r}")
        values.append(value)
    return values


def parse_arguments(argv: Sequence[str]) -> List[int]:
    """The numbers to sort, from the arguments after the program name.

    Fewer than two tokens mean there is nothing to do and give an empty
    list without any validation.
    """
    tokens = split_arguments(argv)
    if len(tokens) < 2:
        return []
    return validate_arguments(tokens)