"""Allocating string helpers: substrings, joins, trims, maps, splits.

Strings behave as NUL-terminated text: anything from the first ``"\\0"``
onwards is ignored.
"""

from typing import Callable, List, MutableSequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _cstr(s: str) -> str:
    """The text before the first NUL character."""
    return s.partition("\0")[0]


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of ``s1`` and ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """``s`` without the characters of ``charset`` at either end."""
    chars = _cstr(charset)
    if not chars:
        return _cstr(s)
    return _cstr(s).strip(chars)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(
    s: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call ``func(index, s)`` for each character of the mutable sequence ``s``.

    ``func`` may rewrite ``s[index]`` in place. Iteration stops at the
    first NUL element, which is re-checked after every call.
    """
    index = 0
    while index < len(s) and s[index] != "\0":
        func(index, s)
        index += 1


def split(s: str, sep: str) -> List[str]:
    """The non-empty runs of ``s`` between occurrences of ``sep``.

    Splitting on the NUL character yields the whole string as one token.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _cstr(s)
    if sep == "\0":
        return [text] if text else []
    return [token for token in text.split(sep) if token]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)