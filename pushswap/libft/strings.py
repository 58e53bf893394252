"""String search, comparison, bounded copy and integer parsing.

Strings behave as NUL-terminated text: anything from the first ``"\\0"``
onwards is ignored. Positions are returned as indices, with ``None``
meaning "not found".
"""

from itertools import takewhile, zip_longest
from typing import Optional, Tuple, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _cstr(s: str) -> str:
    """The text before the first NUL character."""
    return s.partition("\0")[0]


def _char_code(c: Union[str, int]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def str_len(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def str_chr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for the terminator gives the length of ``s``; a character
    code outside 0-255 gives 0.
    """
    code = _char_code(c)
    if not 0 <= code <= 255:
        return 0
    text = _cstr(s)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def str_rchr(s: str, c: Union[str, int]) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for the terminator gives the length of ``s``; a character
    code outside 0-255 gives 0.
    """
    code = _char_code(c)
    if not 0 <= code <= 255:
        return 0
    text = _cstr(s)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the
    terminator counting as 0, or 0 when the compared prefixes are equal.
    """
    _non_negative("n", n)
    a = _cstr(s1)[:n]
    b = _cstr(s2)[:n]
    for ch1, ch2 in zip_longest(a, b, fillvalue="\0"):
        if ch1 != ch2:
            return ord(ch1) - ord(ch2)
    return 0


def strl_cpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the text that fits (one slot is kept for the terminator, and
    nothing is copied when ``size`` is 0) and the full length of ``src``.
    """
    _non_negative("size", size)
    text = _cstr(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strl_cat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had; when ``size`` is below the length of ``dst`` that length is
    ``len(src) + size``.
    """
    _non_negative("size", size)
    head = _cstr(dst)
    tail = _cstr(src)
    room = max(size - len(head) - 1, 0)
    result = head + tail[:room]
    if size < len(head):
        return result, len(tail) + size
    return result, len(head) + len(tail)


def str_nstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _non_negative("length", length)
    haystack = _cstr(big)
    needle = _cstr(little)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def str_dup(s: str) -> str:
    """A copy of ``s`` up to its terminator."""
    return _cstr(s)


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit ``int``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0, and values beyond the
    32-bit range wrap around.
    """
    rest = _cstr(text).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)