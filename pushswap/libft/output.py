"""Writing characters, strings and integers to a text stream.

Every function writes to ``stream``, or to standard output when it is
omitted. Strings behave as NUL-terminated text.
"""

import sys
from typing import Optional, TextIO, Union

from pushswap.libft.strings import str_dup
from pushswap.libft.text import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or as a character code."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its terminator."""
    _target(stream).write(str_dup(s))


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its terminator, followed by a newline."""
    _target(stream).write(str_dup(s) + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit integer."""
    _target(stream).write(itoa(n))