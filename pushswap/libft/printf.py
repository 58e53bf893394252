"""A small printf-style formatter.

Conversions have the form ``%[flags][width][.precision]specifier`` with
flags from ``-+ #0``, width and precision given as digits or ``*``, and a
specifier from ``cspdiuxX%``.
"""

import sys
from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

FLAGS = "-+ #0"
SPECIFIERS = "cspdiuxX%"

_UINT32_MASK = 2**32 - 1
_UINT64_MASK = 2**64 - 1


class FormatError(ValueError):
    """Raised for a conversion that cannot be parsed or has no argument.

    ``partial`` holds the text produced before the faulty conversion.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


@dataclass
class FormatSpec:
    """One parsed conversion."""

    specifier: str = ""
    is_left: bool = False
    is_plus: bool = False
    is_space: bool = False
    is_hash: bool = False
    is_zero_pad: bool = False
    width: int = 0
    precision: int = -1

    @property
    def base(self) -> int:
        """Numeric base of the conversion, or 0 for non-numeric ones."""
        if self.specifier in ("d", "i", "u"):
            return 10
        if self.specifier in ("x", "X", "p"):
            return 16
        return 0


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError("not enough arguments for format") from None


def _read_value(text: str, pos: int, args: Iterator[Any]) -> Tuple[int, int]:
    if pos < len(text) and text[pos] == "*":
        return int(_next_arg(args)), pos + 1
    start = pos
    while pos < len(text) and text[pos].isascii() and text[pos].isdigit():
        pos += 1
    return (int(text[start:pos]) if pos > start else 0), pos


def parse_spec(text: str, pos: int, args: Iterator[Any]) -> Tuple[FormatSpec, int]:
    """Parse the conversion starting at ``pos``, just after its ``%``.

    ``args`` is an iterator that supplies the values of ``*`` fields.
    Returns the parsed spec and the position following the specifier.
    """
    spec = FormatSpec()
    while pos < len(text) and text[pos] in FLAGS:
        flag = text[pos]
        if flag == "-":
            spec.is_left = True
        elif flag == "+":
            spec.is_plus = True
        elif flag == " ":
            spec.is_space = True
        elif flag == "#":
            spec.is_hash = True
        else:
            spec.is_zero_pad = True
        pos += 1
    spec.width, pos = _read_value(text, pos, args)
    if pos < len(text) and text[pos] == ".":
        pos += 1
        if pos < len(text):
            spec.precision, pos = _read_value(text, pos, args)
    if pos >= len(text) or text[pos] not in SPECIFIERS:
        raise FormatError(f"invalid conversion at position {pos}")
    spec.specifier = text[pos]
    return spec, pos + 1


def _render_char(spec: FormatSpec, arg: Any) -> str:
    if spec.specifier == "%":
        return "%"
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"expected a single character, got {arg!r}")
        ch = arg
    else:
        ch = chr(int(arg) & 0xFF)
    if spec.width > 1:
        pad = " " * (spec.width - 1)
        return ch + pad if spec.is_left else pad + ch
    return ch


def _render_str(spec: FormatSpec, arg: Any) -> str:
    if arg is None:
        text = "(null)" if spec.precision > 5 or spec.precision <= 0 else ""
    elif isinstance(arg, str):
        text = arg.partition("\0")[0]
    else:
        raise TypeError(f"%s expects a str or None, got {type(arg).__name__}")
    if 0 <= spec.precision <= len(text):
        count = spec.precision
    else:
        count = len(text)
    shown = text[:count]
    pad = " " * max(spec.width - count, 0)
    return shown + pad if spec.is_left else pad + shown


def _to_int32(value: Any) -> int:
    return (int(value) + 2**31) % 2**32 - 2**31


def _pointer_value(arg: Any) -> int:
    if arg is None:
        return 0
    if isinstance(arg, int):
        return arg & _UINT64_MASK
    return id(arg) & _UINT64_MASK


def _render_number(spec: FormatSpec, arg: Any) -> str:
    kind = spec.specifier
    negative = False
    if kind in ("d", "i"):
        value = _to_int32(arg)
        negative = value < 0
        magnitude = abs(value)
    elif kind == "p":
        magnitude = _pointer_value(arg)
    else:
        magnitude = int(arg) & _UINT32_MASK
    upper = kind == "X"
    if spec.base == 16:
        digits = format(magnitude, "X" if upper else "x")
    else:
        digits = str(magnitude)

    is_zero = digits[0] == "0"
    hex_prefixed = kind in ("x", "X") and spec.is_hash and not is_zero
    prefixed = hex_prefixed or kind == "p"
    signed = negative or spec.is_plus or spec.is_space
    length = len(digits)

    zeros = 0
    if spec.precision >= 0:
        zeros = max(spec.precision - length, 0)
    elif spec.is_zero_pad and not spec.is_left:
        zeros = spec.width - length if spec.width > length else 0
        if prefixed:
            zeros -= 2
        elif signed:
            zeros -= 1
    if zeros < 0 or (kind == "p" and is_zero):
        zeros = 0

    spaces = spec.width - zeros - length
    if prefixed:
        spaces -= 4 if kind == "p" and is_zero else 2
    if signed:
        spaces -= 1
    spaces = max(spaces, 0)

    if hex_prefixed or (kind == "p" and not is_zero):
        sign = "0X" if upper else "0x"
    elif kind in ("d", "i"):
        if negative:
            sign = "-"
        elif spec.is_plus:
            sign = "+"
        elif spec.is_space:
            sign = " "
        else:
            sign = ""
    else:
        sign = ""

    fix_u = " " if kind == "u" and (spec.is_space or spec.is_plus) and spaces > 0 else ""
    body = "(nil)" if kind == "p" and is_zero else digits
    if spec.is_left:
        return sign + "0" * zeros + body + " " * spaces + fix_u
    return " " * spaces + fix_u + sign + "0" * zeros + body


def render(spec: FormatSpec, arg: Any) -> str:
    """Render ``arg`` according to ``spec``; ``%%`` ignores ``arg``."""
    kind = spec.specifier
    if kind in ("%", "c"):
        return _render_char(spec, arg)
    if kind == "s":
        return _render_str(spec, arg)
    if kind in ("d", "i", "p", "x", "X", "u"):
        return _render_number(spec, arg)
    raise FormatError(f"unknown specifier {kind!r}")


def format_string(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    values = iter(args)
    pieces: List[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        try:
            if pos + 1 >= len(fmt):
                raise FormatError("incomplete conversion at end of format")
            spec, pos = parse_spec(fmt, pos + 1, values)
            arg = None if spec.specifier == "%" else _next_arg(values)
        except FormatError as exc:
            exc.partial = "".join(pieces)
            raise
        pieces.append(render(spec, arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    On a bad conversion the text before it and ``Parsing Error!`` are
    written, then :class:`FormatError` is raised.
    """
    try:
        text = format_string(fmt, *args)
    except FormatError as exc:
        sys.stdout.write(exc.partial + "Parsing Error!")
        raise
    sys.stdout.write(text)
    return len(text)