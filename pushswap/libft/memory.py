"""Byte-buffer helpers working on ``bytearray`` objects.

Functions that fill or copy write into the buffer they are given and
return it. Byte values are reduced modulo 256, as a C ``unsigned char``.
"""

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(name: str, buf: Buffer, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative, got {n}")
    if offset < 0 or offset + n > len(buf):
        raise ValueError(
            f"{name}: span of {n} bytes at {offset} exceeds buffer of {len(buf)}"
        )


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value``."""
    _check_span("memset", buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the address space")
    return bytearray(count * size)


def memchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``."""
    _check_span("memchr", buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0."""
    _check_span("memcmp", a, n)
    _check_span("memcmp", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span("memcpy", dest, n)
    _check_span("memcpy", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly.
    """
    _check_span("memmove", buf, n, src)
    _check_span("memmove", buf, n, dest)
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf