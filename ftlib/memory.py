"""Byte-buffer helpers: allocation, zeroing, copying, searching and comparing.

Destination buffers are mutable ``bytearray`` objects changed in place;
sources may be any bytes-like object. A byte value given as an int is taken
modulo 256, as an unsigned char would be.
"""

from __future__ import annotations

from collections.abc import Sized


def _check_length(n: int, *buffers: Sized) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if len(buffer) < n:
            raise ValueError(f"buffer of {len(buffer)} byte(s) is shorter than {n}")


def memalloc(size: int) -> bytearray:
    """Return a new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_length(n, buffer)
    buffer[:n] = bytes(n)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dst`` and return ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: bytes | bytearray, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` up to and including the first byte ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dst`` just past the
    copied ``c``, or None if ``c`` was not among the first ``n`` bytes (in which
    case all ``n`` bytes were copied).
    """
    _check_length(n, dst, src)
    head = bytes(src[:n])
    found = head.find(c & 0xFF)
    count = n if found < 0 else found + 1
    dst[:count] = head[:count]
    return None if found < 0 else count


def memmove(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were first copied
    aside. Returns ``buffer``.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for offset in (dst_offset, src_offset):
        if offset < 0 or offset + length > len(buffer):
            raise ValueError(
                f"region at {offset} of {length} byte(s) exceeds a buffer of {len(buffer)}"
            )
    buffer[dst_offset:dst_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte ``c`` among the first ``n`` bytes of ``data``, or None."""
    _check_length(n, data)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0 when the
    first ``n`` bytes match.
    """
    _check_length(n, first, second)
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0