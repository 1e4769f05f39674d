"""Conversions between numbers and text with fixed-width integer semantics."""

from __future__ import annotations

import re

_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")
_MAX_FACTORIAL = 12


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _leading_number(text: str) -> tuple[int, int]:
    match = _NUMBER.match(text.lstrip(_WHITESPACE))
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    return sign, int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit int."""
    sign, magnitude = _leading_number(text)
    return _to_signed(sign * _to_signed(magnitude, 32), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit long."""
    sign, magnitude = _leading_number(text)
    return _to_signed(sign * _to_signed(magnitude, 64), 64)


def atoi_base(text: str, base: str) -> int:
    """Parse digits drawn from ``base``; a sign is honoured only for base ten.

    Parsing stops at the first character that is not a digit of ``base``.
    """
    size = len(base)
    decimal = size == 10
    sign = -1 if decimal and text.startswith("-") else 1
    if decimal and text[:1] in ("-", "+"):
        text = text[1:]
    result = 0
    for char in text:
        digit = base.find(char)
        if digit < 0:
            break
        result = _to_signed(result * size + digit, 64)
    return _to_signed(sign * _to_signed(result, 32), 32)


def itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit int."""
    return str(_to_signed(number, 32))


def ltoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 64-bit long."""
    return str(_to_signed(number, 64))


def itoa_base(number: int, digits: str) -> str:
    """Text of ``number`` (as an unsigned 64-bit value) in the base given by ``digits``."""
    size = len(digits)
    if size < 2:
        raise ValueError("a base needs at least two digits")
    value = _to_unsigned(number, 64)
    out = []
    while True:
        value, remainder = divmod(value, size)
        out.append(digits[remainder])
        if value == 0:
            break
    return "".join(reversed(out))


def encode_wide_char(value: int, mb_cur_max: int = 4) -> bytes:
    """Encode a code point as a multibyte sequence of at most ``mb_cur_max`` bytes.

    With ``mb_cur_max`` of 1 any value below 256 is a single byte.
    Raises ValueError for surrogates, values from 0x10FFFF up, or values
    that need more bytes than allowed.
    """
    value = _to_unsigned(value, 32)
    count = 0
    limit = 256 if mb_cur_max == 1 else 128
    while True:
        allowed = count < mb_cur_max
        count += 1
        if not (allowed and value >= limit):
            break
        limit <<= 4 if count == 1 else 5
    if count > mb_cur_max or value >= 0x10FFFF or 0xD7FF < value < 0xE000:
        raise ValueError(f"cannot encode {value:#x} in {mb_cur_max} byte(s)")
    if count == 1:
        return bytes([value & 0xFF])
    tail = []
    for _ in range(count - 1):
        tail.append((value & 0x3F) | 0x80)
        value >>= 6
    lead = (value | ((0xF00 >> count) & 0xF0)) & 0xFF
    return bytes([lead, *reversed(tail)])


def factorial(number: int) -> int:
    """Factorial of 0 to 12, the range that fits a 32-bit int."""
    if number < 0 or number > _MAX_FACTORIAL:
        raise ValueError(f"factorial is defined here for 0 to {_MAX_FACTORIAL}, got {number}")
    result = 1
    for factor in range(2, number + 1):
        result *= factor
    return result