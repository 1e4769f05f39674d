"""Conversions for the integer and pointer types of a format string.

Each converter takes a parsed FormatSpec and an iterator over the remaining
arguments. It consumes exactly one argument and returns the converted text.
"""

from __future__ import annotations

from collections.abc import Iterator

from ftlib.convert import itoa_base
from ftlib.fmtspec import (
    ConversionError,
    Flag,
    FormatSpec,
    read_long,
    read_signed,
    read_ulong,
    read_unsigned,
)

DECIMAL_DIGITS = "0123456789"
OCTAL_DIGITS = "01234567"
HEX_DIGITS = "0123456789abcdef"
UPPER_HEX_DIGITS = "0123456789ABCDEF"


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise ConversionError("not enough arguments for the format") from None


def _pad(body: str, spec: FormatSpec, fill: str) -> str:
    gap = fill * (spec.width - len(body))
    return body + gap if spec.has(Flag.LEFT) else gap + body


def _swap(text: str, first: int, second: int) -> str:
    chars = list(text)
    chars[first], chars[second] = chars[second], chars[first]
    return "".join(chars)


def _zero_padded(spec: FormatSpec, digits: str) -> str:
    """Digits widened with leading zeros up to the precision, when it is larger."""
    precision = spec.precision
    if precision is None or precision <= len(digits):
        return digits
    return digits.rjust(precision, "0")


# Signed decimal

def _signed_body(spec: FormatSpec, sign: str, digits: str) -> str:
    if spec.precision == 0 and digits == "0":
        return sign
    return sign + _zero_padded(spec, digits)


def _format_signed(spec: FormatSpec, value: int) -> str:
    digits = itoa_base(abs(value), DECIMAL_DIGITS)
    if value < 0:
        sign = "-"
    elif spec.has(Flag.PLUS):
        sign = "+"
    elif spec.has(Flag.SPACE):
        sign = " "
    else:
        sign = ""
    body = _signed_body(spec, sign, digits)
    if len(body) >= spec.width:
        return body
    left = spec.has(Flag.LEFT)
    zero_fill = spec.has(Flag.ZERO) and spec.precision is None and not left
    out = _pad(body, spec, "0" if zero_fill else " ")
    if zero_fill and sign:
        out = _swap(out, 0, spec.width - len(body))
    return out


def convert_decimal(spec: FormatSpec, args: Iterator[object]) -> str:
    """Signed decimal (``d`` and ``i``), sized by the spec's length."""
    return _format_signed(spec, read_signed(spec, _next_arg(args)))


def convert_long_decimal(spec: FormatSpec, args: Iterator[object]) -> str:
    """Signed decimal of a long (``D``), whatever the spec's length."""
    return _format_signed(spec, read_long(_next_arg(args)))


# Unsigned decimal

def _unsigned_body(spec: FormatSpec, digits: str) -> str:
    if spec.precision == 0 and digits == "0":
        return ""
    return _zero_padded(spec, digits)


def _format_unsigned(spec: FormatSpec, value: int) -> str:
    body = _unsigned_body(spec, itoa_base(value, DECIMAL_DIGITS))
    if len(body) >= spec.width:
        return body
    zero_fill = spec.has(Flag.ZERO) and spec.precision is None
    out = _pad(body, spec, "0" if zero_fill else " ")
    if (
        zero_fill
        and not spec.has(Flag.LEFT)
        and (spec.has(Flag.SPACE) or spec.has(Flag.PLUS))
    ):
        out = _swap(out, 0, spec.width - len(body))
    return out


def convert_unsigned(spec: FormatSpec, args: Iterator[object]) -> str:
    """Unsigned decimal (``u``), sized by the spec's length."""
    return _format_unsigned(spec, read_unsigned(spec, _next_arg(args)))


def convert_long_unsigned(spec: FormatSpec, args: Iterator[object]) -> str:
    """Unsigned decimal of a long (``U``), whatever the spec's length."""
    return _format_unsigned(spec, read_ulong(_next_arg(args)))


# Octal

def _octal_alternate(spec: FormatSpec, body: str) -> str:
    if not spec.has(Flag.ALTERNATE) or body.startswith("0"):
        return body
    return "0" + body


def _octal_body(spec: FormatSpec, digits: str) -> str:
    if digits == "0" and spec.precision is not None:
        return _octal_alternate(spec, "0" * spec.precision)
    return _octal_alternate(spec, _zero_padded(spec, digits))


def convert_octal(spec: FormatSpec, args: Iterator[object]) -> str:
    """Unsigned octal (``o``), sized by the spec's length."""
    value = read_unsigned(spec, _next_arg(args))
    body = _octal_body(spec, itoa_base(value, OCTAL_DIGITS))
    if len(body) >= spec.width:
        return body
    left = spec.has(Flag.LEFT)
    zero_fill = spec.has(Flag.ZERO) and not left and spec.precision is None
    out = _pad(body, spec, "0" if zero_fill else " ")
    if zero_fill and (spec.has(Flag.SPACE) or spec.has(Flag.PLUS)):
        out = _swap(out, 0, spec.width - len(body))
    return out


def convert_long_octal(spec: FormatSpec, args: Iterator[object]) -> str:
    """Unsigned octal of a long (``O``), whatever the spec's length."""
    value = read_ulong(_next_arg(args))
    body = _octal_body(spec, itoa_base(value, OCTAL_DIGITS))
    if len(body) >= spec.width:
        return body
    zero_fill = spec.has(Flag.ZERO) and spec.precision is None
    return _pad(body, spec, "0" if zero_fill else " ")


# Hexadecimal

def _hex_body(spec: FormatSpec, digits: str) -> str:
    if digits == "0":
        return digits if spec.precision is None else "0" * spec.precision
    body = _zero_padded(spec, digits)
    if spec.has(Flag.ALTERNATE):
        return "0" + spec.type + body
    return body


def convert_hex(spec: FormatSpec, args: Iterator[object]) -> str:
    """Lower-case hexadecimal (``x``), sized by the spec's length."""
    value = read_unsigned(spec, _next_arg(args))
    body = _hex_body(spec, itoa_base(value, HEX_DIGITS))
    if len(body) >= spec.width:
        return body
    left = spec.has(Flag.LEFT)
    zero_fill = spec.has(Flag.ZERO) and not left and spec.precision is None
    out = _pad(body, spec, "0" if zero_fill else " ")
    if zero_fill and spec.has(Flag.ALTERNATE):
        out = _swap(out, 1, spec.width - len(body) + 1)
    return out


def convert_upper_hex(spec: FormatSpec, args: Iterator[object]) -> str:
    """Upper-case hexadecimal (``X``), sized by the spec's length."""
    value = read_unsigned(spec, _next_arg(args))
    body = _hex_body(spec, itoa_base(value, UPPER_HEX_DIGITS))
    if len(body) >= spec.width:
        return body
    zero_fill = spec.has(Flag.ZERO) and spec.precision is None
    return _pad(body, spec, "0" if zero_fill else " ")


# Pointer

def _pointer_body(spec: FormatSpec, digits: str) -> str:
    if digits == "0":
        return digits if spec.precision is None else "0" * spec.precision
    return _zero_padded(spec, digits)


def convert_pointer(spec: FormatSpec, args: Iterator[object]) -> str:
    """Address (``p``) as ``0x`` and lower-case hexadecimal; None counts as 0."""
    arg = _next_arg(args)
    value = read_ulong(0 if arg is None else arg)
    body = "0x" + _pointer_body(spec, itoa_base(value, HEX_DIGITS))
    if len(body) >= spec.width:
        return body
    out = _pad(body, spec, "0" if spec.has(Flag.ZERO) else " ")
    if out.startswith("00"):
        out = _swap(out, 1, spec.width - len(body) + 1)
    return out