"""Parsing of conversion specifications and reading of their integer arguments.

A specification has the shape ``%[flags][width][.precision][length]type``
where the flags are any of `` 0#+-``, the length is one of ``z``, ``j``,
``h``, ``hh``, ``l`` or ``ll`` and the type is one of ``sSpdDioOuUxXcC%``.
"""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, field

from ftlib.chartype import is_digit
from ftlib.convert import atoi

CONVERSION_TYPES = "sSpdDioOuUxXcC%"

# Lengths as stored on a spec: doubled letters collapse to their upper case.
LENGTH_CHARS = "zjhlHL"
_DOUBLED = {"h": "H", "l": "L"}

# Width in bits of the integer each length reads, and whether the signed
# reader keeps it signed.
_SIGNED_BITS = {"z": 64, "j": 64, "h": 16, "l": 64, "H": 8, "L": 64, "": 32}
_UNSIGNED_BITS = {"z": 64, "j": 64, "h": 16, "l": 64, "H": 8, "L": 64, "": 32}


class Flag(enum.Flag):
    """Flags that may precede the width of a specification."""

    NONE = 0
    SPACE = enum.auto()
    ZERO = enum.auto()
    ALTERNATE = enum.auto()
    PLUS = enum.auto()
    LEFT = enum.auto()


_FLAG_CHARS = {
    " ": Flag.SPACE,
    "0": Flag.ZERO,
    "#": Flag.ALTERNATE,
    "+": Flag.PLUS,
    "-": Flag.LEFT,
}


@dataclass
class FormatSpec:
    """One parsed conversion specification."""

    type: str = ""
    length: str = ""
    precision: int | None = None
    width: int = 0
    flags: Flag = field(default=Flag.NONE)

    def has(self, flag: Flag) -> bool:
        """True when ``flag`` was given."""
        return bool(self.flags & flag)


class FormatSyntaxError(ValueError):
    """A specification does not end in a known conversion type.

    ``spec`` holds what was parsed before the offending character and
    ``pos`` is the index of that character in the format string.
    """

    def __init__(self, spec: FormatSpec, pos: int) -> None:
        super().__init__(f"invalid conversion specification at index {pos}")
        self.spec = spec
        self.pos = pos


class ConversionError(ValueError):
    """An argument cannot be converted as its specification asks."""


def _char_at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _skip_digits(fmt: str, pos: int) -> int:
    while _char_at(fmt, pos) and is_digit(fmt[pos]):
        pos += 1
    return pos


def _parse_length(fmt: str, pos: int) -> tuple[str, int]:
    char = _char_at(fmt, pos)
    if not char or char not in "zjhl":
        return "", pos
    if char in _DOUBLED and _char_at(fmt, pos + 1) == char:
        return _DOUBLED[char], pos + 2
    return char, pos + 1


def parse_spec(fmt: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the specification whose ``%`` sits at ``fmt[pos]``.

    Returns the spec and the index just past its type character. Raises
    FormatSyntaxError when no valid type character ends the specification.
    """
    spec = FormatSpec()
    pos += 1
    while (char := _char_at(fmt, pos)) in _FLAG_CHARS and char:
        spec.flags |= _FLAG_CHARS[char]
        pos += 1
    if _char_at(fmt, pos) and is_digit(fmt[pos]):
        spec.width = atoi(fmt[pos:])
    pos = _skip_digits(fmt, pos)
    if _char_at(fmt, pos) == ".":
        pos += 1
        precision = atoi(fmt[pos:])
        spec.precision = precision if precision >= 0 else None
    pos = _skip_digits(fmt, pos)
    spec.length, pos = _parse_length(fmt, pos)
    char = _char_at(fmt, pos)
    if not char or char not in CONVERSION_TYPES:
        raise FormatSyntaxError(spec, pos)
    spec.type = char
    return spec, pos + 1


def _as_int(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise ConversionError(f"expected an integer argument, got {value!r}") from exc


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def read_signed(spec: FormatSpec, value: object) -> int:
    """Take ``value`` as the signed integer type that the spec's length names."""
    bits = _SIGNED_BITS.get(spec.length, 32)
    return _wrap_signed(_as_int(value), bits)


def read_unsigned(spec: FormatSpec, value: object) -> int:
    """Take ``value`` as the unsigned integer type that the spec's length names."""
    bits = _UNSIGNED_BITS.get(spec.length, 32)
    return _wrap_unsigned(_as_int(value), bits)


def read_long(value: object) -> int:
    """Take ``value`` as a signed 64-bit long."""
    return _wrap_signed(_as_int(value), 64)


def read_ulong(value: object) -> int:
    """Take ``value`` as an unsigned 64-bit long."""
    return _wrap_unsigned(_as_int(value), 64)