"""Formatted output driven by ``%`` conversion specifications."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from ftlib.chartype import is_alpha
from ftlib.fmtspec import Flag, FormatSpec, FormatSyntaxError, parse_spec
from ftlib.numeric import (
    convert_decimal,
    convert_hex,
    convert_long_decimal,
    convert_long_octal,
    convert_long_unsigned,
    convert_octal,
    convert_pointer,
    convert_unsigned,
    convert_upper_hex,
)
from ftlib.textual import (
    convert_char,
    convert_percent,
    convert_string,
    convert_wide_char,
    convert_wide_string,
)

Converter = Callable[[FormatSpec, Iterator[object]], str]

_CONVERTERS: dict[str, Converter] = {
    "s": convert_string,
    "S": convert_wide_string,
    "p": convert_pointer,
    "d": convert_decimal,
    "D": convert_long_decimal,
    "i": convert_decimal,
    "o": convert_octal,
    "O": convert_long_octal,
    "u": convert_unsigned,
    "U": convert_long_unsigned,
    "x": convert_hex,
    "X": convert_upper_hex,
    "c": convert_char,
    "C": convert_wide_char,
    "%": convert_percent,
}


def converter_for(type_char: str) -> Converter:
    """The converter for a conversion type character."""
    try:
        return _CONVERTERS[type_char]
    except KeyError:
        raise ValueError(f"unknown conversion type {type_char!r}") from None


def _invalid(spec: FormatSpec, fmt: str, pos: int) -> tuple[str, int]:
    """Text for a specification without a valid type, and where to resume.

    A letter in the type position is shown padded to the width and consumed;
    anything else leaves only the padding and is read as ordinary text.
    """
    fill = "0" if spec.has(Flag.ZERO) else " "
    char = fmt[pos] if pos < len(fmt) else ""
    shown = char if char and is_alpha(char) else fill
    size = spec.width if spec.width > 1 else int(shown != fill)
    if shown != fill:
        pos += 1
    if size == 0:
        return "", pos
    gap = fill * (size - 1)
    return (shown + gap if spec.has(Flag.LEFT) else gap + shown), pos


def _render(fmt: str, args: tuple[object, ...]) -> Iterator[str]:
    if fmt is None:
        raise TypeError("the format must be a string, not None")
    remaining = iter(args)
    start = 0
    while (percent := fmt.find("%", start)) != -1:
        literal = fmt[start:percent]
        try:
            spec, end = parse_spec(fmt, percent)
        except FormatSyntaxError as err:
            text, end = _invalid(err.spec, fmt, err.pos)
        else:
            text = converter_for(spec.type)(spec, remaining)
        yield literal
        yield text
        start = end
    yield fmt[start:]


def sprintf(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversion specifications replaced by ``args``.

    Raises ConversionError when an argument is missing or unsuitable.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Text is written piece by piece, so what came before a failing conversion
    has already been written when the error is raised. Returns the number of
    bytes the output takes in UTF-8.
    """
    out = sys.stdout if stream is None else stream
    count = 0
    for piece in _render(fmt, args):
        if piece:
            out.write(piece)
            count += len(piece.encode("utf-8", errors="surrogateescape"))
    return count