"""Conversions for the character, string and percent types of a format string.

Each converter takes a parsed FormatSpec and an iterator over the remaining
arguments and returns the converted text. Widths and precisions of the wide
conversions count bytes of the multibyte (UTF-8) encoding, not characters.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator

from ftlib.convert import encode_wide_char
from ftlib.fmtspec import ConversionError, Flag, FormatSpec

MB_CUR_MAX = 4
NULL_TEXT = "(null)"


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise ConversionError("not enough arguments for the format") from None


def _pad(text: str, size: int, spec: FormatSpec, *, zero_with_left: bool = True) -> str:
    """Pad ``text``, whose encoded size is ``size``, out to the spec's width.

    The gap is filled with zeros when the ``0`` flag is set; unless
    ``zero_with_left`` is true, the ``-`` flag turns that back to spaces.
    """
    left = spec.has(Flag.LEFT)
    zero = spec.has(Flag.ZERO) and (zero_with_left or not left)
    gap = ("0" if zero else " ") * (spec.width - size)
    return text + gap if left else gap + text


def _as_code(value: object) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ConversionError(f"expected a single character, got {value!r}")
        return ord(value)
    try:
        return operator.index(value)
    except TypeError as exc:
        raise ConversionError(f"expected a character or a code, got {value!r}") from exc


def _encode(code: int) -> bytes:
    try:
        return encode_wide_char(code, MB_CUR_MAX)
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc


def _code_points(arg: object) -> list[int]:
    if isinstance(arg, str):
        return [ord(char) for char in arg]
    if not isinstance(arg, Iterable):
        raise ConversionError(f"expected a wide string, got {arg!r}")
    return [_as_code(item) for item in arg]


def convert_string(spec: FormatSpec, args: Iterator[object]) -> str:
    """String (``s``); with the ``l`` length it is a wide string instead."""
    if spec.length == "l":
        spec.length = ""
        spec.type = "S"
        return convert_wide_string(spec, args)
    arg = _next_arg(args)
    if arg is None:
        text = NULL_TEXT
    elif isinstance(arg, str):
        text = arg
    else:
        raise ConversionError(f"expected a string argument, got {arg!r}")
    if spec.precision is not None:
        text = text[: spec.precision]
    if len(text) >= spec.width:
        return text
    return _pad(text, len(text), spec)


def convert_wide_string(spec: FormatSpec, args: Iterator[object]) -> str:
    """Wide string (``S``): a str or a sequence of code points, ended by a 0.

    The precision limits the number of encoded bytes; a character that would
    cross it is left out whole.
    """
    arg = _next_arg(args)
    if arg is None:
        text, size = NULL_TEXT, len(NULL_TEXT)
    else:
        pieces: list[bytes] = []
        size = 0
        for code in _code_points(arg):
            if code == 0:
                break
            if spec.precision is not None and size >= spec.precision:
                break
            encoded = _encode(code)
            if spec.precision is not None and size + len(encoded) > spec.precision:
                break
            pieces.append(encoded)
            size += len(encoded)
        text = b"".join(pieces).decode("utf-8")
    if size >= spec.width:
        return text
    return _pad(text, size, spec)


def convert_char(spec: FormatSpec, args: Iterator[object]) -> str:
    """Character (``c``), taken as a byte; with the ``l`` length a wide character."""
    if spec.length == "l":
        spec.length = ""
        spec.type = "C"
        return convert_wide_char(spec, args)
    char = chr(_as_code(_next_arg(args)) & 0xFF)
    if spec.width <= 1:
        return char
    return _pad(char, 1, spec)


def convert_wide_char(spec: FormatSpec, args: Iterator[object]) -> str:
    """Wide character (``C``), written in its multibyte encoding."""
    encoded = _encode(_as_code(_next_arg(args)) & 0xFFFFFFFF)
    text = encoded.decode("utf-8")
    if spec.width <= len(encoded):
        return text
    return _pad(text, len(encoded), spec)


def convert_percent(spec: FormatSpec, args: Iterator[object]) -> str:
    """A literal percent sign (``%``); consumes no argument."""
    if spec.width <= 1:
        return "%"
    return _pad("%", 1, spec, zero_with_left=False)