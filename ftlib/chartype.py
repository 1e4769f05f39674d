"""ASCII character classification.

Every predicate accepts either a one-character string or an integer
character code, and only ever answers for the ASCII range.
"""

from __future__ import annotations

_SPACES = frozenset(" \t\n\v\f\r")


def _code(char: str | int) -> int:
    if isinstance(char, int):
        return char
    if isinstance(char, str) and len(char) == 1:
        return ord(char)
    raise ValueError(f"expected a single character or a code, got {char!r}")


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    return is_upper(char) or is_lower(char)


def is_digit(char: str | int) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(char) <= 126


def is_space(char: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(char)
    return 0 <= code < 0x110000 and chr(code) in _SPACES


def is_upper(char: str | int) -> bool:
    """True for ASCII upper-case letters."""
    return ord("A") <= _code(char) <= ord("Z")


def is_lower(char: str | int) -> bool:
    """True for ASCII lower-case letters."""
    return ord("a") <= _code(char) <= ord("z")