import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.chartype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_lower,
    is_print,
    is_space,
    is_upper,
)

ASCII_CHARS = [chr(code) for code in range(128)]


@pytest.mark.parametrize("char", ASCII_CHARS)
def test_predicates_agree_with_builtin_ascii_classes(char):
    assert is_alpha(char) == (char in string.ascii_letters)
    assert is_digit(char) == (char in string.digits)
    assert is_alnum(char) == (char in string.ascii_letters + string.digits)
    assert is_upper(char) == (char in string.ascii_uppercase)
    assert is_lower(char) == (char in string.ascii_lowercase)
    assert is_space(char) == (char in string.whitespace)
    assert is_print(char) == char.isprintable()
    assert is_ascii(char) is True


@pytest.mark.parametrize("char", ASCII_CHARS)
def test_int_and_str_give_same_answer(char):
    for predicate in (is_alpha, is_digit, is_alnum, is_ascii, is_print, is_space, is_upper, is_lower):
        assert predicate(char) == predicate(ord(char))


@given(st.characters(min_codepoint=128))
def test_non_ascii_characters_are_rejected(char):
    assert not is_ascii(char)
    assert not is_alpha(char)
    assert not is_digit(char)
    assert not is_print(char)
    assert not is_space(char)


@pytest.mark.parametrize("code", [-1, -200, 128, 1000])
def test_out_of_range_codes(code):
    assert not is_ascii(code)
    assert not is_alnum(code)
    assert not is_space(code)


@pytest.mark.parametrize("bad", ["", "ab", None, 1.5])
def test_bad_argument_raises(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)