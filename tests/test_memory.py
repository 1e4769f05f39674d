import pytest
from hypothesis import given, strategies as st

from ftlib.memory import bzero, memalloc, memccpy, memchr, memcmp, memcpy, memmove


def test_memalloc_is_zero_filled():
    buffer = memalloc(5)
    assert buffer == bytearray(5)
    assert len(buffer) == 5


def test_memalloc_negative_raises():
    with pytest.raises(ValueError):
        memalloc(-1)


def test_bzero_zeroes_prefix_only():
    buffer = bytearray(b"hello")
    bzero(buffer, 3)
    assert buffer[:3] == bytes(3)
    assert buffer[3:] == b"lo"


def test_bzero_too_long_raises():
    with pytest.raises(ValueError):
        bzero(bytearray(b"ab"), 3)


def test_memcpy_copies_prefix_and_returns_dst():
    dst = bytearray(b"xxxxxx")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst[:4] == b"abcd"
    assert dst[4:] == b"xx"


def test_memcpy_short_source_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"abc", 5)


def test_memccpy_stops_after_byte():
    dst = bytearray(b"......")
    offset = memccpy(dst, b"hello!", ord("l"), 6)
    assert offset == 3
    assert dst[:offset] == b"hel"
    assert dst[offset:] == b"..."


def test_memccpy_not_found_copies_n():
    dst = bytearray(b"....")
    assert memccpy(dst, b"abcd", ord("z"), 3) is None
    assert dst[:3] == b"abc"
    assert dst[3:] == b"."


def test_memccpy_byte_taken_modulo_256():
    first = bytearray(6)
    second = bytearray(6)
    assert memccpy(first, b"hello!", ord("l"), 6) == memccpy(second, b"hello!", ord("l") + 256, 6)
    assert first == second


@given(
    data=st.binary(min_size=1, max_size=40),
    dst=st.integers(min_value=0, max_value=39),
    src=st.integers(min_value=0, max_value=39),
    length=st.integers(min_value=0, max_value=40),
)
def test_memmove_overlapping_regions(data, dst, src, length):
    size = len(data)
    dst %= size
    src %= size
    length = min(length, size - dst, size - src)
    buffer = bytearray(data)
    result = memmove(buffer, dst, src, length)
    assert result is buffer
    assert buffer[dst:dst + length] == data[src:src + length]
    assert len(buffer) == size


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    assert memchr(b"abcabc", ord("c"), 6) == 2


def test_memchr_limited_to_n():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_byte_modulo_256():
    assert memchr(b"abcabc", ord("b") + 256, 6) == memchr(b"abcabc", ord("b"), 6)


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_zero_length_is_zero():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_sign_of_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_short_buffer_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


@given(st.binary(max_size=20), st.binary(max_size=20))
def test_memcmp_antisymmetric(first, second):
    n = min(len(first), len(second))
    assert memcmp(first, second, n) == -memcmp(second, first, n)
    assert (memcmp(first, second, n) == 0) == (first[:n] == second[:n])