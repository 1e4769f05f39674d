import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.linereader import LineReader, get_next_line


def pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


def read_all(reader, data):
    fd = pipe_with(data)
    try:
        return list(reader.lines(fd))
    finally:
        os.close(fd)


def test_lines_with_trailing_newline():
    assert read_all(LineReader(), b"one\ntwo\n") == ["one", "two"]


def test_last_line_without_newline():
    assert read_all(LineReader(), b"one\ntwo") == ["one", "two"]


def test_empty_lines_kept():
    assert read_all(LineReader(), b"a\n\nb\n") == ["a", "", "b"]


def test_empty_input():
    assert read_all(LineReader(), b"") == []


def test_lines_longer_than_buffer():
    long_line = "x" * 100
    assert read_all(LineReader(3), (long_line + "\nend\n").encode()) == [long_line, "end"]


def test_none_after_end_of_file():
    reader = LineReader()
    fd = pipe_with(b"only\n")
    try:
        assert reader.read_line(fd) == "only"
        assert reader.read_line(fd) is None
        assert reader.read_line(fd) is None
    finally:
        os.close(fd)


def test_interleaved_descriptors():
    reader = LineReader(2)
    first = pipe_with(b"a1\na2\n")
    second = pipe_with(b"b1\nb2\n")
    try:
        assert reader.read_line(first) == "a1"
        assert reader.read_line(second) == "b1"
        assert reader.read_line(first) == "a2"
        assert reader.read_line(second) == "b2"
        assert reader.read_line(first) is None
    finally:
        os.close(first)
        os.close(second)


def test_file_descriptor(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_bytes("h\u00e9llo\nw\u00f6rld".encode("utf-8"))
    fd = os.open(path, os.O_RDONLY)
    try:
        assert list(LineReader(5).lines(fd)) == ["h\u00e9llo", "w\u00f6rld"]
    finally:
        os.close(fd)


def test_module_level_reader():
    fd = pipe_with(b"first\nsecond")
    try:
        assert get_next_line(fd) == "first"
        assert get_next_line(fd) == "second"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [0, -1, 8_000_001])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_bad_descriptor():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        LineReader().read_line(read_fd)


_line = st.text(
    alphabet=st.characters(blacklist_characters="\n", blacklist_categories=("Cs",)),
    max_size=20,
)


@given(st.lists(_line, max_size=10), st.integers(min_value=1, max_value=16))
def test_round_trip(lines, size):
    data = "".join(line + "\n" for line in lines).encode("utf-8")
    assert read_all(LineReader(size), data) == lines