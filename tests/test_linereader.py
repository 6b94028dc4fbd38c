import os

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ftkit.linereader import DEFAULT_BUFFER_SIZE, LineReader, get_next_line


@pytest.fixture
def open_file(tmp_path):
    fds = []

    def _open(content: bytes, name: str = "data.txt") -> int:
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield _open
    for fd in fds:
        try:
            os.close(fd)
        except OSError:
            pass


def _pipe_with(content: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, content)
    os.close(write_end)
    return read_end


def test_default_buffer_size_is_two():
    assert LineReader().buffer_size == DEFAULT_BUFFER_SIZE == 2


def test_lines_keep_their_newlines(open_file):
    fd = open_file(b"first\nsecond\n")
    reader = LineReader()
    assert reader.next_line(fd) == b"first\n"
    assert reader.next_line(fd) == b"second\n"
    assert reader.next_line(fd) is None


def test_last_line_without_newline(open_file):
    fd = open_file(b"one\ntwo")
    reader = LineReader(3)
    assert list(reader.lines(fd)) == [b"one\n", b"two"]
    assert reader.next_line(fd) is None


def test_empty_file_gives_none(open_file):
    fd = open_file(b"")
    assert LineReader().next_line(fd) is None


def test_blank_lines_are_returned(open_file):
    fd = open_file(b"\n\nx\n")
    assert list(LineReader(1).lines(fd)) == [b"\n", b"\n", b"x\n"]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 100])
def test_round_trip_for_any_buffer_size(open_file, size):
    content = b"alpha\nbeta gamma\n\ndelta\nend"
    fd = open_file(content)
    lines = list(LineReader(size).lines(fd))
    assert b"".join(lines) == content
    assert lines == content.splitlines(keepends=True)


def test_separate_descriptors_keep_separate_leftovers(open_file):
    fd_a = open_file(b"a1\na2\na3\n", "a.txt")
    fd_b = open_file(b"b1\nb2\n", "b.txt")
    reader = LineReader(4)
    assert reader.next_line(fd_a) == b"a1\n"
    assert reader.next_line(fd_b) == b"b1\n"
    assert reader.next_line(fd_a) == b"a2\n"
    assert reader.next_line(fd_b) == b"b2\n"
    assert reader.next_line(fd_a) == b"a3\n"
    assert reader.next_line(fd_b) is None
    assert reader.next_line(fd_a) is None


def test_nul_drops_rest_of_its_chunk(open_file):
    fd = open_file(b"ab\0cd\nef\n")
    reader = LineReader(4)
    assert reader.next_line(fd) == b"abd\n"
    assert reader.next_line(fd) == b"ef\n"
    assert reader.next_line(fd) is None


def test_reads_from_pipe():
    fd = _pipe_with(b"piped\nlines\n")
    try:
        assert list(LineReader(3).lines(fd)) == [b"piped\n", b"lines\n"]
    finally:
        os.close(fd)


def test_module_function_reads_lines(open_file):
    fd = open_file(b"x\ny\n")
    assert get_next_line(fd) == b"x\n"
    assert get_next_line(fd) == b"y\n"
    assert get_next_line(fd) is None


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_negative_descriptor_raises():
    with pytest.raises(OSError):
        LineReader().next_line(-1)


def test_closed_descriptor_raises(open_file):
    fd = open_file(b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)


@settings(max_examples=60, deadline=None)
@given(
    content=st.binary(max_size=200).map(lambda b: b.replace(b"\0", b"")),
    size=st.integers(min_value=1, max_value=16),
)
def test_lines_reassemble_content(content, size):
    fd = _pipe_with(content)
    try:
        lines = list(LineReader(size).lines(fd))
    finally:
        os.close(fd)
    assert b"".join(lines) == content
    assert all(line for line in lines)
    for line in lines[:-1]:
        assert line.endswith(b"\n")
        assert line.count(b"\n") == 1
    if lines:
        assert lines[-1].count(b"\n") <= 1
        assert b"\n" not in lines[-1][:-1]