import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.output import (
    print_error,
    print_error_fd,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def _capture(action):
    """Run action(fd) on the write end of a pipe and return (result, bytes written)."""
    read_fd, write_fd = os.pipe()
    try:
        result = action(write_fd)
    finally:
        os.close(write_fd)
    chunks = []
    try:
        while True:
            chunk = os.read(read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(read_fd)
    return result, b"".join(chunks)


def test_put_char_str():
    _, out = _capture(lambda fd: put_char("a", fd))
    assert out == b"a"


def test_put_char_int():
    _, out = _capture(lambda fd: put_char(ord("x"), fd))
    assert out == b"x"


def test_put_char_int_wraps_to_byte():
    _, out = _capture(lambda fd: put_char(ord("x") + 256, fd))
    assert out == b"x"


def test_put_char_rejects_long_string():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(ValueError):
            put_char("ab", write_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_put_char_rejects_other_types():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(TypeError):
            put_char(1.5, write_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


@given(st.text(max_size=200))
def test_put_str_round_trip(s):
    _, out = _capture(lambda fd: put_str(s, fd))
    assert out.decode() == s


def test_put_str_none_writes_nothing():
    _, out = _capture(lambda fd: put_str(None, fd))
    assert out == b""


@given(st.text(max_size=200))
def test_put_endl_appends_newline(s):
    _, out = _capture(lambda fd: put_endl(s, fd))
    assert out.decode() == s + "\n"


def test_put_endl_none_writes_nothing():
    _, out = _capture(lambda fd: put_endl(None, fd))
    assert out == b""


def test_put_nbr_int_min():
    _, out = _capture(lambda fd: put_nbr(-2147483648, fd))
    assert out == b"-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_round_trip(n):
    _, out = _capture(lambda fd: put_nbr(n, fd))
    assert int(out.decode()) == n


def test_put_nbr_out_of_range():
    read_fd, write_fd = os.pipe()
    try:
        with pytest.raises(OverflowError):
            put_nbr(2**31, write_fd)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_print_error_prints_and_returns(capsys):
    assert print_error("something failed", 7) == 7
    assert capsys.readouterr().out == "something failed\n"


def test_print_error_fd_writes_and_returns():
    result, out = _capture(lambda fd: print_error_fd("bad input", fd, -1))
    assert result == -1
    assert out == b"bad input\n"


def test_print_error_fd_none_returns_zero():
    result, out = _capture(lambda fd: print_error_fd(None, fd, 5))
    assert result == 0
    assert out == b""