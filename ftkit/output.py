"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from ftkit.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: int | str, fd: int) -> None:
    """Write one character to fd.

    A str must hold exactly one character and is written UTF-8 encoded;
    an int is written as a single byte, taken modulo 256.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    elif isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def put_str(s: str | None, fd: int) -> None:
    """Write s to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode())


def put_endl(s: str | None, fd: int) -> None:
    """Write s followed by a newline to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write a signed 32-bit integer in decimal to fd.

    Raises OverflowError for values outside the 32-bit range.
    """
    _write_all(fd, itoa(n).encode())


def print_error(text: str, return_value: int) -> int:
    """Print text and a newline to standard output and return return_value."""
    print(text)
    return return_value


def print_error_fd(s: str | None, fd: int, value: int) -> int:
    """Write s and a newline to fd and return value; None writes nothing and returns 0."""
    if s is None:
        return 0
    put_endl(s, fd)
    return value