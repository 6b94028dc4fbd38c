"""Length, bounded copy, search and comparison on NUL-terminated strings.

Strings may be ``str`` or bytes-like objects; a NUL character ends the
string, as it would in a C buffer. Positions are returned as indices,
with ``None`` where nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest

Text = str | bytes | bytearray | memoryview


def _terminated(s: Text) -> str | bytes:
    if isinstance(s, str):
        return s.partition("\0")[0]
    return bytes(s).partition(b"\0")[0]


def _codes(t: str | bytes) -> list[int]:
    if isinstance(t, str):
        return [ord(ch) for ch in t]
    return list(t)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(dest: bytearray, n: int) -> None:
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    if n > len(dest):
        raise ValueError(f"size {n} exceeds buffer of length {len(dest)}")


def _source_bytes(src: bytes | bytearray | memoryview) -> bytes:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like, not str")
    return bytes(_terminated(src))


def strlen(s: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strlcpy(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> int:
    """Copy src into dest, which holds n bytes, always NUL-terminating when n > 0.

    Returns the length of src, so a result >= n means the copy was truncated.
    """
    _check_size(dest, n)
    data = _source_bytes(src)
    if n:
        count = min(len(data), n - 1)
        dest[:count] = data[:count]
        dest[count] = 0
    return len(data)


def strlcat(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> int:
    """Append src to the string in dest, whose total size is n bytes.

    Returns the length the full result would have had: n + len(src) when n
    is smaller than the string already in dest, len(dest string) + len(src)
    otherwise.
    """
    _check_size(dest, n)
    data = _source_bytes(src)
    dest_len = strlen(dest)
    if n < dest_len:
        return n + len(data)
    room = max(n - dest_len - 1, 0)
    copied = min(len(data), room)
    dest[dest_len : dest_len + copied] = data[:copied]
    # A copy that fills a buffer that started out empty is left unterminated.
    if not (dest_len == 0 and n >= 1 and copied == n - 1):
        end = dest_len + copied
        if end >= len(dest):
            raise ValueError("no room for the terminating NUL")
        dest[end] = 0
    return len(data) + dest_len


def strchr(s: Text, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL gives the index of the terminator, i.e. strlen(s).
    For bytes-like s, c is taken modulo 256.
    """
    t = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(t)
    if not isinstance(t, str):
        code &= 0xFF
    try:
        return _codes(t).index(code)
    except ValueError:
        return None


def strrchr(s: Text, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL gives the index of the terminator, i.e. strlen(s).
    For bytes-like s, c is taken modulo 256.
    """
    t = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(t)
    if not isinstance(t, str):
        code &= 0xFF
    codes = _codes(t)
    try:
        return len(codes) - 1 - codes[::-1].index(code)
    except ValueError:
        return None


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most n characters; the difference of the first mismatch, or 0."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    pairs = zip_longest(_codes(_terminated(s1)), _codes(_terminated(s2)), fillvalue=0)
    for x, y in islice(pairs, n):
        if x != y:
            return x - y
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> int | None:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    target = _terminated(needle)
    if not target:
        return 0
    window = _terminated(haystack)[: max(length, 0)]
    index = window.find(target)  # type: ignore[arg-type]
    return None if index < 0 else index