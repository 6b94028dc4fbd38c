"""Building new strings from existing ones: copies, slices, joins, trims and splits.

Strings are ``str``. A NUL character ends a string, as it would in a C
buffer, so anything after the first NUL is ignored.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import count


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.partition("\0")[0]


def strdup(s: str) -> str:
    """A copy of s up to its first NUL."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at index start.

    A start past the end of s gives an empty string. Negative arguments
    raise ValueError.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s1: str, charset: str) -> str:
    """s1 with every leading and trailing character found in charset removed."""
    text = _terminated(s1)
    chars = _terminated(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, c: str) -> list[str]:
    """The non-empty pieces of s separated by runs of the character c."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single separator character, got {c!r}")
    return [word for word in _terminated(s).split(c) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, character) for each character of s.

    A NUL returned by f ends the result there.
    """
    mapped = "".join(f(index, ch) for index, ch in enumerate(_terminated(s)))
    return mapped.partition("\0")[0]


def _is_nul(item: object) -> bool:
    return item == 0 or item == "\0"


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Apply f(index, character) to each character of s in place.

    s is a mutable sequence of characters, such as a ``bytearray`` or a list
    of one-character strings. When f returns something other than None, it
    replaces the character at that index. Iteration stops at a NUL.
    """
    for index in count():
        if index >= len(s) or _is_nul(s[index]):
            break
        replacement = f(index, s[index])
        if replacement is not None:
            s[index] = replacement