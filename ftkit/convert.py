"""Number parsing and formatting with fixed-width integer semantics."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"

INT_BITS = 32
LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's complement signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse_decimal(text: str) -> int:
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < end and text[pos] in _DIGITS:
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return -value if negative else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Text without digits yields 0.
    """
    return _wrap(_parse_decimal(text), INT_BITS)


def atol(text: str) -> int:
    """Like atoi, but wraps to a signed 64-bit value."""
    return _wrap(_parse_decimal(text), LONG_BITS)


def _hex_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    return 0


def base_to_int(base: str, text: str, n: int) -> int:
    """Read up to n characters of text as a number in the radix len(base).

    Only the length of base matters. Digits are 0-9 and a-f/A-F; any other
    character counts as zero. Reading also stops at a NUL character. The
    result wraps to a signed 32-bit value.
    """
    radix = len(base)
    result = 0
    for ch in text[: max(n, 0)]:
        if ch == "\0":
            break
        result = result * radix + _hex_value(ch)
    return _wrap(result, INT_BITS)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal.

    Raises OverflowError for values outside the 32-bit range.
    """
    if _wrap(n, INT_BITS) != n:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)