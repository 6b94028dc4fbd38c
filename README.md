# ftkit

A small toolkit of everyday helpers with C-style semantics: fixed-width
integer parsing, NUL-terminated strings, bounded copies, and line-by-line
reading from raw file descriptors. It needs nothing outside the standard
library.

## Modules

- `ftkit.ctype` – ASCII character classification and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`. Each takes an integer code point or a one-character string;
  `to_upper` and `to_lower` return the same kind they were given.
- `ftkit.convert` – number parsing and formatting:
  `atoi` (wraps to signed 32 bits), `atol` (wraps to signed 64 bits),
  `base_to_int(base, text, n)` (reads up to `n` characters in radix
  `len(base)`), and `itoa` (raises `OverflowError` outside the 32-bit range).
- `ftkit.strsearch` – length, bounded copy and concatenate, search and
  compare on `str` or bytes-like values, where a NUL ends the string:
  `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`.
  Searches return an index, or `None` when nothing is found. `strlcpy` and
  `strlcat` write into a `bytearray`.
- `ftkit.strbuild` – building new strings: `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, and `striteri`, which changes a mutable
  sequence in place.
- `ftkit.output` – writing to file descriptors: `put_char`, `put_str`,
  `put_endl`, `put_nbr`, `print_error` (prints to standard output and returns
  the value given) and `print_error_fd`.
- `ftkit.linkedlist` – a singly linked list: `Node` and `LinkedList`, with
  `push_front`, `push_back`, `clear`, `remove_node`, `for_each`, `last`,
  `map`, `len()` and iteration over contents.
- `ftkit.linereader` – reading a file descriptor one line at a time:
  `LineReader(buffer_size=2)` with `next_line(fd)` and `lines(fd)`, and the
  module-level `get_next_line(fd)` that uses a shared reader. Lines are
  `bytes` and keep their newline; leftover bytes are remembered per
  descriptor.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.strbuild import split, strtrim

atoi("  -42abc")              # -42
itoa(-2147483648)             # "-2147483648"
split("++a++b+c", "+")        # ["a", "b", "c"]
strtrim("+-hello-+", "+-")    # "hello"
```

```python
from ftkit.strsearch import strchr, strlcpy

strchr("hello", "l")          # 2
buf = bytearray(8)
strlcpy(buf, b"hello world", 8)   # 11; buf now holds b"hello w\x00"
```

```python
from ftkit.linkedlist import LinkedList

items = LinkedList(["one", "two"])
items.push_front("zero")
items.push_back("three")
list(items)                   # ["zero", "one", "two", "three"]
len(items)                    # 4
```

```python
import os
import sys
from ftkit.linereader import LineReader

reader = LineReader(buffer_size=64)
fd = os.open("notes.txt", os.O_RDONLY)
for line in reader.lines(fd):
    sys.stdout.write(line.decode())
os.close(fd)
```

## What it does not do

The package has no raw byte-buffer helpers (fill, zero, copy, move, compare
or allocate) and no 3D vector or rotation math. It provides no command-line
program.

## Running the tests

```
pip install ".[test]"
pytest
```