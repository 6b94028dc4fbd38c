"""ASCII character, number conversion, string, output, linked-list and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "ctype",
    "linereader",
    "linkedlist",
    "output",
    "strbuild",
    "strsearch",
]