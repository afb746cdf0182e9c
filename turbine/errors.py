"""Errors reported while reading source text."""

from __future__ import annotations


def format_error_detail(source: str, x: int, y: int) -> str:
    """Return line ``y`` of ``source`` followed by a caret under column ``x``."""
    lines = source.split("\n")
    if not 1 <= y <= len(lines):
        raise ValueError(f"line {y} is out of range")
    caret = " " * max(x - 1, 0) + "^"
    return f"{lines[y - 1]}\n{caret}\n"


class ParseError(Exception):
    """An error at a position (column ``x``, line ``y``) of a source file."""

    def __init__(self, message: str, source: str, filename: str,
                 x: int, y: int) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.filename = filename
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"{self.filename}:{self.y}:{self.x}: error: {self.message}"

    def detail(self) -> str:
        """The offending source line with a caret marking the column."""
        return format_error_detail(self.source, self.x, self.y)