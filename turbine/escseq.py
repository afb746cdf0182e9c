"""Escape sequences recognised in string and character literals."""

from __future__ import annotations

_ESCAPES = {
    '"': '"',
    "0": "\0",
    "n": "\n",
    "'": "'",
    "\\": "\\",
    "t": "\t",
    "r": "\r",
    "f": "\f",
    "v": "\v",
    "a": "\a",
    "b": "\b",
    "?": "?",
}


def find_escape_sequence(char: str) -> str | None:
    """Return the character that ``\\<char>`` stands for, or None if unknown."""
    return _ESCAPES.get(char)