"""File functions offered to scripts by the built-in ``file`` module."""

from __future__ import annotations

from typing import Iterable


def _open(path: str, mode: str):
    return open(path, mode, encoding="utf-8", newline="")


def read_text(path: str) -> str:
    """Return the whole content of the file at ``path``."""
    with _open(path, "r") as fp:
        return fp.read()


def write_text(path: str, text: str) -> None:
    """Replace the content of the file at ``path`` with ``text``."""
    with _open(path, "w") as fp:
        fp.write(text)


def read_lines(path: str) -> list[str]:
    """Return the lines of the file, each keeping its trailing newline.

    A final line without a newline is included; an empty tail is not.
    """
    parts = read_text(path).split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def write_lines(path: str, lines: Iterable[str]) -> None:
    """Write ``lines`` to the file at ``path`` exactly as given."""
    with _open(path, "w") as fp:
        fp.writelines(lines)