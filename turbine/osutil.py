"""Operating-system helpers: paths and clocks."""

from __future__ import annotations

import os
import time

_PATH_MAX = 4096


def get_current_directory() -> str:
    return os.getcwd()


def path_exists(path: str) -> bool:
    return os.path.exists(path)


def path_join(left: str, right: str) -> str | None:
    """Join two paths and resolve them; None if the result does not exist."""
    joined = f"{left}/{right}"
    if len(joined) >= _PATH_MAX:
        return None
    try:
        return os.path.realpath(joined, strict=True)
    except OSError:
        return None


def dirname(path: str | None) -> str | None:
    """Return the part of ``path`` before its last slash.

    None when there is no slash. A path whose only slash is the leading one
    is returned whole.
    """
    if path is None:
        return None
    slash = path.rfind("/")
    if slash < 0:
        return None
    if slash == 0:
        return path
    return path[:slash]


def time_now() -> float:
    """System time in seconds."""
    return time.time()


def perf() -> float:
    """Monotonic clock in seconds."""
    return time.monotonic()


def elapsed(start: float) -> float:
    """Seconds since ``start``, measured with :func:`time_now`."""
    return time_now() - start


def sleep(seconds: float) -> None:
    """Sleep for ``seconds``; negative durations do nothing."""
    if seconds < 0:
        return
    time.sleep(seconds)