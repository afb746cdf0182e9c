"""Clock functions offered to scripts by the built-in ``time`` module."""

from __future__ import annotations

from turbine import osutil


def now() -> float:
    """System time in seconds."""
    return osutil.time_now()


def perf() -> float:
    """Monotonic clock in seconds, for measuring intervals."""
    return osutil.perf()


def elapsed(start: float) -> float:
    """Seconds since ``start``, a value returned by :func:`now`."""
    return osutil.elapsed(start)


def sleep(seconds: float) -> None:
    """Pause for ``seconds``."""
    osutil.sleep(seconds)