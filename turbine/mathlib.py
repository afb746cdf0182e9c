"""Numeric functions offered to scripts by the built-in ``math`` module.

Out-of-domain arguments give NaN and overflowing results give an infinity,
as floating-point arithmetic does, rather than raising.
"""

from __future__ import annotations

import math
from typing import Callable

PI = 3.141592653589793
E = 2.718281828459045
INF = math.inf

_REL_TOL = 1e-9
_ABS_TOL = 1e-12


def _safe(fn: Callable[[float], float], x: float,
          overflow: float = math.inf) -> float:
    try:
        return fn(x)
    except OverflowError:
        return overflow
    except ValueError:
        return math.nan


def _log(fn: Callable[[float], float], x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return fn(x)


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1


def is_close(a: float, b: float, rel_tol: float, abs_tol: float) -> bool:
    """Whether ``a`` and ``b`` differ by at most one of the tolerances."""
    if a == b:
        return True
    diff = abs(a - b)
    return diff <= abs_tol or diff <= rel_tol * max(abs(a), abs(b))


def isclose(x: float, y: float) -> bool:
    """:func:`is_close` with the module's default tolerances."""
    return is_close(x, y, _REL_TOL, _ABS_TOL)


def power(x: float, y: float) -> float:
    """``x`` raised to ``y``."""
    try:
        return math.pow(x, y)
    except OverflowError:
        if x < 0.0 and _is_odd_integer(y):
            return -math.inf
        return math.inf
    except ValueError:
        if x == 0.0 and y < 0.0:
            if _is_odd_integer(y):
                return math.copysign(math.inf, x)
            return math.inf
        return math.nan


def sqrt(x: float) -> float:
    if x < 0.0:
        return math.nan
    return math.sqrt(x)


def absolute(x: float) -> float:
    return math.fabs(x)


def floor(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.floor(x)), x)


def ceil(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.ceil(x)), x)


def round_half_away(x: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    if not math.isfinite(x):
        return x
    magnitude = abs(x)
    whole = float(math.floor(magnitude))
    if magnitude - whole >= 0.5:
        whole += 1.0
    return math.copysign(whole, x)


def radians(degree: float) -> float:
    return degree * (PI / 180.0)


def degrees(radian: float) -> float:
    return radian * (180.0 / PI)


def sin(x: float) -> float:
    return _safe(math.sin, x)


def cos(x: float) -> float:
    return _safe(math.cos, x)


def tan(x: float) -> float:
    return _safe(math.tan, x)


def asin(x: float) -> float:
    return _safe(math.asin, x)


def acos(x: float) -> float:
    return _safe(math.acos, x)


def atan(x: float) -> float:
    return _safe(math.atan, x)


def atan2(x: float, y: float) -> float:
    return math.atan2(x, y)


def sinh(x: float) -> float:
    return _safe(math.sinh, x, math.copysign(math.inf, x))


def cosh(x: float) -> float:
    return _safe(math.cosh, x)


def tanh(x: float) -> float:
    return math.tanh(x)


def asinh(x: float) -> float:
    return math.asinh(x)


def acosh(x: float) -> float:
    return _safe(math.acosh, x)


def atanh(x: float) -> float:
    if abs(x) == 1.0:
        return math.copysign(math.inf, x)
    return _safe(math.atanh, x)


def exp(x: float) -> float:
    return _safe(math.exp, x)


def log(x: float) -> float:
    return _log(math.log, x)


def log10(x: float) -> float:
    return _log(math.log10, x)


def log2(x: float) -> float:
    return _log(math.log2, x)


def module_globals() -> dict[str, float]:
    """The module's global constants, keyed by their script names."""
    return {"_PI_": PI, "_E_": E, "_INF_": INF}