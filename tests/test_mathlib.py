import math

import pytest

from turbine import mathlib


def test_module_globals_hold_source_constants():
    globs = mathlib.module_globals()
    assert globs["_PI_"] == 3.141592653589793
    assert globs["_E_"] == 2.718281828459045
    assert math.isinf(globs["_INF_"]) and globs["_INF_"] > 0
    assert set(globs) == {"_PI_", "_E_", "_INF_"}


def test_is_close_equal_values():
    assert mathlib.is_close(7.25, 7.25, 0.0, 0.0) is True


def test_is_close_absolute_tolerance_is_inclusive():
    assert mathlib.is_close(1.0, 1.5, 0.0, 0.5) is True
    assert mathlib.is_close(1.0, 1.5, 0.0, 0.25) is False


def test_is_close_relative_tolerance():
    assert mathlib.is_close(100.0, 101.0, 0.01, 0.0) is True
    assert mathlib.is_close(100.0, 102.0, 0.01, 0.0) is False


def test_isclose_default_tolerances():
    assert mathlib.isclose(1.0, 1.0 + 1e-10) is True
    assert mathlib.isclose(1.0, 1.1) is False
    assert mathlib.isclose(0.0, 1e-13) is True


@pytest.mark.parametrize("x", [0.0, 0.3, 1.0, 2.0, 12.5])
def test_sqrt_squares_back(x):
    assert mathlib.isclose(mathlib.sqrt(x) ** 2, x)


def test_sqrt_negative_is_nan():
    result = mathlib.sqrt(-1.0)
    assert repr(abs(result)) == "nan"


@pytest.mark.parametrize("x", [0.5, 3.0, 17.0])
def test_power_half_is_sqrt(x):
    assert mathlib.isclose(mathlib.power(x, 0.5), mathlib.sqrt(x))


def test_power_edge_cases():
    assert math.isinf(mathlib.power(0.0, -1.0))
    assert math.isnan(mathlib.power(-8.0, 1.0 / 3.0))
    assert mathlib.power(1e300, 2.0) == math.inf
    assert mathlib.power(-1e300, 3.0) == -math.inf


@pytest.mark.parametrize("x", [-3.7, -0.2, 0.0, 0.2, 2.5, 9.0])
def test_floor_and_ceil_bracket_value(x):
    lo, hi = mathlib.floor(x), mathlib.ceil(x)
    assert lo.is_integer() and hi.is_integer()
    assert lo <= x <= hi
    assert hi - lo in (0.0, 1.0)


def test_floor_ceil_pass_through_non_finite():
    assert mathlib.floor(math.inf) == math.inf
    assert math.isnan(mathlib.ceil(math.nan))


def test_round_half_away_from_zero():
    assert mathlib.round_half_away(0.5) == 1.0
    assert mathlib.round_half_away(-2.5) == -3.0
    assert mathlib.round_half_away(0.49999999999999994) == 0.0


@pytest.mark.parametrize("x", [-5.5, -1.2, 1.2, 3.5, 4.4])
def test_round_is_symmetric(x):
    assert mathlib.round_half_away(-x) == -mathlib.round_half_away(x)
    assert abs(mathlib.round_half_away(x) - x) <= 0.5


def test_absolute():
    assert mathlib.absolute(-4.5) == mathlib.absolute(4.5)
    assert mathlib.absolute(-4.5) >= 0


def test_degrees_radians_round_trip():
    assert mathlib.radians(180.0) == mathlib.PI
    for x in (-90.0, 0.0, 45.0, 360.0):
        assert mathlib.isclose(mathlib.degrees(mathlib.radians(x)), x)


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.0, 0.7, 3.0])
def test_trig_identities(x):
    assert mathlib.isclose(mathlib.sin(x) ** 2 + mathlib.cos(x) ** 2, 1.0)
    assert mathlib.isclose(mathlib.atan(mathlib.tan(x)) % math.pi,
                           x % math.pi) or abs(x) > math.pi / 2


@pytest.mark.parametrize("x", [-0.9, -0.3, 0.0, 0.4, 0.99])
def test_inverse_trig_round_trip(x):
    assert mathlib.isclose(mathlib.sin(mathlib.asin(x)), x)
    assert mathlib.isclose(mathlib.cos(mathlib.acos(x)), x)


def test_trig_domain_errors_give_nan():
    assert math.isnan(mathlib.asin(2.0))
    assert math.isnan(mathlib.acos(-2.0))
    assert math.isnan(mathlib.sin(math.inf))


def test_atan2_matches_atan_in_first_quadrant():
    assert mathlib.isclose(mathlib.atan2(1.0, 2.0), mathlib.atan(0.5))


@pytest.mark.parametrize("x", [-1.5, 0.0, 0.5, 2.0])
def test_hyperbolic_identities(x):
    assert mathlib.isclose(mathlib.cosh(x) ** 2 - mathlib.sinh(x) ** 2, 1.0)
    assert mathlib.isclose(mathlib.asinh(mathlib.sinh(x)), x)
    assert mathlib.isclose(mathlib.tanh(x), mathlib.sinh(x) / mathlib.cosh(x))


def test_hyperbolic_edges():
    assert mathlib.sinh(1000.0) == math.inf
    assert mathlib.sinh(-1000.0) == -math.inf
    assert mathlib.cosh(1000.0) == math.inf
    assert math.isnan(mathlib.acosh(0.5))
    assert mathlib.atanh(1.0) == math.inf
    assert mathlib.atanh(-1.0) == -math.inf
    assert math.isnan(mathlib.atanh(2.0))
    assert mathlib.isclose(mathlib.acosh(mathlib.cosh(1.3)), 1.3)
    assert mathlib.isclose(mathlib.atanh(mathlib.tanh(0.4)), 0.4)


@pytest.mark.parametrize("x", [0.1, 1.0, 7.0, 1000.0])
def test_exp_log_round_trip(x):
    assert mathlib.isclose(mathlib.exp(mathlib.log(x)), x)
    assert mathlib.isclose(mathlib.power(10.0, mathlib.log10(x)), x)
    assert mathlib.isclose(mathlib.power(2.0, mathlib.log2(x)), x)


def test_log_edges():
    assert mathlib.log(0.0) == -math.inf
    assert mathlib.log10(0.0) == -math.inf
    assert math.isnan(mathlib.log2(-1.0))
    assert mathlib.exp(1000.0) == math.inf
    assert mathlib.log(mathlib.E) == pytest.approx(1.0)