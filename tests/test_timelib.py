import time

from turbine import timelib


def test_now_tracks_system_time():
    before = time.time()
    value = timelib.now()
    after = time.time()
    assert before <= value <= after


def test_perf_is_monotonic():
    first = timelib.perf()
    second = timelib.perf()
    assert second >= first


def test_elapsed_from_now_is_small_and_non_negative():
    start = timelib.now()
    result = timelib.elapsed(start)
    assert 0.0 <= result < 5.0


def test_elapsed_from_earlier_start():
    start = timelib.now() - 10.0
    assert timelib.elapsed(start) >= 10.0


def test_sleep_waits_at_least_the_duration():
    start = timelib.perf()
    timelib.sleep(0.02)
    assert timelib.perf() - start >= 0.015


def test_sleep_negative_returns_promptly():
    start = timelib.perf()
    timelib.sleep(-1.0)
    assert timelib.perf() - start < 0.5