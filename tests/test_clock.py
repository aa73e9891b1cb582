import threading
from datetime import datetime, timedelta

import pytest

from timeline_core.clock import FixedClock, SystemClock


def test_system_clock_is_naive():
    assert SystemClock().now().tzinfo is None


def test_fixed_clock_set_and_advance():
    clock = FixedClock(datetime(2024, 5, 10, 14, 30))
    clock.advance(timedelta(minutes=45))
    assert clock.now() == datetime(2024, 5, 10, 15, 15)
    clock.set(datetime(2024, 1, 1))
    assert clock.now() == datetime(2024, 1, 1)


def test_subscription_ticks_until_disposed():
    ticked = threading.Event()
    seen = []

    def on_tick(instant):
        seen.append(instant)
        ticked.set()

    sub = SystemClock().subscribe(10, on_tick)
    try:
        assert ticked.wait(2.0)
    finally:
        sub.dispose()
    assert not sub.active
    assert isinstance(seen[0], datetime)


def test_dispose_is_idempotent_and_context_manager():
    with SystemClock().subscribe(60_000, lambda _now: None) as sub:
        assert sub.active
    assert not sub.active
    sub.dispose()
    assert not sub.active


def test_dispose_on_error_path():
    sub = None
    with pytest.raises(RuntimeError):
        with SystemClock().subscribe(60_000, lambda _now: None) as sub:
            raise RuntimeError("view torn down")
    assert sub is not None and not sub.active


def test_fixed_clock_subscription_reports_fixed_instant():
    instant = datetime(2024, 5, 10, 14, 30)
    got = []
    done = threading.Event()

    def on_tick(now):
        got.append(now)
        done.set()

    with FixedClock(instant).subscribe(10, on_tick):
        assert done.wait(2.0)
    assert got[0] == instant


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        SystemClock().subscribe(0, lambda _now: None)
