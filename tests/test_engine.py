import logging
from datetime import date, datetime

import pytest

from timeline_core.clock import FixedClock
from timeline_core.engine import compute_timeline
from timeline_core.models import DayViewState, WindowViewState

DAY = date(2024, 5, 10)


def test_day_view_pipeline(make_event, clock):
    a = make_event("PT-ABC", arrival_time="10:00", departure_time="11:30", status="arrived")
    b = make_event("PT-ABC", arrival_time="11:00", departure_time="12:00")
    c = make_event("PR-XYZ", arrival_time="11:00", departure_time="12:00")
    elsewhere = make_event("PR-XYZ", arrival_time="11:00", arrival_date="2024-05-11")

    result = compute_timeline([a, b, c, elsewhere], DayViewState(DAY), clock)

    assert result.resource_keys == ["PT-ABC", "PR-XYZ"]
    assert result.conflicts == frozenset({a.id, b.id})
    abc, xyz = result.groups
    assert [bar.event_id for bar in abc.bars] == [a.id, b.id]
    assert [bar.event_id for bar in xyz.bars] == [c.id]
    assert all(bar.is_conflict for bar in abc.bars)
    assert not xyz.bars[0].is_conflict
    assert abc.bars[0].status_key == "arrived"
    assert abc.bars[0].left_percent == pytest.approx(10 / 24 * 100)
    assert abc.bars[0].width_percent == pytest.approx(1.5 / 24 * 100)
    assert result.now_marker.percent == pytest.approx(14.5 / 24 * 100)


def test_now_marker_absent_on_other_day(make_event, clock):
    event = make_event(arrival_time="10:00", arrival_date="2024-05-11")
    result = compute_timeline([event], DayViewState(date(2024, 5, 11)), clock)
    assert result.now_marker is None
    assert len(result.groups) == 1


def test_window_view_drops_hidden_bars_but_keeps_row(make_event, clock):
    early = make_event("PT-ABC", arrival_time="02:00", departure_time="05:00")
    late = make_event("PT-ABC", arrival_time="09:00", departure_time="10:00")
    state = WindowViewState(DAY, view_start_hour=6)

    result = compute_timeline([early, late], state, clock)

    assert result.resource_keys == ["PT-ABC"]
    assert [bar.event_id for bar in result.groups[0].bars] == [late.id]
    assert result.groups[0].bars[0].left_percent == pytest.approx(25.0)


def test_window_view_default_full_day_fallback(make_event, clock):
    untimed = make_event("PT-ABC", arrival_date="2024-05-10")
    state = WindowViewState(DAY, view_start_hour=6)

    result = compute_timeline([untimed], state, clock)
    bar = result.groups[0].bars[0]
    assert bar.left_percent == pytest.approx(0.0)
    assert bar.width_percent == pytest.approx(100.0)


def test_day_view_default_minimal_fallback(make_event, clock):
    untimed = make_event("PT-ABC", arrival_date="2024-05-10")
    bar = compute_timeline([untimed], DayViewState(DAY), clock).groups[0].bars[0]
    assert bar.left_percent == pytest.approx(0.0)
    assert bar.width_percent == pytest.approx(100 / 24)


def test_fallback_override(make_event, clock):
    untimed = make_event("PT-ABC", arrival_date="2024-05-10")
    timed = make_event("PT-ABC", arrival_time="15:00", departure_time="16:00")
    minimal = compute_timeline([untimed, timed], DayViewState(DAY), clock)
    full_day = compute_timeline([untimed, timed], DayViewState(DAY), clock, no_time_fallback="full_day")
    assert minimal.conflicts == frozenset()
    assert full_day.conflicts == frozenset({untimed.id, timed.id})


def test_conflict_detected_even_when_bar_hidden(make_event, clock):
    a = make_event("PT-ABC", arrival_time="01:00", departure_time="03:00")
    b = make_event("PT-ABC", arrival_time="02:00", departure_time="04:00")
    result = compute_timeline([a, b], WindowViewState(DAY, view_start_hour=12), clock)
    assert result.conflicts == frozenset({a.id, b.id})
    assert result.groups[0].bars == []


def test_empty_and_invalid_dates(make_event, clock):
    assert compute_timeline([], DayViewState(DAY), clock).groups == []
    event = make_event(arrival_time="10:00")
    result = compute_timeline([event], DayViewState(date(2030, 1, 1)), clock)
    assert result.groups == [] and result.resource_keys == [] and result.conflicts == frozenset()


def test_idempotent(make_event, clock):
    events = [
        make_event("PT-ABC", arrival_time="10:00", departure_time="11:30"),
        make_event("PT-ABC", arrival_time="11:00", departure_time="12:00"),
    ]
    state = DayViewState(DAY)
    assert compute_timeline(events, state, clock) == compute_timeline(events, state, clock)


def test_clock_drives_now_marker(make_event):
    clock = FixedClock(datetime(2024, 5, 10, 6, 0))
    state = WindowViewState(DAY, view_start_hour=6)
    assert compute_timeline([], state, clock).now_marker.percent == pytest.approx(0.0)
    clock.set(datetime(2024, 5, 10, 19, 0))
    assert compute_timeline([], state, clock).now_marker is None


def test_summary_logged(make_event, clock, caplog):
    event = make_event(arrival_time="10:00")
    with caplog.at_level(logging.DEBUG, logger="timeline_core.engine"):
        compute_timeline([event], DayViewState(DAY), clock)
    assert "1 events, 1 aircraft, 0 conflicting" in caplog.text
