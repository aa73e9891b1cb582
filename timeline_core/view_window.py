# timeline_core/view_window.py

from __future__ import annotations
from dataclasses import replace
from datetime import timedelta
from typing import List, Tuple, Union

from .config import DAY_VIEW, KIOSK_VIEW
from .models import DayViewState, HourTick, WindowViewState

ViewState = Union[DayViewState, WindowViewState]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def max_start_hour(state: WindowViewState) -> int:
    return 24 - state.visible_hours


def centered_start_hour(current_hour: int, visible_hours: int) -> int:
    return _clamp(current_hour - visible_hours // 2, 0, 24 - visible_hours)


def initial_day_view(clock) -> DayViewState:
    return DayViewState(current_date=clock.now().date())


def initial_window_view(clock, visible_hours: int = KIOSK_VIEW["VISIBLE_HOURS"]) -> WindowViewState:
    now = clock.now()
    return WindowViewState(
        current_date=now.date(),
        view_start_hour=centered_start_hour(now.hour, visible_hours),
        visible_hours=visible_hours,
    )


def advance_day(state: ViewState, days: int = 1) -> ViewState:
    return replace(state, current_date=state.current_date + timedelta(days=days))


def jump_to_today(state: ViewState, clock) -> ViewState:
    now = clock.now()
    if isinstance(state, WindowViewState):
        return replace(
            state,
            current_date=now.date(),
            view_start_hour=centered_start_hour(now.hour, state.visible_hours),
        )
    return replace(state, current_date=now.date())


def scroll(state: WindowViewState, hours: int = KIOSK_VIEW["SCROLL_STEP_HOURS"]) -> WindowViewState:
    new_start = _clamp(state.view_start_hour + hours, 0, max_start_hour(state))
    if new_start == state.view_start_hour:
        return state
    return replace(state, view_start_hour=new_start)


def jump_to_now(state: WindowViewState, clock) -> WindowViewState:
    return replace(state, view_start_hour=centered_start_hour(clock.now().hour, state.visible_hours))


def can_scroll_back(state: WindowViewState) -> bool:
    return state.view_start_hour > 0


def can_scroll_forward(state: WindowViewState) -> bool:
    return state.view_start_hour < max_start_hour(state)


def visible_range(state: ViewState) -> Tuple[int, int]:
    if isinstance(state, WindowViewState):
        return state.view_start_hour, state.view_start_hour + state.visible_hours
    return 0, DAY_VIEW["SPAN_HOURS"]


def range_label(state: ViewState) -> str:
    start, end = visible_range(state)
    return f"{start:02d}:00 - {end:02d}:00"


def hour_ticks(state: ViewState) -> List[HourTick]:
    start, end = visible_range(state)
    span = end - start
    every = KIOSK_VIEW["MAJOR_TICK_EVERY"] if isinstance(state, WindowViewState) else DAY_VIEW["MAJOR_TICK_EVERY"]
    return [
        HourTick(
            hour=hour,
            label=f"{hour:02d}:00",
            left_percent=(hour - start) / span * 100,
            is_major=hour % every == 0,
        )
        for hour in range(start, end)
    ]
