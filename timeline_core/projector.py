# timeline_core/projector.py

from __future__ import annotations
from datetime import datetime
from typing import Optional

from .config import day_window, kiosk_window
from .models import NowMarker, Projection, TimeInterval, TimelineWindow, WindowViewState


def window_for(state) -> TimelineWindow:
    if isinstance(state, WindowViewState):
        return kiosk_window(state.view_start_hour, state.visible_hours)
    return day_window()


def project_interval(interval: TimeInterval, window: TimelineWindow) -> Optional[Projection]:
    """Left offset and width (percent of the window span), or None when not visible."""
    if not window.clip:
        left = (interval.start - window.start_hour) / window.span_hours * 100
        width = (interval.end - interval.start) / window.span_hours * 100
        return Projection(left, max(width, window.min_width_percent))

    window_end = window.start_hour + window.span_hours
    visible_start = max(interval.start, window.start_hour)
    visible_end = min(interval.end, window_end)
    if visible_end <= window.start_hour or visible_start >= window_end:
        return None

    left = (visible_start - window.start_hour) / window.span_hours * 100
    width = (visible_end - visible_start) / window.span_hours * 100
    return Projection(left, max(width, window.min_width_percent))


def clock_hours(instant: datetime) -> float:
    return instant.hour + instant.minute / 60


def project_now_marker(now: datetime, state) -> Optional[NowMarker]:
    # only the displayed day can show the current time
    if state.current_date != now.date():
        return None
    window = window_for(state)
    hour = clock_hours(now)
    if hour < window.start_hour or hour > window.start_hour + window.span_hours:
        return None
    percent = (hour - window.start_hour) / window.span_hours * 100
    return NowMarker(percent=percent, label=now.strftime('%H:%M'))
