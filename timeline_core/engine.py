# timeline_core/engine.py

from __future__ import annotations
import logging
from functools import partial
from typing import Iterable, Optional

from .clock import SystemClock
from .config import DAY_VIEW, KIOSK_VIEW
from .grouping import filter_events_for_date, group_by_resource
from .interval_resolver import resolve_interval
from .models import Event, RenderDescriptor, ResourceRow, TimelineResult, WindowViewState
from .overlap import detect_conflicts
from .projector import project_interval, project_now_marker, window_for

logger = logging.getLogger(__name__)


def default_no_time_fallback(view_state) -> str:
    if isinstance(view_state, WindowViewState):
        return KIOSK_VIEW["NO_TIME_FALLBACK"]
    return DAY_VIEW["NO_TIME_FALLBACK"]


def compute_timeline(
    events: Iterable[Event],
    view_state,
    clock=None,
    *,
    no_time_fallback: Optional[str] = None,
) -> TimelineResult:
    """
    Full pipeline for one render:
      date filter -> group by aircraft -> conflicts per aircraft -> projection
    plus the now marker. Everything is rebuilt from the inputs on every call.
    """
    clock = clock or SystemClock()
    fallback = no_time_fallback or default_no_time_fallback(view_state)
    resolve = partial(resolve_interval, no_time_fallback=fallback)

    events_for_date = filter_events_for_date(events, view_state.current_date)
    groups = group_by_resource(events_for_date)
    conflicts = frozenset(detect_conflicts(groups, resolve))
    window = window_for(view_state)

    rows = []
    for group in groups:
        row = ResourceRow(resource_key=group.resource_key, resource_label=group.resource_label)
        for event in group.events:
            projection = project_interval(resolve(event), window)
            if projection is None:
                continue
            row.bars.append(RenderDescriptor(
                event_id=event.id,
                left_percent=projection.left_percent,
                width_percent=projection.width_percent,
                is_conflict=event.id in conflicts,
                status_key=event.status,
            ))
        rows.append(row)

    now_marker = project_now_marker(clock.now(), view_state)
    logger.debug(
        "Timeline for %s: %d events, %d aircraft, %d conflicting",
        view_state.current_date, len(events_for_date), len(groups), len(conflicts),
    )
    return TimelineResult(
        groups=rows,
        conflicts=conflicts,
        now_marker=now_marker,
        resource_keys=[g.resource_key for g in groups],
    )


def events_by_id(events: Iterable[Event]):
    return {e.id: e for e in events}
