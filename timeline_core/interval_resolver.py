# timeline_core/interval_resolver.py

from __future__ import annotations
import logging
import re
from typing import Optional

from .config import NO_TIME_FALLBACK_FULL_DAY, NO_TIME_FALLBACK_MINIMAL, NO_TIME_FALLBACKS
from .models import (
    SOURCE_ARRIVAL_ONLY,
    SOURCE_BOTH,
    SOURCE_DEPARTURE_ONLY,
    SOURCE_NONE,
    Event,
    TimeInterval,
)

logger = logging.getLogger(__name__)

MIN_BLOCK_HOURS = 1.0

CLOCK_PATTERN = re.compile(r'([0-9]{1,2}):([0-9]{2})(?::[0-9]{2})?')


def parse_clock_hours(value: Optional[str]) -> Optional[float]:
    """'HH:MM' (optionally 'HH:MM:SS') -> fractional hours, or None when absent/malformed."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    match = CLOCK_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Ignoring clock value not in HH:MM form: %r", value)
        return None
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        logger.debug("Ignoring out-of-range clock value: %r", value)
        return None
    return hours + minutes / 60


def _fallback_interval(no_time_fallback: str) -> TimeInterval:
    if no_time_fallback == NO_TIME_FALLBACK_MINIMAL:
        return TimeInterval(0.0, MIN_BLOCK_HOURS, SOURCE_NONE)
    if no_time_fallback == NO_TIME_FALLBACK_FULL_DAY:
        return TimeInterval(0.0, 24.0, SOURCE_NONE)
    raise ValueError(f"no_time_fallback must be one of {NO_TIME_FALLBACKS}, got {no_time_fallback!r}")


def resolve_interval(event: Event, no_time_fallback: str = NO_TIME_FALLBACK_MINIMAL) -> TimeInterval:
    """
    Time data of one movement -> [start, end) in hours of the day.
      1) arrival and departure -> [arrival, departure); overnight or equal -> 1h block
      2) departure only -> 1h block from departure
      3) arrival only -> 1h block from arrival
      4) neither -> no_time_fallback ("minimal" = [0, 1), "full_day" = [0, 24))
    Window clamping is left to the projector.
    """
    if no_time_fallback not in NO_TIME_FALLBACKS:
        raise ValueError(f"no_time_fallback must be one of {NO_TIME_FALLBACKS}, got {no_time_fallback!r}")

    arrival = parse_clock_hours(event.arrival_time)
    departure = parse_clock_hours(event.departure_time)

    if arrival is not None and departure is not None:
        end = departure
        if end <= arrival:
            end = arrival + MIN_BLOCK_HOURS
        return TimeInterval(arrival, end, SOURCE_BOTH)
    if departure is not None:
        return TimeInterval(departure, departure + MIN_BLOCK_HOURS, SOURCE_DEPARTURE_ONLY)
    if arrival is not None:
        return TimeInterval(arrival, arrival + MIN_BLOCK_HOURS, SOURCE_ARRIVAL_ONLY)
    return _fallback_interval(no_time_fallback)
