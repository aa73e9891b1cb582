# timeline_core/config.py

import pandas as pd

from .models import TimelineWindow

NO_TIME_FALLBACK_MINIMAL = "minimal"
NO_TIME_FALLBACK_FULL_DAY = "full_day"
NO_TIME_FALLBACKS = (NO_TIME_FALLBACK_MINIMAL, NO_TIME_FALLBACK_FULL_DAY)

TIMELINE_CONFIG = {
    "CLOCK_TICK_MS": 60_000,            # now-marker refresh
    "DATA_PATH": "data/movements.csv",
    "DAY_VIEW": {
        "SPAN_HOURS": 24,
        "MIN_WIDTH_PERCENT": 2.0,
        "MAJOR_TICK_EVERY": 6,
        "NO_TIME_FALLBACK": NO_TIME_FALLBACK_MINIMAL,
    },
    "KIOSK_VIEW": {
        "VISIBLE_HOURS": 12,
        "MIN_WIDTH_PERCENT": 3.0,
        "SCROLL_STEP_HOURS": 3,
        "MAJOR_TICK_EVERY": 3,
        "NO_TIME_FALLBACK": NO_TIME_FALLBACK_FULL_DAY,
    },
}

DAY_VIEW = TIMELINE_CONFIG["DAY_VIEW"]
KIOSK_VIEW = TIMELINE_CONFIG["KIOSK_VIEW"]


def day_window():
    return TimelineWindow(
        start_hour=0,
        span_hours=DAY_VIEW["SPAN_HOURS"],
        min_width_percent=DAY_VIEW["MIN_WIDTH_PERCENT"],
        clip=False,
    )


def kiosk_window(view_start_hour, visible_hours=None):
    return TimelineWindow(
        start_hour=view_start_hour,
        span_hours=visible_hours or KIOSK_VIEW["VISIBLE_HOURS"],
        min_width_percent=KIOSK_VIEW["MIN_WIDTH_PERCENT"],
        clip=True,
    )


def get_event_dataframe_schema():
    columns_with_types = {
        'id': str, 'aircraft_prefix': str, 'aircraft_model': str,
        'origin': str, 'destination': str,
        'arrival_date': str, 'arrival_time': str,
        'departure_date': str, 'departure_time': str,
        'status': str,
    }
    return pd.DataFrame({col: pd.Series(dtype=dtype) for col, dtype in columns_with_types.items()})
