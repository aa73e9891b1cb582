# timeline_core/data_loader.py

from __future__ import annotations
import logging
import os
from typing import Iterator, List

import pandas as pd

from .config import get_event_dataframe_schema
from .models import Event

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {
    "id", "aircraft_prefix", "aircraft_model",
    "arrival_date", "arrival_time", "departure_date", "departure_time", "status",
}
OPTIONAL_COLUMNS = ("origin", "destination")


def parse_movements_df(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Movement CSV is missing required columns: {sorted(missing)}")
    df = df.copy()
    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = None
    return df


def _cell(row, col):
    value = row.get(col)
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def event_dicts_from_df(df: pd.DataFrame) -> Iterator[dict]:
    for _, row in df.iterrows():
        yield {
            "id": _cell(row, "id") or "",
            "resource_key": _cell(row, "aircraft_prefix") or "",
            "resource_label": _cell(row, "aircraft_model") or "",
            "arrival_date": _cell(row, "arrival_date"),
            "arrival_time": _cell(row, "arrival_time"),
            "departure_date": _cell(row, "departure_date"),
            "departure_time": _cell(row, "departure_time"),
            "status": _cell(row, "status") or "scheduled",
            "origin": _cell(row, "origin"),
            "destination": _cell(row, "destination"),
        }


def events_from_dataframe(df: pd.DataFrame) -> List[Event]:
    df = parse_movements_df(df)
    return [Event(**d) for d in event_dicts_from_df(df)]


def read_movements_csv(path: str) -> pd.DataFrame:
    """Read the movement CSV as text columns (times stay 'HH:MM', blanks become NaN)."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Movement file not found: {path}")
    df = pd.read_csv(path, dtype=str)
    if df.empty:
        return get_event_dataframe_schema()
    return parse_movements_df(df)


def load_events(path: str) -> List[Event]:
    events = events_from_dataframe(read_movements_csv(path))
    logger.info("Loaded %d movements from %s", len(events), path)
    return events


def events_to_dataframe(events: List[Event]) -> pd.DataFrame:
    if not events:
        return get_event_dataframe_schema()
    return pd.DataFrame([{
        "id": e.id,
        "aircraft_prefix": e.resource_key,
        "aircraft_model": e.resource_label,
        "origin": e.origin,
        "destination": e.destination,
        "arrival_date": e.arrival_date,
        "arrival_time": e.arrival_time,
        "departure_date": e.departure_date,
        "departure_time": e.departure_time,
        "status": e.status,
    } for e in events])
