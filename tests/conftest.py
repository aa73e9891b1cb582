import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from timeline_core.clock import FixedClock
from timeline_core.models import Event

TODAY = "2024-05-10"


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 5, 10, 14, 30))


@pytest.fixture
def make_event():
    counter = {"n": 0}

    def _make(resource_key="PT-ABC", arrival_time=None, departure_time=None, **kwargs):
        counter["n"] += 1
        kwargs.setdefault("id", f"ev{counter['n']}")
        kwargs.setdefault("resource_label", "Citation CJ3")
        kwargs.setdefault("arrival_date", TODAY if arrival_time else None)
        kwargs.setdefault("departure_date", TODAY if departure_time else None)
        return Event(
            resource_key=resource_key,
            arrival_time=arrival_time,
            departure_time=departure_time,
            **kwargs,
        )

    return _make
