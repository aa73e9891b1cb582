from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import FrozenSet, List, Optional

SOURCE_BOTH = "both"
SOURCE_DEPARTURE_ONLY = "departure-only"
SOURCE_ARRIVAL_ONLY = "arrival-only"
SOURCE_NONE = "none"


@dataclass(frozen=True)
class Event:
    id: str
    resource_key: str            # aircraft prefix / registration
    resource_label: str = ""     # aircraft model
    arrival_date: Optional[str] = None    # YYYY-MM-DD
    arrival_time: Optional[str] = None    # HH:MM
    departure_date: Optional[str] = None
    departure_time: Optional[str] = None
    status: str = "scheduled"
    origin: Optional[str] = None
    destination: Optional[str] = None


@dataclass(frozen=True)
class TimeInterval:
    start: float   # fractional hours, [0, 24)
    end: float     # always > start
    source: str = SOURCE_BOTH


@dataclass
class ResourceGroup:
    resource_key: str
    resource_label: str
    events: List[Event] = field(default_factory=list)


@dataclass(frozen=True)
class DayViewState:
    current_date: date


@dataclass(frozen=True)
class WindowViewState:
    current_date: date
    view_start_hour: int = 0
    visible_hours: int = 12

    def __post_init__(self):
        if not 1 <= self.visible_hours <= 24:
            raise ValueError(f"visible_hours must be within 1..24, got {self.visible_hours}")
        if not 0 <= self.view_start_hour <= 24 - self.visible_hours:
            raise ValueError(
                f"view_start_hour {self.view_start_hour} outside [0, {24 - self.visible_hours}]"
            )


@dataclass(frozen=True)
class TimelineWindow:
    start_hour: float
    span_hours: float
    min_width_percent: float
    clip: bool = True


@dataclass(frozen=True)
class Projection:
    left_percent: float
    width_percent: float


@dataclass(frozen=True)
class HourTick:
    hour: int
    label: str
    left_percent: float
    is_major: bool = False


@dataclass(frozen=True)
class RenderDescriptor:
    event_id: str
    left_percent: float
    width_percent: float
    is_conflict: bool
    status_key: str


@dataclass(frozen=True)
class NowMarker:
    percent: float
    label: str   # HH:MM


@dataclass
class ResourceRow:
    resource_key: str
    resource_label: str
    bars: List[RenderDescriptor] = field(default_factory=list)


@dataclass
class TimelineResult:
    groups: List[ResourceRow] = field(default_factory=list)
    conflicts: FrozenSet[str] = frozenset()
    now_marker: Optional[NowMarker] = None
    resource_keys: List[str] = field(default_factory=list)
