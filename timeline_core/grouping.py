# timeline_core/grouping.py

from __future__ import annotations
from datetime import date
from typing import Dict, Iterable, List, Union

from .models import Event, ResourceGroup


def _date_key(target: Union[date, str]) -> str:
    if isinstance(target, date):
        return target.isoformat()
    return str(target)


def filter_events_for_date(events: Iterable[Event], target: Union[date, str]) -> List[Event]:
    """Movements touching `target` on arrival OR departure."""
    key = _date_key(target)
    return [e for e in events if e.arrival_date == key or e.departure_date == key]


def group_by_resource(events: Iterable[Event]) -> List[ResourceGroup]:
    """Partition by exact resource_key, keys in first-seen order, events in input order."""
    groups: Dict[str, ResourceGroup] = {}
    for event in events:
        group = groups.get(event.resource_key)
        if group is None:
            group = ResourceGroup(resource_key=event.resource_key, resource_label=event.resource_label)
            groups[event.resource_key] = group
        group.events.append(event)
    return list(groups.values())
