# timeline_core/palette.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence

STATUS_SCHEDULED = "scheduled"
STATUS_ARRIVED = "arrived"
STATUS_DEPARTED = "departed"
STATUS_DELAYED = "delayed"
STATUS_CANCELLED = "cancelled"
STATUS_KEYS = (STATUS_SCHEDULED, STATUS_ARRIVED, STATUS_DEPARTED, STATUS_DELAYED, STATUS_CANCELLED)
# the public board does not advertise cancellations
KIOSK_LEGEND_STATUSES = (STATUS_SCHEDULED, STATUS_ARRIVED, STATUS_DEPARTED, STATUS_DELAYED)
NOW_LEGEND_LABEL = "Hora Atual"

STATUS_LABELS = {
    STATUS_SCHEDULED: "Programado",
    STATUS_ARRIVED: "Chegou",
    STATUS_DEPARTED: "Partiu",
    STATUS_DELAYED: "Atrasado",
    STATUS_CANCELLED: "Cancelado",
}

CONFLICT_KEY = "conflict"
UNKNOWN_KEY = "unknown"


@dataclass(frozen=True)
class ColorToken:
    key: str
    label: str
    fill: str
    border: str


def _token(key, fill, border, label=None):
    return ColorToken(key=key, label=label or STATUS_LABELS.get(key, key), fill=fill, border=border)


# Internal day view: theme roles (primary / success / info / warning / destructive)
DAY_PALETTE: Dict[str, ColorToken] = {
    STATUS_SCHEDULED: _token(STATUS_SCHEDULED, "rgba(37, 99, 235, 0.8)", "#2563EB"),
    STATUS_ARRIVED: _token(STATUS_ARRIVED, "rgba(22, 163, 74, 0.8)", "#16A34A"),
    STATUS_DEPARTED: _token(STATUS_DEPARTED, "rgba(14, 165, 233, 0.8)", "#0EA5E9"),
    STATUS_DELAYED: _token(STATUS_DELAYED, "rgba(245, 158, 11, 0.8)", "#F59E0B"),
    STATUS_CANCELLED: _token(STATUS_CANCELLED, "rgba(220, 38, 38, 0.8)", "#DC2626"),
    CONFLICT_KEY: _token(CONFLICT_KEY, "rgba(220, 38, 38, 0.9)", "#991B1B", label="Conflito"),
    UNKNOWN_KEY: _token(UNKNOWN_KEY, "rgba(148, 163, 184, 0.6)", "#64748B", label="Outro"),
}

# Public kiosk: translucent fills on a dark background
KIOSK_PALETTE: Dict[str, ColorToken] = {
    STATUS_SCHEDULED: _token(STATUS_SCHEDULED, "rgba(59, 130, 246, 0.3)", "#60A5FA"),
    STATUS_ARRIVED: _token(STATUS_ARRIVED, "rgba(34, 197, 94, 0.3)", "#4ADE80"),
    STATUS_DEPARTED: _token(STATUS_DEPARTED, "rgba(168, 85, 247, 0.3)", "#C084FC"),
    STATUS_DELAYED: _token(STATUS_DELAYED, "rgba(245, 158, 11, 0.3)", "#FBBF24"),
    STATUS_CANCELLED: _token(STATUS_CANCELLED, "rgba(239, 68, 68, 0.3)", "#F87171"),
    CONFLICT_KEY: _token(CONFLICT_KEY, "rgba(239, 68, 68, 0.6)", "#EF4444", label="Conflito"),
    UNKNOWN_KEY: _token(UNKNOWN_KEY, "rgba(107, 114, 128, 0.3)", "#9CA3AF", label="Outro"),
}


def color_for(status: str, is_conflict: bool, palette: Dict[str, ColorToken] = DAY_PALETTE) -> ColorToken:
    """Colour of a bar. A conflict wins over any status; unknown statuses get the muted token."""
    if is_conflict:
        return palette[CONFLICT_KEY]
    return palette.get(status, palette[UNKNOWN_KEY])


def legend(palette: Dict[str, ColorToken] = DAY_PALETTE, include_conflict: bool = True,
           statuses: Sequence[str] = STATUS_KEYS) -> List[ColorToken]:
    keys = list(statuses)
    if include_conflict:
        keys.append(CONFLICT_KEY)
    return [palette[k] for k in keys]
