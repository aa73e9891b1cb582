# timeline_core/charts.py

from __future__ import annotations
from typing import Dict, List, Optional

import plotly.graph_objects as go

from .models import Event, HourTick, TimelineResult
from .palette import DAY_PALETTE, ColorToken, color_for

EMPTY_MESSAGE = "Nenhuma operação programada para esta data"

CAPTION_TIMES = "times"     # "10:00 → 11:30", internal view
CAPTION_ROUTE = "route"     # "SBGR→SBRJ", public board
CAPTION_MODES = (CAPTION_TIMES, CAPTION_ROUTE)


def _bar_caption(event: Optional[Event], event_id: str, mode: str = CAPTION_TIMES) -> str:
    if event is None:
        return event_id
    if mode == CAPTION_ROUTE:
        if not (event.origin or event.destination):
            return event.resource_key
        return f"{event.origin or '?'}→{event.destination or '?'}"
    parts = [p for p in (event.arrival_time, event.departure_time) if p]
    return " → ".join(parts) if parts else event.resource_key


def _bar_hover(event: Optional[Event], resource_key: str) -> str:
    if event is None or not (event.origin or event.destination):
        return resource_key
    return f"{resource_key} - {event.origin or '?'} → {event.destination or '?'}"


def build_timeline_figure(
    result: TimelineResult,
    ticks: List[HourTick],
    events: Dict[str, Event],
    palette: Dict[str, ColorToken] = DAY_PALETTE,
    title: str = "",
    dark: bool = False,
    show_conflicts: bool = True,
    caption: str = CAPTION_TIMES,
) -> go.Figure:
    """Gantt of one timeline result; x axis is 0-100 % of the visible window.
    The public board passes show_conflicts=False and colours by status only,
    with caption="route" to label bars by origin and destination."""
    if caption not in CAPTION_MODES:
        raise ValueError(f"caption must be one of {CAPTION_MODES}, got {caption!r}")
    fig = go.Figure()

    # one trace per colour token so the legend lists statuses once
    traces: Dict[str, dict] = {}
    for row in result.groups:
        for bar in row.bars:
            event = events.get(bar.event_id)
            token = color_for(bar.status_key, bar.is_conflict and show_conflicts, palette)
            trace = traces.setdefault(token.key, {"token": token, "x": [], "base": [], "y": [], "text": [], "hover": []})
            trace["x"].append(bar.width_percent)
            trace["base"].append(bar.left_percent)
            trace["y"].append(row.resource_key)
            trace["text"].append(_bar_caption(event, bar.event_id, caption))
            trace["hover"].append(_bar_hover(event, row.resource_key))

    for trace in traces.values():
        token = trace["token"]
        fig.add_trace(go.Bar(
            x=trace["x"],
            base=trace["base"],
            y=trace["y"],
            orientation='h',
            name=token.label,
            text=trace["text"],
            textposition='inside',
            insidetextanchor='start',
            hovertext=trace["hover"],
            hoverinfo='text',
            marker=dict(
                color=token.fill,
                line=dict(color=token.border, width=3 if token.key == "conflict" else 1),
            ),
        ))

    if result.now_marker is not None:
        fig.add_vline(
            x=result.now_marker.percent,
            line=dict(color='#22C55E' if dark else 'red', dash='dash', width=2),
            annotation_text=result.now_marker.label,
            annotation_position='top',
        )

    if not result.groups:
        fig.add_annotation(
            text=EMPTY_MESSAGE, x=50, y=0.5, xref='x', yref='paper',
            showarrow=False, font=dict(color='gray'),
        )

    fig.update_layout(
        title=title,
        barmode='overlay',
        plot_bgcolor='#0d1117' if dark else 'rgba(0,0,0,0)',
        paper_bgcolor='#0d1117' if dark else 'rgba(0,0,0,0)',
        height=max(200, 60 * len(result.groups) + 120),
        margin=dict(l=40, r=20, t=60, b=20),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis=dict(
            range=[0, 100],
            tickvals=[t.left_percent for t in ticks],
            ticktext=[t.label for t in ticks],
            showgrid=True,
            side='top',
        ),
        yaxis=dict(
            categoryorder='array',
            categoryarray=result.resource_keys,
            autorange='reversed',
            title="Aeronave",
        ),
    )
    if dark:
        fig.update_layout(font=dict(color='#E5E7EB'))
    return fig
