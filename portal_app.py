import logging
import os
from datetime import timedelta

import pandas as pd
import streamlit as st

from timeline_core.charts import CAPTION_ROUTE, build_timeline_figure
from timeline_core.clock import SystemClock
from timeline_core.config import KIOSK_VIEW, TIMELINE_CONFIG
from timeline_core.data_loader import load_events
from timeline_core.engine import compute_timeline, events_by_id
from timeline_core.grouping import filter_events_for_date
from timeline_core.palette import KIOSK_LEGEND_STATUSES, KIOSK_PALETTE, NOW_LEGEND_LABEL, STATUS_LABELS, legend
from timeline_core.view_window import (
    advance_day,
    can_scroll_back,
    can_scroll_forward,
    hour_ticks,
    initial_window_view,
    jump_to_now,
    jump_to_today,
    range_label,
    scroll,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Painel de Voos", layout="wide")

CLOCK = SystemClock()
DATA_PATH = os.environ.get("GH_TIMELINE_DATA", TIMELINE_CONFIG["DATA_PATH"])
STEP = KIOSK_VIEW["SCROLL_STEP_HOURS"]


@st.cache_data(ttl=60)
def load_data(path):
    try:
        return load_events(path)
    except FileNotFoundError:
        st.error(f"Arquivo de movimentos não encontrado: '{path}'.")
        return None
    except ValueError as e:
        st.error(f"Arquivo de movimentos inválido: {e}")
        return None


def movement_table(events, day):
    rows = [{
        'aircraft': e.resource_key,
        'model': e.resource_label,
        'route': f"{e.origin or '-'} → {e.destination or '-'}",
        'arrival': (e.arrival_time or '')[:5] or '--:--',
        'departure': (e.departure_time or '')[:5] or '--:--',
        'status': STATUS_LABELS.get(e.status, e.status),
    } for e in filter_events_for_date(events, day)]
    return pd.DataFrame(rows)


if 'kiosk_view' not in st.session_state:
    st.session_state.kiosk_view = initial_window_view(CLOCK, KIOSK_VIEW["VISIBLE_HOURS"])

events = load_data(DATA_PATH)
if events is None:
    st.stop()

view = st.session_state.kiosk_view
st.title("Painel de Voos")

# --- Header controls: date navigation | hour window ---
col_prev, col_today, col_next, col_date, col_range, col_back, col_now, col_fwd = st.columns([1, 1, 1, 3, 3, 1, 1, 1])
if col_prev.button("◀", key="kiosk_prev_day"):
    st.session_state.kiosk_view = advance_day(view, -1)
    st.rerun()
if col_today.button("Hoje", key="kiosk_today"):
    st.session_state.kiosk_view = jump_to_today(view, CLOCK)
    st.rerun()
if col_next.button("▶", key="kiosk_next_day"):
    st.session_state.kiosk_view = advance_day(view, 1)
    st.rerun()
col_date.markdown(f"**{view.current_date.strftime('%d/%m/%Y')}**")
col_range.markdown(f"`{range_label(view)}`")
if col_back.button("⏪", key="kiosk_back", disabled=not can_scroll_back(view)):
    st.session_state.kiosk_view = scroll(view, -STEP)
    st.rerun()
if col_now.button("Agora", key="kiosk_now"):
    st.session_state.kiosk_view = jump_to_now(view, CLOCK)
    st.rerun()
if col_fwd.button("⏩", key="kiosk_fwd", disabled=not can_scroll_forward(view)):
    st.session_state.kiosk_view = scroll(view, STEP)
    st.rerun()


@st.fragment(run_every=timedelta(milliseconds=TIMELINE_CONFIG["CLOCK_TICK_MS"]))
def kiosk_timeline():
    current = st.session_state.kiosk_view
    result = compute_timeline(events, current, CLOCK)
    fig = build_timeline_figure(
        result,
        hour_ticks(current),
        events_by_id(events),
        palette=KIOSK_PALETTE,
        dark=True,
        show_conflicts=False,
        caption=CAPTION_ROUTE,
    )
    st.plotly_chart(fig, width="stretch")
    entries = [token.label for token in legend(KIOSK_PALETTE, include_conflict=False, statuses=KIOSK_LEGEND_STATUSES)]
    st.caption(" · ".join(entries + [NOW_LEGEND_LABEL]))


kiosk_timeline()

st.markdown("---")
table = movement_table(events, view.current_date)
if table.empty:
    st.info("Nenhum voo neste período.")
else:
    st.dataframe(table.rename(columns={
        'aircraft': 'Aeronave',
        'model': 'Modelo',
        'route': 'Rota',
        'arrival': 'Hora Chegada',
        'departure': 'Hora Partida',
        'status': 'Status',
    }), width="stretch", hide_index=True)
