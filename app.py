import logging
import os
from datetime import timedelta

import pandas as pd
import streamlit as st

from timeline_core.charts import build_timeline_figure
from timeline_core.clock import SystemClock
from timeline_core.config import TIMELINE_CONFIG
from timeline_core.data_loader import events_to_dataframe, load_events
from timeline_core.engine import compute_timeline, events_by_id
from timeline_core.palette import DAY_PALETTE, STATUS_LABELS
from timeline_core.view_window import advance_day, hour_ticks, initial_day_view, jump_to_today

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- Page config ---
st.set_page_config(page_title="Calendário Operacional", layout="wide")

CLOCK = SystemClock()
DATA_PATH = os.environ.get("GH_TIMELINE_DATA", TIMELINE_CONFIG["DATA_PATH"])


@st.cache_data
def load_data(path):
    """Movement list for the whole base. None when the file is missing or malformed."""
    try:
        return load_events(path)
    except FileNotFoundError:
        st.error(f"Arquivo de movimentos não encontrado: '{path}'. Rode 'python generate_data.py' primeiro.")
        return None
    except ValueError as e:
        st.error(f"Arquivo de movimentos inválido: {e}")
        return None


def conflict_table(events, result):
    rows = []
    by_id = events_by_id(events)
    for row in result.groups:
        for bar in row.bars:
            if not bar.is_conflict:
                continue
            event = by_id[bar.event_id]
            rows.append({
                'aircraft': row.resource_key,
                'model': row.resource_label,
                'route': f"{event.origin or '-'} → {event.destination or '-'}",
                'eta': event.arrival_time or '--:--',
                'etd': event.departure_time or '--:--',
                'status': STATUS_LABELS.get(event.status, event.status),
            })
    return pd.DataFrame(rows)


# --- Session state ---
if 'day_view' not in st.session_state:
    st.session_state.day_view = initial_day_view(CLOCK)
if 'day_picker' not in st.session_state:
    st.session_state.day_picker = st.session_state.day_view.current_date


def set_day_view(view):
    # keep the picker on the displayed day
    st.session_state.day_view = view
    st.session_state.day_picker = view.current_date


def go_prev_day():
    set_day_view(advance_day(st.session_state.day_view, -1))


def go_today():
    set_day_view(jump_to_today(st.session_state.day_view, CLOCK))


def go_next_day():
    set_day_view(advance_day(st.session_state.day_view, 1))


def on_date_picked():
    view = st.session_state.day_view
    picked = st.session_state.day_picker
    if picked is not None:
        st.session_state.day_view = advance_day(view, (picked - view.current_date).days)


events = load_data(DATA_PATH)
if events is None:
    st.stop()

st.title("Calendário Operacional")

# --- Sidebar ---
st.sidebar.header("Navegação")
nav_prev, nav_today, nav_next = st.sidebar.columns(3)
nav_prev.button("◀", key="prev_day", on_click=go_prev_day)
nav_today.button("Hoje", key="today", on_click=go_today)
nav_next.button("▶", key="next_day", on_click=go_next_day)

st.sidebar.date_input("Data:", key="day_picker", on_change=on_date_picked)

st.sidebar.markdown("---")
if st.sidebar.button("Recarregar dados"):
    load_data.clear()
    st.rerun()


@st.fragment(run_every=timedelta(milliseconds=TIMELINE_CONFIG["CLOCK_TICK_MS"]))
def timeline_panel():
    view = st.session_state.day_view
    result = compute_timeline(events, view, CLOCK)

    st.subheader(view.current_date.strftime('%d/%m/%Y'))
    fig = build_timeline_figure(
        result,
        hour_ticks(view),
        events_by_id(events),
        palette=DAY_PALETTE,
    )
    st.plotly_chart(fig, width="stretch")

    col1, col2, col3 = st.columns(3)
    col1.metric("Aeronaves", f"{len(result.resource_keys)}")
    col2.metric("Movimentos", f"{sum(len(g.bars) for g in result.groups)}")
    col3.metric("Em conflito", f"{len(result.conflicts)}")

    if result.conflicts:
        st.warning(f"**{len(result.conflicts)} movimentos** com sobreposição de horário na mesma aeronave.")
        st.dataframe(conflict_table(events, result).rename(columns={
            'aircraft': 'Aeronave',
            'model': 'Modelo',
            'route': 'Rota',
            'eta': 'ETA',
            'etd': 'ETD',
            'status': 'Status',
        }), width="stretch", hide_index=True)
    elif result.groups:
        st.success("Nenhum conflito de aeronave nesta data.")
    else:
        st.info("Nenhuma operação programada para esta data.")


timeline_panel()

with st.expander("Todos os movimentos"):
    st.dataframe(events_to_dataframe(events), width="stretch", hide_index=True)
