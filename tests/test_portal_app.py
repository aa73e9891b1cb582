from datetime import date, datetime
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from timeline_core.models import WindowViewState
from timeline_core.view_window import centered_start_hour

PORTAL = str(Path(__file__).resolve().parents[1] / "portal_app.py")

CSV = """id,aircraft_prefix,aircraft_model,origin,destination,arrival_date,arrival_time,departure_date,departure_time,status
MV1,PT-ABC,Citation CJ3,SBGR,SBRJ,2024-05-10,10:00,2024-05-10,11:30,arrived
MV2,PR-XYZ,Phenom 300,SBKP,SBBR,2024-05-10,13:00,2024-05-10,14:00,cancelled
"""


@pytest.fixture
def movements(tmp_path, monkeypatch):
    path = tmp_path / "movements.csv"
    path.write_text(CSV, encoding="utf-8")
    monkeypatch.setenv("GH_TIMELINE_DATA", str(path))
    return path


def start_portal(start_hour=6, day=date(2024, 5, 10)):
    at = AppTest.from_file(PORTAL, default_timeout=30)
    at.session_state["kiosk_view"] = WindowViewState(day, view_start_hour=start_hour)
    return at.run()


def shown(at):
    return at.session_state["kiosk_view"]


def test_scroll_buttons_move_three_hours(movements):
    at = start_portal(6)
    assert not at.exception

    at.button(key="kiosk_fwd").click().run()
    assert shown(at).view_start_hour == 9
    at.button(key="kiosk_back").click().run()
    at.button(key="kiosk_back").click().run()
    assert shown(at).view_start_hour == 3
    assert shown(at).current_date == date(2024, 5, 10)


def test_scroll_buttons_disabled_at_edges(movements):
    at = start_portal(0)
    assert at.button(key="kiosk_back").disabled
    assert not at.button(key="kiosk_fwd").disabled

    at = start_portal(12)
    assert at.button(key="kiosk_fwd").disabled


def test_now_button_centres_on_current_hour(movements):
    at = start_portal(0)
    before = datetime.now().hour
    at.button(key="kiosk_now").click().run()
    after = datetime.now().hour
    assert shown(at).view_start_hour in {centered_start_hour(before, 12), centered_start_hour(after, 12)}
    assert shown(at).current_date == date(2024, 5, 10)


def test_day_buttons(movements):
    at = start_portal(6)
    at.button(key="kiosk_next_day").click().run()
    assert shown(at).current_date == date(2024, 5, 11)
    assert shown(at).view_start_hour == 6
    at.button(key="kiosk_prev_day").click().run()
    at.button(key="kiosk_prev_day").click().run()
    assert shown(at).current_date == date(2024, 5, 9)

    before = date.today()
    at.button(key="kiosk_today").click().run()
    assert shown(at).current_date in (before, date.today())


def test_legend_and_table(movements):
    at = start_portal(6)
    legend_text = at.caption[0].value
    assert "Hora Atual" in legend_text
    assert "Atrasado" in legend_text
    assert "Cancelado" not in legend_text
    assert len(at.dataframe[0].value) == 2


def test_missing_file_shows_error(tmp_path, monkeypatch):
    monkeypatch.setenv("GH_TIMELINE_DATA", str(tmp_path / "absent.csv"))
    at = AppTest.from_file(PORTAL, default_timeout=30).run()
    assert not at.exception
    assert "não encontrado" in at.error[0].value
