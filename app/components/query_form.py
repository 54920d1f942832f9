"""Session query form: year, race, session and driver list."""

from __future__ import annotations

import streamlit as st

from apex.client import TelemetryQuery
from apex.config import Settings
from apex.utils import normalize_driver_codes

SESSIONS = [
    "Qualifying",
    "Race",
    "Sprint",
    "Sprint Qualifying",
    "Practice 1",
    "Practice 2",
    "Practice 3",
]


def render_query_form(settings: Settings, loading: bool) -> TelemetryQuery | None:
    """Render the controls row. Returns a query only on submit with valid input."""
    default_session = (
        SESSIONS.index(settings.default_session) if settings.default_session in SESSIONS else 0
    )
    with st.form("telemetry_query", border=False):
        year_col, race_col, session_col, drivers_col, btn_col = st.columns([1, 2, 2, 3, 2])
        with year_col:
            year = st.number_input(
                "Year", min_value=2018, max_value=2100, value=settings.default_year, step=1
            )
        with race_col:
            race = st.text_input("Race", value=settings.default_race)
        with session_col:
            session = st.selectbox("Session", SESSIONS, index=default_session)
        with drivers_col:
            drivers = st.text_input(
                "Drivers",
                value=settings.default_drivers,
                help="Comma-separated driver codes. The first driver is the distance reference.",
            )
        with btn_col:
            st.markdown('<div class="form-button-spacer"></div>', unsafe_allow_html=True)
            submitted = st.form_submit_button(
                "ANALYZING…" if loading else "Analyze Telemetry",
                disabled=loading,
                type="primary",
                use_container_width=True,
            )

    if not submitted:
        return None
    codes = normalize_driver_codes(drivers)
    if not codes:
        st.warning("Enter at least one driver code, e.g. VER, LEC.")
        return None
    return TelemetryQuery(year=int(year), race=race.strip(), session=session, drivers=codes)
