from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

sys.path.append(str(Path(__file__).resolve().parents[1]))

from apex.config import get_settings  # noqa: E402
from apex.state import AppController  # noqa: E402
from apex.viewport import ViewportController  # noqa: E402

st.set_page_config(page_title="Beyond The Apex", page_icon="🏎️", layout="wide")

from components import (  # noqa: E402
    render_chart_panel,
    render_driver_legend,
    render_query_form,
)
from theme import inject_theme  # noqa: E402

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

inject_theme()


# ---------------------------------------------------------------------------
# Session state: one controller and one viewport registry per browser session
# ---------------------------------------------------------------------------
if "app_controller" not in st.session_state:
    st.session_state.app_controller = AppController()
if "viewports" not in st.session_state:
    st.session_state.viewports = ViewportController()

controller: AppController = st.session_state.app_controller
viewports: ViewportController = st.session_state.viewports


# ---------------------------------------------------------------------------
# Header row: branding + Reset All
# ---------------------------------------------------------------------------
_title_col, _reset_col = st.columns([5, 1])
with _title_col:
    st.markdown('<div class="app-title">🏎️ Beyond The Apex</div>', unsafe_allow_html=True)
with _reset_col:
    if st.button("⟲ Reset All", use_container_width=True):
        viewports.reset_all()


# ---------------------------------------------------------------------------
# Controls row: query the analysis service
# ---------------------------------------------------------------------------
query = render_query_form(settings, loading=controller.state.loading)
if query is not None:
    with st.spinner("ANALYZING…"):
        controller.fetch(query)

state = controller.state
if state.error:
    st.markdown(f'<div class="fetch-error">{state.error}</div>', unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Data panel: legend + six metric charts
# ---------------------------------------------------------------------------
render_driver_legend(state.store)
render_chart_panel(state, viewports)

st.markdown(
    '<div class="app-footer">Telemetry from the analysis service &middot; '
    "Built with Streamlit &amp; Plotly</div>",
    unsafe_allow_html=True,
)
