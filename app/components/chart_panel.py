"""Stacked metric charts sharing one zoom/pan contract."""

from __future__ import annotations

import streamlit as st
from charts import METRIC_CHARTS, build_telemetry_chart

from apex.state import AppState
from apex.viewport import ViewportController


def unmount_chart_panel(viewports: ViewportController) -> None:
    for chart in METRIC_CHARTS:
        viewports.unregister(chart.chart_id)


def render_chart_panel(state: AppState, viewports: ViewportController) -> None:
    if not state.has_data:
        unmount_chart_panel(viewports)
        return

    cap_col, mode_col = st.columns([5, 1.5])
    with cap_col:
        st.markdown(
            '<p class="chart-caption">'
            "Drag across a chart to zoom into a stretch of the lap. "
            "With pan mode on, the same drag slides the zoomed view along the lap. "
            "Dashed lines mark the sector boundaries.</p>",
            unsafe_allow_html=True,
        )
    with mode_col:
        # Browser drags carry no modifier keys; this toggle stands in for Shift.
        pan_mode = st.toggle("Pan mode (Shift)", key="viewport_pan_mode")

    for chart in METRIC_CHARTS:
        handle = viewports.register(chart.chart_id)
        head_col, reset_col = st.columns([6, 1])
        with head_col:
            st.markdown(f'<p class="section-header">{chart.title}</p>', unsafe_allow_html=True)
        with reset_col:
            if st.button("⟲ Reset", key=f"reset_{chart.chart_id}"):
                handle.reset_viewport()

        # The last drag on this chart arrives as the widget's selection state.
        handle.apply_selection(
            st.session_state.get(handle.widget_key(state.fetch_id)), shift=pan_mode
        )

        figure = build_telemetry_chart(state.store, chart, handle, state.fetch_id)
        st.plotly_chart(
            figure,
            use_container_width=True,
            config=viewports.plot_config(),
            key=handle.widget_key(state.fetch_id),
            on_select="rerun",
            selection_mode="box",
        )
