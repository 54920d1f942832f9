"""Shared driver legend: one colour chip per active driver."""

from __future__ import annotations

import html

import streamlit as st
from charts import _hex_to_rgba

from apex.projection import driver_color
from apex.store import TelemetryStore
from apex.utils import format_lap_time


def legend_html(store: TelemetryStore) -> str:
    present = set(store.drivers())
    chips = []
    for idx, code in enumerate(store.active_drivers):
        label = html.escape(code)
        color = driver_color(idx)
        if code in present:
            detail = format_lap_time(store.lap_time(code))
        else:
            detail = "no data"
        chips.append(
            f'<span class="driver-chip" style="border-color:{color};'
            f'background:{_hex_to_rgba(color, 0.12)};">'
            f'<span class="driver-swatch" style="background:{color};"></span>'
            f"<b>{label}</b><span class=\"driver-lap\">{detail}</span></span>"
        )
    return f'<div class="driver-legend">{"".join(chips)}</div>'


def render_driver_legend(store: TelemetryStore) -> None:
    if not store.active_drivers:
        return
    st.markdown(legend_html(store), unsafe_allow_html=True)
