"""Reusable UI components for the Beyond The Apex dashboard."""

from .chart_panel import render_chart_panel, unmount_chart_panel
from .driver_legend import legend_html, render_driver_legend
from .query_form import render_query_form

__all__ = [
    "legend_html",
    "render_chart_panel",
    "render_driver_legend",
    "render_query_form",
    "unmount_chart_panel",
]
