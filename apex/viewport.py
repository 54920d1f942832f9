"""Shared zoom/pan contract for every telemetry chart.

Each chart owns a :class:`ViewportHandle`. A horizontal box drag on the
chart reaches the server as a selection event and is routed through
:meth:`ViewportHandle.drag`: a plain drag zooms to the box, a drag in pan
mode slides the visible range. Every change bumps the handle revision,
which feeds the figure's ``uirevision`` and the widget key, so the browser
redraws from the server-side range and the spent selection is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportState:
    """Visible x-range; ``None`` means the full data extent."""

    x_range: tuple[float, float] | None = None

    @property
    def is_full_extent(self) -> bool:
        return self.x_range is None


FULL_EXTENT = ViewportState()


def box_x_extent(selection: Mapping[str, Any] | None) -> tuple[float, float] | None:
    """x start/end of the last box in a Streamlit Plotly selection event."""
    if not selection:
        return None
    boxes = (selection.get("selection") or {}).get("box") or []
    if not boxes:
        return None
    xs = boxes[-1].get("x") or []
    if len(xs) != 2:
        return None
    try:
        return float(xs[0]), float(xs[1])
    except (TypeError, ValueError):
        return None


class ViewportHandle:
    def __init__(self, chart_id: str) -> None:
        self.chart_id = chart_id
        self.revision = 0
        self._state = FULL_EXTENT

    @property
    def state(self) -> ViewportState:
        return self._state

    def _set(self, state: ViewportState) -> None:
        if state != self._state:
            self._state = state
            self.revision += 1

    def zoom(self, x0: float, x1: float) -> None:
        lo, hi = sorted((float(x0), float(x1)))
        if lo == hi:
            return
        self._set(ViewportState((lo, hi)))

    def pan(self, dx: float) -> None:
        if self._state.x_range is None:
            return
        lo, hi = self._state.x_range
        self._set(ViewportState((lo + dx, hi + dx)))

    def drag(self, x_start: float, x_end: float, shift: bool = False) -> None:
        """Route a horizontal drag: plain drag zooms, shift-drag pans.

        Panning follows the pointer, so dragging right reveals lower distances.
        """
        if shift:
            self.pan(x_start - x_end)
        else:
            self.zoom(x_start, x_end)

    def reset_viewport(self) -> None:
        self._state = FULL_EXTENT
        self.revision += 1

    def uirevision(self, fetch_id: int) -> str:
        return f"{fetch_id}:{self.chart_id}:{self.revision}"

    def widget_key(self, fetch_id: int) -> str:
        """Chart widget key; a new key drops the spent box selection."""
        return f"chart_{self.chart_id}_{fetch_id}_{self.revision}"

    def apply_selection(self, selection: Mapping[str, Any] | None, shift: bool = False) -> bool:
        """Feed a box selection from the chart widget through :meth:`drag`."""
        extent = box_x_extent(selection)
        if extent is None:
            return False
        before = self.revision
        self.drag(*extent, shift=shift)
        return self.revision != before


class ViewportController:
    """Registry of mounted chart handles plus the uniform interaction config."""

    def __init__(self) -> None:
        self._handles: dict[str, ViewportHandle] = {}

    def register(self, chart_id: str) -> ViewportHandle:
        handle = self._handles.get(chart_id)
        if handle is None:
            handle = ViewportHandle(chart_id)
            self._handles[chart_id] = handle
        return handle

    def unregister(self, chart_id: str) -> None:
        self._handles.pop(chart_id, None)

    def handle(self, chart_id: str) -> ViewportHandle | None:
        return self._handles.get(chart_id)

    def mounted(self) -> list[str]:
        return list(self._handles)

    def reset_all(self, chart_ids: list[str] | None = None) -> None:
        """Reset every mounted chart; ids that are not mounted are skipped."""
        targets = list(self._handles) if chart_ids is None else chart_ids
        for chart_id in targets:
            handle = self._handles.get(chart_id)
            if handle is None:
                logger.debug("Skipping reset for unmounted chart %s", chart_id)
                continue
            handle.reset_viewport()

    @staticmethod
    def interaction_layout() -> dict[str, Any]:
        # Horizontal box drags come back to the server as selections; y is
        # never dragged and is fitted to the visible slice by the chart.
        return {
            "dragmode": "select",
            "selectdirection": "h",
            "hovermode": "x unified",
            "xaxis": {"fixedrange": False},
            "yaxis": {"fixedrange": True, "autorange": True},
        }

    @staticmethod
    def plot_config() -> dict[str, Any]:
        return {
            "scrollZoom": False,
            "doubleClick": "reset",
            "displaylogo": False,
            "modeBarButtonsToRemove": ["lasso2d", "zoom2d"],
        }
