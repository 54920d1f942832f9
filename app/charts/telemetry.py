from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import plotly.graph_objects as go

from apex.projection import Dataset, project
from apex.sectors import sector_lines
from apex.store import TelemetryStore
from apex.viewport import ViewportController, ViewportHandle

from ._shared import _CHART_LAYOUT, _GRID, _ZEROLINE, _dash_pattern, _merge_axis


@dataclass(frozen=True)
class MetricChart:
    metric: str
    title: str
    unit: str = ""
    height: int = 300
    tension: float = 0.0

    @property
    def chart_id(self) -> str:
        return self.metric


METRIC_CHARTS = (
    MetricChart("delta_to_pole", "Delta to Pole", unit="s"),
    MetricChart("speed", "Speed", unit="km/h"),
    MetricChart("throttle", "Throttle", unit="%", height=220),
    MetricChart("brake", "Brake", height=180),
    MetricChart("rpm", "RPM", height=220),
    MetricChart("long_g", "Longitudinal G", unit="g", height=220),
)


class _DataXAxis:
    """Plotly resolves data-space x (xref='x') to pixels on every redraw."""

    def pixel_for_value(self, value: float) -> float:
        return value


class _PaperYAxis:
    top = 1.0
    bottom = 0.0


def _line_trace(dataset: Dataset, x: list[float] | None) -> go.Scatter:
    points = list(dataset.points)
    line = {"width": dataset.line_width, "color": dataset.color}
    if dataset.tension > 0:
        line.update(shape="spline", smoothing=min(dataset.tension, 1.3))
    return go.Scatter(
        x=x[: len(points)] if x is not None else None,
        y=points,
        mode="lines+markers" if dataset.show_markers else "lines",
        line=line,
        name=dataset.label,
        hovertemplate="%{y:.3~f}",
    )


def _visible_y_range(
    datasets: list[Dataset],
    x: list[float] | None,
    x_range: tuple[float, float],
) -> tuple[float, float] | None:
    """y extent of the samples inside ``x_range``, padded by 5%."""
    if x is None:
        return None
    lo, hi = x_range
    xs = np.asarray(x, dtype=float)
    visible = []
    for dataset in datasets:
        ys = np.asarray(dataset.points, dtype=float)
        n = min(len(xs), len(ys))
        mask = (xs[:n] >= lo) & (xs[:n] <= hi)
        visible.append(ys[:n][mask])
    if not visible:
        return None
    values = np.concatenate(visible)
    values = values[np.isfinite(values)]
    if values.size == 0:
        return None
    y_min, y_max = float(values.min()), float(values.max())
    pad = (y_max - y_min) * 0.05 or max(abs(y_max) * 0.05, 1.0)
    return y_min - pad, y_max + pad


def add_sector_lines(figure: go.Figure, reference_distance: list[float]) -> None:
    for line in sector_lines(reference_distance, _DataXAxis(), _PaperYAxis()):
        figure.add_shape(
            type="line",
            xref="x",
            yref="paper",
            x0=line.x,
            x1=line.x,
            y0=line.y_bottom,
            y1=line.y_top,
            line={"color": line.color, "width": 1, "dash": _dash_pattern(line.dash)},
            layer="below",
        )


def build_telemetry_chart(
    store: TelemetryStore,
    chart: MetricChart,
    viewport: ViewportHandle | None = None,
    fetch_id: int = 0,
) -> go.Figure:
    """Distance-aligned comparison of ``chart.metric`` for every active driver.

    Samples are placed on the reference driver's distance trace by index.
    Without a reference distance the traces fall back to sample index and
    sector lines are omitted.
    """
    figure = go.Figure()
    interaction = ViewportController.interaction_layout()

    reference_distance = store.reference_distance()
    x = reference_distance or None

    datasets = project(store, chart.metric, store.active_drivers, tension=chart.tension)
    for dataset in datasets:
        figure.add_trace(_line_trace(dataset, x))

    add_sector_lines(figure, reference_distance)

    xaxis = _merge_axis(
        {
            "type": "linear",
            "gridcolor": _GRID,
            "zerolinecolor": _ZEROLINE,
            "showticklabels": x is not None,
            "ticksuffix": " m" if x is not None else "",
        },
        interaction["xaxis"],
    )
    yaxis = _merge_axis(
        {
            "gridcolor": _GRID,
            "zerolinecolor": _ZEROLINE,
            "title": {"text": f"{chart.title} ({chart.unit})" if chart.unit else chart.title},
        },
        interaction["yaxis"],
    )

    x_range = viewport.state.x_range if viewport is not None else None
    if x_range is not None:
        xaxis.update(range=list(x_range), autorange=False)
        y_range = _visible_y_range(datasets, x, x_range)
        if y_range is not None:
            yaxis.update(range=list(y_range), autorange=False)

    figure.update_layout(
        **_CHART_LAYOUT,
        dragmode=interaction["dragmode"],
        selectdirection=interaction["selectdirection"],
        hovermode=interaction["hovermode"],
        xaxis=xaxis,
        yaxis=yaxis,
        height=chart.height,
        uirevision=viewport.uirevision(fetch_id) if viewport is not None else str(fetch_id),
    )
    return figure
