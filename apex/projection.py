from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from apex.store import TelemetryStore

DRIVER_COLORS = (
    "#36A2EB",
    "#FF6384",
    "#00FF9D",
    "#FF9F40",
    "#9966FF",
    "#FFCD56",
    "#C9CBCF",
    "#E74C3C",
    "#2ECC71",
)

LINE_WIDTH = 1.5


def driver_color(index: int, palette: Sequence[str] = DRIVER_COLORS) -> str:
    """Colour for the driver at ``index`` in the active list (wraps around)."""
    return palette[index % len(palette)]


@dataclass(frozen=True)
class Dataset:
    label: str
    points: tuple[float, ...]
    color: str
    line_width: float = LINE_WIDTH
    show_markers: bool = False
    tension: float = 0.0


def project(
    store: TelemetryStore,
    metric: str,
    active_drivers: Sequence[str],
    tension: float = 0.0,
    palette: Sequence[str] = DRIVER_COLORS,
) -> list[Dataset]:
    """One dataset per active driver for ``metric``, in active-driver order.

    Drivers missing from the store keep their slot (and colour) with an
    empty point sequence, so legend and colour order never shift.
    """
    if not store.has_data():
        return []
    return [
        Dataset(
            label=driver,
            points=tuple(store.get_series(driver, metric)),
            color=driver_color(idx, palette),
            tension=tension,
        )
        for idx, driver in enumerate(active_drivers)
    ]
