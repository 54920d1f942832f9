"""Sector boundary overlay.

Boundaries are recomputed on every draw from the reference driver's
distance trace and the chart's current axis mapping, so they stay on the
right distance after a zoom or pan. Nothing here keeps state between
draws; the caller executes the returned instructions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import numpy as np

SECTOR_FRACTIONS = (0.33, 0.66)

SECTOR_LINE_COLOR = "rgba(255,255,255,0.2)"
SECTOR_LINE_DASH = (5, 5)


class XAxisMapping(Protocol):
    def pixel_for_value(self, value: float) -> float: ...


class YAxisExtent(Protocol):
    top: float
    bottom: float


@dataclass(frozen=True)
class VerticalLine:
    x: float
    y_top: float
    y_bottom: float
    color: str = SECTOR_LINE_COLOR
    dash: tuple[int, ...] = SECTOR_LINE_DASH


def sector_boundaries(distance: Sequence[float]) -> list[float]:
    """Distances of the sector boundaries, or [] without a usable lap length."""
    values = np.asarray(distance, dtype=float)
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return []
    total = float(finite[-1])
    return [total * fraction for fraction in SECTOR_FRACTIONS]


def sector_lines(
    distance: Sequence[float],
    x_axis: XAxisMapping,
    y_axis: YAxisExtent,
) -> list[VerticalLine]:
    return [
        VerticalLine(x=x_axis.pixel_for_value(value), y_top=y_axis.top, y_bottom=y_axis.bottom)
        for value in sector_boundaries(distance)
    ]
