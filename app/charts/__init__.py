"""Chart builders for the Beyond The Apex telemetry dashboard."""

from ._shared import _hex_to_rgba
from .telemetry import (
    METRIC_CHARTS,
    MetricChart,
    add_sector_lines,
    build_telemetry_chart,
)

__all__ = [
    "METRIC_CHARTS",
    "MetricChart",
    "_hex_to_rgba",
    "add_sector_lines",
    "build_telemetry_chart",
]
