"""Read-only view of one analysis payload, keyed by driver code."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

DISTANCE = "distance"

METRICS = (
    DISTANCE,
    "delta_to_pole",
    "speed",
    "throttle",
    "brake",
    "rpm",
    "long_g",
)


def _to_series(values: object, code: str, metric: str) -> pd.Series:
    if not isinstance(values, Iterable) or isinstance(values, (str, bytes, Mapping)):
        logger.warning("Ignoring %s samples for %s: not a sequence", metric, code)
        return pd.Series(dtype=float)
    raw = pd.Series(list(values), dtype=object)
    # Strings and other junk become NaN rather than failing the whole driver.
    series = pd.to_numeric(raw, errors="coerce").astype(float)
    coerced = int(series.isna().sum() - raw.isna().sum())
    if coerced:
        logger.warning("Coerced %d non-numeric %s samples for %s", coerced, metric, code)
    return series


def _to_float(value: object) -> float | None:
    try:
        result = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return None if math.isnan(result) else result


def _parse_driver(code: str, entry: object) -> tuple[dict[str, pd.Series], float | None] | None:
    if not isinstance(entry, Mapping):
        logger.warning("Ignoring telemetry for %s: expected a mapping, got %s", code, type(entry))
        return None
    raw_telemetry = entry.get("telemetry") or {}
    if not isinstance(raw_telemetry, Mapping):
        logger.warning("Ignoring telemetry block for %s: not a mapping", code)
        raw_telemetry = {}

    series = {
        str(metric): _to_series(values, code, str(metric))
        for metric, values in raw_telemetry.items()
    }

    lengths = {len(s) for s in series.values()}
    if len(lengths) > 1:
        logger.warning("Telemetry series for %s have unequal lengths: %s", code, sorted(lengths))

    distance = series.get(DISTANCE)
    if distance is not None and len(distance) > 1:
        steps = np.diff(distance.dropna().to_numpy())
        if (steps < 0).any():
            logger.warning("Distance series for %s is not monotonically non-decreasing", code)

    return series, _to_float(entry.get("lap_time"))


@dataclass(frozen=True, eq=False)
class TelemetryStore:
    """Immutable per-driver metric series.

    A store is never mutated: each successful fetch builds a new one with
    :meth:`load`. Lookups for drivers or metrics that the server did not
    return yield empty series instead of raising, because partial results
    are a normal outcome of a query.
    """

    _series: Mapping[str, Mapping[str, pd.Series]] = field(default_factory=dict)
    _lap_times: Mapping[str, float | None] = field(default_factory=dict)
    active_drivers: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> TelemetryStore:
        return cls()

    @classmethod
    def load(
        cls,
        payload: Mapping[str, Any] | None,
        active_drivers: Iterable[str] = (),
    ) -> TelemetryStore:
        drivers_block = (payload or {}).get("drivers") or {}
        if not isinstance(drivers_block, Mapping):
            logger.warning("Payload 'drivers' is not a mapping; loading an empty store")
            drivers_block = {}

        series: dict[str, dict[str, pd.Series]] = {}
        lap_times: dict[str, float | None] = {}
        for code, entry in drivers_block.items():
            parsed = _parse_driver(str(code), entry)
            if parsed is None:
                continue
            series[str(code)], lap_times[str(code)] = parsed

        return cls(
            _series=series,
            _lap_times=lap_times,
            active_drivers=tuple(active_drivers),
        )

    def has_data(self) -> bool:
        return bool(self._series)

    def drivers(self) -> list[str]:
        return list(self._series)

    def metrics(self, driver_code: str) -> list[str]:
        return list(self._series.get(driver_code, {}))

    def get_series(self, driver_code: str, metric: str) -> list[float]:
        values = self._series.get(driver_code, {}).get(metric)
        if values is None:
            return []
        return values.tolist()

    def lap_time(self, driver_code: str) -> float | None:
        return self._lap_times.get(driver_code)

    def reference_driver(self) -> str | None:
        """First active driver, or None when nothing is active or loaded."""
        if not self.active_drivers or not self.has_data():
            return None
        return self.active_drivers[0]

    def reference_distance(self) -> list[float]:
        driver = self.reference_driver()
        if driver is None:
            return []
        return self.get_series(driver, DISTANCE)
