from __future__ import annotations

import logging

from apex.store import TelemetryStore


def test_load_exposes_equal_length_series(payload: dict) -> None:
    store = TelemetryStore.load(payload, ["VER", "LEC"])

    assert store.has_data()
    assert store.drivers() == ["VER", "LEC"]
    assert len(store.get_series("VER", "speed")) == len(store.get_series("VER", "distance")) == 61
    assert store.get_series("VER", "distance")[-1] == 6000.0
    assert store.lap_time("LEC") == 93.5


def test_missing_driver_or_metric_yields_empty_series(payload: dict) -> None:
    store = TelemetryStore.load(payload, ["VER"])

    assert store.get_series("XYZ", "speed") == []
    assert store.get_series("VER", "drs") == []
    assert store.lap_time("XYZ") is None


def test_unknown_metrics_are_kept() -> None:
    store = TelemetryStore.load(
        {"drivers": {"VER": {"telemetry": {"distance": [0, 1], "gear": [7, 8]}}}}, ["VER"]
    )
    assert store.metrics("VER") == ["distance", "gear"]
    assert store.get_series("VER", "gear") == [7.0, 8.0]


def test_non_numeric_samples_become_nan() -> None:
    store = TelemetryStore.load(
        {"drivers": {"VER": {"telemetry": {"speed": [1, None, "x", "3.5"]}}}}, ["VER"]
    )
    values = store.get_series("VER", "speed")
    assert values[0] == 1.0
    assert values[3] == 3.5
    assert values[1] != values[1]
    assert values[2] != values[2]


def test_non_numeric_samples_are_logged(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="apex.store")

    TelemetryStore.load({"drivers": {"VER": {"telemetry": {"speed": [1, "x", None]}}}}, ["VER"])

    assert "Coerced 1 non-numeric speed samples for VER" in caplog.text


def test_numeric_samples_log_nothing(caplog, payload: dict) -> None:
    caplog.set_level(logging.WARNING, logger="apex.store")
    TelemetryStore.load(payload, ["VER"])
    assert caplog.records == []


def test_get_series_returns_a_copy(payload: dict) -> None:
    store = TelemetryStore.load(payload, ["VER"])
    values = store.get_series("VER", "speed")
    values.clear()
    assert len(store.get_series("VER", "speed")) == 61


def test_reference_driver_is_first_active_driver(payload: dict) -> None:
    store = TelemetryStore.load(payload, ["LEC", "VER"])
    assert store.reference_driver() == "LEC"
    assert store.reference_distance()[-1] == 6000.0


def test_reference_driver_none_without_drivers_or_data(payload: dict) -> None:
    assert TelemetryStore.load(payload, []).reference_driver() is None
    assert TelemetryStore.empty().reference_driver() is None
    assert TelemetryStore.empty().reference_distance() == []


def test_reference_distance_empty_when_reference_missing(payload: dict) -> None:
    store = TelemetryStore.load(payload, ["XYZ", "VER"])
    assert store.reference_driver() == "XYZ"
    assert store.reference_distance() == []


def test_malformed_entries_are_skipped(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="apex.store")
    store = TelemetryStore.load(
        {"drivers": {"VER": "oops", "LEC": {"telemetry": {"speed": [1, 2]}}}}, ["VER", "LEC"]
    )
    assert store.drivers() == ["LEC"]
    assert "Ignoring telemetry for VER" in caplog.text


def test_load_tolerates_missing_payload() -> None:
    assert not TelemetryStore.load(None).has_data()
    assert not TelemetryStore.load({"drivers": []}).has_data()
