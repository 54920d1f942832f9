from __future__ import annotations

import pytest


def lap_payload(*codes: str, points: int = 61) -> dict:
    distance = [i * 100.0 for i in range(points)]
    drivers = {}
    for offset, code in enumerate(codes):
        drivers[code] = {
            "lap_time": 92.5 + offset,
            "telemetry": {
                "distance": distance,
                "delta_to_pole": [0.001 * i * (offset + 1) for i in range(points)],
                "speed": [200.0 + offset + (i % 10) for i in range(points)],
                "throttle": [100.0] * points,
                "brake": [0.0] * points,
                "rpm": [11000.0] * points,
                "long_g": [0.5] * points,
            },
        }
    return {"drivers": drivers}


@pytest.fixture
def payload() -> dict:
    return lap_payload("VER", "LEC")
