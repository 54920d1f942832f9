from __future__ import annotations

import os
from dataclasses import dataclass


def _optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    api_base_url: str = os.getenv("APEX_API_URL", "http://localhost:8000")
    request_timeout_s: float | None = _optional_float(os.getenv("APEX_REQUEST_TIMEOUT"))
    log_level: str = os.getenv("APEX_LOG_LEVEL", "INFO")
    default_year: int = 2025
    default_race: str = "Austin"
    default_session: str = "Qualifying"
    default_drivers: str = "VER, LEC, NOR, PIA"

    @property
    def analyze_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/analyze"


def get_settings() -> Settings:
    return Settings()
