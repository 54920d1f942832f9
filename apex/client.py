from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests

from apex.config import Settings, get_settings

logger = logging.getLogger(__name__)


class FetchFailure(Exception):
    """Telemetry could not be retrieved: transport error or non-ok status."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class TelemetryQuery:
    year: int
    race: str
    session: str
    drivers: tuple[str, ...]

    def params(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "race": self.race,
            "session": self.session,
            "drivers": ",".join(self.drivers),
        }


class TelemetryClient:
    """Client for the remote ``/analyze`` endpoint."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._session = session or requests.Session()

    def analyze(self, query: TelemetryQuery) -> Mapping[str, Any]:
        """Return the ``data`` payload for ``query`` or raise :class:`FetchFailure`."""
        url = self.settings.analyze_url
        logger.info("Requesting telemetry %s", query.params())
        try:
            response = self._session.get(
                url,
                params=query.params(),
                timeout=self.settings.request_timeout_s,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise FetchFailure(f"Request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchFailure(f"Response from {url} is not valid JSON") from exc

        if not isinstance(body, Mapping):
            raise FetchFailure("Response body is not a JSON object")

        status = body.get("status")
        if status == "error":
            raise FetchFailure(str(body.get("message") or "Server reported an error"))
        if status != "ok":
            raise FetchFailure(f"Unexpected response status: {status!r}")

        data = body.get("data")
        if not isinstance(data, Mapping):
            raise FetchFailure("Response is missing its telemetry payload")
        return data
