from __future__ import annotations

import pytest
import requests

from apex.client import FetchFailure, TelemetryClient, TelemetryQuery
from apex.config import Settings


class _FakeResponse:
    def __init__(self, body: object, status_code: int = 200) -> None:
        self._body = body
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> object:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class _FakeSession:
    def __init__(self, response: _FakeResponse | Exception) -> None:
        self.response = response
        self.calls: list[dict] = []

    def get(self, url: str, params: dict, timeout: float | None) -> _FakeResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


QUERY = TelemetryQuery(year=2025, race="Austin", session="Qualifying", drivers=("VER", "LEC"))


def _client(response: _FakeResponse | Exception) -> tuple[TelemetryClient, _FakeSession]:
    session = _FakeSession(response)
    settings = Settings(api_base_url="http://api.test/", request_timeout_s=5.0)
    return TelemetryClient(settings=settings, session=session), session


def test_analyze_returns_payload_and_sends_params() -> None:
    client, session = _client(_FakeResponse({"status": "ok", "data": {"drivers": {}}}))

    assert client.analyze(QUERY) == {"drivers": {}}
    assert session.calls == [
        {
            "url": "http://api.test/analyze",
            "params": {
                "year": 2025,
                "race": "Austin",
                "session": "Qualifying",
                "drivers": "VER,LEC",
            },
            "timeout": 5.0,
        }
    ]


def test_error_status_raises_with_server_message() -> None:
    client, _ = _client(_FakeResponse({"status": "error", "message": "session not found"}))

    with pytest.raises(FetchFailure) as exc_info:
        client.analyze(QUERY)
    assert exc_info.value.message == "session not found"


@pytest.mark.parametrize(
    "response",
    [
        _FakeResponse({"status": "pending"}),
        _FakeResponse({"status": "ok"}),
        _FakeResponse(["not", "an", "object"]),
        _FakeResponse(ValueError("bad json")),
        _FakeResponse({"status": "ok", "data": {}}, status_code=502),
        requests.ConnectionError("connection refused"),
        requests.Timeout("read timed out"),
    ],
)
def test_failures_map_to_fetch_failure(response: _FakeResponse | Exception) -> None:
    client, _ = _client(response)
    with pytest.raises(FetchFailure):
        client.analyze(QUERY)
