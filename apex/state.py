"""Application state for one dashboard session.

``AppState`` is immutable; every transition swaps in a new instance, so
the store and the active driver list always change together.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from apex.client import FetchFailure, TelemetryClient, TelemetryQuery
from apex.store import TelemetryStore

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to load data. The server might be waking up!"


@dataclass(frozen=True)
class AppState:
    store: TelemetryStore = field(default_factory=TelemetryStore.empty)
    loading: bool = False
    error: str | None = None
    fetch_id: int = 0

    @property
    def active_drivers(self) -> tuple[str, ...]:
        return self.store.active_drivers

    @property
    def has_data(self) -> bool:
        return self.store.has_data()


class AppController:
    def __init__(self, client: TelemetryClient | None = None) -> None:
        self._client = client
        self._state = AppState()

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def client(self) -> TelemetryClient:
        if self._client is None:
            self._client = TelemetryClient()
        return self._client

    def begin_fetch(self) -> bool:
        """Enter the loading state; False if a fetch is already in flight."""
        if self._state.loading:
            return False
        self._state = replace(self._state, loading=True, error=None)
        return True

    def complete_fetch(self, payload: Mapping[str, Any], drivers: Iterable[str]) -> None:
        self._state = AppState(
            store=TelemetryStore.load(payload, drivers),
            loading=False,
            error=None,
            fetch_id=self._state.fetch_id + 1,
        )

    def fail_fetch(self, message: str = FETCH_FAILED_MESSAGE) -> None:
        # The last good store stays visible after a failed refresh.
        self._state = replace(self._state, loading=False, error=message)

    def fetch(self, query: TelemetryQuery) -> bool:
        """Run one query end to end. Returns True when new data was loaded."""
        if not self.begin_fetch():
            logger.info("Fetch ignored: another fetch is in flight")
            return False
        loaded = False
        try:
            payload = self.client.analyze(query)
            self.complete_fetch(payload, query.drivers)
            loaded = True
            logger.info(
                "Loaded telemetry for %d of %d requested drivers",
                len(set(self._state.store.drivers()) & set(query.drivers)),
                len(query.drivers),
            )
        except FetchFailure as exc:
            logger.warning("Telemetry fetch failed: %s", exc.message)
        except Exception:
            logger.exception("Telemetry fetch crashed for %s", query.params())
            raise
        finally:
            if not loaded:
                self.fail_fetch()
        return loaded
