"""Test helpers for the court directory tests."""

import threading
import time
from collections.abc import Mapping
from typing import Any

from jurisresolver.directory.data_types import CourtRecord


def to_records(raw_courts: list[Mapping[str, Any]]) -> list[CourtRecord]:
    records = []
    for raw in raw_courts:
        record = CourtRecord.from_api(raw)
        if record is not None:
            records.append(record)
    return records


class StaticCourtStore:
    """Store that serves a fixed list and counts fetches.

    Args:
        records: Records returned by every fetch.
        gate: If given, fetch blocks until the event is set.
        delay: Seconds to sleep inside every fetch.
        error: If set, every fetch raises it.
    """

    name = "static"

    def __init__(
        self,
        records: list[CourtRecord],
        gate: threading.Event | None = None,
        delay: float = 0.0,
        error: Exception | None = None,
    ) -> None:
        self.records = records
        self.gate = gate
        self.delay = delay
        self.error = error
        self.calls = 0
        self.started = threading.Event()
        self._lock = threading.Lock()

    def fetch_records(self) -> list[CourtRecord]:
        with self._lock:
            self.calls += 1
        self.started.set()
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.records)


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
