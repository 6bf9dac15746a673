"""Shared test fixtures and conftest for Clock Toolkit tests."""

from __future__ import annotations

import threading
import time
from datetime import datetime, timezone
from typing import Any

import pytest

from clock_toolkit import clocks
from clock_toolkit.application.default_resolver import DefaultClockResolver
from clock_toolkit.application.ports import ClockSupplier, ClockSupplierRegistry, ConfigSource, Logger
from clock_toolkit.domain.value_objects import ClockValue, Timestamp, ZoneId
from clock_toolkit.infrastructure.clock import SYSTEM_UTC

FIXED_INSTANT = Timestamp(datetime(2017, 10, 2, 17, 3, 0, tzinfo=timezone.utc))
FIXED_ZONE = ZoneId("America/Chicago")


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------
class PinnedClockSupplier(ClockSupplier):
    """Stand-in for a third-party supplier registered by a plugin."""

    def get(self) -> ClockValue:
        return ClockValue(instant=FIXED_INSTANT, zone=FIXED_ZONE)

    def __repr__(self) -> str:
        return "PinnedClockSupplier"


class FakeRegistry(ClockSupplierRegistry):
    """In-memory registry; suppliers can be registered and removed mid-test."""

    def __init__(self, *suppliers: ClockSupplier, delay: float = 0.0) -> None:
        self.suppliers: list[ClockSupplier] = list(suppliers)
        self.delay = delay
        self.error: Exception | None = None
        self.calls = 0
        self._lock = threading.Lock()

    def set_services(self, *suppliers: ClockSupplier) -> None:
        self.suppliers = list(suppliers)

    def discover(self) -> ClockSupplier | None:
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.suppliers[0] if self.suppliers else None


class FakeConfig(ConfigSource):
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = dict(values or {})
        self.reads: list[str] = []

    def get(self, key: str) -> str | None:
        self.reads.append(key)
        return self.values.get(key)


class RecordingLogger(Logger):
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, msg: str, **kw: Any) -> None:
        self.records.append(("info", msg, kw))

    def warn(self, msg: str, **kw: Any) -> None:
        self.records.append(("warn", msg, kw))

    def error(self, msg: str, **kw: Any) -> None:
        self.records.append(("error", msg, kw))

    def debug(self, msg: str, **kw: Any) -> None:
        self.records.append(("debug", msg, kw))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def registry():
    return FakeRegistry()


@pytest.fixture
def config():
    return FakeConfig()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def resolver(registry, config, logger):
    return DefaultClockResolver(registry=registry, config=config, logger=logger, fallback=SYSTEM_UTC)


@pytest.fixture
def process_resolver(monkeypatch, resolver):
    """Install a fresh resolver as the process-wide one for this test."""
    monkeypatch.setattr(clocks, "_resolver", resolver)
    return resolver


@pytest.fixture
def berlin_tz(monkeypatch):
    monkeypatch.setenv("TZ", "Europe/Berlin")
    return ZoneId("Europe/Berlin")
