"""Application ports – abstract interfaces that infrastructure must implement.

These are the boundaries of the application layer. Domain and application code
depend only on these abstractions, never on concrete infrastructure.
"""

from __future__ import annotations

import abc
from typing import Any

from clock_toolkit.domain.value_objects import ClockValue


# ---------------------------------------------------------------------------
# Clock supplier
# ---------------------------------------------------------------------------
class ClockSupplier(abc.ABC):
    """Port: produces the current clock value on demand.

    Third-party packages plug in their own supplier by subclassing this and
    registering it under the ``clock_toolkit.clock_suppliers`` entry-point
    group.
    """

    @abc.abstractmethod
    def get(self) -> ClockValue:
        ...


# ---------------------------------------------------------------------------
# Provider discovery
# ---------------------------------------------------------------------------
class ClockSupplierRegistry(abc.ABC):
    """Port: discovery of an externally registered clock supplier."""

    @abc.abstractmethod
    def discover(self) -> ClockSupplier | None:
        """Return the first registered supplier, or ``None`` if there is none."""
        ...


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
class ConfigSource(abc.ABC):
    """Port: process-wide string-keyed configuration lookup."""

    @abc.abstractmethod
    def get(self, key: str) -> str | None:
        ...


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
class Logger(abc.ABC):
    """Port: structured logging."""

    @abc.abstractmethod
    def info(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def warn(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def error(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def debug(self, msg: str, **kw: Any) -> None:
        ...
