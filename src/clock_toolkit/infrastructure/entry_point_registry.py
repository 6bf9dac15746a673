"""Infrastructure: clock supplier discovery through package entry points.

A package provides its own default clock by declaring, in its
``pyproject.toml``::

    [project.entry-points."clock_toolkit.clock_suppliers"]
    my_clock = "my_package.clocks:MyClockSupplier"

The entry point may name a ``ClockSupplier`` subclass (instantiated with no
arguments) or a ready-made instance.
"""

from __future__ import annotations

from importlib.metadata import EntryPoint, entry_points

from clock_toolkit.application.ports import ClockSupplier, ClockSupplierRegistry, Logger
from clock_toolkit.infrastructure.config import DEFAULT_ENTRY_POINT_GROUP


class EntryPointRegistry(ClockSupplierRegistry):
    """Looks up the entry-point group afresh on every ``discover()``."""

    def __init__(self, group: str = DEFAULT_ENTRY_POINT_GROUP, logger: Logger | None = None) -> None:
        self._group = group
        self._log = logger

    @property
    def group(self) -> str:
        return self._group

    def _entry_points(self) -> list[EntryPoint]:
        return sorted(entry_points(group=self._group), key=lambda ep: ep.name)

    def available(self) -> list[str]:
        return [ep.name for ep in self._entry_points()]

    def discover(self) -> ClockSupplier | None:
        eps = self._entry_points()
        if not eps:
            return None

        first = eps[0]
        obj = first.load()
        if isinstance(obj, type):
            obj = obj()
        if not isinstance(obj, ClockSupplier):
            raise TypeError(
                f"Entry point {first.name!r} in group {self._group!r} is not a ClockSupplier: {obj!r}"
            )

        if self._log is not None:
            self._log.debug("Discovered clock supplier", entry_point=first.name, value=first.value)
        return obj
