"""Clock suppliers for production code and tests.

Production code asks for a supplier instead of reading the system time::

    from clock_toolkit.clocks import get_default

    clock = get_default()
    created_at = clock.get().now()

Tests pin time with ``fixed_clock_supplier(...)``, or install a provider
under the ``clock_toolkit.clock_suppliers`` entry-point group so that
``get_default()`` picks it up.

``get_default()`` returns a UTC supplier unless a provider is registered.
The registered provider is cached; set
``CLOCK_TOOLKIT_CLOCK_SUPPLIER_DEFAULT_CACHED=false`` to look it up again on
every ``get()``. The variable is read once per process.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from clock_toolkit.application.default_resolver import DefaultClockResolver
from clock_toolkit.application.ports import ClockSupplier
from clock_toolkit.domain.value_objects import ETC_UTC, Timestamp, ZoneId
from clock_toolkit.infrastructure.clock import SYSTEM_DEFAULT_ZONE, SYSTEM_UTC, FixedClockSupplier
from clock_toolkit.infrastructure.config import DEFAULT_ENTRY_POINT_GROUP, EnvironmentConfig, is_verbose
from clock_toolkit.infrastructure.entry_point_registry import EntryPointRegistry
from clock_toolkit.infrastructure.logger import ConsoleLogger


def _build_resolver() -> DefaultClockResolver:
    # Built at import time; verbosity is looked up once .env has been read.
    logger = ConsoleLogger(verbose=is_verbose)
    return DefaultClockResolver(
        registry=EntryPointRegistry(DEFAULT_ENTRY_POINT_GROUP, logger=logger),
        config=EnvironmentConfig(),
        logger=logger,
        fallback=SYSTEM_UTC,
    )


# Process-wide; tests swap this attribute to start from a fresh resolver.
_resolver = _build_resolver()


def get_default() -> ClockSupplier:
    """Obtain the default clock supplier; never ``None``, same object every call."""
    return _resolver.get_default()


def system_utc_clock_supplier() -> ClockSupplier:
    return SYSTEM_UTC


def system_default_zone_clock_supplier() -> ClockSupplier:
    return SYSTEM_DEFAULT_ZONE


def fixed_clock_supplier(
    fixed_instant: Timestamp | datetime | str,
    zone: ZoneId | ZoneInfo | str,
) -> FixedClockSupplier:
    """Return a supplier whose clock never moves.

    ``fixed_instant`` may be an ISO-8601 string and ``zone`` a ``ZoneInfo``.
    Raises ``InvalidArgument`` if either argument is ``None`` or of another type.
    """
    return FixedClockSupplier(fixed_instant, zone)


def fixed_utc_clock_supplier(fixed_instant: Timestamp | datetime | str) -> FixedClockSupplier:
    return FixedClockSupplier(fixed_instant, ETC_UTC)
