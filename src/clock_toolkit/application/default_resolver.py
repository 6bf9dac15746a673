"""Process-wide default clock supplier resolution.

The default supplier is resolved lazily, once, on the first ``get_default()``
call:

1. The caching flag is read from the config source.  An absent flag means
   "cached"; a present flag only keeps caching on if it is ``true``
   (case-insensitive).  Anything else, including garbage, turns it off.
2. Cached: the registry is asked once.  The discovered supplier, or the
   fallback when nothing is registered, is returned forever after.
3. Not cached: a ``NonCachingClockSupplier`` is returned forever after.  It
   asks the registry again on every ``get()``.

If discovery raises, nothing is memoised and the next call starts over.
"""

from __future__ import annotations

import enum
import threading

from clock_toolkit.application.ports import ClockSupplier, ClockSupplierRegistry, ConfigSource, Logger
from clock_toolkit.domain.value_objects import ClockValue

CACHED_PROPERTY_KEY = "CLOCK_TOOLKIT_CLOCK_SUPPLIER_DEFAULT_CACHED"


class CachingPolicy(enum.Enum):
    CACHED = "cached"
    NOT_CACHED = "not_cached"


def parse_caching_policy(raw: str | None) -> CachingPolicy:
    """Lenient on absence, strict on presence."""
    if raw is None or raw.lower() == "true":
        return CachingPolicy.CACHED
    return CachingPolicy.NOT_CACHED


def _qualified_name(obj: object) -> str:
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


class NonCachingClockSupplier(ClockSupplier):
    """Re-runs discovery on every ``get()``."""

    def __init__(self, registry: ClockSupplierRegistry, fallback: ClockSupplier) -> None:
        self._registry = registry
        self._fallback = fallback
        # Diagnostics only; concurrent get() calls may interleave writes.
        self._supplier_name = "uninitialized - call get() first"

    @property
    def supplier_name(self) -> str:
        return self._supplier_name

    def get(self) -> ClockValue:
        supplier = self._registry.discover()
        if supplier is None:
            supplier = self._fallback
        self._supplier_name = _qualified_name(supplier)
        return supplier.get()

    def __repr__(self) -> str:
        return f"non_caching_clock_supplier({self._supplier_name})"


class DefaultClockResolver:
    """Computes the default clock supplier exactly once, thread-safely."""

    def __init__(
        self,
        registry: ClockSupplierRegistry,
        config: ConfigSource,
        logger: Logger,
        fallback: ClockSupplier,
    ) -> None:
        self._registry = registry
        self._config = config
        self._log = logger
        self._fallback = fallback
        self._lock = threading.Lock()
        self._instance: ClockSupplier | None = None

    @property
    def resolved(self) -> bool:
        return self._instance is not None

    def get_default(self) -> ClockSupplier:
        instance = self._instance
        if instance is not None:
            return instance

        with self._lock:
            if self._instance is None:
                self._instance = self._initialize()
            return self._instance

    def _initialize(self) -> ClockSupplier:
        raw = self._config.get(CACHED_PROPERTY_KEY)
        policy = parse_caching_policy(raw)
        self._log.debug("Resolving default clock supplier", policy=policy.value, flag=raw)

        if policy is CachingPolicy.NOT_CACHED:
            return NonCachingClockSupplier(self._registry, self._fallback)

        provider = self._registry.discover()
        if provider is None:
            self._log.debug("No clock supplier registered; using fallback", fallback=repr(self._fallback))
            return self._fallback

        self._log.debug("Using registered clock supplier", supplier=_qualified_name(provider))
        return provider
