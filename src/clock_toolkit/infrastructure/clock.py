"""Infrastructure: built-in clock suppliers (system UTC, system zone, fixed)."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from clock_toolkit.application.ports import ClockSupplier
from clock_toolkit.domain.errors import InvalidArgument, MalformedPersistedZone
from clock_toolkit.domain.value_objects import ClockValue, Timestamp, ZoneId

PERSISTED_FORMAT_VERSION = 1


class _StatelessClockSupplier(ClockSupplier):
    """Zero-field supplier; all instances of one class are interchangeable."""

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


class SystemUtcClockSupplier(_StatelessClockSupplier):
    """Real wall-clock time in UTC."""

    def get(self) -> ClockValue:
        return ClockValue(instant=Timestamp.now(), zone=ZoneId.UTC)

    def __repr__(self) -> str:
        return "system_utc_clock_supplier()"


class SystemDefaultZoneClockSupplier(_StatelessClockSupplier):
    """Real wall-clock time in whatever zone the process uses at call time."""

    def get(self) -> ClockValue:
        return ClockValue(instant=Timestamp.now(), zone=ZoneId.system_default())

    def __repr__(self) -> str:
        return "system_default_zone_clock_supplier()"


SYSTEM_UTC = SystemUtcClockSupplier()
SYSTEM_DEFAULT_ZONE = SystemDefaultZoneClockSupplier()


def _to_timestamp(value: object) -> Timestamp:
    if value is None:
        raise InvalidArgument("fixed_instant")
    if isinstance(value, Timestamp):
        return value
    if isinstance(value, datetime):
        return Timestamp(value)
    if isinstance(value, str):
        return Timestamp.from_iso(value)
    raise InvalidArgument(f"fixed_instant must be a Timestamp, aware datetime or ISO-8601 string: {value!r}")


def _to_zone_id(value: object) -> ZoneId:
    if value is None:
        raise InvalidArgument("zone")
    if isinstance(value, ZoneId):
        return value
    if isinstance(value, ZoneInfo):
        if value.key is None:
            raise InvalidArgument(f"zone has no IANA key: {value!r}")
        return ZoneId(value.key)
    if isinstance(value, str):
        return ZoneId(value)
    raise InvalidArgument(f"zone must be a ZoneId, ZoneInfo or zone id string: {value!r}")


class FixedClockSupplier(ClockSupplier):
    """Always returns the same instant in the same zone.

    The clock value is computed once here and handed out on every ``get()``.
    Only the instant and the zone id are persisted; ``from_dict`` rebuilds
    the clock value instead of trusting a stored one.
    """

    def __init__(
        self,
        fixed_instant: Timestamp | datetime | str | None,
        zone: ZoneId | ZoneInfo | str | None,
    ) -> None:
        self._fixed_instant = _to_timestamp(fixed_instant)
        self._zone = _to_zone_id(zone)
        self._value = ClockValue(instant=self._fixed_instant, zone=self._zone)

    @property
    def fixed_instant(self) -> Timestamp:
        return self._fixed_instant

    @property
    def zone(self) -> ZoneId:
        return self._zone

    def get(self) -> ClockValue:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClockSupplier):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"fixed_clock_supplier({self._fixed_instant}, {self._zone})"

    # ---- persisted form ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": PERSISTED_FORMAT_VERSION,
            "fixed_instant": self._fixed_instant.iso(),
            "zone": self._zone.id,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "FixedClockSupplier":
        if not isinstance(d, dict):
            raise InvalidArgument(f"Persisted clock must be a JSON object, got {type(d).__name__}")
        version = d.get("version", PERSISTED_FORMAT_VERSION)
        if version != PERSISTED_FORMAT_VERSION:
            raise InvalidArgument(f"Unsupported persisted clock version: {version!r}")

        raw_instant = d.get("fixed_instant")
        raw_zone = d.get("zone")
        if raw_instant is None:
            raise InvalidArgument("fixed_instant")
        if raw_zone is None:
            raise InvalidArgument("zone")

        try:
            zone = ZoneId(str(raw_zone))
        except InvalidArgument as exc:
            raise MalformedPersistedZone(f"Persisted zone is not a known zone id: {raw_zone!r}") from exc

        return cls(Timestamp.from_iso(str(raw_instant)), zone)
