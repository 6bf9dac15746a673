"""Domain value objects – small immutable types with validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from clock_toolkit.domain.errors import InvalidArgument


@dataclass(frozen=True)
class Timestamp:
    """UTC timestamp value object."""

    dt: datetime

    def __post_init__(self) -> None:
        if self.dt.tzinfo is None or self.dt.utcoffset() is None:
            raise InvalidArgument(f"Timestamp requires a timezone-aware datetime: {self.dt!r}")
        if self.dt.tzinfo is not timezone.utc:
            object.__setattr__(self, "dt", self.dt.astimezone(timezone.utc))

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(dt=datetime.now(timezone.utc))

    @classmethod
    def from_iso(cls, iso: str) -> "Timestamp":
        text = iso.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidArgument(f"Invalid ISO-8601 instant: {iso!r}") from exc
        return cls(dt=dt)

    def iso(self) -> str:
        return self.dt.isoformat().replace("+00:00", "Z")

    def __str__(self) -> str:
        return self.iso()


@dataclass(frozen=True)
class ZoneId:
    """Canonical IANA time-zone identifier, e.g. ``America/Chicago``."""

    id: str

    UTC: ClassVar["ZoneId"]

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidArgument("zone id must not be empty")
        try:
            ZoneInfo(self.id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise InvalidArgument(f"Unknown zone id: {self.id!r}") from exc

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.id)

    @classmethod
    def system_default(cls) -> "ZoneId":
        """Resolve the process default zone as it is right now."""
        tz = os.environ.get("TZ", "").lstrip(":")
        if tz:
            try:
                return cls(tz)
            except InvalidArgument:
                pass

        # /etc/localtime -> /usr/share/zoneinfo/Europe/Berlin
        localtime = os.path.realpath("/etc/localtime")
        marker = "zoneinfo" + os.sep
        if marker in localtime:
            try:
                return cls(localtime.split(marker, 1)[1])
            except InvalidArgument:
                pass

        return cls.UTC

    def __str__(self) -> str:
        return self.id


ZoneId.UTC = ZoneId("UTC")
ETC_UTC = ZoneId("Etc/UTC")


@dataclass(frozen=True)
class ClockValue:
    """An instant plus the zone it should be read in."""

    instant: Timestamp
    zone: ZoneId

    def now(self) -> datetime:
        return self.instant.dt.astimezone(self.zone.tzinfo)

    def to_dict(self) -> dict[str, str]:
        return {
            "instant": self.instant.iso(),
            "zone": self.zone.id,
            "local": self.now().isoformat(),
        }

    def __str__(self) -> str:
        return f"{self.instant.iso()} [{self.zone.id}]"
