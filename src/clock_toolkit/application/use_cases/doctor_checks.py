"""Use-case: DoctorChecks – validate caching flag, provider discovery, zone data."""

from __future__ import annotations

from dataclasses import dataclass, field

from clock_toolkit.application.default_resolver import (
    CACHED_PROPERTY_KEY,
    CachingPolicy,
    parse_caching_policy,
)
from clock_toolkit.application.ports import ClockSupplierRegistry, ConfigSource, Logger
from clock_toolkit.domain.errors import InvalidArgument
from clock_toolkit.domain.value_objects import ZoneId

# A zone with historical offset transitions; proves real tz data is present.
_PROBE_ZONE = "America/Chicago"


@dataclass
class CheckResult:
    name: str
    passed: bool
    message: str


@dataclass
class DoctorResponse:
    checks: list[CheckResult] = field(default_factory=list)

    @property
    def all_passed(self) -> bool:
        return all(c.passed for c in self.checks)


class DoctorChecks:
    """Run diagnostic checks on the clock environment."""

    def __init__(self, registry: ClockSupplierRegistry, config: ConfigSource, logger: Logger) -> None:
        self._registry = registry
        self._config = config
        self._log = logger

    def execute(self) -> DoctorResponse:
        checks: list[CheckResult] = []

        # 1. Caching flag
        checks.append(self._check_caching_flag())

        # 2. Provider discovery
        checks.append(self._check_providers())

        # 3. Zone database
        checks.append(self._check_zone_database())

        # 4. Local zone
        checks.append(self._check_local_zone())

        return DoctorResponse(checks=checks)

    def _check_caching_flag(self) -> CheckResult:
        """A present flag that is neither true nor false is most likely a typo."""
        raw = self._config.get(CACHED_PROPERTY_KEY)
        policy = parse_caching_policy(raw)
        if raw is None:
            return CheckResult(
                name="caching_flag",
                passed=True,
                message=f"{CACHED_PROPERTY_KEY} not set; default supplier is cached",
            )
        if raw.lower() not in ("true", "false"):
            return CheckResult(
                name="caching_flag",
                passed=False,
                message=f"{CACHED_PROPERTY_KEY}={raw!r} is not a boolean; treated as {policy.value}",
            )
        state = "cached" if policy is CachingPolicy.CACHED else "re-discovered on every get()"
        return CheckResult(
            name="caching_flag",
            passed=True,
            message=f"{CACHED_PROPERTY_KEY}={raw}; default supplier is {state}",
        )

    def _check_providers(self) -> CheckResult:
        """Run one discovery pass and report what it found."""
        try:
            provider = self._registry.discover()
        except Exception as e:
            self._log.error(f"Clock supplier discovery failed: {e}")
            return CheckResult(name="providers", passed=False, message=f"Discovery error: {e}")
        if provider is None:
            return CheckResult(
                name="providers",
                passed=True,
                message="No clock supplier registered; system UTC clock is used",
            )
        cls = type(provider)
        return CheckResult(
            name="providers",
            passed=True,
            message=f"Registered supplier: {cls.__module__}.{cls.__qualname__}",
        )

    def _check_zone_database(self) -> CheckResult:
        try:
            ZoneId(_PROBE_ZONE)
        except InvalidArgument as e:
            return CheckResult(name="zone_database", passed=False, message=f"Zone data unavailable: {e}")
        return CheckResult(name="zone_database", passed=True, message=f"Zone data available ({_PROBE_ZONE} loads)")

    def _check_local_zone(self) -> CheckResult:
        zone = ZoneId.system_default()
        return CheckResult(name="local_zone", passed=True, message=f"Process default zone: {zone}")
