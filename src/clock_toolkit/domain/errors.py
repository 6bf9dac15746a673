"""Domain errors."""

from __future__ import annotations


class ClockToolkitError(Exception):
    """Base class for all clock toolkit errors."""


class InvalidArgument(ClockToolkitError, ValueError):
    """A required argument was absent or invalid."""


class MalformedPersistedZone(ClockToolkitError, ValueError):
    """A persisted fixed clock names a zone that does not exist."""
