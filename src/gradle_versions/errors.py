"""Exception types raised by version parsing and catalog lookup."""

from __future__ import annotations


class VersionParseError(ValueError):
    """A string is not a valid Gradle version (examples: '1.0', '1.0-rc-1')."""


class FetchError(Exception):
    """The published-version catalog could not be obtained."""


class RemoteUnavailableError(FetchError):
    """Download of the version catalog failed (network, timeout, HTTP or decode error)."""


class NoCacheAvailableError(FetchError):
    """Cache-only lookup was requested but no readable cache file exists."""


class MalformedCatalogError(FetchError):
    """The catalog decoded fine but one of its records holds an invalid version."""


class CachePersistError(OSError):
    """The catalog cache file could not be written. Never fails a lookup."""
