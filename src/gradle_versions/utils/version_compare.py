"""Gradle version comparison utilities."""

from __future__ import annotations

from gradle_versions.errors import VersionParseError
from gradle_versions.models.version import GradleVersion


def try_parse_version(v: str) -> GradleVersion | None:
    """Parse a version string, returning None on failure."""
    try:
        return GradleVersion(v)
    except VersionParseError:
        return None


def _segment(version: GradleVersion, index: int) -> int:
    return version.release[index] if index < len(version.release) else 0


def classify_update(current: str, latest: str) -> str:
    """Classify the update type between two version strings.

    Returns: "major", "minor", "patch", "up-to-date", or "unknown".
    Pre-release and snapshot moves within the same release count as "patch".
    """
    cur = try_parse_version(current)
    lat = try_parse_version(latest)

    if cur is None or lat is None:
        return "unknown"
    if lat <= cur:
        return "up-to-date"
    if _segment(lat, 0) > _segment(cur, 0):
        return "major"
    if _segment(lat, 1) > _segment(cur, 1):
        return "minor"
    return "patch"
