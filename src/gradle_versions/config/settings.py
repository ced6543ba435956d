"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

DEFAULT_VERSIONS_URL = "https://services.gradle.org/versions/all"


def _default_cache_dir() -> Path:
    """Return the directory holding the cached version catalog.

    Follows the XDG base directory layout: XDG_CACHE_HOME when set,
    otherwise ~/.cache.
    """
    xdg = os.environ.get("XDG_CACHE_HOME", "")
    if xdg:
        return Path(xdg) / "tooling" / "gradle"
    return Path.home() / ".cache" / "tooling" / "gradle"


def _default_versions_url() -> str:
    return os.environ.get("GRADLE_VERSIONS_URL", "") or DEFAULT_VERSIONS_URL


@dataclass
class Settings:
    cache_dir: Path = field(default_factory=_default_cache_dir)
    versions_url: str = field(default_factory=_default_versions_url)
    minimum_supported_version: str = "2.6"
    connect_timeout: float = 10.0  # seconds
    read_timeout: float = 10.0  # seconds
    cache_max_age: timedelta = timedelta(days=1)
    fallback_version: str = "8.2.1"

    @property
    def cache_file(self) -> Path:
        return self.cache_dir / "versions.json"


# Global singleton
settings = Settings()
