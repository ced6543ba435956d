"""On-disk cache of the raw version catalog.

The cache is a single file holding the last successfully downloaded payload
verbatim. Its modification time decides freshness: a file younger than
``cache_max_age`` (one day by default) is fresh, anything older is stale but
still usable as a fallback when the network is down.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from datetime import timedelta
from pathlib import Path

from gradle_versions.config.settings import settings
from gradle_versions.errors import CachePersistError
from gradle_versions.models import CacheState

logger = logging.getLogger(__name__)


class VersionCache:
    """Reads and writes the cached catalog file."""

    def __init__(self, path: Path | None = None, max_age: timedelta | None = None):
        self.path = path if path is not None else settings.cache_file
        self.max_age = max_age if max_age is not None else settings.cache_max_age

    def state(self, now: float | None = None) -> CacheState:
        """Classify the cache file as absent, fresh or stale."""
        if not self.path.is_file():
            return CacheState.ABSENT
        try:
            mtime = self.path.stat().st_mtime
        except OSError:
            logger.debug("Could not stat cache file %s", self.path, exc_info=True)
            return CacheState.ABSENT
        now = time.time() if now is None else now
        if mtime > now - self.max_age.total_seconds():
            return CacheState.FRESH
        return CacheState.STALE

    def read(self) -> str | None:
        """Return the cached payload, or None if it cannot be read."""
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.debug("Could not read cache file %s", self.path, exc_info=True)
            return None

    def write(self, payload: str) -> None:
        """Replace the cache file with ``payload``.

        The payload goes to a temporary file in the same directory first and
        is then renamed over the cache file, so readers never see a partial
        write. Raises CachePersistError on any filesystem error.
        """
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
            raise CachePersistError(f"Could not write cache file {self.path}: {exc}") from exc
        logger.debug("Stored version information in %s", self.path)
