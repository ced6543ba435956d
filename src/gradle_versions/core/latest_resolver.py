"""Resolve the latest published Gradle version once, with an offline fallback."""

from __future__ import annotations

import logging

from gradle_versions.config.settings import settings
from gradle_versions.core.version_catalog import VersionCatalog
from gradle_versions.errors import FetchError
from gradle_versions.models import LookupStrategy

logger = logging.getLogger(__name__)


class LatestVersionResolver:
    """Memoizes the newest published version for the lifetime of the instance.

    When the catalog cannot be fetched (typically no network connection) or
    comes back empty, ``fallback`` is returned instead and remembered just
    the same, so a failing lookup is attempted only once.
    """

    def __init__(
        self,
        catalog: VersionCatalog | None = None,
        strategy: LookupStrategy = LookupStrategy.REMOTE,
        fallback: str | None = None,
    ):
        self.catalog = catalog or VersionCatalog()
        self.strategy = strategy
        self.fallback = fallback or settings.fallback_version
        self._resolved: str | None = None

    def resolve(self) -> str:
        if self._resolved is None:
            self._resolved = self._search() or self.fallback
        return self._resolved

    def _search(self) -> str | None:
        try:
            versions = self.catalog.fetch(self.strategy)
        except FetchError:
            logger.debug("Could not look up the latest Gradle version, using %s", self.fallback, exc_info=True)
            return None
        if not versions:
            return None
        latest = versions[0].raw
        logger.info("Last version of Gradle is %s", latest)
        return latest
