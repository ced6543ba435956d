"""Published Gradle versions, retrieved remotely or from the local cache."""

from __future__ import annotations

import enum
import logging

from gradle_versions.config.settings import settings
from gradle_versions.core.version_cache import VersionCache
from gradle_versions.core.versions_client import VersionsClient
from gradle_versions.errors import (
    CachePersistError,
    MalformedCatalogError,
    NoCacheAvailableError,
    RemoteUnavailableError,
    VersionParseError,
)
from gradle_versions.models import CacheState, LookupStrategy
from gradle_versions.models.catalog import CatalogEntry, parse_catalog
from gradle_versions.models.version import GradleVersion

logger = logging.getLogger(__name__)


class CacheAction(enum.Enum):
    DOWNLOAD = "download"
    READ_CACHE = "read-cache"
    FAIL_NO_CACHE = "fail-no-cache"
    DOWNLOAD_AND_CACHE = "download-and-cache"
    READ_CACHE_ELSE_DOWNLOAD = "read-cache-else-download"
    DOWNLOAD_ELSE_READ_CACHE = "download-else-read-cache"


_LOOKUP_PLAN: dict[tuple[LookupStrategy, CacheState], CacheAction] = {
    (LookupStrategy.REMOTE, CacheState.ABSENT): CacheAction.DOWNLOAD,
    (LookupStrategy.REMOTE, CacheState.FRESH): CacheAction.DOWNLOAD,
    (LookupStrategy.REMOTE, CacheState.STALE): CacheAction.DOWNLOAD,
    (LookupStrategy.CACHED_ONLY, CacheState.ABSENT): CacheAction.FAIL_NO_CACHE,
    (LookupStrategy.CACHED_ONLY, CacheState.FRESH): CacheAction.READ_CACHE,
    (LookupStrategy.CACHED_ONLY, CacheState.STALE): CacheAction.READ_CACHE,
    (LookupStrategy.REMOTE_IF_NOT_CACHED, CacheState.ABSENT): CacheAction.DOWNLOAD_AND_CACHE,
    (LookupStrategy.REMOTE_IF_NOT_CACHED, CacheState.FRESH): CacheAction.READ_CACHE_ELSE_DOWNLOAD,
    (LookupStrategy.REMOTE_IF_NOT_CACHED, CacheState.STALE): CacheAction.DOWNLOAD_ELSE_READ_CACHE,
}


def plan_lookup(strategy: LookupStrategy, cache_state: CacheState) -> CacheAction:
    """Decide how to obtain the catalog for a strategy and cache state. No I/O."""
    return _LOOKUP_PLAN[(strategy, cache_state)]


def filter_versions(entries: list[CatalogEntry], minimum: GradleVersion) -> list[GradleVersion]:
    """Return final versions plus active release candidates, highest first.

    Broken builds, snapshots and inactive release candidates are dropped, as
    is anything whose base version is below ``minimum``. An entry that
    survives the filter but carries an invalid version string raises
    MalformedCatalogError.
    """
    versions: list[GradleVersion] = []
    for entry in entries:
        if entry.is_broken or entry.is_snapshot:
            continue
        if entry.is_candidate_for_other_version and not entry.is_active_rc:
            continue
        try:
            version = GradleVersion(entry.version)
        except VersionParseError as exc:
            raise MalformedCatalogError(f"Catalog contains an invalid version: {exc}") from exc
        if version.base_version >= minimum:
            versions.append(version)
    versions.sort(key=lambda v: v.sort_key, reverse=True)
    return versions


class VersionCatalog:
    """Provides the Gradle versions available from services.gradle.org.

    The version information is optionally cached on the local file system,
    see LookupStrategy for the available retrieval policies.
    """

    def __init__(
        self,
        client: VersionsClient | None = None,
        cache: VersionCache | None = None,
        minimum_version: str | None = None,
    ):
        self.client = client or VersionsClient()
        self.cache = cache or VersionCache()
        self.minimum_version = GradleVersion(minimum_version or settings.minimum_supported_version)

    def fetch(self, strategy: LookupStrategy = LookupStrategy.REMOTE_IF_NOT_CACHED) -> list[GradleVersion]:
        """Return all supported final versions plus active release candidates, highest first."""
        entries = self._retrieve(strategy)
        return filter_versions(entries, self.minimum_version)

    def _retrieve(self, strategy: LookupStrategy) -> list[CatalogEntry]:
        if strategy == LookupStrategy.REMOTE:
            # Skip the cache file entirely, not even a stat.
            state = CacheState.ABSENT
        else:
            state = self.cache.state()
        action = plan_lookup(strategy, state)
        logger.debug("Version lookup strategy=%s cache=%s -> %s", strategy.value, state.value, action.value)

        if action == CacheAction.DOWNLOAD:
            return self._download()

        if action == CacheAction.FAIL_NO_CACHE:
            raise NoCacheAvailableError(
                "Could not get Gradle version information from cache and remote update was disabled"
            )

        if action == CacheAction.READ_CACHE:
            entries = self._read_cache()
            if entries is None:
                raise NoCacheAvailableError(
                    f"Cache file {self.cache.path} is unreadable and remote update was disabled"
                )
            return entries

        if action == CacheAction.DOWNLOAD_AND_CACHE:
            return self._download_and_cache()

        if action == CacheAction.READ_CACHE_ELSE_DOWNLOAD:
            entries = self._read_cache()
            if entries is not None:
                return entries
            return self._download_and_cache()

        # DOWNLOAD_ELSE_READ_CACHE
        try:
            return self._download_and_cache()
        except RemoteUnavailableError as exc:
            logger.debug("Remote lookup failed, falling back to stale cache %s", self.cache.path)
            entries = self._read_cache()
            if entries is None:
                raise RemoteUnavailableError(
                    "Cannot collect Gradle version information remotely nor locally."
                ) from exc
            return entries

    def _download(self) -> list[CatalogEntry]:
        return self._decode_remote(self.client.download())

    def _download_and_cache(self) -> list[CatalogEntry]:
        payload = self.client.download()
        entries = self._decode_remote(payload)
        try:
            self.cache.write(payload)
        except CachePersistError:
            # Cache writes are best-effort.
            logger.debug("Ignoring cache write failure", exc_info=True)
        return entries

    def _decode_remote(self, payload: str) -> list[CatalogEntry]:
        try:
            return parse_catalog(payload)
        except ValueError as exc:
            raise RemoteUnavailableError(f"Server returned malformed version information: {exc}") from exc

    def _read_cache(self) -> list[CatalogEntry] | None:
        payload = self.cache.read()
        if payload is None:
            return None
        try:
            return parse_catalog(payload)
        except ValueError:
            logger.debug("Corrupt cache file %s, ignoring", self.cache.path, exc_info=True)
            return None


def fetch_versions(strategy: LookupStrategy = LookupStrategy.REMOTE_IF_NOT_CACHED) -> list[GradleVersion]:
    """Fetch the published versions using the default settings."""
    return VersionCatalog().fetch(strategy)
