"""Data models for Gradle version lookup."""

from __future__ import annotations

import enum


class LookupStrategy(enum.Enum):
    """How the published-version catalog is retrieved."""

    # Only read the local cache file. Fail if it is missing or unreadable.
    CACHED_ONLY = "cached-only"
    # Prefer the cache while it is fresh, otherwise download and store it.
    REMOTE_IF_NOT_CACHED = "remote-if-not-cached"
    # Always download, never touch the cache file.
    REMOTE = "remote"


class CacheState(enum.Enum):
    ABSENT = "absent"
    FRESH = "fresh"
    STALE = "stale"


class StageKind(enum.Enum):
    MILESTONE = "milestone"
    OTHER = "other"
    PREVIEW = "preview"
    RC = "rc"

    @classmethod
    def from_word(cls, word: str) -> StageKind:
        for member in (cls.MILESTONE, cls.PREVIEW, cls.RC):
            if member.value == word:
                return member
        return cls.OTHER

    @property
    def rank(self) -> int:
        return STAGE_RANKS[self]


STAGE_RANKS: dict[StageKind, int] = {
    StageKind.MILESTONE: 0,
    StageKind.OTHER: 1,
    StageKind.PREVIEW: 2,
    StageKind.RC: 3,
}
