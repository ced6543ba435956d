"""Version catalog records as published by services.gradle.org."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# JSON keys
VERSION = "version"
SNAPSHOT = "snapshot"
ACTIVE_RC = "activeRc"
RC_FOR = "rcFor"
BROKEN = "broken"


def _as_bool(value: Any) -> bool:
    """Booleans arrive either as JSON booleans or as "true"/"false" strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


@dataclass
class CatalogEntry:
    version: str = ""
    is_snapshot: bool = False
    is_active_rc: bool = False
    rc_for: str = ""
    is_broken: bool = False

    @property
    def is_candidate_for_other_version(self) -> bool:
        return bool(self.rc_for)

    @classmethod
    def from_dict(cls, d: dict) -> CatalogEntry:
        if not d:
            return cls()
        return cls(
            version=str(d.get(VERSION) or ""),
            is_snapshot=_as_bool(d.get(SNAPSHOT)),
            is_active_rc=_as_bool(d.get(ACTIVE_RC)),
            rc_for=str(d.get(RC_FOR) or ""),
            is_broken=_as_bool(d.get(BROKEN)),
        )


def parse_catalog(payload: str) -> list[CatalogEntry]:
    """Decode a raw catalog payload (a JSON array of objects).

    Raises ValueError when the payload is not JSON or not an array of objects.
    """
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    entries: list[CatalogEntry] = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError(f"expected a JSON object, got {type(item).__name__}")
        entries.append(CatalogEntry.from_dict(item))
    return entries
