"""Gradle version identifiers and their total ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from gradle_versions.errors import VersionParseError
from gradle_versions.models import StageKind

if TYPE_CHECKING:
    from gradle_versions.core.capabilities import Capability

VERSION_PATTERN = re.compile(
    r"(?P<release>[0-9]+(?:\.[0-9]+)+)"
    r"(?:-(?P<word>[A-Za-z]+)-(?P<ordinal>[0-9]+)(?P<patch>[a-z])?)?"
    r"(?:-(?P<suffix>SNAPSHOT|(?P<timestamp>[0-9]{14})(?P<offset>[-+][0-9]{4})?))?"
)

# Floating snapshots ("-SNAPSHOT", "-snapshot-N") sort before any dated build.
FLOATING_SNAPSHOT = datetime.min.replace(tzinfo=timezone.utc)

_NO_PATCH = ""


@dataclass(frozen=True)
class Stage:
    """Pre-release qualifier such as ``rc-1`` or ``milestone-3a``."""

    kind: StageKind
    ordinal: int
    patch: str = _NO_PATCH

    @property
    def sort_key(self) -> tuple[int, int, str]:
        return (self.kind.rank, self.ordinal, self.patch)

    def __str__(self) -> str:
        return f"{self.kind.value}-{self.ordinal}{self.patch}"


@dataclass(frozen=True, eq=False)
class GradleVersion:
    """A parsed Gradle version.

    Construction validates ``raw`` and derives every other field, so an
    instance is always complete. Equality and hashing use the raw string
    only, while ``<``/``<=``/``>``/``>=`` follow :func:`compare_versions`.
    Two different strings may therefore rank level without being equal.
    """

    raw: str
    release: tuple[int, ...] = field(init=False)
    stage: Stage | None = field(init=False)
    snapshot: datetime | None = field(init=False)

    def __post_init__(self) -> None:
        release, stage, snapshot = _parse(self.raw)
        object.__setattr__(self, "release", release)
        object.__setattr__(self, "stage", stage)
        object.__setattr__(self, "snapshot", snapshot)

    @property
    def is_snapshot(self) -> bool:
        return self.snapshot is not None

    @property
    def is_final(self) -> bool:
        return self.stage is None and self.snapshot is None

    @property
    def base_version(self) -> GradleVersion:
        """The final release this version leads to ('1.2-rc-1' -> '1.2')."""
        if self.is_final:
            return self
        return GradleVersion(self.raw.split("-", 1)[0])

    @property
    def sort_key(self) -> tuple:
        """Tuple whose natural ordering matches :func:`compare_versions`."""
        # Final releases rank above any stage, undated above any snapshot.
        stage_key = (1, 0, 0, _NO_PATCH) if self.stage is None else (0, *self.stage.sort_key)
        snapshot_key = (1, FLOATING_SNAPSHOT) if self.snapshot is None else (0, self.snapshot)
        return (self.release, stage_key, snapshot_key)

    def supports(self, capability: Capability | str) -> bool:
        # capabilities builds its table from this module
        from gradle_versions.core.capabilities import supports

        return supports(capability, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradleVersion):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __lt__(self, other: GradleVersion) -> bool:
        if not isinstance(other, GradleVersion):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __le__(self, other: GradleVersion) -> bool:
        if not isinstance(other, GradleVersion):
            return NotImplemented
        return compare_versions(self, other) <= 0

    def __gt__(self, other: GradleVersion) -> bool:
        if not isinstance(other, GradleVersion):
            return NotImplemented
        return compare_versions(self, other) > 0

    def __ge__(self, other: GradleVersion) -> bool:
        if not isinstance(other, GradleVersion):
            return NotImplemented
        return compare_versions(self, other) >= 0

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"GradleVersion({self.raw!r})"


def parse_version(raw: str) -> GradleVersion:
    """Parse a version string, raising VersionParseError when malformed."""
    return GradleVersion(raw)


def compare_versions(a: GradleVersion, b: GradleVersion) -> int:
    """Return -1, 0 or 1 as ``a`` ranks below, level with or above ``b``."""
    key_a, key_b = a.sort_key, b.sort_key
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def base_version(version: GradleVersion) -> GradleVersion:
    return version.base_version


def _parse(raw: str) -> tuple[tuple[int, ...], Stage | None, datetime | None]:
    match = VERSION_PATTERN.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise VersionParseError(f"'{raw}' is not a valid Gradle version string (examples: '1.0', '1.0-rc-1')")

    word = match.group("word")
    try:
        release = tuple(int(p) for p in match.group("release").split("."))
        ordinal = int(match.group("ordinal")) if word is not None else 0
    except ValueError as exc:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise VersionParseError(f"'{raw[:40]}...' has a numeric component too long to convert") from exc

    stage: Stage | None = None
    if word is not None:
        # "snapshot" stays a stage of kind OTHER as well as a floating snapshot;
        # see decision 7 in DESIGN.md.
        stage = Stage(
            kind=StageKind.from_word(word),
            ordinal=ordinal,
            patch=match.group("patch") or _NO_PATCH,
        )

    snapshot: datetime | None
    if word == "snapshot" or match.group("suffix") == "SNAPSHOT":
        snapshot = FLOATING_SNAPSHOT
    elif match.group("timestamp") is not None:
        snapshot = _parse_timestamp(raw, match.group("timestamp"), match.group("offset"))
    else:
        snapshot = None

    return release, stage, snapshot


def _parse_timestamp(raw: str, stamp: str, offset: str | None) -> datetime:
    """Parse ``yyyyMMddHHmmss`` with an optional ``+HHMM``/``-HHMM`` offset (UTC otherwise)."""
    tz = timezone.utc
    try:
        if offset is not None:
            sign = -1 if offset[0] == "-" else 1
            delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[3:5]))
            tz = timezone(sign * delta)
        return datetime(
            int(stamp[0:4]),
            int(stamp[4:6]),
            int(stamp[6:8]),
            int(stamp[8:10]),
            int(stamp[10:12]),
            int(stamp[12:14]),
            tzinfo=tz,
        )
    except ValueError as exc:
        raise VersionParseError(f"'{raw}' has an invalid snapshot timestamp '{stamp}{offset or ''}'") from exc
