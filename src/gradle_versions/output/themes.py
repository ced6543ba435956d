"""Stage, capability and update color maps."""

from gradle_versions.models import StageKind
from gradle_versions.models.version import GradleVersion

STAGE_COLORS: dict[StageKind, str] = {
    StageKind.MILESTONE: "magenta",
    StageKind.OTHER: "magenta",
    StageKind.PREVIEW: "yellow",
    StageKind.RC: "yellow bold",
}

UPDATE_COLORS: dict[str, str] = {
    "major": "red bold",
    "minor": "yellow",
    "patch": "green",
    "up-to-date": "dim",
    "unknown": "dim",
}


def version_kind(version: GradleVersion) -> str:
    if version.stage is not None:
        return version.stage.kind.value
    if version.is_snapshot:
        return "snapshot"
    return "final"


def styled_kind(version: GradleVersion) -> str:
    kind = version_kind(version)
    if version.stage is not None:
        color = STAGE_COLORS.get(version.stage.kind, "white")
    elif version.is_snapshot:
        color = "dim"
    else:
        color = "green"
    return f"[{color}]{kind}[/{color}]"


def styled_support(supported: bool) -> str:
    return "[green]yes[/green]" if supported else "[red]no[/red]"


def styled_update(update_type: str) -> str:
    color = UPDATE_COLORS.get(update_type, "white")
    return f"[{color}]{update_type}[/{color}]"
