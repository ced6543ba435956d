"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from gradle_versions.core.capabilities import Capability, MINIMUM_VERSIONS
from gradle_versions.models.version import GradleVersion
from gradle_versions.models.wrapper import WrapperInfo
from gradle_versions.output.themes import version_kind

console = Console()


def _version_to_dict(v: GradleVersion) -> dict[str, Any]:
    return {
        "version": v.raw,
        "kind": version_kind(v),
        "base_version": v.base_version.raw,
        "snapshot": v.snapshot.isoformat() if v.snapshot is not None else None,
    }


def output_versions(versions: list[GradleVersion], fmt: str) -> None:
    if fmt == "json":
        data = [_version_to_dict(v) for v in versions]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_version_to_dict(v) for v in versions]
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        from gradle_versions.output.tables import version_list_table
        console.print(version_list_table(versions))


def output_capabilities(version: GradleVersion, report: dict[Capability, bool], fmt: str) -> None:
    if fmt in ("json", "yaml"):
        data = {
            "version": version.raw,
            "base_version": version.base_version.raw,
            "capabilities": [
                {"name": cap.value, "since": MINIMUM_VERSIONS[cap], "supported": supported}
                for cap, supported in report.items()
            ],
        }
        if fmt == "json":
            console.print_json(json.dumps(data, indent=2))
        else:
            console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        from gradle_versions.output.tables import capability_table
        console.print(capability_table(version, report))


def output_wrapper(info: WrapperInfo, latest: str | None, update_type: str | None, fmt: str) -> None:
    if fmt in ("json", "yaml"):
        data = {
            "project": str(info.project_dir),
            "distribution_url": info.distribution_url,
            "version": info.version.raw if info.version else None,
            "latest_version": latest,
            "update_type": update_type,
        }
        if fmt == "json":
            console.print_json(json.dumps(data, indent=2))
        else:
            console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        from gradle_versions.output.tables import wrapper_panel
        console.print(wrapper_panel(info, latest=latest, update_type=update_type))
