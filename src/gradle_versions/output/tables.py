"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from gradle_versions.core.capabilities import Capability, MINIMUM_VERSIONS
from gradle_versions.models.version import GradleVersion
from gradle_versions.models.wrapper import WrapperInfo
from gradle_versions.output.themes import styled_kind, styled_support, styled_update


def version_list_table(versions: list[GradleVersion]) -> Table:
    table = Table(title="Published Gradle Versions", expand=False, show_lines=False)
    table.add_column("Version", style="bold white", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Base", style="cyan", no_wrap=True)

    for v in versions:
        table.add_row(v.raw, styled_kind(v), v.base_version.raw)
    return table


def capability_table(version: GradleVersion, report: dict[Capability, bool]) -> Table:
    table = Table(title=f"Capabilities of Gradle {version.raw}", expand=False)
    table.add_column("Capability", style="cyan", no_wrap=True)
    table.add_column("Since", justify="right", style="dim")
    table.add_column("Supported", no_wrap=True)

    for cap, supported in report.items():
        table.add_row(cap.value, MINIMUM_VERSIONS[cap], styled_support(supported))
    return table


def wrapper_panel(info: WrapperInfo, latest: str | None = None, update_type: str | None = None) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Project", str(info.project_dir))
    table.add_row("Properties", str(info.properties_file))
    table.add_row("Distribution", info.distribution_url or "-")
    table.add_row("Version", info.version.raw if info.version else "-")
    if latest:
        table.add_row("Latest", latest)
    if update_type:
        table.add_row("Update", styled_update(update_type))

    return Panel(table, title="[bold]Gradle Wrapper[/bold]", border_style="blue")
