"""gradle-versions wrapper [dir] - Inspect a project's Gradle wrapper."""

from __future__ import annotations

from pathlib import Path

import typer

from gradle_versions.cli.errors import reported_errors
from gradle_versions.cli.options import OutputOption, StrategyOption
from gradle_versions.core.latest_resolver import LatestVersionResolver
from gradle_versions.core.wrapper import inspect_wrapper
from gradle_versions.models import LookupStrategy
from gradle_versions.output.formatters import output_wrapper
from gradle_versions.utils.version_compare import classify_update


def wrapper(
    project_dir: Path = typer.Argument(Path("."), help="Project root containing gradle/wrapper"),
    output: str = OutputOption,
    strategy: LookupStrategy = StrategyOption,
    check_updates: bool = typer.Option(True, "--check/--no-check", help="Compare with the latest published version"),
) -> None:
    """Show the Gradle distribution pinned by the wrapper and whether it is current."""
    with reported_errors():
        info = inspect_wrapper(project_dir)

    if not info.found:
        typer.echo(f"No distributionUrl found in {info.properties_file}", err=True)
        raise typer.Exit(code=1)

    latest = None
    update_type = None
    if check_updates:
        latest = LatestVersionResolver(strategy=strategy).resolve()
        current = info.version.raw if info.version else ""
        update_type = classify_update(current, latest)

    output_wrapper(info, latest, update_type, output)
