"""gradle-versions list - List published Gradle versions."""

from __future__ import annotations

from typing import Optional

import typer

from gradle_versions.cli.errors import reported_errors
from gradle_versions.cli.options import OutputOption, StrategyOption
from gradle_versions.core.version_catalog import VersionCatalog
from gradle_versions.models import LookupStrategy
from gradle_versions.output.formatters import output_versions


def list_versions(
    output: str = OutputOption,
    strategy: LookupStrategy = StrategyOption,
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show only the N newest versions"),
) -> None:
    """List final Gradle versions and active release candidates, newest first."""
    with reported_errors():
        versions = VersionCatalog().fetch(strategy)
    if limit:
        versions = versions[:limit]
    output_versions(versions, output)
