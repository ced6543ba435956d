"""gradle-versions latest - Print the latest Gradle version."""

from __future__ import annotations

import typer

from gradle_versions.cli.errors import reported_errors
from gradle_versions.cli.options import StrategyOption
from gradle_versions.core.latest_resolver import LatestVersionResolver
from gradle_versions.core.version_catalog import VersionCatalog
from gradle_versions.models import LookupStrategy


def latest(
    strategy: LookupStrategy = StrategyOption,
    strict: bool = typer.Option(False, "--strict", help="Fail instead of printing the offline fallback version"),
) -> None:
    """Print the newest published Gradle version."""
    if strict:
        with reported_errors():
            versions = VersionCatalog().fetch(strategy)
        if not versions:
            typer.echo("No Gradle versions published.", err=True)
            raise typer.Exit(code=1)
        typer.echo(versions[0].raw)
        return

    resolver = LatestVersionResolver(strategy=strategy)
    typer.echo(resolver.resolve())
