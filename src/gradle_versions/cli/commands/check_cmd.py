"""gradle-versions check <version> - Show capabilities of a Gradle version."""

from __future__ import annotations

from typing import Optional

import typer

from gradle_versions.cli.errors import reported_errors
from gradle_versions.cli.options import OutputOption
from gradle_versions.core.capabilities import Capability, capability_report, supports
from gradle_versions.models.version import parse_version
from gradle_versions.output.formatters import output_capabilities


def check(
    version: str = typer.Argument(help="Gradle version, e.g. 6.8 or 7.0-rc-1"),
    output: str = OutputOption,
    capability: Optional[str] = typer.Option(
        None, "--capability", "-c", help="Check a single capability; exit code 1 when unsupported",
    ),
) -> None:
    """Show which version-gated features a Gradle version provides."""
    with reported_errors():
        parsed = parse_version(version)

    if capability:
        try:
            supported = supports(capability, parsed)
        except ValueError:
            names = ", ".join(f"'{c.value}'" for c in Capability)
            typer.echo(f"Unknown capability '{capability}'. Known: {names}", err=True)
            raise typer.Exit(code=2)
        typer.echo("yes" if supported else "no")
        if not supported:
            raise typer.Exit(code=1)
        return

    output_capabilities(parsed, capability_report(parsed), output)
