"""Shared CLI options."""

from __future__ import annotations

import typer

from gradle_versions.models import LookupStrategy

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
StrategyOption = typer.Option(
    LookupStrategy.REMOTE_IF_NOT_CACHED,
    "--strategy",
    "-s",
    case_sensitive=False,
    help="Catalog lookup strategy",
)
