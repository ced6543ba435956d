"""Map lookup failures to user-facing CLI messages."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from gradle_versions.errors import (
    MalformedCatalogError,
    NoCacheAvailableError,
    RemoteUnavailableError,
    VersionParseError,
)


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn known failures into a one-line message on stderr and exit code 1."""
    try:
        yield
    except NoCacheAvailableError as e:
        typer.echo(f"No cached version information available: {e}", err=True)
        typer.echo("Tip: run with '--strategy remote-if-not-cached' while online.", err=True)
        raise typer.Exit(code=1)
    except RemoteUnavailableError as e:
        typer.echo(f"Cannot reach the Gradle versions service and no usable cache: {e}", err=True)
        raise typer.Exit(code=1)
    except MalformedCatalogError as e:
        typer.echo(f"The Gradle versions service returned malformed data: {e}", err=True)
        raise typer.Exit(code=1)
    except VersionParseError as e:
        typer.echo(f"Invalid version string: {e}", err=True)
        raise typer.Exit(code=1)
