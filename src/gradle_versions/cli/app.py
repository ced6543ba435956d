"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="gradle-versions",
    help="Gradle versions - parse, compare and look up published Gradle releases.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookup details to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from gradle_versions.cli.commands.list_cmd import list_versions
    from gradle_versions.cli.commands.latest_cmd import latest
    from gradle_versions.cli.commands.check_cmd import check
    from gradle_versions.cli.commands.wrapper_cmd import wrapper

    app.command("list", help="List published Gradle versions")(list_versions)
    app.command("latest", help="Print the latest Gradle version")(latest)
    app.command("check", help="Show capabilities of a Gradle version")(check)
    app.command("wrapper", help="Inspect a project's Gradle wrapper")(wrapper)


_register_commands()


def main() -> None:
    app()
