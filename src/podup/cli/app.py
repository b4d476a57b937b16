"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="podup",
    help="podup - Podman auto-update with a Slack report.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from podup.cli.commands.run_cmd import app as run_app
    from podup.cli.commands.status_cmd import app as status_app
    from podup.cli.commands.weekly_cmd import weekly

    app.add_typer(run_app, name="run", help="Update containers and send the Slack report")
    app.add_typer(status_app, name="status", help="Show auto-update containers and pending updates")
    # plain command so options may follow the script list
    app.command("weekly", help="Run scheduled maintenance scripts")(weekly)


_register_commands()


def main() -> None:
    app()
