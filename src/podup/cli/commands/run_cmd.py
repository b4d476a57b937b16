"""podup run - Update containers and send the Slack report."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Optional

import typer

from podup.cli.options import PodmanOption
from podup.config.settings import settings
from podup.core.exceptions import PreconditionError, RuntimeCommandError
from podup.core.pipeline import run_pipeline
from podup.core.podman_client import PodmanClient
from podup.output.formatters import output_pipeline

app = typer.Typer()


@app.callback(invoke_without_command=True)
def run(
    output: str = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml, text"),
    podman: Optional[str] = PodmanOption,
    all_sections: bool = typer.Option(
        settings.all_sections, "--all-sections/--conditional-sections",
        help="Always render the failed and still-pending sections",
    ),
    send: bool = typer.Option(True, "--send/--no-send", help="Post the report to Slack"),
    env_file: Optional[Path] = typer.Option(None, "--env-file", help="Bitwarden credential file"),
    secret_id: Optional[str] = typer.Option(None, "--secret-id", help="Bitwarden secret holding the webhook URL"),
) -> None:
    """Run podman auto-update and report what changed to Slack."""
    cfg = settings
    if env_file is not None:
        cfg = dataclasses.replace(cfg, env_file=env_file)
    if secret_id:
        cfg = dataclasses.replace(cfg, webhook_secret_id=secret_id)

    try:
        result = run_pipeline(PodmanClient(podman), send=send, all_sections=all_sections, cfg=cfg)
    except PreconditionError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
    except RuntimeCommandError as e:
        typer.echo(f"Error: {e.message}", err=True)
        if e.output.strip():
            typer.echo(e.output.strip(), err=True)
        raise typer.Exit(code=1)

    output_pipeline(result, output)
    if result.delivery is not None and not result.delivery.ok:
        typer.echo("Warning: Slack delivery did not succeed (see log)", err=True)
