"""podup status - Show auto-update containers and pending updates."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from podup.cli.options import OutputOption, PodmanOption
from podup.core.exceptions import RuntimeCommandError
from podup.core.inventory import build_inventory
from podup.core.podman_client import PodmanClient
from podup.core.reconciler import take_snapshot
from podup.models.container import StatusSnapshot
from podup.output.formatters import output_status

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def status(
    output: str = OutputOption,
    podman: Optional[str] = PodmanOption,
) -> None:
    """List auto-update containers with their dry-run status. Nothing is updated."""
    client = PodmanClient(podman)
    try:
        with console.status("[bold cyan]Inspecting containers…") as spinner:
            inventory = build_inventory(client)
            if inventory.checked:
                spinner.update("[bold cyan]Checking registries…")
                snapshot = take_snapshot(client, "status")
            else:
                snapshot = StatusSnapshot()
    except RuntimeCommandError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if not inventory.containers:
        console.print("[dim]No auto-update containers found.[/dim]")
        return

    output_status(inventory, snapshot, output)
