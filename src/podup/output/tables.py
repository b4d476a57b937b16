"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from podup.models import Bucket
from podup.models.container import StatusSnapshot
from podup.models.report import Inventory, Reconciliation
from podup.output.themes import styled_bucket, styled_status


def status_table(inventory: Inventory, snapshot: StatusSnapshot) -> Table:
    table = Table(title="Auto-Update Containers", expand=True)
    table.add_column("Container", style="bold white", no_wrap=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Systemd Unit", style="cyan")
    table.add_column("Update", no_wrap=True)

    for c in inventory.containers:
        if c.has_unit_label:
            unit = c.unit_name
            update = styled_status(snapshot.status_of(c.name))
        else:
            unit = "[dim]-[/dim]"
            update = "[dim]excluded[/dim]"
        table.add_row(c.name, c.short_id, unit, update)
    return table


def reconciliation_table(result: Reconciliation) -> Table:
    table = Table(title="Auto-Update Result", expand=True)
    table.add_column("Bucket", no_wrap=True)
    table.add_column("Count", justify="right", style="bold")
    table.add_column("Containers")

    for b in Bucket:
        names = result.bucket(b)
        table.add_row(styled_bucket(b), str(len(names)), ", ".join(names) or "[dim]None[/dim]")
    return table


def message_panel(message: str, truncated: bool = False) -> Panel:
    title = "[bold]Slack Message[/bold]" + (" [yellow](truncated)[/yellow]" if truncated else "")
    return Panel(Text(message.rstrip("\n")), title=title, border_style="blue")
