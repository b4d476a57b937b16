"""Table / JSON / YAML / text output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from podup.models.container import StatusSnapshot
from podup.models.report import Inventory, PipelineResult

console = Console()


def _status_to_dicts(inventory: Inventory, snapshot: StatusSnapshot) -> list[dict[str, Any]]:
    rows = []
    for c in inventory.containers:
        status = snapshot.status_of(c.name)
        rows.append({
            "name": c.name,
            "id": c.id,
            "unit": c.unit_name or None,
            "checked": c.has_unit_label,
            "status": status.value if status else None,
        })
    return rows


def _pipeline_to_dict(result: PipelineResult) -> dict[str, Any]:
    data = result.reconciliation.to_dict()
    data["truncated"] = result.truncated
    data["message"] = result.delivered_message
    if result.delivery is not None:
        data["delivery"] = {
            "status_code": result.delivery.status_code,
            "error": result.delivery.error or None,
        }
    return data


def output_status(inventory: Inventory, snapshot: StatusSnapshot, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_status_to_dicts(inventory, snapshot), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_status_to_dicts(inventory, snapshot), default_flow_style=False))
    else:
        from podup.output.tables import status_table
        console.print(status_table(inventory, snapshot))
        if snapshot.error:
            console.print(f"[yellow]Warning: {snapshot.error}[/yellow]")


def output_pipeline(result: PipelineResult, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_pipeline_to_dict(result), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_pipeline_to_dict(result), default_flow_style=False, allow_unicode=True))
    elif fmt == "text":
        console.print(result.delivered_message, markup=False, highlight=False, emoji=False, soft_wrap=True, end="")
    else:
        from podup.output.tables import message_panel, reconciliation_table
        console.print(reconciliation_table(result.reconciliation))
        console.print(message_panel(result.delivered_message, truncated=result.truncated))
