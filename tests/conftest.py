"""Shared fixtures: a scripted stand-in for the podman CLI."""

from __future__ import annotations

import json
from typing import Any

import pytest

from podup.core.exceptions import RuntimeCommandError
from podup.core.podman_client import CommandResult


def inspect_payload(name: str, cid: str, unit: str | None = None) -> dict[str, Any]:
    labels = {"io.containers.autoupdate": "registry"}
    if unit:
        labels["PODMAN_SYSTEMD_UNIT"] = unit
    return {"Id": cid, "Name": name, "Config": {"Labels": labels}}


def dry_run_output(statuses: dict[str, str]) -> str:
    return json.dumps([
        {"Unit": f"{name}.service", "ContainerName": name, "Updated": status}
        for name, status in statuses.items()
    ])


class FakePodman:
    """Records every call and replays canned dry-run outputs in order."""

    def __init__(
        self,
        containers: list[dict[str, Any]] | None = None,
        dry_runs: list[str | CommandResult] | None = None,
        update_output: str = "",
        update_returncode: int = 0,
    ):
        self.containers = {c["Id"]: c for c in containers or []}
        self.dry_runs = list(dry_runs or [])
        self.update_output = update_output
        self.update_returncode = update_returncode
        self.calls: list[str] = []
        self.fail_list = False

    def list_autoupdate_ids(self, label: str | None = None) -> list[str]:
        self.calls.append("ps")
        if self.fail_list:
            raise RuntimeCommandError(["podman", "ps"], 125, "cannot connect to podman")
        return list(self.containers)

    def inspect(self, container_id: str) -> dict:
        self.calls.append(f"inspect {container_id}")
        return self.containers[container_id]

    def auto_update(self) -> CommandResult:
        self.calls.append("auto-update")
        return CommandResult(["podman", "auto-update"], self.update_returncode, self.update_output)

    def auto_update_dry_run(self) -> CommandResult:
        self.calls.append("dry-run")
        out = self.dry_runs.pop(0) if self.dry_runs else "[]"
        if isinstance(out, CommandResult):
            return out
        return CommandResult(["podman", "auto-update", "--dry-run"], 0, out)


@pytest.fixture
def fake_podman_factory():
    return FakePodman
