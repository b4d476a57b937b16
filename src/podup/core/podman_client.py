"""Podman CLI wrapper."""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass

from podup.config.settings import settings
from podup.core.exceptions import RuntimeCommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    command: list[str]
    returncode: int
    output: str


class PodmanClient:
    """Thin wrapper around the podman command line."""

    def __init__(self, binary: str | None = None):
        self.binary = binary or settings.podman_binary

    def _run(self, *args: str, check: bool = True, merge_stderr: bool = False) -> CommandResult:
        command = [self.binary, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            proc = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise RuntimeCommandError(command, 127, str(e)) from e

        output = proc.stdout or ""
        if check and proc.returncode != 0:
            raise RuntimeCommandError(command, proc.returncode, proc.stderr or output)
        return CommandResult(command=command, returncode=proc.returncode, output=output)

    def list_autoupdate_ids(self, label: str | None = None) -> list[str]:
        """Return ids of running containers carrying the auto-update label."""
        label = label or settings.autoupdate_label
        result = self._run("ps", "--filter", f"label={label}", "--format", "{{.ID}}")
        return [line.strip() for line in result.output.splitlines() if line.strip()]

    def inspect(self, container_id: str) -> dict:
        result = self._run("inspect", container_id)
        try:
            data = json.loads(result.output)
        except json.JSONDecodeError as e:
            raise RuntimeCommandError(result.command, result.returncode, f"invalid inspect output: {e}") from e
        if isinstance(data, list):
            data = data[0] if data else {}
        if not isinstance(data, dict):
            raise RuntimeCommandError(result.command, result.returncode, "unexpected inspect output")
        return data

    def auto_update(self) -> CommandResult:
        """Apply pending updates. Non-zero exit codes are returned, not raised."""
        return self._run("auto-update", check=False, merge_stderr=True)

    def auto_update_dry_run(self) -> CommandResult:
        return self._run("auto-update", "--dry-run", "--format", "json", check=False)
