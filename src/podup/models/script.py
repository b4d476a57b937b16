"""Weekly wrapper outcome model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScriptOutcome:
    script: str
    log_path: Path
    returncode: int | None = None
    error: str = ""  # set when the script could not be started

    @property
    def ok(self) -> bool:
        return not self.error and self.returncode == 0
