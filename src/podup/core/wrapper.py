"""Run scheduled maintenance scripts, one log file each."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from podup.models.script import ScriptOutcome

logger = logging.getLogger(__name__)


def log_path_for(script: str, log_dir: Path) -> Path:
    return log_dir / f"{Path(script).name}.log"


def run_script(script: str, log_dir: Path) -> ScriptOutcome:
    log_path = log_path_for(script, log_dir)
    with log_path.open("w", encoding="utf-8") as log_file:
        try:
            proc = subprocess.run([script], stdout=log_file, stderr=subprocess.STDOUT)
        except OSError as e:
            log_file.write(f"Failed to start {script}: {e}\n")
            logger.warning("Could not start %s: %s", script, e)
            return ScriptOutcome(script=script, log_path=log_path, error=str(e))

    if proc.returncode != 0:
        logger.warning("%s exited with code %d", script, proc.returncode)
    return ScriptOutcome(script=script, log_path=log_path, returncode=proc.returncode)


def run_scripts(scripts: list[str], log_dir: Path) -> list[ScriptOutcome]:
    """Run every script in order; a failing script never stops the rest."""
    log_dir.mkdir(parents=True, exist_ok=True)
    return [run_script(script, log_dir) for script in scripts]
