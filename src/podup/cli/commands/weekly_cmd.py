"""podup weekly - Run scheduled maintenance scripts."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from podup.config.settings import settings
from podup.core.wrapper import run_scripts


def weekly(
    scripts: Optional[List[str]] = typer.Argument(None, help="Scripts to run (default: $PODUP_WEEKLY_SCRIPTS)"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for per-script logs"),
) -> None:
    """Run each script in turn, logging its output to <log-dir>/<name>.log.

    A failing script is reported as a warning and never stops the rest.
    """
    scripts = scripts or settings.weekly_scripts
    if not scripts:
        typer.echo("No scripts given and PODUP_WEEKLY_SCRIPTS is empty.", err=True)
        raise typer.Exit(code=1)

    outcomes = run_scripts(scripts, log_dir or settings.weekly_log_dir)
    failures = [o for o in outcomes if not o.ok]
    for o in failures:
        typer.echo(f"Warning: {o.script} reported a problem (see log at {o.log_path})")

    if failures:
        typer.echo(f"Finished with {len(failures)} warning(s).")
    else:
        typer.echo("All scripts executed successfully!")
