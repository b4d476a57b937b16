"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
PodmanOption = typer.Option(None, "--podman", help="podman binary (default: $PODUP_PODMAN_BINARY or podman)")
