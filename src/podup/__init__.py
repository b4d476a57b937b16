"""Podman auto-update reconciler with a Slack report."""

__version__ = "0.1.0"
