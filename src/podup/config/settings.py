"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_WEBHOOK_SECRET_ID = "1dd0cfbe-b2b2-4c50-bf8d-b2bc00ea08a4"


def _default_env_file() -> Path:
    return Path(os.environ.get("PODUP_ENV_FILE", "") or "/etc/bitwarden/env")


def _default_weekly_log_dir() -> Path:
    return Path(os.environ.get("PODUP_WEEKLY_LOG_DIR", "") or "/var/log/weekly-scripts")


def _default_weekly_scripts() -> list[str]:
    raw = os.environ.get("PODUP_WEEKLY_SCRIPTS", "")
    return [s for s in raw.split(os.pathsep) if s]


def _default_max_message_length() -> int:
    """Slack rejects text blocks around 3000 characters; stay below that."""
    raw = os.environ.get("PODUP_MAX_MESSAGE_LENGTH", "")
    try:
        return int(raw) if raw else 2900
    except ValueError:
        return 2900


def _default_all_sections() -> bool:
    return os.environ.get("PODUP_REPORT_SECTIONS", "conditional").lower() == "all"


def _default_webhook_timeout() -> float:
    raw = os.environ.get("PODUP_WEBHOOK_TIMEOUT", "")
    try:
        return float(raw) if raw else 30.0
    except ValueError:
        return 30.0


@dataclass
class Settings:
    env_file: Path = field(default_factory=_default_env_file)
    webhook_secret_id: str = field(
        default_factory=lambda: os.environ.get("PODUP_WEBHOOK_SECRET_ID", "") or DEFAULT_WEBHOOK_SECRET_ID
    )
    bws_binary: str = field(default_factory=lambda: os.environ.get("PODUP_BWS_BINARY", "") or "bws")
    podman_binary: str = field(default_factory=lambda: os.environ.get("PODUP_PODMAN_BINARY", "") or "podman")
    autoupdate_label: str = "io.containers.autoupdate=registry"
    unit_label: str = "PODMAN_SYSTEMD_UNIT"
    max_message_length: int = field(default_factory=_default_max_message_length)
    all_sections: bool = field(default_factory=_default_all_sections)
    webhook_timeout: float = field(default_factory=_default_webhook_timeout)
    weekly_log_dir: Path = field(default_factory=_default_weekly_log_dir)
    weekly_scripts: list[str] = field(default_factory=_default_weekly_scripts)
    default_output: str = "table"

    @property
    def benign_update_warning(self) -> str:
        """Line fragment podman auto-update prints for containers without a unit label."""
        return f"no {self.unit_label} label found"


# Global singleton
settings = Settings()
