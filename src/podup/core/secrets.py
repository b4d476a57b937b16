"""Bitwarden Secrets Manager lookup of the Slack webhook URL."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from pathlib import Path

from dotenv import load_dotenv

from podup.config.settings import Settings, settings as default_settings
from podup.core.exceptions import PreconditionError

logger = logging.getLogger(__name__)

TOKEN_VAR = "BWS_ACCESS_TOKEN"
_WEBHOOK_ERROR = "Failed to retrieve SLACK_WEBHOOK_URL from Bitwarden."


def load_environment(env_file: Path) -> None:
    """Load the credential file into the process environment."""
    if not env_file.is_file():
        raise PreconditionError(f"Environment file {env_file} not found.", context={"path": str(env_file)})
    load_dotenv(env_file, override=True)
    logger.debug("Loaded environment from %s", env_file)


def require_access_token() -> str:
    token = os.environ.get(TOKEN_VAR, "")
    if not token:
        raise PreconditionError(f"{TOKEN_VAR} is not set.")
    return token


def fetch_webhook_url(secret_id: str, bws_binary: str = "bws") -> str:
    """Read the webhook URL from the ``value`` field of a Bitwarden secret."""
    command = [bws_binary, "secret", "get", secret_id, "--output", "json"]
    try:
        proc = subprocess.run(command, capture_output=True, text=True, env=os.environ.copy())
    except OSError as e:
        raise PreconditionError(_WEBHOOK_ERROR, context={"reason": str(e)}) from e
    if proc.returncode != 0:
        raise PreconditionError(_WEBHOOK_ERROR, context={"returncode": proc.returncode, "stderr": proc.stderr.strip()})

    try:
        data = json.loads(proc.stdout)
    except json.JSONDecodeError as e:
        raise PreconditionError(_WEBHOOK_ERROR, context={"reason": str(e)}) from e

    value = data.get("value") if isinstance(data, dict) else None
    url = str(value or "").replace("\n", "").replace('"', "").strip()
    if not url:
        raise PreconditionError(_WEBHOOK_ERROR, context={"secret_id": secret_id})
    return url


def resolve_webhook_url(cfg: Settings | None = None) -> str:
    cfg = cfg or default_settings
    load_environment(cfg.env_file)
    require_access_token()
    return fetch_webhook_url(cfg.webhook_secret_id, cfg.bws_binary)
