"""Exceptions raised by the podup core."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class PodupError(Exception):
    """Base error carrying a message and some context for the log."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        logger.debug("%s | context=%s", message, self.context)


class PreconditionError(PodupError):
    """Credentials or the webhook URL are unavailable; nothing can be reported."""


class RuntimeCommandError(PodupError):
    """A checked external command exited non-zero or could not be started."""

    def __init__(self, command: list[str], returncode: int, output: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"Command '{' '.join(command)}' failed with exit code {returncode}",
            context={"command": command, "returncode": returncode, "output": output.strip()},
        )
