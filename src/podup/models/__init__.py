"""Data models for podup."""

from __future__ import annotations

import enum


class Bucket(enum.Enum):
    """Disposition groups a reconciliation sorts containers into."""

    CHECKED = "checked"
    EXCLUDED = "excluded"
    UPDATED = "updated"
    FAILED = "failed"
    STILL_PENDING = "still-pending"
    ALREADY_CURRENT = "already-current"
