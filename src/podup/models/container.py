"""Container and update-status models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class UpdateStatus(enum.Enum):
    PENDING = "pending"
    UPDATED = "updated"
    FAILED = "failed"
    CURRENT = "false"
    UNKNOWN = "unknown"

    @classmethod
    def from_str(cls, s: str) -> UpdateStatus:
        for member in cls:
            if member.value == s:
                return member
        return cls.UNKNOWN


@dataclass(frozen=True)
class ContainerRecord:
    name: str = ""
    id: str = ""
    unit_name: str = ""

    @property
    def has_unit_label(self) -> bool:
        return bool(self.unit_name)

    @property
    def short_id(self) -> str:
        return self.id[:12]

    @classmethod
    def from_inspect(cls, d: dict, unit_label: str, container_id: str = "") -> ContainerRecord:
        """Build a record from one object of `podman inspect` output."""
        labels = (d.get("Config") or {}).get("Labels") or {}
        return cls(
            name=(d.get("Name") or "").lstrip("/"),
            id=d.get("Id") or container_id,
            unit_name=labels.get(unit_label) or "",
        )


@dataclass(frozen=True)
class StatusSnapshot:
    """Per-container result of one `podman auto-update --dry-run`.

    A container missing from ``statuses`` is current (or unknown to the runtime).
    ``error`` is set when the dry-run exited non-zero or its output was
    unusable; in the latter case the snapshot is empty.
    """

    statuses: dict[str, UpdateStatus] = field(default_factory=dict)
    error: str = ""

    def names_with(self, status: UpdateStatus) -> frozenset[str]:
        return frozenset(name for name, s in self.statuses.items() if s is status)

    def status_of(self, name: str) -> UpdateStatus | None:
        return self.statuses.get(name)

    @property
    def ok(self) -> bool:
        return not self.error
