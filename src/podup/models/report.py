"""Inventory, reconciliation and delivery models."""

from __future__ import annotations

from dataclasses import dataclass, field

from podup.models import Bucket
from podup.models.container import ContainerRecord


@dataclass(frozen=True)
class Inventory:
    containers: tuple[ContainerRecord, ...] = ()

    @property
    def checked(self) -> tuple[ContainerRecord, ...]:
        return tuple(c for c in self.containers if c.has_unit_label)

    @property
    def excluded(self) -> tuple[ContainerRecord, ...]:
        return tuple(c for c in self.containers if not c.has_unit_label)

    @property
    def checked_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.checked)

    @property
    def excluded_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.excluded)

    @property
    def units(self) -> dict[str, str]:
        return {c.name: c.unit_name for c in self.checked}


@dataclass(frozen=True)
class Reconciliation:
    checked: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()
    updated: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()
    still_pending: tuple[str, ...] = ()
    already_current: tuple[str, ...] = ()
    units: dict[str, str] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    update_ran: bool = False

    def bucket(self, which: Bucket) -> tuple[str, ...]:
        return {
            Bucket.CHECKED: self.checked,
            Bucket.EXCLUDED: self.excluded,
            Bucket.UPDATED: self.updated,
            Bucket.FAILED: self.failed,
            Bucket.STILL_PENDING: self.still_pending,
            Bucket.ALREADY_CURRENT: self.already_current,
        }[which]

    def counts(self) -> dict[Bucket, int]:
        return {b: len(self.bucket(b)) for b in Bucket}

    def to_dict(self) -> dict:
        data: dict = {b.value: list(self.bucket(b)) for b in Bucket}
        data["units"] = dict(self.units)
        data["warnings"] = list(self.warnings)
        data["update_ran"] = self.update_ran
        return data


@dataclass(frozen=True)
class DeliveryResult:
    status_code: int | None = None
    body: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


@dataclass(frozen=True)
class PipelineResult:
    reconciliation: Reconciliation
    message: str
    delivered_message: str
    delivery: DeliveryResult | None = None

    @property
    def truncated(self) -> bool:
        return self.delivered_message != self.message
