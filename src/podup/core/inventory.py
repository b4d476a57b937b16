"""Enumerate auto-update containers and sort them by unit label."""

from __future__ import annotations

import logging

from podup.config.settings import settings
from podup.core.podman_client import PodmanClient
from podup.models.container import ContainerRecord
from podup.models.report import Inventory

logger = logging.getLogger(__name__)


def build_inventory(podman: PodmanClient) -> Inventory:
    """Inspect every container labelled for registry auto-update.

    Runtime order is preserved. Any failing podman call propagates as
    RuntimeCommandError.
    """
    records: list[ContainerRecord] = []
    for container_id in podman.list_autoupdate_ids(settings.autoupdate_label):
        raw = podman.inspect(container_id)
        record = ContainerRecord.from_inspect(raw, settings.unit_label, container_id=container_id)
        if not record.has_unit_label:
            logger.debug("%s has no %s label, excluding", record.name, settings.unit_label)
        records.append(record)

    inventory = Inventory(containers=tuple(records))
    logger.info(
        "Found %d auto-update container(s): %d with unit label, %d without",
        len(inventory.containers), len(inventory.checked), len(inventory.excluded),
    )
    return inventory
