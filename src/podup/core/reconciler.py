"""Work out what `podman auto-update` actually did to each container.

Podman gives no direct "just updated" signal, so a container is inferred to
have been updated when it was pending in the dry-run taken before the update
and is neither pending nor failed in the dry-run taken after it. An image
pushed to the registry between the two snapshots can make this inference
wrong in either direction; that approximation is accepted.
"""

from __future__ import annotations

import json
import logging

from podup.config.settings import settings
from podup.core.podman_client import PodmanClient
from podup.models.container import StatusSnapshot, UpdateStatus
from podup.models.report import Inventory, Reconciliation

logger = logging.getLogger(__name__)


def parse_dry_run(output: str) -> dict[str, UpdateStatus]:
    """Parse `podman auto-update --dry-run --format json` output.

    Raises ValueError when the output is not a JSON array of objects.
    """
    data = json.loads(output) if output.strip() else []
    if data is None:
        return {}
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")

    statuses: dict[str, UpdateStatus] = {}
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"expected an object, got {type(entry).__name__}")
        name = entry.get("ContainerName") or ""
        if name:
            statuses[name] = UpdateStatus.from_str(str(entry.get("Updated", "")))
    return statuses


def take_snapshot(podman: PodmanClient, phase: str) -> StatusSnapshot:
    """Run one dry-run and parse whatever it printed.

    podman exits non-zero when any container's check fails but still prints
    the full report, so the statuses are kept and the exit code is only
    recorded in ``error``. Empty or unparseable output yields an empty
    snapshot.
    """
    result = podman.auto_update_dry_run()
    if result.returncode != 0 and not result.output.strip():
        error = f"{phase} dry-run exited with code {result.returncode} and printed nothing"
        logger.warning(error)
        return StatusSnapshot(error=error)
    try:
        statuses = parse_dry_run(result.output)
    except ValueError as e:
        error = f"could not parse {phase} dry-run output: {e}"
        logger.warning(error)
        return StatusSnapshot(error=error)

    logger.debug("%s snapshot: %d container(s) reported", phase, len(statuses))
    if result.returncode != 0:
        error = f"{phase} dry-run exited with code {result.returncode}"
        logger.warning(error)
        return StatusSnapshot(statuses=statuses, error=error)
    return StatusSnapshot(statuses=statuses)


def run_update(podman: PodmanClient) -> int:
    """Run `podman auto-update` once for its side effects."""
    logger.debug("About to run podman auto-update")
    result = podman.auto_update()
    level = logging.WARNING if result.returncode != 0 else logging.INFO
    benign = settings.benign_update_warning
    for line in result.output.splitlines():
        if line.strip() and benign not in line:
            logger.log(level, "auto-update: %s", line)
    if result.returncode != 0:
        logger.warning("podman auto-update exited with code %d, continuing", result.returncode)
    else:
        logger.debug("podman auto-update exit code: 0")
    return result.returncode


def classify(
    inventory: Inventory,
    before: StatusSnapshot,
    after: StatusSnapshot,
    update_ran: bool = True,
) -> Reconciliation:
    """Sort checked containers into updated / failed / pending / current."""
    checked = inventory.checked_names
    checked_set = set(checked)

    needs_before = before.names_with(UpdateStatus.PENDING) & checked_set
    needs_after = after.names_with(UpdateStatus.PENDING) & checked_set
    failed = after.names_with(UpdateStatus.FAILED) & checked_set

    updated = needs_before - needs_after - failed
    current = checked_set - updated - needs_after - failed

    def ordered(names: frozenset[str] | set[str]) -> tuple[str, ...]:
        return tuple(n for n in checked if n in names)

    warnings = tuple(s.error for s in (before, after) if s.error)
    return Reconciliation(
        checked=checked,
        excluded=inventory.excluded_names,
        updated=ordered(updated),
        failed=ordered(failed),
        still_pending=ordered(needs_after),
        already_current=ordered(current),
        units=inventory.units,
        warnings=warnings,
        update_ran=update_ran,
    )


def reconcile(podman: PodmanClient, inventory: Inventory) -> Reconciliation:
    """Snapshot, update, snapshot again and classify."""
    if not inventory.checked:
        logger.info("No containers with a %s label, skipping auto-update", settings.unit_label)
        return Reconciliation(excluded=inventory.excluded_names, update_ran=False)

    before = take_snapshot(podman, "before")
    run_update(podman)
    after = take_snapshot(podman, "after")

    result = classify(inventory, before, after)
    logger.info(
        "Reconciled %d container(s): %d updated, %d failed, %d still pending, %d already current",
        len(result.checked), len(result.updated), len(result.failed),
        len(result.still_pending), len(result.already_current),
    )
    return result
