"""One scheduled run: secrets, inventory, reconcile, report, deliver."""

from __future__ import annotations

import logging
from datetime import date

from podup.config.settings import Settings, settings as default_settings
from podup.core.inventory import build_inventory
from podup.core.notifier import post_message
from podup.core.podman_client import PodmanClient
from podup.core.reconciler import reconcile
from podup.core.report import render_report
from podup.core.secrets import resolve_webhook_url
from podup.models.report import PipelineResult
from podup.utils.text import truncate_message

logger = logging.getLogger(__name__)


def run_pipeline(
    podman: PodmanClient,
    *,
    send: bool = True,
    all_sections: bool | None = None,
    report_date: date | None = None,
    webhook_url: str | None = None,
    cfg: Settings | None = None,
) -> PipelineResult:
    """Run the whole update-and-report cycle.

    The webhook URL is resolved before podman is touched, so a
    PreconditionError aborts the run without any container work.
    """
    cfg = cfg or default_settings
    if send and not webhook_url:
        webhook_url = resolve_webhook_url(cfg)

    inventory = build_inventory(podman)
    result = reconcile(podman, inventory)

    if all_sections is None:
        all_sections = cfg.all_sections
    message = render_report(result, report_date or date.today(), all_sections=all_sections)
    delivered = truncate_message(message, cfg.max_message_length)
    if delivered != message:
        logger.warning("Report is %d chars, truncated to fit %d", len(message), cfg.max_message_length)

    delivery = None
    if send and webhook_url:
        delivery = post_message(webhook_url, delivered)

    return PipelineResult(
        reconciliation=result,
        message=message,
        delivered_message=delivered,
        delivery=delivery,
    )
