"""Slack incoming-webhook delivery."""

from __future__ import annotations

import logging

import requests

from podup.config.settings import settings
from podup.models.report import DeliveryResult

logger = logging.getLogger(__name__)


def post_message(webhook_url: str, text: str, timeout: float | None = None) -> DeliveryResult:
    """POST ``{"text": text}`` once. The outcome is logged and returned, never raised."""
    timeout = settings.webhook_timeout if timeout is None else timeout
    logger.debug("Sending Slack message (%d chars)", len(text))
    try:
        response = requests.post(webhook_url, json={"text": text}, timeout=timeout)
    except requests.RequestException as e:
        logger.error("Failed to send Slack message: %s", e)
        return DeliveryResult(error=str(e))

    logger.debug("Slack response: %s", response.text)
    if 200 <= response.status_code < 300:
        logger.info("Slack message delivered (HTTP %d)", response.status_code)
    else:
        logger.warning("Slack webhook returned HTTP %d: %s", response.status_code, response.text)
    return DeliveryResult(status_code=response.status_code, body=response.text)
