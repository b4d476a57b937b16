"""Tests for Slack webhook delivery."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from podup.core import notifier


class _Response:
    def __init__(self, status_code: int, text: str = "ok") -> None:
        self.status_code = status_code
        self.text = text


def test_post_message_sends_text_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    sent: dict[str, Any] = {}

    def fake_post(url: str, **kwargs: Any) -> _Response:
        sent["url"] = url
        sent.update(kwargs)
        return _Response(200)

    monkeypatch.setattr(notifier.requests, "post", fake_post)
    result = notifier.post_message("https://hooks.example/T", "hello", timeout=5)
    assert sent["url"] == "https://hooks.example/T"
    assert sent["json"] == {"text": "hello"}
    assert sent["timeout"] == 5
    assert result.ok
    assert result.status_code == 200


def test_post_message_non_2xx_is_returned(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(notifier.requests, "post", lambda url, **kw: _Response(404, "no_service"))
    result = notifier.post_message("https://hooks.example/T", "hello")
    assert result.status_code == 404
    assert result.body == "no_service"
    assert not result.ok


def test_post_message_transport_error_is_not_raised(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_post(url: str, **kwargs: Any) -> None:
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(notifier.requests, "post", fake_post)
    result = notifier.post_message("https://hooks.example/T", "hello")
    assert result.status_code is None
    assert "connection refused" in result.error
