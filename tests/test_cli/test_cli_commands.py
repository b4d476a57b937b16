"""CLI tests using typer's CliRunner."""

from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import FakePodman, dry_run_output, inspect_payload
from podup.cli.app import app
from podup.cli.commands import run_cmd, status_cmd
from podup.config.settings import settings
from podup.core import pipeline
from podup.models.report import DeliveryResult

runner = CliRunner()


@pytest.fixture
def fake(monkeypatch: pytest.MonkeyPatch) -> FakePodman:
    podman = FakePodman(
        containers=[inspect_payload("A", "1", "u1"), inspect_payload("B", "2")],
        dry_runs=[dry_run_output({"A": "pending"}), dry_run_output({})],
    )
    monkeypatch.setattr(run_cmd, "PodmanClient", lambda binary=None: podman)
    monkeypatch.setattr(status_cmd, "PodmanClient", lambda binary=None: podman)
    return podman


def test_run_missing_env_file_exits_1_before_podman(
    fake: FakePodman, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(settings, "env_file", tmp_path / "absent")
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 1
    assert "Environment file" in result.output
    assert fake.calls == []


def test_run_empty_webhook_exits_1_before_podman(
    fake: FakePodman, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> None:
    env_file = tmp_path / "env"
    env_file.write_text("BWS_ACCESS_TOKEN=tok\n", encoding="utf-8")
    monkeypatch.setenv("BWS_ACCESS_TOKEN", "")
    monkeypatch.setattr(settings, "env_file", env_file)

    class _Proc:
        returncode = 0
        stdout = json.dumps({"value": ""})
        stderr = ""

    from podup.core import secrets
    monkeypatch.setattr(secrets.subprocess, "run", lambda *a, **kw: _Proc())

    result = runner.invoke(app, ["run"])
    assert result.exit_code == 1
    assert "Failed to retrieve SLACK_WEBHOOK_URL from Bitwarden." in result.output
    assert fake.calls == []


def test_run_sends_report(fake: FakePodman, monkeypatch: pytest.MonkeyPatch) -> None:
    sent: list[str] = []
    monkeypatch.setattr(pipeline, "resolve_webhook_url", lambda cfg: "https://hooks.example/T")

    def fake_post(url: str, text: str) -> DeliveryResult:
        sent.append(text)
        return DeliveryResult(status_code=500, body="server error")

    monkeypatch.setattr(pipeline, "post_message", fake_post)
    result = runner.invoke(app, ["run", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["updated"] == ["A"]
    assert data["excluded"] == ["B"]
    assert data["delivery"]["status_code"] == 500
    assert len(sent) == 1


def test_run_no_send_prints_text(fake: FakePodman) -> None:
    result = runner.invoke(app, ["run", "--no-send", "--output", "text", "--all-sections"])
    assert result.exit_code == 0
    assert "*Podman Auto-Update Report (" in result.stdout
    assert "*Containers that failed to update:*\nNone" in result.stdout


def test_run_inventory_failure_exits_1(fake: FakePodman) -> None:
    fake.fail_list = True
    result = runner.invoke(app, ["run", "--no-send"])
    assert result.exit_code == 1
    assert "failed with exit code 125" in result.output


def test_status_json(fake: FakePodman) -> None:
    fake.dry_runs = [dry_run_output({"A": "pending"})]
    result = runner.invoke(app, ["status", "--output", "json"])
    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert rows[0] == {"name": "A", "id": "1", "unit": "u1", "checked": True, "status": "pending"}
    assert rows[1]["checked"] is False
    assert "auto-update" not in fake.calls


def test_weekly_reports_warnings(tmp_path: Path) -> None:
    script = tmp_path / "fail.sh"
    script.write_text("#!/bin/sh\nexit 2\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    log_dir = tmp_path / "logs"

    result = runner.invoke(app, ["weekly", str(script), "--log-dir", str(log_dir)])
    assert result.exit_code == 0
    assert f"Warning: {script} reported a problem (see log at {log_dir / 'fail.sh.log'})" in result.output
    assert "All scripts executed successfully!" not in result.output


def test_weekly_without_scripts_exits_1(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "weekly_scripts", [])
    result = runner.invoke(app, ["weekly"])
    assert result.exit_code == 1


def test_weekly_accepts_log_dir_after_scripts(tmp_path: Path) -> None:
    ok = tmp_path / "ok.sh"
    ok.write_text("#!/bin/sh\necho done\n", encoding="utf-8")
    ok.chmod(ok.stat().st_mode | stat.S_IXUSR)
    bad = tmp_path / "bad.sh"
    bad.write_text("#!/bin/sh\nexit 1\n", encoding="utf-8")
    bad.chmod(bad.stat().st_mode | stat.S_IXUSR)
    log_dir = tmp_path / "logs"

    result = runner.invoke(app, ["weekly", str(ok), str(bad), "--log-dir", str(log_dir)])
    assert result.exit_code == 0
    assert "Finished with 1 warning(s)." in result.output
    assert (log_dir / "ok.sh.log").read_text() == "done\n"
    assert (log_dir / "bad.sh.log").exists()


def test_run_env_file_option_does_not_change_settings(fake: FakePodman, tmp_path: Path) -> None:
    before = settings.env_file
    missing = tmp_path / "other-env"
    result = runner.invoke(app, ["run", "--env-file", str(missing), "--secret-id", "sid"])
    assert result.exit_code == 1
    assert f"Environment file {missing} not found." in result.output
    assert settings.env_file == before
    assert settings.webhook_secret_id != "sid"
    assert fake.calls == []
