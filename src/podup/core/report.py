"""Render a reconciliation as a Slack mrkdwn message."""

from __future__ import annotations

from datetime import date

from podup.config.settings import settings
from podup.models import Bucket
from podup.models.report import Reconciliation


def bucket_titles(unit_label: str) -> dict[Bucket, str]:
    return {
        Bucket.CHECKED: f"Containers checked (with {unit_label} label)",
        Bucket.EXCLUDED: f"Containers not updated (missing {unit_label} label)",
        Bucket.UPDATED: "Containers updated during this run",
        Bucket.FAILED: "Containers that failed to update",
        Bucket.STILL_PENDING: "Containers still needing updates",
        Bucket.ALREADY_CURRENT: "Containers already up-to-date",
    }


# Only shown when non-empty unless every section is requested.
_CONDITIONAL_BUCKETS = frozenset({Bucket.FAILED, Bucket.STILL_PENDING})


def format_containers(names: tuple[str, ...], units: dict[str, str] | None = None) -> str:
    """Bullet list of names, optionally annotated with systemd units."""
    if not names:
        return "None"
    if units is None:
        return "\n".join(f"• {name}" for name in names)
    return "\n".join(f"• {name} (systemd unit: {units.get(name, '')})" for name in names)


def render_report(
    result: Reconciliation,
    report_date: date,
    all_sections: bool = False,
) -> str:
    titles = bucket_titles(settings.unit_label)
    counts = result.counts()

    lines = [f"*Podman Auto-Update Report ({report_date.isoformat()})*", "", "*Summary:*"]
    lines += [f"• {titles[b]}: {counts[b]}" for b in Bucket]
    lines += ["", "---"]

    for b in Bucket:
        names = result.bucket(b)
        if b in _CONDITIONAL_BUCKETS and not names and not all_sections:
            continue
        units = result.units if b is Bucket.CHECKED else None
        lines += ["", f"*{titles[b]}:*", format_containers(names, units)]

    if result.warnings:
        lines += ["", "*Warnings:*"]
        lines += [f"• {w}" for w in result.warnings]

    return "\n".join(lines) + "\n"
