"""Status and bucket color maps."""

from podup.models import Bucket
from podup.models.container import UpdateStatus

STATUS_COLORS: dict[UpdateStatus, str] = {
    UpdateStatus.PENDING: "yellow",
    UpdateStatus.UPDATED: "green",
    UpdateStatus.FAILED: "red bold",
    UpdateStatus.CURRENT: "dim",
    UpdateStatus.UNKNOWN: "dim",
}

BUCKET_COLORS: dict[Bucket, str] = {
    Bucket.CHECKED: "cyan",
    Bucket.EXCLUDED: "dim",
    Bucket.UPDATED: "green",
    Bucket.FAILED: "red bold",
    Bucket.STILL_PENDING: "yellow",
    Bucket.ALREADY_CURRENT: "dim",
}


def styled_status(status: UpdateStatus | None) -> str:
    if status is None or status is UpdateStatus.CURRENT:
        return "[dim]up-to-date[/dim]"
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{status.value}[/{color}]"


def styled_bucket(bucket: Bucket) -> str:
    color = BUCKET_COLORS.get(bucket, "white")
    return f"[{color}]{bucket.value}[/{color}]"
