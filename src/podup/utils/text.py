"""Message size helpers."""

from __future__ import annotations

TRUNCATION_NOTICE = "...\n*Message truncated due to length.*"


def truncate_message(text: str, limit: int, notice: str = TRUNCATION_NOTICE) -> str:
    """Cap ``text`` at ``limit`` characters and append ``notice`` if cut.

    The kept prefix is the longest run of whole lines that fits in ``limit``,
    so a bullet or a ``*bold*`` marker is never split. A first line longer
    than the limit is cut hard.
    """
    if len(text) <= limit:
        return text

    # a line break right at the limit still closes a line that fits
    newline = text.rfind("\n", 0, limit + 1)
    head = text[:newline] if newline > 0 else text[:limit]
    return f"{head}\n{notice}"
