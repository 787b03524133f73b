"""Timestamp helpers shared by the stores."""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    The fixed width keeps lexical order equal to chronological order.
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
