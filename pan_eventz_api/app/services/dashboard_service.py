"""
Service computing the admin dashboard summary.

The dashboard shows four counters (all events, upcoming events, all
inquiries, inquiries from the last seven days) and the five most
recent events and inquiries.  Everything is derived from the file
store on each request.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from pan_eventz_api.app.core.file_storage import CONTACT_SUBMISSIONS, EVENTS, FileStorage


RECENT_LIMIT = 5
NEW_INQUIRY_WINDOW = timedelta(days=7)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _event_day(event: Dict[str, Any]) -> Optional[date]:
    raw = event.get("eventDate") or event.get("date")
    if not isinstance(raw, str):
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


class DashboardService:
    """Builds the dashboard payload from the file store."""

    def __init__(self, storage: FileStorage) -> None:
        self.storage = storage

    async def summary(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        events = self.storage.get_all(EVENTS)
        inquiries = self.storage.get_all(CONTACT_SUBMISSIONS)

        today = now.date()
        upcoming = [event for event in events if (_event_day(event) or date.min) >= today]
        cutoff = now - NEW_INQUIRY_WINDOW
        new_inquiries = [
            row for row in inquiries if (_parse_timestamp(row.get("createdAt")) or cutoff) > cutoff
        ]

        recent_events: List[Dict[str, Any]] = sorted(
            events, key=lambda event: _event_day(event) or date.min, reverse=True
        )[:RECENT_LIMIT]
        recent_inquiries: List[Dict[str, Any]] = sorted(
            inquiries, key=lambda row: row.get("createdAt") or "", reverse=True
        )[:RECENT_LIMIT]

        return {
            "stats": {
                "totalEvents": len(events),
                "upcomingEvents": len(upcoming),
                "totalInquiries": len(inquiries),
                "newInquiries": len(new_inquiries),
            },
            "recentEvents": recent_events,
            "recentInquiries": recent_inquiries,
        }
