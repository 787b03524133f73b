"""
Service layer for event case studies.

Events live in the ``events`` file collection.  The public events page
can filter by status (``Upcoming``, ``Completed``, ...); the comparison
ignores case because stored data uses both spellings.  The detail page
looks events up by slug.
"""

from typing import Any, Dict, List, Optional

from pan_eventz_api.app.core.file_storage import EVENTS

from .base import FileCollectionService, wants_filter


class EventService(FileCollectionService):
    """Service for managing events."""

    collection = EVENTS

    async def list_items(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        events = self.storage.get_all(self.collection)
        if wants_filter(status):
            wanted = status.lower()
            events = [event for event in events if str(event.get("status", "")).lower() == wanted]
        return events

    async def get_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        return await self.find_by("slug", slug)
