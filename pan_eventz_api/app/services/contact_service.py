"""
Service layer for contact form submissions (inquiries).

Submissions land in the ``contactSubmissions`` file collection with the
status ``New``.  The admin inbox filters by status and records replies
with :meth:`ContactService.respond`, which stores the reply text and
time on the inquiry and moves it to ``Responded``.
"""

import logging
from typing import Any, Dict, List, Optional

from pan_eventz_api.app.core.file_storage import CONTACT_SUBMISSIONS
from pan_eventz_api.app.core.timestamps import utc_now_iso

from .base import FileCollectionService, wants_filter


logger = logging.getLogger(__name__)


class ContactService(FileCollectionService):
    """Service for managing inquiries."""

    collection = CONTACT_SUBMISSIONS

    async def list_items(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return inquiries, newest first, optionally narrowed by status."""
        rows = self.storage.get_all(self.collection)
        if wants_filter(status):
            rows = [row for row in rows if row.get("status") == status]
        return sorted(rows, key=lambda row: row.get("createdAt") or "", reverse=True)

    async def respond(self, item_id: int, message: str, status: str = "Responded") -> Optional[Dict[str, Any]]:
        """Record a reply on an inquiry.

        Returns the updated inquiry or ``None`` if it does not exist.
        """
        updated = self.storage.update(
            self.collection,
            item_id,
            {"response": message, "respondedAt": utc_now_iso(), "status": status},
        )
        if updated is not None:
            logger.info("Recorded response for inquiry %s", item_id)
        return updated
