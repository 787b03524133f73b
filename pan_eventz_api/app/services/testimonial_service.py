"""
Service layer for client testimonials.

Testimonials live in the ``testimonials`` file collection.  Rows
without an ``active`` flag count as active.
"""

from typing import Any, Dict, List

from pan_eventz_api.app.core.file_storage import TESTIMONIALS

from .base import FileCollectionService


class TestimonialService(FileCollectionService):
    """Service for managing testimonials."""

    collection = TESTIMONIALS

    async def list_active(self) -> List[Dict[str, Any]]:
        return [row for row in self.storage.get_all(self.collection) if row.get("active", True)]
