"""
Service layer for the event gallery.

Gallery items live in the ``galleryItems`` file collection.  Listing
can be narrowed to one category; ``"all"`` (the default tab on the
gallery page) returns everything.  Items created without an image get
a Cloudinary placeholder URL so the grid never shows a broken image.
"""

import time
from typing import Any, Dict, List, Optional

from pan_eventz_api.app.core.file_storage import GALLERY_ITEMS

from .base import FileCollectionService, wants_filter


PLACEHOLDER_URL = "https://res.cloudinary.com/dhxetyrkb/image/upload/v1/placeholder_{}"


class GalleryService(FileCollectionService):
    """Service for managing gallery items."""

    collection = GALLERY_ITEMS

    async def list_items(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        items = self.storage.get_all(self.collection)
        if wants_filter(category):
            items = [item for item in items if item.get("category") == category]
        return items

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        media_url = data.pop("mediaUrl", None)
        data["imageUrl"] = data.get("imageUrl") or media_url or PLACEHOLDER_URL.format(int(time.time() * 1000))
        return data
