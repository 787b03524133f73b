"""
Gallery endpoints.

The public gallery page lists items, optionally filtered by
``?category=``.  When the store fails or holds no items the route
serves four sample items (one per main category) so the page is never
empty.  Creating, editing and deleting items requires an admin token.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_gallery_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import GALLERY_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.gallery import GalleryItemCreate, GalleryItemUpdate
from pan_eventz_api.app.services.base import wants_filter
from pan_eventz_api.app.services.gallery_service import GalleryService


router = APIRouter()


@router.get("")
async def list_gallery(
    category: Optional[str] = None,
    service: GalleryService = Depends(get_gallery_service),
) -> List[Dict[str, Any]]:
    """Return gallery items, or the sample items when there are none."""

    def narrow(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if wants_filter(category):
            return [item for item in items if item["category"] == category]
        return items

    return await with_fallback(lambda: service.list_items(category), GALLERY_FALLBACK, "gallery", narrow=narrow)


@router.get("/{item_id}")
async def get_gallery_item(
    item_id: int,
    service: GalleryService = Depends(get_gallery_service),
) -> Dict[str, Any]:
    item = await service.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery item not found")
    return item


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_gallery_item(
    item_in: GalleryItemCreate,
    service: GalleryService = Depends(get_gallery_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Create a gallery item (admin only)."""
    with write_errors("Failed to create gallery item"):
        return await service.create_item(item_in.to_record())


@router.put("/{item_id}")
async def update_gallery_item(
    item_id: int,
    item_in: GalleryItemUpdate,
    service: GalleryService = Depends(get_gallery_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Update a gallery item (admin only)."""
    with write_errors("Failed to update gallery item"):
        item = await service.update_item(item_id, item_in.to_record(partial=True))
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery item not found")
    return item


@router.delete("/{item_id}")
async def delete_gallery_item(
    item_id: int,
    service: GalleryService = Depends(get_gallery_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    """Delete a gallery item (admin only)."""
    with write_errors("Failed to delete gallery item", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(item_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery item not found")
    return {"message": "Gallery item deleted successfully"}
