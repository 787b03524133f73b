"""Homepage slider endpoints; the public slider only receives active slides."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_slide_service, with_fallback, write_errors
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.slide import SlideCreate, SlideUpdate
from pan_eventz_api.app.services.slide_service import SlideService


router = APIRouter()
admin_router = APIRouter()


@router.get("")
async def list_slides(service: SlideService = Depends(get_slide_service)) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_active, [], "slides", on_empty=False)


@admin_router.get("")
async def list_all_slides(service: SlideService = Depends(get_slide_service)) -> List[Dict[str, Any]]:
    return await service.list_items()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_slide(
    slide_in: SlideCreate,
    service: SlideService = Depends(get_slide_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create slide"):
        return await service.create_item(slide_in.to_record())


@router.put("/{slide_id}")
async def update_slide(
    slide_id: int,
    slide_in: SlideUpdate,
    service: SlideService = Depends(get_slide_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update slide"):
        slide = await service.update_item(slide_id, slide_in.to_record(partial=True))
    if slide is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slide not found")
    return slide


@router.delete("/{slide_id}")
async def delete_slide(
    slide_id: int,
    service: SlideService = Depends(get_slide_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete slide", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(slide_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Slide not found")
    return {"message": "Slide deleted successfully"}
