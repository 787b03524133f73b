"""Featured technology endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_technology_service, with_fallback, write_errors
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.technology import TechnologyCreate, TechnologyUpdate
from pan_eventz_api.app.services.technology_service import TechnologyService


router = APIRouter()
admin_router = APIRouter()


@router.get("")
async def list_technologies(
    service: TechnologyService = Depends(get_technology_service),
) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_active, [], "technologies", on_empty=False)


@admin_router.get("")
async def list_all_technologies(
    service: TechnologyService = Depends(get_technology_service),
) -> List[Dict[str, Any]]:
    return await service.list_items()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_technology(
    technology_in: TechnologyCreate,
    service: TechnologyService = Depends(get_technology_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create technology"):
        return await service.create_item(technology_in.to_record())


@router.put("/{technology_id}")
async def update_technology(
    technology_id: int,
    technology_in: TechnologyUpdate,
    service: TechnologyService = Depends(get_technology_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update technology"):
        technology = await service.update_item(technology_id, technology_in.to_record(partial=True))
    if technology is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Technology not found")
    return technology


@router.delete("/{technology_id}")
async def delete_technology(
    technology_id: int,
    service: TechnologyService = Depends(get_technology_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete technology", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(technology_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Technology not found")
    return {"message": "Technology deleted successfully"}
