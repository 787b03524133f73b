"""Statistics counter endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_stat_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import STATS_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.stat import StatCreate, StatUpdate
from pan_eventz_api.app.services.stat_service import StatService


router = APIRouter()


@router.get("")
async def list_stats(service: StatService = Depends(get_stat_service)) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_items, STATS_FALLBACK, "stats")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_stat(
    stat_in: StatCreate,
    service: StatService = Depends(get_stat_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create stat"):
        return await service.create_item(stat_in.to_record())


@router.put("/{stat_id}")
async def update_stat(
    stat_id: int,
    stat_in: StatUpdate,
    service: StatService = Depends(get_stat_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update stat"):
        stat = await service.update_item(stat_id, stat_in.to_record(partial=True))
    if stat is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Stat not found")
    return stat


@router.delete("/{stat_id}")
async def delete_stat(
    stat_id: int,
    service: StatService = Depends(get_stat_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete stat", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(stat_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Stat not found")
    return {"message": "Stat deleted successfully"}
