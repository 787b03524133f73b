"""Company value endpoints (the values block of the about page)."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_value_service, with_fallback, write_errors
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.about import ValueCreate, ValueUpdate
from pan_eventz_api.app.services.about_service import ValueService


router = APIRouter()


@router.get("")
async def list_values(service: ValueService = Depends(get_value_service)) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_items, [], "values", on_empty=False)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_value(
    value_in: ValueCreate,
    service: ValueService = Depends(get_value_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create value"):
        return await service.create_item(value_in.to_record())


@router.put("/{value_id}")
async def update_value(
    value_id: int,
    value_in: ValueUpdate,
    service: ValueService = Depends(get_value_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update value"):
        value = await service.update_item(value_id, value_in.to_record(partial=True))
    if value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Value not found")
    return value


@router.delete("/{value_id}")
async def delete_value(
    value_id: int,
    service: ValueService = Depends(get_value_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete value", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(value_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Value not found")
    return {"message": "Value deleted successfully"}
