"""
Service page endpoints.

``GET /api/services`` returns every service with its features and
process steps; ``GET /api/services/{slug}`` returns one.  Admins create
a service together with its children in one request, and update or
delete it by numeric id.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_catalog_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import SERVICES_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.service import ServiceCreate, ServiceUpdate
from pan_eventz_api.app.services.catalog_service import CatalogService


router = APIRouter()


@router.get("")
async def list_services(service: CatalogService = Depends(get_catalog_service)) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_items, SERVICES_FALLBACK, "services")


@router.get("/{slug}")
async def get_service(slug: str, service: CatalogService = Depends(get_catalog_service)) -> Dict[str, Any]:
    found = await service.get_by_slug(slug)
    if found is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return found


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_service(
    service_in: ServiceCreate,
    service: CatalogService = Depends(get_catalog_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Create a service with its features and process steps (admin only)."""
    record = service_in.to_record()
    features = record.pop("features")
    process_steps = record.pop("processSteps")
    with write_errors("Failed to create service"):
        return await service.create_service(record, features, process_steps)


@router.put("/{service_id}")
async def update_service(
    service_id: int,
    service_in: ServiceUpdate,
    service: CatalogService = Depends(get_catalog_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update service"):
        updated = await service.update_item(service_id, service_in.to_record(partial=True))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return updated


@router.delete("/{service_id}")
async def delete_service(
    service_id: int,
    service: CatalogService = Depends(get_catalog_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete service", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(service_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return {"message": "Service deleted successfully"}
