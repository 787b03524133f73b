"""
Testimonial endpoints.

The homepage carousel gets active testimonials only; the admin panel
lists all of them at ``GET /api/admin/testimonials``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_testimonial_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import TESTIMONIALS_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.testimonial import TestimonialCreate, TestimonialUpdate
from pan_eventz_api.app.services.testimonial_service import TestimonialService


router = APIRouter()
admin_router = APIRouter()


@router.get("")
async def list_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
) -> List[Dict[str, Any]]:
    return await with_fallback(service.list_active, TESTIMONIALS_FALLBACK, "testimonials")


@admin_router.get("")
async def list_all_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
) -> List[Dict[str, Any]]:
    return await service.list_items()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    testimonial_in: TestimonialCreate,
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create testimonial"):
        return await service.create_item(testimonial_in.to_record())


@router.put("/{testimonial_id}")
async def update_testimonial(
    testimonial_id: int,
    testimonial_in: TestimonialUpdate,
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update testimonial"):
        testimonial = await service.update_item(testimonial_id, testimonial_in.to_record(partial=True))
    if testimonial is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return testimonial


@router.delete("/{testimonial_id}")
async def delete_testimonial(
    testimonial_id: int,
    service: TestimonialService = Depends(get_testimonial_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete testimonial", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(testimonial_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return {"message": "Testimonial deleted successfully"}
