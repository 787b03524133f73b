"""
About page endpoints.

``GET /api/about`` returns the page content and ``GET /api/about/full``
adds the leadership team and the company values.  Admins edit the page
with ``PUT /api/about``, which creates the record on first use.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from pan_eventz_api.app.api.deps import get_about_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import ABOUT_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.about import AboutUpdate
from pan_eventz_api.app.services.about_service import AboutService


router = APIRouter()


@router.get("")
async def get_about(service: AboutService = Depends(get_about_service)) -> Dict[str, Any]:
    return await with_fallback(service.get_about, ABOUT_FALLBACK, "about content")


@router.get("/full")
async def get_about_full(service: AboutService = Depends(get_about_service)) -> Dict[str, Any]:
    """Return the about page with its team and values."""
    payload = {**ABOUT_FALLBACK, "team": [], "values": []}
    return await with_fallback(service.get_full, payload, "about page", on_empty=False)


@router.put("")
async def update_about(
    about_in: AboutUpdate,
    service: AboutService = Depends(get_about_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update about content"):
        return await service.update_about(about_in.to_record(partial=True))
