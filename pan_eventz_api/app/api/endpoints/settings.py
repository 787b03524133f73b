"""
Site settings endpoints.

``GET /api/settings`` returns all three sections, ``GET
/api/settings/{section}`` one of them.  ``PUT /api/settings/{section}``
merges the posted keys into the stored section (admin only).
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_settings_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import SETTINGS_DEFAULTS
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.services.settings_service import SettingsService


router = APIRouter()


@router.get("")
async def get_all_settings(
    service: SettingsService = Depends(get_settings_service),
) -> Dict[str, Dict[str, Any]]:
    return await with_fallback(service.get_all, SETTINGS_DEFAULTS, "settings", on_empty=False)


@router.get("/{section}")
async def get_settings_section(
    section: str,
    service: SettingsService = Depends(get_settings_service),
) -> Dict[str, Any]:
    try:
        return await service.get_section(section)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Settings section not found") from exc


@router.put("/{section}")
async def update_settings_section(
    section: str,
    values: Dict[str, Any] = Body(...),
    service: SettingsService = Depends(get_settings_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    """Shallow-merge ``values`` into ``section``."""
    if section not in SETTINGS_DEFAULTS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Settings section not found")
    with write_errors("Failed to update settings"):
        return await service.update_section(section, values)
