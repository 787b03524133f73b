"""Liveness probe."""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends

from pan_eventz_api.app.core.config import Settings
from pan_eventz_api.app.core.security import get_settings


router = APIRouter()


@router.get("")
async def health(app_settings: Settings = Depends(get_settings)) -> Dict[str, str]:
    return {
        "status": "OK",
        "version": app_settings.api_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
