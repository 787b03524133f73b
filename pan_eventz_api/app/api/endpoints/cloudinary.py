"""Cloudinary folder listing for the public media pages."""

import logging
from typing import Any, Dict, List

import requests
from fastapi import APIRouter, Depends, status

from pan_eventz_api.app.api.deps import get_cloudinary_service
from pan_eventz_api.app.core.errors import ApiError
from pan_eventz_api.app.services.cloudinary_service import CloudinaryNotConfigured, CloudinaryService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{folder}")
async def list_folder(
    folder: str,
    service: CloudinaryService = Depends(get_cloudinary_service),
) -> List[Dict[str, Any]]:
    try:
        return await service.list_folder(folder)
    except CloudinaryNotConfigured as exc:
        logger.error("Cloudinary request for %s rejected: %s", folder, exc)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)) from exc
    except (requests.RequestException, ValueError) as exc:
        logger.exception("Error fetching Cloudinary folder %s", folder)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch images from Cloudinary", str(exc)) from exc
