"""
File upload endpoint for the admin panel.

``POST /api/upload`` takes a multipart form with a ``file`` field and
answers with the public path under ``/uploads``.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, File, UploadFile, status

from pan_eventz_api.app.api.deps import get_upload_service
from pan_eventz_api.app.core.errors import ApiError
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.services.upload_service import FileTooLarge, UnsupportedFileType, UploadService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def upload_file(
    file: UploadFile = File(...),
    service: UploadService = Depends(get_upload_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        return await service.save(file, field="file")
    except UnsupportedFileType as exc:
        raise ApiError(status.HTTP_400_BAD_REQUEST, str(exc)) from exc
    except FileTooLarge as exc:
        raise ApiError(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, str(exc)) from exc
    except OSError as exc:
        logger.exception("Failed to store upload %s", file.filename)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to upload file", str(exc)) from exc
    finally:
        await file.close()
