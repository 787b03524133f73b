"""
Storage of files uploaded from the admin panel.

Uploads are written to ``Settings.uploads_dir`` under a generated name
``<field>-<epoch ms>-<random><ext>`` and served back at
``/uploads/<name>``.  Only images, videos and office documents are
accepted: both the file extension and the declared MIME type must match
the allowed pattern.  Files are streamed to disk in 1 MiB chunks and a
file that grows past the size limit is removed again.
"""

import logging
import os
import random
import re
import time
from pathlib import Path
from typing import Any, Dict

from fastapi import UploadFile


logger = logging.getLogger(__name__)

ALLOWED_TYPES = re.compile(r"jpeg|jpg|png|gif|webp|mp4|avi|mov|pdf|doc|docx|xls|xlsx|ppt|pptx")
CHUNK_SIZE = 1024 * 1024


class UnsupportedFileType(ValueError):
    """The upload is not an accepted image, video or document."""


class FileTooLarge(ValueError):
    """The upload exceeds the configured size limit."""


def build_filename(field: str, original_name: str) -> str:
    ext = os.path.splitext(original_name)[1]
    return f"{field}-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def is_allowed(filename: str, content_type: str) -> bool:
    ext = os.path.splitext(filename)[1].lower()
    return bool(ALLOWED_TYPES.search(ext)) and bool(ALLOWED_TYPES.search(content_type or ""))


class UploadService:
    """Validates and stores uploaded files."""

    def __init__(self, uploads_dir: str, max_size: int) -> None:
        self.uploads_dir = Path(uploads_dir)
        self.max_size = max_size

    async def save(self, upload: UploadFile, field: str = "file") -> Dict[str, Any]:
        """Write ``upload`` to disk and return its public description.

        Raises ``UnsupportedFileType`` or ``FileTooLarge``; in the latter
        case nothing is left on disk.
        """
        original_name = upload.filename or ""
        if not is_allowed(original_name, upload.content_type or ""):
            raise UnsupportedFileType("Only images, videos, and documents are allowed")

        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        name = build_filename(field, original_name)
        target = self.uploads_dir / name
        size = 0
        try:
            with target.open("wb") as fh:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_size:
                        raise FileTooLarge(f"File exceeds the {self.max_size // (1024 * 1024)}MB limit")
                    fh.write(chunk)
        except Exception:
            target.unlink(missing_ok=True)
            raise
        logger.info("Stored upload %s (%d bytes) as %s", original_name, size, name)
        return {
            "message": "File uploaded successfully",
            "filePath": f"/uploads/{name}",
            "originalName": original_name,
            "size": size,
        }
