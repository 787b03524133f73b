"""
Pydantic models for gallery items.

A gallery item is a photo or video from a past event.  ``category``
drives the filter tabs on the public gallery page (``corporate``,
``wedding``, ``sports``, ``cultural``, ...).  ``imageUrl`` usually
points at Cloudinary or at a file under ``/uploads``.
"""

from typing import List, Optional

from pydantic import Field

from .common import ContentModel


class GalleryItemCreate(ContentModel):
    """Schema for creating a gallery item."""

    title: str = Field(..., examples=["Corporate Annual Conference 2023"])
    category: str = Field(..., examples=["corporate"])
    description: str = ""
    event: Optional[str] = None
    date: Optional[str] = None
    image_url: Optional[str] = None
    media_url: Optional[str] = None
    media_type: str = "image"
    tags: Optional[List[str]] = None


class GalleryItemUpdate(ContentModel):
    """Schema for updating a gallery item; only sent fields change."""

    title: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    event: Optional[str] = None
    date: Optional[str] = None
    image_url: Optional[str] = None
    media_type: Optional[str] = None
    tags: Optional[List[str]] = None
