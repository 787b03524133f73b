"""
Pydantic models for client testimonials.

Only ``content`` and ``rating`` are required.  The author can be given
either as ``name``/``position`` or as ``authorName``/``authorTitle``,
both shapes exist in stored data and are kept as sent.
"""

from typing import Optional

from pydantic import Field

from .common import ContentModel


class TestimonialCreate(ContentModel):
    """Schema for creating a testimonial."""

    content: str
    rating: int = Field(..., ge=1, le=5)
    name: Optional[str] = None
    position: Optional[str] = None
    company: Optional[str] = None
    image: Optional[str] = None
    featured: bool = False
    active: bool = True


class TestimonialUpdate(ContentModel):
    """Schema for updating a testimonial."""

    content: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    name: Optional[str] = None
    position: Optional[str] = None
    company: Optional[str] = None
    image: Optional[str] = None
    featured: Optional[bool] = None
    active: Optional[bool] = None
