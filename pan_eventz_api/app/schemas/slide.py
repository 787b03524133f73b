"""Pydantic models for homepage hero slides."""

from typing import Optional

from .common import ContentModel


class SlideCreate(ContentModel):
    title: str
    title_highlight: Optional[str] = None
    description: str
    background_image: str
    primary_cta_text: str
    primary_cta_link: str
    secondary_cta_text: str
    secondary_cta_link: str
    order: int
    active: bool = True


class SlideUpdate(ContentModel):
    title: Optional[str] = None
    title_highlight: Optional[str] = None
    description: Optional[str] = None
    background_image: Optional[str] = None
    primary_cta_text: Optional[str] = None
    primary_cta_link: Optional[str] = None
    secondary_cta_text: Optional[str] = None
    secondary_cta_link: Optional[str] = None
    order: Optional[int] = None
    active: Optional[bool] = None
