"""Pydantic models for the featured technologies strip."""

from typing import Optional

from .common import ContentModel


class TechnologyCreate(ContentModel):
    title: str
    description: str
    icon: str
    order: int
    active: bool = True


class TechnologyUpdate(ContentModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    active: Optional[bool] = None
