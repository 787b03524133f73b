"""
Pydantic models for the service pages.

A service (corporate, wedding, sports, ...) owns an ordered list of
feature bullet points and an ordered list of process steps.  Both are
sent inline when a service is created.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import ContentModel


class ServiceFeatureIn(BaseModel):
    text: str


class ServiceProcessStepIn(BaseModel):
    title: str
    description: str
    order: int


class ServiceCreate(ContentModel):
    """Schema for creating a service together with its children."""

    slug: str = Field(..., examples=["corporate"])
    title: str
    description: str
    image_url: str
    banner: Optional[str] = None
    features: List[ServiceFeatureIn] = Field(default_factory=list)
    process_steps: List[ServiceProcessStepIn] = Field(default_factory=list)


class ServiceUpdate(ContentModel):
    """Schema for updating the service row itself."""

    slug: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    banner: Optional[str] = None
