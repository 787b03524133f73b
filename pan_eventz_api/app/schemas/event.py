"""
Pydantic models for event case studies.

Events are the portfolio entries shown on the events page.  The public
detail page addresses them by ``slug``; admin writes use the numeric
id.
"""

from typing import List, Optional, Union

from .common import ContentModel


class EventCreate(ContentModel):
    """Schema for creating an event."""

    title: str
    slug: str
    description: str
    event_type: str
    event_date: Optional[str] = None
    location: Optional[str] = None
    status: str = "Upcoming"
    client: Optional[str] = None
    budget: Optional[Union[int, float, str]] = None
    cover_image: Optional[str] = None
    images: Optional[List[str]] = None
    notes: Optional[str] = None


class EventUpdate(ContentModel):
    """Schema for updating an event; all fields are optional."""

    title: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    event_type: Optional[str] = None
    event_date: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    client: Optional[str] = None
    budget: Optional[Union[int, float, str]] = None
    cover_image: Optional[str] = None
    images: Optional[List[str]] = None
    notes: Optional[str] = None
