"""
Pydantic models for the about page, the team and the company values.

The about page is a single record; ``AboutUpdate`` upserts it.  Team
members shown on the team page are kept in the file store, while the
company values belong to the about page.
"""

from typing import List, Optional

from .common import ContentModel


class AboutUpdate(ContentModel):
    description: Optional[str] = None
    mission: Optional[str] = None
    vision: Optional[str] = None
    history: Optional[str] = None
    team: Optional[str] = None
    quality: Optional[str] = None
    images: Optional[List[str]] = None


class TeamMemberCreate(ContentModel):
    name: str
    position: str
    bio: Optional[str] = None
    image: Optional[str] = None
    order: int = 1


class TeamMemberUpdate(ContentModel):
    name: Optional[str] = None
    position: Optional[str] = None
    bio: Optional[str] = None
    image: Optional[str] = None
    order: Optional[int] = None


class ValueCreate(ContentModel):
    title: str
    description: str
    order: int


class ValueUpdate(ContentModel):
    title: Optional[str] = None
    description: Optional[str] = None
    order: Optional[int] = None
