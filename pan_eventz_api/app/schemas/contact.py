"""
Pydantic models for contact form submissions (inquiries).

Visitors submit the form on the contact page; the admin works through
the inquiries, moving them from ``New`` through ``In Review`` and
``Responded`` to ``Closed``.
"""

from typing import Optional

from pydantic import Field

from .common import ContentModel


class ContactSubmissionCreate(ContentModel):
    """Schema for the public contact form."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str
    event_type: str
    message: str
    status: str = "New"


class ContactSubmissionUpdate(ContentModel):
    """Schema for updating an inquiry from the admin panel."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    event_type: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None


class ContactResponse(ContentModel):
    """Reply recorded against an inquiry."""

    message: str = Field(..., min_length=1)
    status: str = "Responded"
