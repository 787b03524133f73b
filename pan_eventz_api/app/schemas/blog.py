"""
Pydantic models for blog posts.

Posts are created as drafts unless ``status`` says otherwise.  Only
published posts are listed on the public blog.
"""

from typing import List, Optional

from pydantic import Field

from .common import ContentModel


class BlogPostCreate(ContentModel):
    """Schema for creating a blog post."""

    title: str
    slug: str = Field(..., examples=["planning-perfect-corporate-event"])
    excerpt: str
    content: str
    author: str
    author_title: Optional[str] = None
    author_image: Optional[str] = None
    category: str
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: str = "draft"


class BlogPostUpdate(ContentModel):
    """Schema for updating a blog post."""

    title: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    author_title: Optional[str] = None
    author_image: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[str] = None
