"""
Blog endpoints.

The public blog lists published posts (optionally by ``?category=``)
and shows a single post by slug.  The admin panel sees drafts as well
through ``GET /api/admin/blog``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from pan_eventz_api.app.api.deps import get_blog_service, with_fallback, write_errors
from pan_eventz_api.app.core.fallbacks import BLOG_FALLBACK
from pan_eventz_api.app.core.security import require_admin
from pan_eventz_api.app.schemas.blog import BlogPostCreate, BlogPostUpdate
from pan_eventz_api.app.services.base import wants_filter
from pan_eventz_api.app.services.blog_service import BlogService


router = APIRouter()
admin_router = APIRouter()


@router.get("")
async def list_posts(
    category: Optional[str] = None,
    service: BlogService = Depends(get_blog_service),
) -> List[Dict[str, Any]]:
    """Return published posts."""

    def narrow(posts: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if wants_filter(category):
            return [post for post in posts if post["category"] == category]
        return posts

    return await with_fallback(
        lambda: service.list_items(category, published_only=True), BLOG_FALLBACK, "blog posts", narrow=narrow
    )


@admin_router.get("")
async def list_all_posts(
    category: Optional[str] = None,
    service: BlogService = Depends(get_blog_service),
) -> List[Dict[str, Any]]:
    """Return every post including drafts (admin only)."""
    return await service.list_items(category)


@router.get("/{slug}")
async def get_post(slug: str, service: BlogService = Depends(get_blog_service)) -> Dict[str, Any]:
    post = await service.get_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog post not found")
    return post


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    post_in: BlogPostCreate,
    service: BlogService = Depends(get_blog_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to create blog post"):
        return await service.create_item(post_in.to_record())


@router.put("/{post_id}")
async def update_post(
    post_id: int,
    post_in: BlogPostUpdate,
    service: BlogService = Depends(get_blog_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, Any]:
    with write_errors("Failed to update blog post"):
        post = await service.update_item(post_id, post_in.to_record(partial=True))
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog post not found")
    return post


@router.delete("/{post_id}")
async def delete_post(
    post_id: int,
    service: BlogService = Depends(get_blog_service),
    current_user: dict = Depends(require_admin),
) -> Dict[str, str]:
    with write_errors("Failed to delete blog post", status.HTTP_500_INTERNAL_SERVER_ERROR):
        deleted = await service.delete_item(post_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog post not found")
    return {"message": "Blog post deleted successfully"}
