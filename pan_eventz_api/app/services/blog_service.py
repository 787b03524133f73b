"""
Service layer for blog posts.

Posts are stored in the ``blogPosts`` file collection.  The public blog
shows only published posts: those whose ``status`` is ``"published"``,
or older records that carry ``active: true`` instead of a status.  The
admin panel lists every post.  Publishing a post stamps
``publishDate`` unless one was given.
"""

from typing import Any, Dict, List, Optional

from pan_eventz_api.app.core.file_storage import BLOG_POSTS
from pan_eventz_api.app.core.timestamps import utc_now_iso

from .base import FileCollectionService, wants_filter


PUBLISHED = "published"


def is_published(post: Dict[str, Any]) -> bool:
    if "status" in post:
        return post["status"] == PUBLISHED
    return bool(post.get("active"))


class BlogService(FileCollectionService):
    """Service for managing blog posts."""

    collection = BLOG_POSTS

    async def list_items(self, category: Optional[str] = None, published_only: bool = False) -> List[Dict[str, Any]]:
        posts = self.storage.get_all(self.collection)
        if published_only:
            posts = [post for post in posts if is_published(post)]
        if wants_filter(category):
            posts = [post for post in posts if post.get("category") == category]
        return posts

    async def get_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        return await self.find_by("slug", slug)

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("status") == PUBLISHED and not data.get("publishDate"):
            data["publishDate"] = utc_now_iso()
        return data

    async def update_item(self, item_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        data = dict(data)
        if data.get("status") == PUBLISHED and not data.get("publishDate"):
            current = self.storage.get(self.collection, item_id)
            if current is not None and not current.get("publishDate"):
                data["publishDate"] = utc_now_iso()
        return self.storage.update(self.collection, item_id, data)
