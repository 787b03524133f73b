"""Service layer for homepage slides (``slides`` table)."""

from typing import Any, Dict, List

from pan_eventz_api.app.core.db import eq, slides

from .base import TableService, sort_by_order


class SlideService(TableService):
    """Slides are shown in ``order``; the public slider only gets active ones."""

    table = slides

    async def list_items(self) -> List[Dict[str, Any]]:
        return sort_by_order(self.db.query[slides].find_many())

    async def list_active(self) -> List[Dict[str, Any]]:
        return sort_by_order(self.db.query[slides].find_many(where=eq(slides.c.active, True)))
