"""Service layer for featured technologies (``technologies`` table)."""

from typing import Any, Dict, List

from pan_eventz_api.app.core.db import eq, technologies

from .base import TableService, sort_by_order


class TechnologyService(TableService):
    table = technologies

    async def list_items(self) -> List[Dict[str, Any]]:
        return sort_by_order(self.db.query[technologies].find_many())

    async def list_active(self) -> List[Dict[str, Any]]:
        return sort_by_order(
            self.db.query[technologies].find_many(where=eq(technologies.c.active, True))
        )
