"""Service layer for the statistics counters (``stats`` table)."""

from typing import Any, Dict, List

from pan_eventz_api.app.core.db import stats

from .base import TableService, sort_by_order


class StatService(TableService):
    table = stats

    async def list_items(self) -> List[Dict[str, Any]]:
        return sort_by_order(self.db.query[stats].find_many())
