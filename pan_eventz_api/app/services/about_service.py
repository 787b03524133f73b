"""
Service layer for the about page.

The page content is a single row in the ``about`` table.  The full
view used by the about page adds the leadership team (``aboutTeam``)
and the company values (``aboutValues``), both ordered by ``order``.
Values are also editable on their own through :class:`ValueService`.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pan_eventz_api.app.core.db import about, about_team, about_values, eq

from .base import TableService, sort_by_order


logger = logging.getLogger(__name__)


class AboutService(TableService):
    """Service for reading and upserting the about page."""

    table = about

    async def get_about(self) -> Optional[Dict[str, Any]]:
        return self.db.query[about].find_first()

    async def get_full(self) -> Dict[str, Any]:
        content = await self.get_about() or {}
        team = sort_by_order(self.db.query[about_team].find_many())
        values = sort_by_order(self.db.query[about_values].find_many())
        return {**content, "team": team, "values": values}

    async def update_about(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Update the about row, creating it on first use."""
        existing = await self.get_about()
        if existing is None:
            created = await self.create_item(data)
            logger.info("About page created")
            return created
        [updated] = self.db.update(about).set(dict(data)).where(eq(about.c.id, existing["id"])).returning()
        logger.info("About page updated")
        return updated


class ValueService(TableService):
    """Service for the company values listed on the about page."""

    table = about_values

    async def list_items(self) -> List[Dict[str, Any]]:
        return sort_by_order(self.db.query[about_values].find_many())
