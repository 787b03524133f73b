"""
Generic CRUD services over the two stores.

``FileCollectionService`` wraps one ``FileStorage`` collection and
``TableService`` wraps one ``MockDB`` table.  Domain services subclass
them, set ``collection``/``table`` and add the queries their pages
need (filters by category or status, lookup by slug, ordering).

Both flavours expose the same coroutine API so route handlers do not
care which store backs a resource:

* ``list_items()``
* ``get_item(item_id)`` returning the row or ``None``
* ``create_item(data)`` returning the stored row
* ``update_item(item_id, data)`` returning the merged row or ``None``
* ``delete_item(item_id)`` returning ``False`` when nothing matched
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pan_eventz_api.app.core.db import MockDB, Table, eq
from pan_eventz_api.app.core.file_storage import FileStorage


logger = logging.getLogger(__name__)

ALL = "all"


def wants_filter(value: Optional[str]) -> bool:
    """Return ``True`` when a query filter should be applied.

    Missing, empty and ``"all"`` values mean "no filter".
    """
    return bool(value) and value != ALL


def sort_by_order(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort rows by their ``order`` key; rows without one go last."""
    return sorted(rows, key=lambda row: (row.get("order") is None, row.get("order") or 0))


class FileCollectionService:
    """CRUD access to a single ``FileStorage`` collection."""

    collection: str = ""

    def __init__(self, storage: FileStorage) -> None:
        self.storage = storage

    async def list_items(self) -> List[Dict[str, Any]]:
        return self.storage.get_all(self.collection)

    async def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        return self.storage.get(self.collection, item_id)

    async def find_by(self, key: str, value: Any) -> Optional[Dict[str, Any]]:
        for row in self.storage.get_all(self.collection):
            if row.get(key) == value:
                return row
        return None

    async def create_item(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return self.storage.create(self.collection, self.prepare_create(dict(data)))

    async def update_item(self, item_id: int, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        return self.storage.update(self.collection, item_id, dict(data))

    async def delete_item(self, item_id: int) -> bool:
        if self.storage.get(self.collection, item_id) is None:
            return False
        return self.storage.delete(self.collection, item_id)

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for subclasses to fill in derived fields before insert."""
        return data


class TableService:
    """CRUD access to a single ``MockDB`` table."""

    table: Table

    def __init__(self, db: MockDB) -> None:
        self.db = db

    async def list_items(self) -> List[Dict[str, Any]]:
        return self.db.query[self.table].find_many()

    async def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        return self.db.query[self.table].find_first(where=eq(self.table.c.id, item_id))

    async def create_item(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        [row] = self.db.insert(self.table).values(dict(data)).returning()
        logger.info("Created %s %s", self.table.name, row["id"])
        return row

    async def update_item(self, item_id: int, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        rows = self.db.update(self.table).set(dict(data)).where(eq(self.table.c.id, item_id)).returning()
        if not rows:
            return None
        logger.info("Updated %s %s", self.table.name, item_id)
        return rows[0]

    async def delete_item(self, item_id: int) -> bool:
        rows = self.db.delete(self.table).where(eq(self.table.c.id, item_id)).returning()
        if rows:
            logger.info("Deleted %s %s", self.table.name, item_id)
        return bool(rows)
