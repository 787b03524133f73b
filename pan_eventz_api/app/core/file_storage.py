"""
Flat-file JSON storage for the editable site content.

Each collection is a single JSON array stored at
``<data_dir>/<collection>.json`` and pretty-printed with a two-space
indent.  Every operation reads the whole file, applies its change and
writes the whole file back.  A re-entrant lock per ``FileStorage``
instance makes each of those read-modify-write cycles atomic inside one
process; two processes sharing a data directory can still overwrite
each other's changes.

Reads are forgiving: a missing file is an empty collection, and a file
that cannot be read or parsed is logged and treated as empty.  Writes
are not: a failed write is logged and the exception propagates to the
caller.

``delete`` returns ``True`` whether or not the id existed.  Callers that
need to answer "not found" look the record up with ``get`` first.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fastapi import Request

from .timestamps import utc_now_iso


logger = logging.getLogger(__name__)

BLOG_POSTS = "blogPosts"
GALLERY_ITEMS = "galleryItems"
TEAM_MEMBERS = "teamMembers"
TESTIMONIALS = "testimonials"
EVENTS = "events"
CONTACT_SUBMISSIONS = "contactSubmissions"
SETTINGS = "settings"

# Set by the store itself; ignored when present in caller data.
GENERATED_KEYS = ("id", "createdAt", "updatedAt")


class FileStorage:
    """JSON-file backed collections rooted at ``data_dir``."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def read_collection(self, collection: str) -> List[Dict[str, Any]]:
        path = self._path(collection)
        with self._lock:
            if not path.exists():
                return []
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError):
                logger.exception("Error reading collection %s", collection)
                return []
        if not isinstance(data, list):
            logger.error("Collection %s is not a JSON array; ignoring its contents", collection)
            return []
        return data

    def write_collection(self, collection: str, rows: List[Dict[str, Any]]) -> None:
        path = self._path(collection)
        with self._lock:
            try:
                path.write_text(json.dumps(rows, indent=2, ensure_ascii=False), encoding="utf-8")
            except (OSError, TypeError, ValueError):
                logger.exception("Error writing collection %s", collection)
                raise

    @staticmethod
    def next_id(rows: Iterable[Mapping[str, Any]]) -> int:
        return max((row.get("id") or 0 for row in rows), default=0) + 1

    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        """Return every row of ``collection`` in file order."""
        return self.read_collection(collection)

    def get(self, collection: str, item_id: int) -> Optional[Dict[str, Any]]:
        for row in self.read_collection(collection):
            if row.get("id") == item_id:
                return row
        return None

    def create(self, collection: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Append a new row and return it.

        The id is one more than the largest id present (1 for an empty
        collection).  ``id``, ``createdAt`` and ``updatedAt`` are always
        generated here; the same keys in ``data`` are ignored.
        """
        with self._lock:
            rows = self.read_collection(collection)
            now = utc_now_iso()
            fields = {key: value for key, value in data.items() if key not in GENERATED_KEYS}
            row = {"id": self.next_id(rows), **fields, "createdAt": now, "updatedAt": now}
            rows.append(row)
            self.write_collection(collection, rows)
        logger.info("Created %s %s", collection, row["id"])
        return row

    def update(self, collection: str, item_id: int, data: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Shallow-merge ``data`` into the row with ``item_id``.

        The row keeps its ``id`` and ``createdAt``.  Returns the updated
        row, or ``None`` when no row has that id; in that case the file is
        left untouched.
        """
        with self._lock:
            rows = self.read_collection(collection)
            for index, row in enumerate(rows):
                if row.get("id") == item_id:
                    patch = {key: value for key, value in data.items() if key not in GENERATED_KEYS}
                    rows[index] = {**row, **patch, "updatedAt": utc_now_iso()}
                    self.write_collection(collection, rows)
                    logger.info("Updated %s %s", collection, item_id)
                    return rows[index]
        return None

    def delete(self, collection: str, item_id: int) -> bool:
        """Remove the row with ``item_id``; always returns ``True``."""
        with self._lock:
            rows = self.read_collection(collection)
            remaining = [row for row in rows if row.get("id") != item_id]
            self.write_collection(collection, remaining)
        if len(remaining) != len(rows):
            logger.info("Deleted %s %s", collection, item_id)
        return True

    def seed(self, collection: str, rows: Iterable[Mapping[str, Any]]) -> int:
        """Write ``rows`` into ``collection`` if it is empty.

        Rows keep their own ids when present; rows without one are
        numbered after the largest id in ``rows``.  Returns the number of
        rows written, 0 if the collection already had content.  Raises
        ``ValueError`` when two rows carry the same id.
        """
        rows = list(rows)
        explicit = [row["id"] for row in rows if row.get("id") is not None]
        if len(explicit) != len(set(explicit)):
            raise ValueError(f"Duplicate ids in seed rows for {collection}")
        with self._lock:
            if self.read_collection(collection):
                return 0
            now = utc_now_iso()
            next_id = self.next_id(rows)
            seeded: List[Dict[str, Any]] = []
            for row in rows:
                if row.get("id") is None:
                    row = {**row, "id": next_id}
                    next_id += 1
                seeded.append({"createdAt": now, "updatedAt": now, **row})
            self.write_collection(collection, seeded)
        logger.info("Seeded %s with %d rows", collection, len(seeded))
        return len(seeded)


def get_file_storage(request: Request) -> FileStorage:
    """FastAPI dependency returning the application's ``FileStorage``."""
    return request.app.state.file_storage
