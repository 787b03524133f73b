"""
In-memory database used by the content services.

``MockDB`` keeps one list of plain ``dict`` rows per table and exposes a
small query-builder API:

* ``db.query.<table>.find_first(where=...)`` and ``find_many(where=...,
  limit=..., offset=...)`` for reads,
* ``db.insert(table).values(...).returning()``,
* ``db.update(table).set(...).where(...).returning()``,
* ``db.delete(table).where(...).returning()``,
* ``db.select(*fields).from_(table).where(...)``.

Conditions are either typed filter expressions built with :func:`eq`
and :func:`and_`, plain predicates (``lambda row: ...``) or mappings
of ``{column_name: value}``.  Matching is equality only and rows are
always returned in insertion order.  Misses are silent: ``None`` from
``find_first`` and ``[]`` from ``returning()``.

Nothing enforces referential integrity between tables; services that
own child rows (service features, process steps) remove them
explicitly.

The application builds one ``MockDB`` in :func:`init_db` and stores it
on ``app.state``.  Route handlers obtain it through the
:func:`get_mock_db` dependency.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from fastapi import Request

from .timestamps import utc_now_iso


logger = logging.getLogger(__name__)

_MISSING = object()
# Stamped by the builders; ignored when present in caller data.
_GENERATED_KEYS = ("id", "createdAt", "updatedAt")


@dataclass(frozen=True)
class Column:
    table: str
    name: str


class Table:
    """A named table with column references available under ``c``."""

    def __init__(self, name: str, columns: Sequence[str]) -> None:
        self.name = name
        self.columns = tuple(columns)
        self.c = SimpleNamespace(**{col: Column(name, col) for col in self.columns})

    def __repr__(self) -> str:
        return f"Table({self.name!r})"


users = Table("users", ("id", "username", "password", "name", "role", "createdAt"))
services = Table(
    "services",
    ("id", "slug", "title", "description", "imageUrl", "banner", "createdAt", "updatedAt"),
)
service_features = Table("serviceFeatures", ("id", "serviceId", "text"))
service_process_steps = Table(
    "serviceProcessSteps", ("id", "serviceId", "title", "description", "order")
)
gallery_items = Table(
    "galleryItems",
    ("id", "title", "category", "description", "event", "date", "imageUrl", "serviceId", "createdAt"),
)
slides = Table(
    "slides",
    (
        "id", "title", "titleHighlight", "description", "backgroundImage",
        "primaryCtaText", "primaryCtaLink", "secondaryCtaText", "secondaryCtaLink",
        "order", "active", "createdAt",
    ),
)
technologies = Table("technologies", ("id", "title", "description", "icon", "order", "active"))
testimonials = Table(
    "testimonials",
    ("id", "content", "authorName", "authorTitle", "authorAvatar", "rating", "active", "createdAt"),
)
about = Table(
    "about",
    ("id", "description", "mission", "vision", "history", "team", "quality", "images", "updatedAt"),
)
about_team = Table("aboutTeam", ("id", "name", "position", "bio", "image", "order"))
about_values = Table("aboutValues", ("id", "title", "description", "order"))
stats = Table("stats", ("id", "label", "value", "suffix", "order"))
blog_posts = Table(
    "blogPosts",
    (
        "id", "title", "slug", "excerpt", "content", "author", "authorTitle", "authorImage",
        "publishDate", "category", "image", "tags", "active", "createdAt", "updatedAt",
    ),
)
contact_submissions = Table(
    "contactSubmissions",
    ("id", "name", "email", "phone", "eventType", "message", "status", "createdAt", "updatedAt"),
)
events = Table(
    "events",
    (
        "id", "title", "slug", "description", "eventType", "eventDate", "location", "status",
        "client", "budget", "coverImage", "images", "notes", "createdAt", "updatedAt",
    ),
)

TABLES: Dict[str, Table] = {
    table.name: table
    for table in (
        users, services, service_features, service_process_steps, gallery_items, slides,
        technologies, testimonials, about, about_team, about_values, stats, blog_posts,
        contact_submissions, events,
    )
}


# ---------------------------------------------------------------------------
# Filter expressions
# ---------------------------------------------------------------------------

class Filter:
    """Base class for typed filter expressions."""

    def matches(self, item: Mapping[str, Any]) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class Eq(Filter):
    field: Column
    value: Any

    def matches(self, item: Mapping[str, Any]) -> bool:
        return item.get(self.field.name, _MISSING) == self.value


@dataclass(frozen=True)
class And(Filter):
    conditions: tuple

    def matches(self, item: Mapping[str, Any]) -> bool:
        return all(match_condition(item, condition) for condition in self.conditions)


def eq(column: Column, value: Any) -> Eq:
    return Eq(column, value)


def and_(*conditions: Any) -> And:
    return And(tuple(conditions))


Condition = Union[None, Filter, Mapping, Callable[[Mapping[str, Any]], bool]]


def match_condition(item: Mapping[str, Any], where: Condition) -> bool:
    """Return ``True`` when ``item`` satisfies ``where``.

    ``None`` and an empty mapping match every row.  For a mapping, each
    value is checked in turn: a filter expression is evaluated against
    the row, a nested mapping is matched recursively, and anything else
    is compared for equality with ``item[key]``.  A key absent from the
    row never matches, not even ``None``.
    """
    if where is None:
        return True
    if isinstance(where, Filter):
        return where.matches(item)
    if isinstance(where, Mapping):
        for key, condition in where.items():
            if isinstance(condition, Filter):
                matched = condition.matches(item)
            elif isinstance(condition, Mapping):
                matched = match_condition(item, condition)
            else:
                matched = item.get(key, _MISSING) == condition
            if not matched:
                return False
        return True
    if callable(where):
        return bool(where(item))
    raise TypeError(f"Unsupported condition type: {type(where).__name__}")


# ---------------------------------------------------------------------------
# Query builders
# ---------------------------------------------------------------------------

class Returning:
    """Result of a write; ``returning()`` yields copies of the affected rows."""

    def __init__(self, rows: List[Dict[str, Any]]) -> None:
        self._rows = rows

    def returning(self) -> List[Dict[str, Any]]:
        return [dict(row) for row in self._rows]


class TableQuery:
    """Read access to a single table (``db.query.<table>``)."""

    def __init__(self, rows: List[Dict[str, Any]]) -> None:
        self._rows = rows

    def find_first(self, where: Condition = None) -> Optional[Dict[str, Any]]:
        for row in self._rows:
            if match_condition(row, where):
                return dict(row)
        return None

    def find_many(
        self,
        where: Condition = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        if where is None:
            result = list(self._rows)
        else:
            result = [row for row in self._rows if match_condition(row, where)]
        # Zero and None both mean "not set".
        if offset:
            result = result[offset:]
        if limit:
            result = result[:limit]
        return [dict(row) for row in result]


class _QueryNamespace:
    def __init__(self, db: "MockDB") -> None:
        self._db = db

    def __getattr__(self, name: str) -> TableQuery:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return TableQuery(self._db.rows(name))
        except KeyError as exc:
            raise AttributeError(str(exc)) from exc

    def __getitem__(self, table: Union[str, Table]) -> TableQuery:
        return TableQuery(self._db.rows(table))


class _InsertBuilder:
    def __init__(self, db: "MockDB", rows: List[Dict[str, Any]]) -> None:
        self._db = db
        self._rows = rows

    def values(self, data: Union[Mapping[str, Any], Iterable[Mapping[str, Any]]]) -> Returning:
        items = [data] if isinstance(data, Mapping) else list(data)
        now = utc_now_iso()
        inserted = []
        for item in items:
            fields = {key: value for key, value in item.items() if key not in _GENERATED_KEYS}
            row = {"id": _next_id(self._rows), **fields, "createdAt": now}
            self._rows.append(row)
            inserted.append(row)
        return Returning(inserted)


class _UpdateBuilder:
    def __init__(self, rows: List[Dict[str, Any]]) -> None:
        self._rows = rows
        self._data: Dict[str, Any] = {}

    def set(self, data: Mapping[str, Any]) -> "_UpdateBuilder":
        self._data = dict(data)
        return self

    def where(self, condition: Condition) -> Returning:
        for index, row in enumerate(self._rows):
            if match_condition(row, condition):
                patch = {key: value for key, value in self._data.items() if key not in _GENERATED_KEYS}
                updated = {**row, **patch, "updatedAt": utc_now_iso()}
                self._rows[index] = updated
                return Returning([updated])
        return Returning([])


class _DeleteBuilder:
    def __init__(self, rows: List[Dict[str, Any]]) -> None:
        self._rows = rows

    def where(self, condition: Condition) -> Returning:
        for index, row in enumerate(self._rows):
            if match_condition(row, condition):
                return Returning([self._rows.pop(index)])
        return Returning([])


class _SelectBuilder:
    def __init__(self, db: "MockDB", fields: Sequence[Union[str, Column]]) -> None:
        self._db = db
        self._fields = [f for f in fields if f != "*"]

    def from_(self, table: Union[str, Table]) -> "_SelectFrom":
        return _SelectFrom(self._db.rows(table), self._fields)


class _SelectFrom:
    def __init__(self, rows: List[Dict[str, Any]], fields: Sequence[Union[str, Column]]) -> None:
        self._rows = rows
        self._names = [f.name if isinstance(f, Column) else f for f in fields]

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if not self._names:
            return dict(row)
        return {name: row.get(name) for name in self._names}

    def where(self, condition: Condition) -> List[Dict[str, Any]]:
        return [self._project(row) for row in self._rows if match_condition(row, condition)]

    def limit(self, limit: int) -> List[Dict[str, Any]]:
        return [self._project(row) for row in self._rows[:limit]]

    def all(self) -> List[Dict[str, Any]]:
        return [self._project(row) for row in self._rows]


def _next_id(rows: List[Dict[str, Any]]) -> int:
    return max((row.get("id") or 0 for row in rows), default=0) + 1


class MockDB:
    """In-memory tables with a query-builder style API."""

    match_condition = staticmethod(match_condition)

    def __init__(self, seed: bool = False) -> None:
        self._data: Dict[str, List[Dict[str, Any]]] = {name: [] for name in TABLES}
        self.query = _QueryNamespace(self)
        if seed:
            from .seed_data import seed_mock_db

            seed_mock_db(self)

    def rows(self, table: Union[str, Table]) -> List[Dict[str, Any]]:
        """Return the live row list of ``table``.

        Raises ``KeyError`` for tables the database does not know.
        """
        name = table.name if isinstance(table, Table) else table
        try:
            return self._data[name]
        except KeyError:
            raise KeyError(f"Unknown table: {name}") from None

    def insert(self, table: Union[str, Table]) -> _InsertBuilder:
        return _InsertBuilder(self, self.rows(table))

    def update(self, table: Union[str, Table]) -> _UpdateBuilder:
        return _UpdateBuilder(self.rows(table))

    def delete(self, table: Union[str, Table]) -> _DeleteBuilder:
        return _DeleteBuilder(self.rows(table))

    def select(self, *fields: Union[str, Column]) -> _SelectBuilder:
        return _SelectBuilder(self, fields)

    def count(self, table: Union[str, Table]) -> int:
        return len(self.rows(table))


def init_db(seed: bool, admin_username: str, admin_password: str, admin_name: str) -> MockDB:
    """Build the application database.

    Sample content is loaded when ``seed`` is true.  The configured
    administrator is always present in the ``users`` table; its
    password is stored hashed.
    """
    from .security import ADMIN_ROLE, hash_password

    db = MockDB(seed=seed)
    if db.query.users.find_first(where=eq(users.c.username, admin_username)) is None:
        db.insert(users).values(
            {
                "username": admin_username,
                "password": hash_password(admin_password),
                "name": admin_name,
                "role": ADMIN_ROLE,
            }
        )
        logger.info("Admin user %s created", admin_username)
    return db


def get_mock_db(request: Request) -> MockDB:
    """FastAPI dependency returning the application's ``MockDB``."""
    return request.app.state.db
