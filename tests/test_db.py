"""Tests for the in-memory ``MockDB`` and its query builders."""

import pytest

from pan_eventz_api.app.core.db import (
    MockDB,
    and_,
    eq,
    init_db,
    match_condition,
    service_features,
    services,
    slides,
    stats,
    users,
)
from pan_eventz_api.app.core.security import verify_password


@pytest.fixture()
def db():
    return MockDB()


class TestMatchCondition:
    def test_empty_mapping_matches_everything(self):
        assert match_condition({"id": 1}, {})
        assert MockDB.match_condition({}, {})

    def test_none_matches_everything(self):
        assert match_condition({"id": 1}, None)

    def test_mapping_equality(self):
        assert match_condition({"slug": "wedding"}, {"slug": "wedding"})
        assert not match_condition({"slug": "wedding"}, {"slug": "sports"})

    def test_missing_key_never_matches(self):
        assert not match_condition({}, {"active": None})
        assert not match_condition({}, eq(slides.c.active, None))

    def test_filter_expressions(self):
        row = {"id": 3, "active": True}
        assert match_condition(row, and_(eq(slides.c.id, 3), eq(slides.c.active, True)))
        assert not match_condition(row, and_(eq(slides.c.id, 3), eq(slides.c.active, False)))

    def test_predicate(self):
        assert match_condition({"value": 10}, lambda row: row["value"] > 5)

    def test_unsupported_condition(self):
        with pytest.raises(TypeError):
            match_condition({}, 42)


class TestInsert:
    def test_ids_increase_from_one(self, db):
        rows = db.insert(stats).values([{"label": "a"}, {"label": "b"}]).returning()
        assert [row["id"] for row in rows] == [1, 2]
        assert all("createdAt" in row for row in rows)

    def test_id_follows_largest_existing(self, db):
        db.insert(stats).values([{"label": "a"}, {"label": "b"}, {"label": "c"}])
        db.delete(stats).where(eq(stats.c.id, 1))
        [row] = db.insert(stats).values({"label": "d"}).returning()
        assert row["id"] == 4

    def test_supplied_id_and_created_at_are_ignored(self, db):
        db.insert(stats).values({"label": "a"})
        [row] = db.insert(stats).values({"id": 1, "label": "b", "createdAt": "2000-01-01"}).returning()
        assert row["id"] == 2
        assert row["createdAt"] != "2000-01-01"
        assert [r["id"] for r in db.query.stats.find_many()] == [1, 2]

    def test_returning_gives_copies(self, db):
        [row] = db.insert(stats).values({"label": "a"}).returning()
        row["label"] = "changed"
        assert db.query.stats.find_first()["label"] == "a"


class TestQueries:
    def test_find_many_limit_and_offset(self, db):
        db.insert(stats).values([{"label": str(i)} for i in range(5)])
        labels = [row["label"] for row in db.query.stats.find_many(limit=2, offset=1)]
        assert labels == ["1", "2"]

    def test_zero_limit_means_no_limit(self, db):
        db.insert(stats).values([{"label": str(i)} for i in range(3)])
        assert len(db.query.stats.find_many(limit=0)) == 3

    def test_find_first_miss_returns_none(self, db):
        assert db.query[services].find_first(where=eq(services.c.slug, "nope")) is None

    def test_table_lookup_by_name(self, db):
        db.insert(service_features).values({"serviceId": 1, "text": "x"})
        assert db.query.serviceFeatures.find_many() == db.query[service_features].find_many()

    def test_unknown_table(self, db):
        with pytest.raises(KeyError):
            db.rows("nope")
        with pytest.raises(AttributeError):
            db.query.nope

    def test_select_projects_columns(self, db):
        db.insert(stats).values({"label": "Events", "value": 5})
        assert db.select(stats.c.label).from_(stats).all() == [{"label": "Events"}]
        assert db.select("*").from_(stats).where({"value": 5})[0]["label"] == "Events"


class TestUpdateAndDelete:
    def test_update_merges_and_stamps(self, db):
        db.insert(stats).values({"label": "a", "value": 1})
        [row] = db.update(stats).set({"value": 2}).where(eq(stats.c.id, 1)).returning()
        assert row["label"] == "a"
        assert row["value"] == 2
        assert "updatedAt" in row

    def test_update_keeps_id_and_created_at(self, db):
        db.insert(stats).values([{"label": "a"}, {"label": "b"}])
        created = db.query.stats.find_first(where=eq(stats.c.id, 2))["createdAt"]
        [row] = db.update(stats).set({"id": 1, "createdAt": "2000-01-01", "label": "c"}).where(eq(stats.c.id, 2)).returning()
        assert row["id"] == 2
        assert row["createdAt"] == created
        assert row["label"] == "c"
        assert [r["id"] for r in db.query.stats.find_many()] == [1, 2]

    def test_update_miss_returns_empty(self, db):
        assert db.update(stats).set({"value": 2}).where(eq(stats.c.id, 9)).returning() == []

    def test_delete_removes_first_match(self, db):
        db.insert(stats).values([{"label": "a"}, {"label": "b"}])
        [row] = db.delete(stats).where({"label": "a"}).returning()
        assert row["id"] == 1
        assert db.count(stats) == 1


class TestInitDb:
    def test_admin_user_is_created_with_hashed_password(self):
        db = init_db(False, "admin", "secret", "Admin User")
        user = db.query[users].find_first(where=eq(users.c.username, "admin"))
        assert user["role"] == "admin"
        assert user["password"] != "secret"
        assert verify_password("secret", user["password"])

    def test_seeded_content(self):
        db = MockDB(seed=True)
        assert db.count(services) == 6
        assert db.count(service_features) == 18
        assert db.count(slides) == 3
        assert db.count(stats) == 4
