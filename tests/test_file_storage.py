"""Tests for the JSON file store."""

import json

import pytest

from pan_eventz_api.app.core.file_storage import FileStorage


COLLECTION = "galleryItems"


class TestReadCollection:
    def test_missing_file_is_empty(self, storage):
        assert storage.get_all(COLLECTION) == []

    def test_corrupt_file_is_empty(self, storage, settings):
        (storage.data_dir / f"{COLLECTION}.json").write_text("{not json", encoding="utf-8")
        assert storage.get_all(COLLECTION) == []

    def test_non_list_file_is_empty(self, storage):
        (storage.data_dir / f"{COLLECTION}.json").write_text('{"id": 1}', encoding="utf-8")
        assert storage.get_all(COLLECTION) == []


class TestCreate:
    def test_first_id_is_one(self, storage):
        row = storage.create(COLLECTION, {"title": "A"})
        assert row["id"] == 1
        assert row["createdAt"] == row["updatedAt"]

    def test_id_is_max_plus_one(self, storage):
        storage.write_collection(COLLECTION, [{"id": 3}, {"id": 7}])
        row = storage.create(COLLECTION, {"title": "B"})
        assert row["id"] == 8
        assert [r["id"] for r in storage.get_all(COLLECTION)] == [3, 7, 8]

    def test_supplied_id_and_timestamps_are_ignored(self, storage):
        storage.create(COLLECTION, {"title": "A"})
        row = storage.create(COLLECTION, {"title": "B", "id": 1, "createdAt": "2000-01-01"})
        assert row["id"] == 2
        assert row["createdAt"] != "2000-01-01"
        ids = [r["id"] for r in storage.get_all(COLLECTION)]
        assert ids == [1, 2]

    def test_file_is_pretty_printed(self, storage):
        storage.create(COLLECTION, {"title": "Café"})
        text = (storage.data_dir / f"{COLLECTION}.json").read_text(encoding="utf-8")
        assert "Café" in text
        assert '\n  {\n    "id": 1' in text
        assert json.loads(text)[0]["title"] == "Café"


class TestUpdate:
    def test_keeps_other_fields(self, storage):
        created = storage.create(COLLECTION, {"title": "A", "category": "corporate"})
        updated = storage.update(COLLECTION, created["id"], {"title": "B"})
        assert updated["title"] == "B"
        assert updated["category"] == "corporate"
        assert updated["updatedAt"] >= created["updatedAt"]
        assert storage.get(COLLECTION, created["id"]) == updated

    def test_patch_cannot_change_id_or_created_at(self, storage):
        storage.create(COLLECTION, {"title": "A"})
        created = storage.create(COLLECTION, {"title": "B"})
        updated = storage.update(COLLECTION, 2, {"id": 1, "createdAt": "2000-01-01", "title": "C"})
        assert updated["id"] == 2
        assert updated["createdAt"] == created["createdAt"]
        assert updated["title"] == "C"
        assert [r["id"] for r in storage.get_all(COLLECTION)] == [1, 2]

    def test_missing_id_leaves_collection_unchanged(self, storage):
        storage.create(COLLECTION, {"title": "A"})
        before = storage.get_all(COLLECTION)
        assert storage.update(COLLECTION, 99, {"title": "B"}) is None
        assert storage.get_all(COLLECTION) == before


class TestDelete:
    def test_removes_exactly_that_id(self, storage):
        for title in ("A", "B", "C"):
            storage.create(COLLECTION, {"title": title})
        assert storage.delete(COLLECTION, 2) is True
        assert [row["title"] for row in storage.get_all(COLLECTION)] == ["A", "C"]

    def test_missing_id_still_returns_true(self, storage):
        assert storage.delete(COLLECTION, 42) is True


class TestSeed:
    def test_seeds_empty_collection_once(self, tmp_path):
        storage = FileStorage(tmp_path / "seeded")
        assert storage.seed(COLLECTION, [{"title": "A"}, {"id": 5, "title": "B"}]) == 2
        assert [row["id"] for row in storage.get_all(COLLECTION)] == [6, 5]
        assert storage.seed(COLLECTION, [{"title": "C"}]) == 0

    def test_rows_without_id_never_collide_with_explicit_ids(self, tmp_path):
        storage = FileStorage(tmp_path / "seeded")
        storage.seed(COLLECTION, [{"title": "A"}, {"id": 1, "title": "B"}, {"title": "C"}])
        assert [row["id"] for row in storage.get_all(COLLECTION)] == [2, 1, 3]

    def test_duplicate_explicit_ids_are_rejected(self, tmp_path):
        storage = FileStorage(tmp_path / "seeded")
        with pytest.raises(ValueError):
            storage.seed(COLLECTION, [{"id": 1}, {"id": 1}])
        assert storage.get_all(COLLECTION) == []
