"""Tests for the gallery routes, including the public fallback."""

from pan_eventz_api.app.core.file_storage import GALLERY_ITEMS


class TestPublicGallery:
    def test_empty_store_serves_four_sample_items(self, client):
        resp = client.get("/api/gallery")
        assert resp.status_code == 200
        categories = [item["category"] for item in resp.json()]
        assert categories == ["corporate", "wedding", "sports", "cultural"]

    def test_fallback_respects_category(self, client):
        resp = client.get("/api/gallery", params={"category": "wedding"})
        assert [item["category"] for item in resp.json()] == ["wedding"]

    def test_stored_items_replace_fallback(self, client, storage):
        storage.create(GALLERY_ITEMS, {"title": "Gala", "category": "corporate"})
        storage.create(GALLERY_ITEMS, {"title": "Cup final", "category": "sports"})
        assert [item["title"] for item in client.get("/api/gallery").json()] == ["Gala", "Cup final"]
        resp = client.get("/api/gallery", params={"category": "sports"})
        assert [item["title"] for item in resp.json()] == ["Cup final"]
        resp = client.get("/api/gallery", params={"category": "all"})
        assert len(resp.json()) == 2

    def test_get_by_id(self, client, storage):
        item = storage.create(GALLERY_ITEMS, {"title": "Gala", "category": "corporate"})
        assert client.get(f"/api/gallery/{item['id']}").json()["title"] == "Gala"
        resp = client.get("/api/gallery/99")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Gallery item not found"}

    def test_non_integer_id_is_a_validation_error(self, client):
        resp = client.get("/api/gallery/abc")
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid request data"
        assert body["error"][0]["loc"][-1] == "item_id"


class TestGalleryWrites:
    def test_create_without_token_writes_nothing(self, client, storage):
        resp = client.post("/api/gallery", json={"title": "Gala", "category": "corporate"})
        assert resp.status_code == 401
        assert resp.json() == {"message": "Authentication required"}
        assert storage.get_all(GALLERY_ITEMS) == []

    def test_create(self, client, admin_headers, storage):
        resp = client.post(
            "/api/gallery",
            json={"title": "Gala", "category": "corporate", "imageUrl": "/uploads/gala.jpg", "venue": "Hall A"},
            headers=admin_headers,
        )
        assert resp.status_code == 201
        item = resp.json()
        assert item["id"] == 1
        assert item["imageUrl"] == "/uploads/gala.jpg"
        assert item["mediaType"] == "image"
        assert item["venue"] == "Hall A"
        assert "mediaUrl" not in item
        assert storage.get_all(GALLERY_ITEMS) == [item]

    def test_payload_id_does_not_duplicate_ids(self, client, admin_headers, storage):
        client.post("/api/gallery", json={"title": "A", "category": "corporate"}, headers=admin_headers)
        resp = client.post("/api/gallery", json={"title": "B", "category": "corporate", "id": 1}, headers=admin_headers)
        assert resp.status_code == 201
        assert resp.json()["id"] == 2
        resp = client.put("/api/gallery/2", json={"id": 1, "title": "B2"}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["id"] == 2
        assert [row["id"] for row in storage.get_all(GALLERY_ITEMS)] == [1, 2]

    def test_create_uses_media_url_or_placeholder(self, client, admin_headers):
        item = client.post(
            "/api/gallery",
            json={"title": "Clip", "category": "sports", "mediaUrl": "https://cdn.example/clip.mp4"},
            headers=admin_headers,
        ).json()
        assert item["imageUrl"] == "https://cdn.example/clip.mp4"
        item = client.post("/api/gallery", json={"title": "X", "category": "sports"}, headers=admin_headers).json()
        assert item["imageUrl"].startswith("https://res.cloudinary.com/")

    def test_create_missing_title(self, client, admin_headers):
        resp = client.post("/api/gallery", json={"category": "corporate"}, headers=admin_headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid request data"

    def test_update_merges(self, client, admin_headers, storage):
        item = storage.create(GALLERY_ITEMS, {"title": "Gala", "category": "corporate"})
        resp = client.put(f"/api/gallery/{item['id']}", json={"title": "Gala 2024"}, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["title"] == "Gala 2024"
        assert resp.json()["category"] == "corporate"

    def test_update_missing(self, client, admin_headers):
        resp = client.put("/api/gallery/5", json={"title": "x"}, headers=admin_headers)
        assert resp.status_code == 404

    def test_delete(self, client, admin_headers, storage):
        item = storage.create(GALLERY_ITEMS, {"title": "Gala", "category": "corporate"})
        resp = client.delete(f"/api/gallery/{item['id']}", headers=admin_headers)
        assert resp.json() == {"message": "Gallery item deleted successfully"}
        assert storage.get_all(GALLERY_ITEMS) == []
        assert client.delete(f"/api/gallery/{item['id']}", headers=admin_headers).status_code == 404

    def test_admin_mirror(self, client, admin_headers):
        resp = client.post("/api/admin/gallery", json={"title": "Gala", "category": "corporate"}, headers=admin_headers)
        assert resp.status_code == 201
        assert client.get("/api/admin/gallery", headers=admin_headers).json()[0]["title"] == "Gala"
        assert client.get("/api/admin/gallery").status_code == 401
