"""Tests for the contact form and the admin inquiry inbox."""

from pan_eventz_api.app.core.file_storage import CONTACT_SUBMISSIONS


FORM = {
    "name": "Neha Gupta",
    "email": "neha@example.com",
    "phone": "+91 90000 00000",
    "eventType": "Wedding",
    "message": "Planning a December wedding.",
}


class TestSubmission:
    def test_public_submission_is_stored_as_new(self, client, storage):
        resp = client.post("/api/contact", json=FORM)
        assert resp.status_code == 201
        body = resp.json()
        assert body["status"] == "New"
        assert body["eventType"] == "Wedding"
        assert storage.get_all(CONTACT_SUBMISSIONS) == [body]

    def test_missing_fields_are_rejected(self, client, storage):
        resp = client.post("/api/contact", json={"name": "Neha"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "Invalid request data"
        missing = {error["loc"][-1] for error in body["error"]}
        assert {"email", "phone", "eventType", "message"} <= missing
        assert storage.get_all(CONTACT_SUBMISSIONS) == []


class TestInbox:
    def test_listing_requires_admin(self, client):
        assert client.get("/api/contact").status_code == 401
        assert client.get("/api/admin/contact").status_code == 401

    def test_status_filter(self, client, storage, admin_headers):
        storage.create(CONTACT_SUBMISSIONS, {**FORM, "status": "New"})
        storage.create(CONTACT_SUBMISSIONS, {**FORM, "status": "Closed"})
        resp = client.get("/api/admin/contact", params={"status": "Closed"}, headers=admin_headers)
        assert [row["status"] for row in resp.json()] == ["Closed"]
        assert len(client.get("/api/contact", params={"status": "all"}, headers=admin_headers).json()) == 2

    def test_newest_first(self, client, storage, admin_headers):
        storage.write_collection(
            CONTACT_SUBMISSIONS,
            [
                {**FORM, "id": 1, "createdAt": "2024-01-01T00:00:00.000Z"},
                {**FORM, "id": 2, "createdAt": "2024-03-01T00:00:00.000Z"},
            ],
        )
        rows = client.get("/api/contact", headers=admin_headers).json()
        assert [row["id"] for row in rows] == [2, 1]

    def test_get_update_delete(self, client, storage, admin_headers):
        row = storage.create(CONTACT_SUBMISSIONS, {**FORM, "status": "New"})
        path = f"/api/contact/{row['id']}"
        assert client.get(path, headers=admin_headers).json()["name"] == "Neha Gupta"
        assert client.put(path, json={"status": "In Review"}, headers=admin_headers).json()["status"] == "In Review"
        assert client.delete(path, headers=admin_headers).json() == {"message": "Contact submission deleted successfully"}
        resp = client.get(path, headers=admin_headers)
        assert resp.status_code == 404
        assert resp.json() == {"message": "Contact submission not found"}

    def test_respond(self, client, storage, admin_headers):
        row = storage.create(CONTACT_SUBMISSIONS, {**FORM, "status": "New"})
        resp = client.post(
            f"/api/admin/contact/{row['id']}/respond",
            json={"message": "We will call you tomorrow."},
            headers=admin_headers,
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "Responded"
        assert body["response"] == "We will call you tomorrow."
        assert body["respondedAt"]
        assert body["message"] == FORM["message"]

    def test_respond_to_missing_inquiry(self, client, admin_headers):
        resp = client.post("/api/contact/7/respond", json={"message": "Hi"}, headers=admin_headers)
        assert resp.status_code == 404
