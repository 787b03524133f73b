"""Tests for admin file uploads."""

import dataclasses
from pathlib import Path

from fastapi.testclient import TestClient

from pan_eventz_api.app.main import create_app
from pan_eventz_api.app.services.upload_service import build_filename, is_allowed


PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class TestHelpers:
    def test_build_filename(self):
        name = build_filename("file", "Stage Photo.JPG")
        field, millis, rand_ext = name.split("-")
        assert field == "file"
        assert millis.isdigit()
        assert rand_ext.endswith(".JPG")

    def test_is_allowed(self):
        assert is_allowed("photo.png", "image/png")
        assert is_allowed("brochure.pdf", "application/pdf")
        assert not is_allowed("script.sh", "text/x-sh")
        assert not is_allowed("photo.png", "text/plain")


class TestUploadRoute:
    def test_upload_is_stored_and_served(self, client, settings, admin_headers):
        resp = client.post(
            "/api/upload",
            files={"file": ("stage.png", PNG, "image/png")},
            headers=admin_headers,
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "File uploaded successfully"
        assert body["originalName"] == "stage.png"
        assert body["size"] == len(PNG)
        assert body["filePath"].startswith("/uploads/file-")
        stored = Path(settings.uploads_dir) / body["filePath"].rsplit("/", 1)[1]
        assert stored.read_bytes() == PNG
        assert client.get(body["filePath"]).content == PNG

    def test_requires_admin(self, client):
        resp = client.post("/api/upload", files={"file": ("stage.png", PNG, "image/png")})
        assert resp.status_code == 401

    def test_rejects_unsupported_type(self, client, settings, admin_headers):
        resp = client.post(
            "/api/upload",
            files={"file": ("run.exe", b"MZ", "application/octet-stream")},
            headers=admin_headers,
        )
        assert resp.status_code == 400
        assert resp.json()["message"] == "Only images, videos, and documents are allowed"
        assert list(Path(settings.uploads_dir).iterdir()) == []

    def test_missing_file(self, client, admin_headers):
        resp = client.post("/api/upload", headers=admin_headers)
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid request data"

    def test_too_large_is_removed(self, settings, storage, admin_headers):
        small = dataclasses.replace(settings, max_upload_size=16)
        client = TestClient(create_app(settings=small, file_storage=storage))
        resp = client.post(
            "/api/upload",
            files={"file": ("stage.png", PNG, "image/png")},
            headers=admin_headers,
        )
        assert resp.status_code == 413
        assert list(Path(small.uploads_dir).iterdir()) == []
