"""Shared fixtures: an application wired to temporary stores."""

import pytest
from fastapi.testclient import TestClient

from pan_eventz_api.app.core.config import Settings
from pan_eventz_api.app.core.file_storage import FileStorage
from pan_eventz_api.app.core.security import ADMIN_ROLE, create_access_token
from pan_eventz_api.app.main import create_app


ADMIN_USERNAME = "eventninja12@"
ADMIN_PASSWORD = "9323641780"
JWT_SECRET = "test-secret"


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        jwt_secret=JWT_SECRET,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        data_dir=str(tmp_path / "data"),
        uploads_dir=str(tmp_path / "uploads"),
        cloudinary_cloud_name="",
        cloudinary_api_key="",
        cloudinary_api_secret="",
        seed_mock_db=True,
        log_file="",
    )


@pytest.fixture()
def storage(settings):
    return FileStorage(settings.data_dir)


@pytest.fixture()
def app(settings, storage):
    return create_app(settings=settings, file_storage=storage)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def admin_token():
    return create_access_token(
        {"userId": 1, "username": ADMIN_USERNAME, "role": ADMIN_ROLE},
        secret=JWT_SECRET,
    )


@pytest.fixture()
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
