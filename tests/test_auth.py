"""Tests for login and the admin guard."""

from pan_eventz_api.app.core.security import create_access_token, decode_access_token


class TestLogin:
    def test_valid_credentials_issue_eight_hour_token(self, client, settings):
        credentials = {"username": settings.admin_username, "password": settings.admin_password}
        resp = client.post("/api/auth/login", json=credentials)
        assert resp.status_code == 200
        body = resp.json()
        assert body["user"]["username"] == settings.admin_username
        assert body["user"]["role"] == "admin"
        assert "password" not in body["user"]
        claims = decode_access_token(body["token"], secret=settings.jwt_secret)
        assert claims["exp"] - claims["iat"] == 8 * 60 * 60
        assert claims["userId"] == body["user"]["id"]

    def test_wrong_password(self, client, settings):
        resp = client.post("/api/auth/login", json={"username": settings.admin_username, "password": "nope"})
        assert resp.status_code == 401
        assert resp.json() == {"message": "Invalid username or password"}

    def test_unknown_user(self, client, settings):
        resp = client.post("/api/auth/login", json={"username": "someone", "password": settings.admin_password})
        assert resp.status_code == 401

    def test_missing_field(self, client, settings):
        resp = client.post("/api/auth/login", json={"username": settings.admin_username})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Username and password are required"


class TestAdminGuard:
    def test_me_returns_claims(self, client, admin_headers, settings):
        resp = client.get("/api/auth/me", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["username"] == settings.admin_username

    def test_missing_token(self, client):
        resp = client.get("/api/auth/me")
        assert resp.status_code == 401
        assert resp.json() == {"message": "Authentication required"}

    def test_invalid_token(self, client):
        resp = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 403
        assert resp.json() == {"message": "Invalid or expired token"}

    def test_token_signed_with_other_secret(self, client):
        token = create_access_token({"role": "admin"}, secret="another-secret")
        resp = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 403

    def test_non_admin_role(self, client, settings):
        token = create_access_token({"userId": 2, "role": "editor"}, secret=settings.jwt_secret)
        resp = client.get("/api/admin/dashboard", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 403
        assert resp.json() == {"message": "Admin access required"}

    def test_admin_tree_requires_token(self, client):
        assert client.get("/api/admin/blog").status_code == 401
        assert client.get("/api/admin/testimonials").status_code == 401


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "OK"
