"""
Tests for the authentication endpoints.

Covers the JSON API, the form actions, cookie attributes and page guards.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.security import make_session_token
from app.schemas.user import SessionUser


def _cookie_attrs(header: str) -> list[str]:
    return [p.strip().lower() for p in header.split(";")[1:]]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_register_sets_session_cookie(register):
    response = register()
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["user"]["email"] == "ada@example.com"
    assert data["user"]["name"] == "Ada"
    assert "password" not in data["user"]

    header = response.headers["set-cookie"]
    assert header.startswith("session_token=")
    attrs = _cookie_attrs(header)
    assert "httponly" in attrs
    assert "path=/" in attrs
    assert "samesite=lax" in attrs
    assert "max-age=2592000" in attrs
    assert "secure" not in attrs


def test_cookie_is_secure_in_production(register, monkeypatch):
    monkeypatch.setattr(settings, "environment", "production")
    response = register()
    assert "secure" in _cookie_attrs(response.headers["set-cookie"])


def test_me_after_register(client, register):
    user_id = register().json()["user"]["id"]
    data = client.get("/api/auth/me").json()
    assert data["isAuthenticated"] is True
    assert data["user"] == {"id": user_id, "email": "ada@example.com", "name": "Ada"}


def test_me_anonymous(client):
    data = client.get("/api/auth/me").json()
    assert data == {"user": None, "isAuthenticated": False}


def test_register_duplicate_email(client, register):
    register()
    response = register(name="Other", password="anotherpass")
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "User already exists"}


def test_register_validation_error(register):
    response = register(password="short")
    assert response.status_code == 400
    assert response.json()["message"] == "Password must be at least 8 characters long"
    assert "set-cookie" not in response.headers


def test_register_missing_fields(client):
    response = client.post("/api/auth/register", json={"email": "ada@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "All fields are required"


@pytest.mark.parametrize("body", [
    {"name": None, "email": "ada@example.com", "password": "longenough1"},
    {"name": "Ada", "email": 42, "password": "longenough1"},
    {"name": "Ada", "email": "ada@example.com", "password": ["longenough1"]},
])
def test_register_null_or_non_string_field(client, body):
    response = client.post("/api/auth/register", json=body)
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "All fields are required"}


def test_register_overlong_password(client):
    password = "x" * 600
    response = client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "ada@example.com", "password": password},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Password must be at most 512 characters long"}
    assert password not in response.text


def test_login_overlong_password(client, register):
    register()
    password = "x" * 600
    response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": password})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}
    assert password not in response.text


def test_login_null_password(client):
    response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": None})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email and password are required"}


def test_ada_scenario(client, register):
    assert register().json()["success"] is True
    client.post("/api/auth/logout")

    wrong = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrongpass"})
    assert wrong.status_code == 401
    assert wrong.json() == {"success": False, "message": "Invalid credentials"}

    unknown = client.post("/api/auth/login", json={"email": "nobody@example.com", "password": "wrongpass"})
    assert unknown.json() == wrong.json()

    ok = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "longenough1"})
    assert ok.status_code == 200
    user = ok.json()["user"]
    assert (user["email"], user["name"]) == ("ada@example.com", "Ada")
    assert client.get("/api/auth/me").json()["user"]["email"] == "ada@example.com"


def test_logout_twice(client, register):
    register()
    first = client.post("/api/auth/logout")
    assert first.status_code == 200
    assert first.json() == {"success": True}
    assert "max-age=0" in first.headers["set-cookie"].lower()
    second = client.post("/api/auth/logout")
    assert second.json() == {"success": True}
    assert client.get("/api/auth/me").json()["isAuthenticated"] is False


def test_tampered_cookie_is_anonymous(client):
    client.cookies.set("session_token", "forged.token.value")
    assert client.get("/api/auth/me").json()["isAuthenticated"] is False


class TestFormActions:

    def test_register_action(self, client):
        response = client.post("/auth/register", data={
            "name": "Ada",
            "email": "ada@example.com",
            "password": "longenough1",
            "confirmPassword": "longenough1",
        })
        assert response.json() == {"success": True}
        assert client.get("/api/auth/me").json()["isAuthenticated"] is True

    def test_register_action_password_mismatch(self, client):
        response = client.post("/auth/register", data={
            "name": "Ada",
            "email": "ada@example.com",
            "password": "longenough1",
            "confirmPassword": "different1",
        })
        assert response.json() == {"error": "Passwords do not match"}

    def test_register_action_requires_confirmation(self, client):
        response = client.post("/auth/register", data={
            "name": "Ada",
            "email": "ada@example.com",
            "password": "longenough1",
        })
        assert response.json() == {"error": "All fields are required"}

    def test_login_action(self, client, register):
        register()
        client.post("/auth/logout")
        bad = client.post("/auth/login", data={"email": "ada@example.com", "password": "nope-nope"})
        assert bad.json() == {"error": "Invalid credentials"}
        good = client.post("/auth/login", data={"email": "ada@example.com", "password": "longenough1"})
        assert good.json() == {"success": True}

    def test_login_action_bad_email(self, client):
        response = client.post("/auth/login", data={"email": "not-an-email", "password": "whatever1"})
        assert response.json() == {"error": "Please enter a valid email address"}


class TestPageGuards:

    def test_dashboard_redirects_anonymous(self, client):
        response = client.get("/dashboard", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    def test_dashboard_for_user(self, client, register):
        register()
        response = client.get("/dashboard")
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["email"] == "ada@example.com"
        assert data["reports"] == []
        assert data["locations"] == []

    def test_create_report_page_lists_categories(self, client, register):
        register()
        data = client.get("/create-report").json()
        ids = [c["id"] for c in data["categories"]]
        assert ids == ["air-pollution", "water-pollution", "global-warming", "wildfire"]

    def test_expired_session_redirects(self, client):
        user = SessionUser(id="a1", email="ada@example.com", name="Ada")
        client.cookies.set("session_token", make_session_token(user, ttl=-60))
        response = client.get("/dashboard", follow_redirects=False)
        assert response.status_code == 303

    def test_second_browser_has_its_own_session(self, client, register):
        register()
        other = TestClient(client.app)
        response = other.get("/dashboard", follow_redirects=False)
        assert response.status_code == 303


@pytest.fixture
def admin_client(client):
    client.cookies.set("admin-session", "1")
    return client


def test_admin_requires_marker_cookie(client):
    response = client.get("/api/admin/reports")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized - Admin access required"}


def test_admin_marker_cookie_is_enough(admin_client):
    response = admin_client.get("/api/admin/reports")
    assert response.status_code == 200
    assert response.json() == []
