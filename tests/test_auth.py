"""
Auth API tests: login, logout, session status and password change.
"""

import pytest

from portfolio_core.core.database import db, User, AppLog

from conftest import ADMIN_USERNAME, ADMIN_PASSWORD


def test_status_without_session(client):
    response = client.get("/api/auth")
    assert response.status_code == 200
    assert response.get_json() == {"authenticated": False}


def test_login_success_sets_session(seeded_client):
    response = seeded_client.post("/api/auth", json={
        "username": ADMIN_USERNAME,
        "password": ADMIN_PASSWORD,
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is True
    assert data["user"]["username"] == ADMIN_USERNAME
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]

    status = seeded_client.get("/api/auth").get_json()
    assert status["authenticated"] is True
    assert status["user"]["username"] == ADMIN_USERNAME


def test_session_cookie_is_signed_not_raw_id(seeded_client):
    response = seeded_client.post("/api/auth", json={
        "username": ADMIN_USERNAME,
        "password": ADMIN_PASSWORD,
    })
    cookie = response.headers.get("Set-Cookie", "")
    assert cookie.startswith("session=")
    assert "HttpOnly" in cookie
    assert "auth-token" not in cookie


def test_login_wrong_password(seeded_client, app):
    response = seeded_client.post("/api/auth", json={
        "username": ADMIN_USERNAME,
        "password": "wrong",
    })
    assert response.status_code == 401
    assert response.get_json()["error"] == "Invalid username or password"

    with app.app_context():
        events = AppLog.query.filter_by(source="security").all()
        assert any("Failed admin login" in e.message for e in events)


def test_login_unknown_user(seeded_client):
    response = seeded_client.post("/api/auth", json={"username": "nobody", "password": "x"})
    assert response.status_code == 401


def test_login_missing_fields(client):
    response = client.post("/api/auth", json={"username": ADMIN_USERNAME})
    assert response.status_code == 400
    assert "error" in response.get_json()


@pytest.mark.parametrize("payload", [
    {"username": 123, "password": ADMIN_PASSWORD},
    {"username": ADMIN_USERNAME, "password": 123},
    {"username": ["admin"], "password": {"x": 1}},
])
def test_login_rejects_non_string_credentials(seeded_client, payload):
    response = seeded_client.post("/api/auth", json=payload)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Username and password are required"}


def test_password_is_hashed(seeded_client, app):
    with app.app_context():
        user = User.query.filter_by(username=ADMIN_USERNAME).one()
        assert user.password_hash != ADMIN_PASSWORD
        assert user.check_password(ADMIN_PASSWORD)
        assert not user.check_password("admin12")


def test_logout_clears_session(auth_client):
    response = auth_client.delete("/api/auth")
    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    assert auth_client.get("/api/auth").get_json() == {"authenticated": False}


def test_stale_session_is_rejected(auth_client, app):
    with app.app_context():
        User.query.delete()
        db.session.commit()

    assert auth_client.get("/api/auth").get_json() == {"authenticated": False}
    response = auth_client.post("/api/projects", json={"title": "x", "category": "Web"})
    assert response.status_code == 401


def test_change_password(auth_client):
    response = auth_client.put("/api/auth/password", json={
        "currentPassword": ADMIN_PASSWORD,
        "newPassword": "s3cret-pass",
    })
    assert response.status_code == 200

    auth_client.delete("/api/auth")
    old = auth_client.post("/api/auth", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert old.status_code == 401
    new = auth_client.post("/api/auth", json={"username": ADMIN_USERNAME, "password": "s3cret-pass"})
    assert new.status_code == 200


def test_change_password_rejects_wrong_current(auth_client):
    response = auth_client.put("/api/auth/password", json={
        "currentPassword": "nope",
        "newPassword": "s3cret-pass",
    })
    assert response.status_code == 400
    assert response.get_json()["error"] == "Current password is incorrect"


def test_change_password_rejects_short_password(auth_client):
    response = auth_client.put("/api/auth/password", json={
        "currentPassword": ADMIN_PASSWORD,
        "newPassword": "abc",
    })
    assert response.status_code == 400


def test_change_password_requires_login(client):
    response = client.put("/api/auth/password", json={
        "currentPassword": "a",
        "newPassword": "bbbbbbbb",
    })
    assert response.status_code == 401
    assert response.get_json() == {"error": "Unauthorized"}
