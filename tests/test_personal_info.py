"""
Personal info API tests.
"""

from portfolio_core.core.database import PersonalInfo
from portfolio_core.modules.personal_info.routes import DEFAULT_PERSONAL_INFO


def test_get_creates_default_record(client, app):
    response = client.get("/api/personal-info")
    assert response.status_code == 200
    data = response.get_json()
    assert data["email"] == DEFAULT_PERSONAL_INFO["email"]
    assert data["wechat"] == DEFAULT_PERSONAL_INFO["wechat"]
    assert data["bio"].startswith("5 years")

    client.get("/api/personal-info")
    with app.app_context():
        assert PersonalInfo.query.count() == 1


def test_update(auth_client):
    response = auth_client.put("/api/personal-info", json={
        "bio": "New bio",
        "email": "me@example.com",
        "wechat": "me",
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data["bio"] == "New bio"
    assert data["email"] == "me@example.com"

    fetched = auth_client.get("/api/personal-info").get_json()
    assert fetched["bio"] == "New bio"


def test_update_missing_fields_become_empty(auth_client):
    auth_client.get("/api/personal-info")
    response = auth_client.put("/api/personal-info", json={"bio": "Only bio", "email": None})
    data = response.get_json()
    assert data["bio"] == "Only bio"
    assert data["email"] == ""
    assert data["wechat"] == ""


def test_update_creates_record_when_missing(auth_client, app):
    with app.app_context():
        assert PersonalInfo.query.count() == 0

    response = auth_client.put("/api/personal-info", json={"bio": "Hello"})
    assert response.status_code == 200

    with app.app_context():
        assert PersonalInfo.query.count() == 1


def test_update_rejects_invalid_email(auth_client):
    response = auth_client.put("/api/personal-info", json={"email": "not-an-email"})
    assert response.status_code == 400


def test_update_requires_auth(seeded_client):
    response = seeded_client.put("/api/personal-info", json={"bio": "x"})
    assert response.status_code == 401
