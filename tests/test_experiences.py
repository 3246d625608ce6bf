"""
Work experience API tests.
"""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def _payload(**overrides):
    payload = {
        "company": "Acme",
        "position": "Designer",
        "period": "2020/01 - 2021/01",
        "description": "Did things",
        "highlights": ["One", "Two"],
        "order": 4,
    }
    payload.update(overrides)
    return payload


def test_list_empty(client):
    response = client.get("/api/experiences")
    assert response.status_code == 200
    assert response.get_json() == []


def test_list_seeded_in_order(seeded_client):
    experiences = seeded_client.get("/api/experiences").get_json()
    assert [e["order"] for e in experiences] == [1, 2, 3]
    assert experiences[0]["position"] == "UI/UX Designer"
    assert isinstance(experiences[0]["highlights"], list)
    assert len(experiences[0]["highlights"]) == 3


def test_list_returns_empty_on_db_failure(client):
    with patch("portfolio_core.modules.experiences.routes.get_all_experiences_db",
               side_effect=OperationalError("SELECT", {}, Exception("boom"))):
        response = client.get("/api/experiences")
    assert response.status_code == 200
    assert response.get_json() == []


def test_create(auth_client):
    response = auth_client.post("/api/experiences", json=_payload())
    assert response.status_code == 200
    data = response.get_json()
    assert data["company"] == "Acme"
    assert data["highlights"] == ["One", "Two"]
    assert data["order"] == 4


def test_create_defaults(auth_client):
    response = auth_client.post("/api/experiences", json={
        "company": "Acme", "position": "Designer", "period": "2020",
    })
    data = response.get_json()
    assert data["description"] == ""
    assert data["highlights"] == []
    assert data["order"] == 0


def test_create_missing_fields(auth_client):
    for field in ("company", "position", "period"):
        response = auth_client.post("/api/experiences", json=_payload(**{field: ""}))
        assert response.status_code == 400
        assert response.get_json() == {"error": "Missing required fields"}


def test_create_requires_auth(seeded_client):
    assert seeded_client.post("/api/experiences", json=_payload()).status_code == 401


def test_new_experience_sorted_by_order(auth_client):
    auth_client.post("/api/experiences", json=_payload(company="First", order=0))
    experiences = auth_client.get("/api/experiences").get_json()
    assert experiences[0]["company"] == "First"


def test_update(auth_client):
    created = auth_client.post("/api/experiences", json=_payload()).get_json()
    response = auth_client.put("/api/experiences", json={
        "id": created["id"],
        "position": "Lead Designer",
        "highlights": ["Only"],
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data["position"] == "Lead Designer"
    assert data["highlights"] == ["Only"]
    assert data["company"] == "Acme"


def test_update_errors(auth_client):
    response = auth_client.put("/api/experiences", json={"company": "x"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing experience ID"}
    assert auth_client.put("/api/experiences", json={"id": 99999}).status_code == 404

    created = auth_client.post("/api/experiences", json=_payload()).get_json()
    assert auth_client.put("/api/experiences", json={"id": created["id"], "highlights": "x"}).status_code == 400


def test_delete(auth_client):
    created = auth_client.post("/api/experiences", json=_payload()).get_json()
    response = auth_client.delete(f"/api/experiences?id={created['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    ids = [e["id"] for e in auth_client.get("/api/experiences").get_json()]
    assert created["id"] not in ids


def test_delete_errors(auth_client):
    response = auth_client.delete("/api/experiences")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Missing experience ID"}
    assert auth_client.delete("/api/experiences?id=99999").status_code == 404


def test_delete_requires_auth(seeded_client):
    assert seeded_client.delete("/api/experiences?id=1").status_code == 401


def test_description_is_stored_as_string(auth_client):
    created = auth_client.post("/api/experiences", json=_payload(description=2024)).get_json()
    assert created["description"] == "2024"

    updated = auth_client.put("/api/experiences", json={"id": created["id"], "description": 1.5}).get_json()
    assert updated["description"] == "1.5"
