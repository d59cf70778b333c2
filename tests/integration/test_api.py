"""JSON API v1."""

from fastapi.testclient import TestClient


def test_list_starts_empty(client: TestClient):
    response = client.get("/api/v1/rsvps/")

    assert response.status_code == 200
    assert response.json() == []


def test_create_returns_refreshed_list(client: TestClient):
    client.post("/api/v1/rsvps/", json={"name": "Alice", "email": "a@x.com", "attending": "yes"})
    response = client.post("/api/v1/rsvps/", json={"name": " Bob", "email": "b@x.com", "attending": "no"})

    assert response.status_code == 201
    body = response.json()
    assert [r["name"] for r in body] == ["Alice", "Bob"]
    assert [r["attending"] for r in body] == [True, False]
    assert body[0]["id"] < body[1]["id"]
    assert isinstance(body[0]["timestamp"], int)
    assert client.get("/api/v1/rsvps/").json() == body


def test_duplicate_and_invalid_are_bad_requests(client: TestClient):
    client.post("/api/v1/rsvps/", json={"name": "Alice", "email": "a@x.com", "attending": "yes"})

    duplicate = client.post("/api/v1/rsvps/", json={"name": "Alice", "email": "a@x.com", "attending": "yes"})
    invalid = client.post("/api/v1/rsvps/", json={"name": "Carol", "email": "c@x.com", "attending": "true"})

    assert duplicate.status_code == 400
    assert duplicate.json() == {"detail": "Your name and email must be unique!"}
    assert invalid.status_code == 400
    assert len(client.get("/api/v1/rsvps/").json()) == 1


def test_health(client: TestClient):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_get_single_rsvp_and_missing_id(client: TestClient):
    created = client.post("/api/v1/rsvps/", json={"name": "Alice", "email": "a@x.com", "attending": "no"}).json()
    rsvp_id = created[0]["id"]

    response = client.get(f"/api/v1/rsvps/{rsvp_id}")
    missing = client.get(f"/api/v1/rsvps/{rsvp_id + 1}")

    assert response.status_code == 200
    assert response.json() == created[0]
    assert missing.status_code == 404
    assert missing.json() == {"detail": "RSVP not found"}
