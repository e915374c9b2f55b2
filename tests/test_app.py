import sqlite3

from fastapi.testclient import TestClient

from conftest import PREFIX
from tracker_activities_api.app.core.config import Settings
from tracker_activities_api.app.core.db import get_db
from tracker_activities_api.app.main import create_app


def test_health_lists_routes(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Server running correctly"
    assert "timestamp" in body
    assert f"GET {PREFIX}/qualifications/grid?id_subject=1" in body["endpoints"]


def test_unknown_route_is_not_found(client):
    r = client.get("/api/nothing/here")
    assert r.status_code == 404
    assert r.json() == {"error": "Route not found"}


def test_malformed_body_is_a_client_error(client):
    r = client.post(
        f"{PREFIX}/activities/create",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid request body"}


class BrokenConnection:
    def execute(self, *args, **kwargs):
        raise sqlite3.OperationalError("no such table: secret_internal_table")

    def cursor(self):
        return self


def test_database_fault_is_redacted(app):
    app.dependency_overrides[get_db] = lambda: BrokenConnection()
    client = TestClient(app, raise_server_exceptions=False)

    r = client.get(f"{PREFIX}/subjects/list")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}

    r = client.post(
        f"{PREFIX}/activities/create",
        json={"id": 1, "name": "Quiz", "date": "2024-01-01"},
    )
    assert r.status_code == 500
    assert "secret" not in r.text


def test_memory_database_is_shared_between_requests():
    app = create_app(Settings(database_url=":memory:"))
    app.state.database.seed(["Math"], [(1, "Ana")])
    client = TestClient(app)

    r = client.post(f"{PREFIX}/activities/create", json={"id": 1, "name": "Quiz", "date": "2024-01-01"})
    assert r.status_code == 201

    r = client.get(f"{PREFIX}/activities/list", params={"id_subject": 1})
    assert r.status_code == 200
    assert [a["name"] for a in r.json()["data"]] == ["Quiz"]
