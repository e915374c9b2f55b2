import os

# The module-level app in ``main`` is built at import; keep it off disk.
os.environ.setdefault("DATABASE_URL", ":memory:")

import pytest
from fastapi.testclient import TestClient

from tracker_activities_api.app.core.config import Settings
from tracker_activities_api.app.main import create_app

PREFIX = "/api/tracker_activities"

# Seeded in this order, so Math is subject 1 and History subject 2.
SUBJECTS = ["Math", "History"]
STUDENTS = [(5, "Ana"), (2, "Luis"), (9, "Marta")]


@pytest.fixture
def app(tmp_path):
    """An app bound to a fresh SQLite file with subjects and students."""
    application = create_app(Settings(database_url=str(tmp_path / "tracker.db")))
    application.state.database.seed(SUBJECTS, STUDENTS)
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    conn = app.state.database.connect()
    yield conn
    conn.close()


@pytest.fixture
def make_activity(client):
    def _make(name="Quiz1", date="2024-12-01", subject_id=1, description=None):
        payload = {"id": subject_id, "name": name, "date": date}
        if description is not None:
            payload["description"] = description
        r = client.post(f"{PREFIX}/activities/create", json=payload)
        assert r.status_code == 201, r.json()
        return r.json()["id"]

    return _make


def count_rows(conn, table):
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
