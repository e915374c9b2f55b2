from datetime import datetime

from fastapi.testclient import TestClient

from conftest import PREFIX, count_rows
from tracker_activities_api.app.core.db import get_db

URL = f"{PREFIX}/activities/create"


def test_create_activity_from_body(client, db):
    r = client.post(
        URL,
        json={"id": 1, "name": "  Exam  ", "date": "2024-12-01", "description": "Unit 1"},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Activity created successfully"
    data = body["data"]
    assert body["id"] == data["id"]
    assert data["name"] == "Exam"
    assert data["id_subject"] == 1
    assert data["description"] == "Unit 1"
    assert datetime.strptime(data["date"], "%d/%m/%Y").date().isoformat() == "2024-12-01"

    row = db.execute("SELECT name, date FROM activities WHERE id = ?", (data["id"],)).fetchone()
    assert (row["name"], row["date"]) == ("Exam", "2024-12-01")


def test_create_activity_from_query(client):
    r = client.get(URL, params={"id": "2", "name": "Essay", "date": "2025-02-28"})
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["date"] == "28/02/2025"
    assert data["id_subject"] == 2
    assert data["description"] is None


def test_blank_description_is_stored_as_null(client):
    r = client.post(URL, json={"id": 1, "name": "Quiz", "date": "2024-01-01", "description": "   "})
    assert r.status_code == 201
    assert r.json()["data"]["description"] is None


def test_missing_parameters(client):
    for payload in ({}, {"id": 1, "name": "Quiz"}, {"id": 1, "name": "", "date": "2024-01-01"}):
        r = client.post(URL, json=payload)
        assert r.status_code == 400
        assert r.json() == {"error": "The id (subject), name and date parameters are required"}


def test_invalid_subject_id(client):
    for value in ("abc", 0, -2, True):
        r = client.post(URL, json={"id": value, "name": "Quiz", "date": "2024-01-01"})
        assert r.status_code == 400
        assert r.json()["error"] == "The id parameter must be a positive integer"


def test_date_format_checked_before_validity(client):
    r = client.post(URL, json={"id": 1, "name": "Quiz", "date": "2024/12/01"})
    assert r.status_code == 400
    assert r.json()["error"] == "The date parameter must use the YYYY-MM-DD format"

    r = client.post(URL, json={"id": 1, "name": "Quiz", "date": "2024-13-40"})
    assert r.status_code == 400
    assert r.json()["error"] == "The date provided is not a valid date"

    r = client.post(URL, json={"id": 1, "name": "Quiz", "date": "2023-02-29"})
    assert r.status_code == 400
    assert r.json()["error"] == "The date provided is not a valid date"


def test_subject_id_reported_before_date(client):
    r = client.get(URL, params={"id": "x", "name": "Quiz", "date": "bad"})
    assert r.status_code == 400
    assert r.json()["error"] == "The id parameter must be a positive integer"


def test_blank_name_rejected(client):
    r = client.get(URL, params={"id": "1", "name": "   ", "date": "2024-01-01"})
    assert r.status_code == 400
    assert r.json()["error"] == "The activity name cannot be empty"


class UntouchableConnection:
    def __getattr__(self, name):
        raise AssertionError(f"database accessed: {name}")


def test_invalid_date_never_reaches_database(app):
    app.dependency_overrides[get_db] = lambda: UntouchableConnection()
    client = TestClient(app)
    r = client.post(URL, json={"id": 1, "name": "Quiz", "date": "2024-13-40"})
    assert r.status_code == 400
    assert r.json()["error"] == "The date provided is not a valid date"


def test_unknown_subject(client, db):
    r = client.post(URL, json={"id": 99, "name": "Quiz", "date": "2024-01-01"})
    assert r.status_code == 400
    assert r.json() == {"error": "The specified subject does not exist"}
    assert count_rows(db, "activities") == 0


def test_subject_may_be_sent_as_id_subject(client):
    r = client.post(URL, json={"id_subject": 1, "name": "Quiz", "date": "2024-12-01"})
    assert r.status_code == 201
    assert r.json()["data"]["id_subject"] == 1

    r = client.get(URL, params={"id_subject": "2", "name": "Essay", "date": "2024-12-02"})
    assert r.status_code == 201
    assert r.json()["data"]["id_subject"] == 2


def test_subject_id_beyond_integer_range(client, db):
    r = client.post(URL, json={"id": "99999999999999999999", "name": "Quiz", "date": "2024-01-01"})
    assert r.status_code == 400
    assert r.json()["error"] == "The id parameter must be a positive integer"
    assert count_rows(db, "activities") == 0


def test_date_with_trailing_newline_rejected(client):
    r = client.post(URL, json={"id": 1, "name": "Quiz", "date": "2024-12-01\n"})
    assert r.status_code == 400
    assert r.json()["error"] == "The date parameter must use the YYYY-MM-DD format"
