# /tests/test_api.py

"""
End-to-end checks through the FastAPI app. The `client` fixture runs the
lifespan handler, so each test starts from a freshly seeded demo classroom.
"""

import pytest
from fastapi.testclient import TestClient

from boltpath.main import app


@pytest.fixture
def new_student_body():
    return {
        "fullName": "Carmen Diaz",
        "grade": "9th Grade",
        "phoneNumber": "(555) 222-3333",
        "learningProfile": {"learningStyle": "auditory", "accommodations": ["Audio support"]},
        "emergencyContact": {"name": "", "relationship": "", "phone": ""},
    }


@pytest.fixture
def new_assignment_body(future_due_date):
    return {
        "title": "Water Quality Watch",
        "problemStatement": "Is the creek behind the school safe for wildlife?",
        "realWorldContext": "The parks department is collecting citizen data.",
        "learningObjectives": ["Sample water"],
        "timeline": [{"phase": "Sampling", "duration": "1 week", "activities": ["Collect samples"]}],
        "dueDate": future_due_date,
        "studentIds": ["1"],
        "status": "active",
    }


# --- Health & Session ---

def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"


def test_login_success(client):
    response = client.post("/api/session/login", json={"fullName": "sarah johnson", "idNumber": "teach002"})
    assert response.status_code == 200
    assert response.json()["teacher"] == {
        "id": "teacher1", "fullName": "Sarah Johnson", "idNumber": "TEACH002", "organization": None
    }


def test_login_with_wrong_credentials(client):
    response = client.post("/api/session/login", json={"fullName": "John Smith", "idNumber": "WRONG1"})
    assert response.status_code == 401


def test_login_validation_error(client):
    response = client.post("/api/session/login", json={"fullName": "J", "idNumber": "!!"})
    assert response.status_code == 422


def test_me_requires_teacher_header(client, auth_headers):
    assert client.get("/api/session/me").status_code == 401
    assert client.get("/api/session/me", headers={"X-Teacher-Id": "teacher9"}).status_code == 401
    assert client.get("/api/session/me", headers=auth_headers).json()["id"] == "teacher1"


def test_me_reports_the_account_that_signed_in(client, auth_headers):
    login = client.post("/api/session/login", json={"fullName": "Sarah Johnson", "idNumber": "TEACH002"}).json()
    headers = {**auth_headers, "X-Teacher-Id-Number": login["teacher"]["idNumber"]}

    assert client.get("/api/session/me", headers=headers).json()["fullName"] == "Sarah Johnson"


# --- Students ---

def test_list_and_search_students(client, auth_headers):
    assert len(client.get("/api/students", headers=auth_headers).json()) == 2

    response = client.get("/api/students", params={"search": "bob"}, headers=auth_headers)
    assert [s["fullName"] for s in response.json()] == ["Bob Smith"]


def test_create_student(client, auth_headers, new_student_body):
    response = client.post("/api/students", json=new_student_body, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["id"].startswith("stu_")
    assert body["teacherId"] == "teacher1"
    assert body["emergencyContact"] is None
    assert body["learningProfile"]["learningStyle"] == "auditory"


def test_create_student_with_bad_phone(client, auth_headers, new_student_body):
    response = client.post("/api/students", json={**new_student_body, "phoneNumber": "12345"}, headers=auth_headers)
    assert response.status_code == 422


def test_update_student_partial(client, auth_headers):
    response = client.put("/api/students/1", json={"grade": "11th Grade"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["grade"] == "11th Grade"
    assert response.json()["learningProfile"]["learningStyle"] == "visual"


def test_update_student_with_empty_body(client, auth_headers):
    assert client.put("/api/students/1", json={}, headers=auth_headers).status_code == 400


def test_update_unknown_student(client, auth_headers):
    assert client.put("/api/students/nope", json={"grade": "x"}, headers=auth_headers).status_code == 404


def test_delete_student_cascades(client, auth_headers):
    assert client.delete("/api/students/1", headers=auth_headers).status_code == 204

    assert client.get("/api/students/1", headers=auth_headers).status_code == 404
    assignment = client.get("/api/assignments/1", headers=auth_headers).json()
    assert assignment["studentIds"] == ["2"]
    assert client.get("/api/assignments/1/progress", headers=auth_headers).json() == []
    assert client.delete("/api/students/1", headers=auth_headers).status_code == 404


def test_export_roster(client, auth_headers):
    response = client.get("/api/students/export", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "roster_teach001.csv" in response.headers["content-disposition"]
    assert "Alice Johnson" in response.text


# --- Assignments ---

def test_create_assignment_ignores_requested_status(client, auth_headers, new_assignment_body):
    response = client.post("/api/assignments", json=new_assignment_body, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["status"] == "draft"


def test_create_assignment_with_past_due_date(client, auth_headers, new_assignment_body):
    body = {**new_assignment_body, "dueDate": "2020-01-01"}
    assert client.post("/api/assignments", json=body, headers=auth_headers).status_code == 422


def test_create_assignment_with_unknown_student(client, auth_headers, new_assignment_body):
    body = {**new_assignment_body, "studentIds": ["ghost"]}
    assert client.post("/api/assignments", json=body, headers=auth_headers).status_code == 400


def test_list_assignments_by_status(client, auth_headers, new_assignment_body):
    client.post("/api/assignments", json=new_assignment_body, headers=auth_headers)

    drafts = client.get("/api/assignments", params={"status_filter": "draft"}, headers=auth_headers).json()
    everything = client.get("/api/assignments", headers=auth_headers).json()

    assert [a["title"] for a in drafts] == ["Water Quality Watch"]
    assert len(everything) == 2


def test_get_assignment_details(client, auth_headers):
    details = client.get("/api/assignments/1", headers=auth_headers).json()

    assert details["phaseCount"] == 4
    assert [s["id"] for s in details["assignedStudents"]] == ["1", "2"]
    assert details["progress"][0]["percentage"] == 25


def test_status_change_any_to_any(client, auth_headers):
    for new_status in ("completed", "draft", "archived"):
        response = client.patch("/api/assignments/1/status", json={"status": new_status}, headers=auth_headers)
        assert response.json()["status"] == new_status


def test_status_change_rejects_unknown_status(client, auth_headers):
    response = client.patch("/api/assignments/1/status", json={"status": "paused"}, headers=auth_headers)
    assert response.status_code == 422


def test_update_assignment(client, auth_headers):
    response = client.put("/api/assignments/1", json={"title": "Climate Action"}, headers=auth_headers)
    assert response.json()["title"] == "Climate Action"
    assert response.json()["status"] == "active"


def test_delete_assignment(client, auth_headers):
    assert client.delete("/api/assignments/1", headers=auth_headers).status_code == 204
    assert client.get("/api/assignments/1", headers=auth_headers).status_code == 404
    assert client.get("/api/assignments/1/progress", headers=auth_headers).status_code == 404


# --- Progress & Dashboard ---

def test_progress_upsert_keeps_single_record(client, auth_headers):
    for _ in range(2):
        response = client.put(
            "/api/progress", json={"studentId": "2", "assignmentId": "1", "currentPhase": 2}, headers=auth_headers
        )
        assert response.status_code == 200

    records = client.get("/api/assignments/1/progress", headers=auth_headers).json()
    bob = [r for r in records if r["studentId"] == "2"]
    assert len(bob) == 1
    assert bob[0]["currentPhase"] == 2


@pytest.mark.parametrize("body, expected_status", [
    ({"studentId": "1", "assignmentId": "missing"}, 404),
    ({"studentId": "99", "assignmentId": "1"}, 400),
    ({"studentId": "1", "assignmentId": "1", "currentPhase": -2}, 422),
])
def test_progress_errors(client, auth_headers, body, expected_status):
    assert client.put("/api/progress", json=body, headers=auth_headers).status_code == expected_status


def test_dashboard_summary(client, auth_headers):
    summary = client.get("/api/dashboard/summary", headers=auth_headers).json()
    assert summary["totalStudents"] == 2
    assert summary["activeAssignments"] == 1
    assert summary["recentStudents"][0]["learningStyle"] == "visual"
    assert summary["recentAssignments"][0]["studentCount"] == 2


def test_roster_routes_require_a_teacher(client):
    assert client.get("/api/students").status_code == 401
    assert client.get("/api/dashboard/summary").status_code == 401


def test_startup_without_mock_data(mocker, auth_headers):
    """With seeding switched off the app starts with an empty classroom."""
    mocker.patch("boltpath.core.config.SEED_MOCK_DATA", False)
    with TestClient(app) as empty_client:
        assert empty_client.get("/api/students", headers=auth_headers).json() == []
        assert empty_client.get("/api/dashboard/summary", headers=auth_headers).json()["totalAssignments"] == 0
