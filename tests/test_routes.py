import logging
from unittest.mock import MagicMock

import httplib2
import pytest

from classroom_reports.core.deps import get_accessor
from classroom_reports.core.errors import UpstreamError
from classroom_reports.main import app
from classroom_reports.services.classroom import ClassroomAccessor
from classroom_reports.schemas.coursework import CourseworkItem, DueDate
from classroom_reports.schemas.submission import Submission


def _seed_coursework(accessor):
    accessor.coursework["C1"] = [
        CourseworkItem(
            id="cw2",
            title="Cell diagram",
            work_type="ASSIGNMENT",
            due_date=DueDate(year=2024, month=3, day=1),
            alternate_link="https://classroom.example/cw2",
        ),
        CourseworkItem(id="cw1", title="Lab <safety>", due_date=DueDate(year=2024, month=2, day=1)),
    ]
    accessor.submissions = [
        Submission(id="s1", user_id="S1", course_work_id="cw1", state="RETURNED", assigned_grade=10),
    ]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_active_courses(client):
    r = client.get("/api/courses")
    assert r.status_code == 200, r.text
    assert [c["name"] for c in r.json()] == ["Algebra", "Biology"]
    assert r.json()[1]["alternateLink"] == "https://classroom.example/c/C1"


def test_course_roster(client):
    r = client.get("/api/courses/C1/roster")
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["course"]["id"] == "C1"
    assert [s["userId"] for s in body["students"]] == ["S1", "S2"]


def test_roster_unknown_course_is_404(client):
    r = client.get("/api/courses/nope/roster")
    assert r.status_code == 404
    assert "nope" in r.json()["detail"]


def test_student_summary_report_payload(client, fake_accessor):
    _seed_coursework(fake_accessor)

    r = client.get("/api/reports/student-summary", params={"courseId": "C1", "userId": "S1"})
    assert r.status_code == 200, r.text

    body = r.json()
    assert body["student"]["userId"] == "S1"
    assert body["filters"] == {"startDate": None, "endDate": None}
    assert body["summary"] == {
        "totalAssigned": 2,
        "turnedIn": 0,
        "returned": 1,
        "graded": 1,
        "missing": 1,
        "late": 0,
    }
    first = body["activities"][0]
    assert first["id"] == "cw2"
    assert first["link"] == "https://classroom.example/cw2"
    assert first["dueDate"] == "2024-03-01"
    assert first["dueDateLabel"] == "Mar 1, 2024"
    assert first["status"] == {"code": "MISSING", "label": "Missing", "late": False}
    assert body["activities"][1]["grade"] == "10"


def test_missing_work_report_payload(client, fake_accessor):
    _seed_coursework(fake_accessor)

    r = client.get(
        "/api/reports/missing-work",
        params={"courseId": "C1", "userId": "S1", "startDate": "2024-01-01", "endDate": "2024-03-31"},
    )
    assert r.status_code == 200, r.text

    body = r.json()
    assert body["totalMissing"] == 1
    assert [a["id"] for a in body["assignments"]] == ["cw2"]
    assert body["filters"] == {"startDate": "2024-01-01", "endDate": "2024-03-31"}


def test_report_without_required_fields_is_400(client):
    r = client.get("/api/reports/student-summary", params={"courseId": "C1"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required field(s): userId"


def test_report_with_bad_date_is_400(client):
    r = client.get(
        "/api/reports/missing-work",
        params={"courseId": "C1", "userId": "S1", "endDate": "March 1"},
    )
    assert r.status_code == 400
    assert "endDate" in r.json()["detail"]


def test_upstream_failure_is_502(client, fake_accessor):
    def broken():
        raise UpstreamError("Classroom API error fetching active courses (HTTP 429)")

    fake_accessor.list_active_courses = broken

    r = client.get("/api/courses")
    assert r.status_code == 502
    assert "HTTP 429" in r.json()["detail"]


def test_unreachable_classroom_is_502(client):
    service = MagicMock()
    service.courses.return_value.get.return_value.execute.side_effect = httplib2.ServerNotFoundError("dns")
    app.dependency_overrides[get_accessor] = lambda: ClassroomAccessor(service)

    r = client.get("/api/courses/C1/roster")
    assert r.status_code == 502
    assert "Could not reach Classroom API" in r.json()["detail"]


def test_index_page_lists_courses(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Biology" in r.text
    assert 'href="/courses/C1"' in r.text


def test_roster_page_links_carry_date_window(client):
    r = client.get("/courses/C1", params={"startDate": "2024-01-01", "endDate": "2024-01-31"})
    assert r.status_code == 200
    assert "Student Two" in r.text
    assert "/courses/C1/students/S1?startDate=2024-01-01&amp;endDate=2024-01-31" in r.text


def test_summary_page_renders_and_escapes(client, fake_accessor):
    _seed_coursework(fake_accessor)

    r = client.get("/courses/C1/students/S1")
    assert r.status_code == 200
    assert "Lab &lt;safety&gt;" in r.text
    assert "Missing: 1" in r.text


def test_missing_page_error_is_visible(client):
    r = client.get("/courses/C1/students/ghost/missing")
    assert r.status_code == 404
    assert "NotFoundError" in r.text
    assert "ghost" in r.text


def test_unhandled_error_still_logged(client, fake_accessor, caplog):
    def broken():
        raise RuntimeError("unexpected")

    fake_accessor.list_active_courses = broken

    with caplog.at_level(logging.ERROR, logger="classroom_reports.core.logging_middleware"):
        with pytest.raises(RuntimeError):
            client.get("/api/courses")

    assert "GET /api/courses -> unhandled error" in caplog.text
