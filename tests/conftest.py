from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from classroom_reports.core.deps import get_accessor, get_report_service
from classroom_reports.core.errors import NotFoundError
from classroom_reports.main import app
from classroom_reports.schemas.course import Course, Roster, Student
from classroom_reports.services.dates import filter_coursework
from classroom_reports.services.reports import ReportService

FIXED_NOW = datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)


class FakeAccessor:
    """In-memory stand-in for ClassroomAccessor."""

    def __init__(self):
        self.courses: list[Course] = []
        self.students: dict[str, list[Student]] = {}
        self.coursework: dict[str, list] = {}
        self.submissions: list = []
        self.submission_requests: list[list[str]] = []

    def list_active_courses(self):
        return sorted(self.courses, key=lambda c: (c.name.casefold(), c.name.swapcase()))

    def get_course(self, course_id):
        for course in self.courses:
            if course.id == course_id:
                return course
        raise NotFoundError(f"Not found: course {course_id}")

    def get_roster(self, course_id):
        return Roster(course=self.get_course(course_id), students=self.students.get(course_id, []))

    def get_student(self, course_id, user_id):
        for student in self.students.get(course_id, []):
            if student.user_id == user_id:
                return student
        raise NotFoundError(f"Not found: student {user_id} in course {course_id}")

    def list_coursework(self, course_id, start_date=None, end_date=None):
        return filter_coursework(self.coursework.get(course_id, []), start_date, end_date)

    def list_submissions(self, course_id, coursework_ids):
        ids = list(coursework_ids)
        self.submission_requests.append(ids)
        return [s for cw_id in ids for s in self.submissions if s.course_work_id == cw_id]


@pytest.fixture()
def fake_accessor():
    """Seed a minimal course "C1" with one student."""
    accessor = FakeAccessor()
    accessor.courses = [
        Course(id="C1", name="Biology", section="Period 2", alternate_link="https://classroom.example/c/C1"),
        Course(id="C2", name="Algebra"),
    ]
    accessor.students["C1"] = [
        Student(user_id="S1", name="Student One", email="student1@example.com"),
        Student(user_id="S2", name="Student Two", email="student2@example.com"),
    ]
    return accessor


@pytest.fixture()
def report_service(fake_accessor):
    return ReportService(fake_accessor, clock=lambda: FIXED_NOW)


@pytest.fixture()
def client(fake_accessor, report_service):
    """Test client wired to the fake accessor via dependency overrides."""
    app.dependency_overrides[get_accessor] = lambda: fake_accessor
    app.dependency_overrides[get_report_service] = lambda: report_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
