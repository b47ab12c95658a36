"""Read-only access to courses, rosters, coursework and submissions.

Wraps the Google Classroom discovery resource. Every call asks only for the
fields the reports use, and every list call is paged to exhaustion before
returning. Upstream failures abort the whole call; nothing is retried.
"""

import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterable, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import Error as GoogleApiClientError
from googleapiclient.errors import HttpError

from classroom_reports.core.errors import NotFoundError, UpstreamError
from classroom_reports.schemas.course import Course, Roster, Student
from classroom_reports.schemas.coursework import CourseworkItem
from classroom_reports.schemas.submission import Submission
from classroom_reports.services.dates import filter_coursework
from classroom_reports.services.pagination import Pager

logger = logging.getLogger(__name__)

COURSE_FIELDS = "id,name,section,alternateLink"
STUDENT_FIELDS = "userId,profile(name(fullName),emailAddress,photoUrl)"
COURSEWORK_FIELDS = "id,title,workType,dueDate,dueTime,creationTime,updateTime,alternateLink"
SUBMISSION_FIELDS = "id,userId,courseWorkId,state,late,updateTime,assignedGrade,draftGrade"

COURSEWORK_ORDER = "dueDate desc,updateTime desc"


@contextmanager
def upstream_call(what: str):
    """Translate Classroom/transport failures into service errors."""
    try:
        yield
    except HttpError as exc:
        status_code = int(exc.resp.status)
        logger.warning("Classroom API error fetching %s: HTTP %s", what, status_code)
        if status_code == 404:
            raise NotFoundError(f"Not found: {what}") from exc
        raise UpstreamError(f"Classroom API error fetching {what} (HTTP {status_code})") from exc
    except (GoogleAuthError, httplib2.HttpLib2Error, GoogleApiClientError, OSError) as exc:
        logger.warning("Classroom API unreachable fetching %s: %s", what, exc)
        raise UpstreamError(f"Could not reach Classroom API fetching {what}: {exc}") from exc


def _to_course(raw: dict) -> Course:
    return Course(
        id=raw["id"],
        name=raw.get("name", ""),
        section=raw.get("section"),
        alternate_link=raw.get("alternateLink"),
    )


def _to_student(raw: dict) -> Student:
    profile = raw.get("profile", {})
    return Student(
        user_id=raw["userId"],
        name=profile.get("name", {}).get("fullName", ""),
        email=profile.get("emailAddress"),
        photo_url=profile.get("photoUrl"),
    )


class ClassroomAccessor:
    def __init__(self, service, page_size: Optional[int] = None):
        self._service = service
        self._page_size = page_size

    def list_active_courses(self) -> list[Course]:
        pager = Pager(
            self._service.courses().list,
            "courses",
            teacherId="me",
            courseStates=["ACTIVE"],
            pageSize=self._page_size,
            fields=f"nextPageToken,courses({COURSE_FIELDS})",
        )
        with upstream_call("active courses"):
            courses = [_to_course(raw) for raw in pager.items()]

        logger.info("Fetched %d active courses", len(courses))
        # alphabetical, case only breaks ties (lowercase first)
        return sorted(courses, key=lambda c: (c.name.casefold(), c.name.swapcase()))

    def get_course(self, course_id: str) -> Course:
        with upstream_call(f"course {course_id}"):
            raw = self._service.courses().get(id=course_id, fields=COURSE_FIELDS).execute()
        return _to_course(raw)

    def get_roster(self, course_id: str) -> Roster:
        course = self.get_course(course_id)

        pager = Pager(
            self._service.courses().students().list,
            "students",
            courseId=course_id,
            pageSize=self._page_size,
            fields=f"nextPageToken,students({STUDENT_FIELDS})",
        )
        with upstream_call(f"roster of course {course_id}"):
            students = [_to_student(raw) for raw in pager.items()]

        logger.info("Fetched %d students for course %s", len(students), course_id)
        return Roster(course=course, students=students)

    def get_student(self, course_id: str, user_id: str) -> Student:
        with upstream_call(f"student {user_id} in course {course_id}"):
            raw = (
                self._service.courses()
                .students()
                .get(courseId=course_id, userId=user_id, fields=STUDENT_FIELDS)
                .execute()
            )
        return _to_student(raw)

    def list_coursework(
        self,
        course_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CourseworkItem]:
        pager = Pager(
            self._service.courses().courseWork().list,
            "courseWork",
            courseId=course_id,
            orderBy=COURSEWORK_ORDER,
            pageSize=self._page_size,
            fields=f"nextPageToken,courseWork({COURSEWORK_FIELDS})",
        )
        with upstream_call(f"coursework of course {course_id}"):
            items = [CourseworkItem.model_validate(raw) for raw in pager.items()]

        selected = filter_coursework(items, start_date, end_date)
        logger.debug(
            "Course %s: %d coursework items, %d within [%s, %s]",
            course_id,
            len(items),
            len(selected),
            start_date,
            end_date,
        )
        return selected

    def list_submissions(self, course_id: str, coursework_ids: Iterable[str]) -> list[Submission]:
        submissions: list[Submission] = []
        for coursework_id in coursework_ids:
            pager = Pager(
                self._service.courses().courseWork().studentSubmissions().list,
                "studentSubmissions",
                courseId=course_id,
                courseWorkId=coursework_id,
                pageSize=self._page_size,
                fields=f"nextPageToken,studentSubmissions({SUBMISSION_FIELDS})",
            )
            with upstream_call(f"submissions for coursework {coursework_id}"):
                submissions.extend(Submission.model_validate(raw) for raw in pager.items())

        logger.debug("Course %s: fetched %d submissions", course_id, len(submissions))
        return submissions
