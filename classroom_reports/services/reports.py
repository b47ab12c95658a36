"""Assembles the per-student summary and missing-work reports."""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from classroom_reports.core.errors import require_fields
from classroom_reports.schemas.coursework import CourseworkItem
from classroom_reports.schemas.report import (
    Activity,
    MissingWorkReport,
    ReportFilters,
    StatusCode,
    StatusDescriptor,
    StudentSummaryReport,
)
from classroom_reports.schemas.submission import Submission
from classroom_reports.services.classroom import ClassroomAccessor
from classroom_reports.services.dates import (
    due_instant,
    end_of_day,
    format_display_date,
    format_iso_date,
    parse_iso_date,
)
from classroom_reports.services.metrics import accumulate, new_metrics
from classroom_reports.services.status import derive_status

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_grade(submission: Optional[Submission]) -> Optional[str]:
    if submission is None:
        return None
    if submission.assigned_grade is not None:
        return _format_number(submission.assigned_grade)
    if submission.draft_grade is not None:
        return f"{_format_number(submission.draft_grade)} (draft)"
    return None


def index_submissions(submissions: Iterable[Submission], user_id: str) -> dict[str, Submission]:
    """Map courseWorkId -> the student's submission; a later duplicate replaces an earlier one."""
    return {s.course_work_id: s for s in submissions if s.user_id == user_id}


def _to_activity(
    item: CourseworkItem,
    submission: Optional[Submission],
    status: StatusDescriptor,
) -> Activity:
    due = due_instant(item)
    submitted = submission.update_time if submission is not None else None
    return Activity(
        id=item.id,
        title=item.title,
        work_type=item.work_type,
        link=item.alternate_link,
        due_date=format_iso_date(due),
        due_date_label=format_display_date(due),
        submitted_at=format_iso_date(submitted),
        submitted_at_label=format_display_date(submitted),
        status=status,
        grade=format_grade(submission),
    )


class ReportService:
    def __init__(
        self,
        accessor: ClassroomAccessor,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.accessor = accessor
        self.clock = clock or _utcnow

    def build_student_summary(
        self,
        course_id: Optional[str],
        user_id: Optional[str],
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> StudentSummaryReport:
        require_fields(courseId=course_id, userId=user_id)
        start = parse_iso_date(start_date, "startDate")
        end = parse_iso_date(end_date, "endDate")

        course = self.accessor.get_course(course_id)
        student = self.accessor.get_student(course_id, user_id)
        coursework = self.accessor.list_coursework(course_id, start, end)
        submissions = self.accessor.list_submissions(course_id, [item.id for item in coursework])
        by_coursework = index_submissions(submissions, student.user_id)

        # "has the due date passed" is judged at the end of the window, or now
        effective_end = end_of_day(end) if end is not None else self.clock()

        metrics = new_metrics(len(coursework))
        activities: list[Activity] = []
        for item in coursework:
            submission = by_coursework.get(item.id)
            status = derive_status(item, submission, effective_end)
            accumulate(metrics, status, submission)
            activities.append(_to_activity(item, submission, status))

        logger.info(
            "Summary for student %s in course %s: %d assigned, %d missing, %d late",
            student.user_id,
            course.id,
            metrics.total_assigned,
            metrics.missing,
            metrics.late,
        )

        return StudentSummaryReport(
            course=course,
            student=student,
            filters=ReportFilters(start_date=start, end_date=end),
            summary=metrics,
            activities=activities,
        )

    def build_missing_work_report(
        self,
        course_id: Optional[str],
        user_id: Optional[str],
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> MissingWorkReport:
        summary = self.build_student_summary(course_id, user_id, start_date, end_date)
        missing = [a for a in summary.activities if a.status.code == StatusCode.MISSING]
        return MissingWorkReport(
            course=summary.course,
            student=summary.student,
            filters=summary.filters,
            total_missing=len(missing),
            assignments=missing,
        )
