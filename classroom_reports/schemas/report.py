from datetime import date
from enum import Enum
from typing import Optional

from pydantic import ConfigDict

from classroom_reports.schemas.base import CamelModel
from classroom_reports.schemas.course import Course, Student


class StatusCode(str, Enum):
    ASSIGNED = "ASSIGNED"
    MISSING = "MISSING"
    TURNED_IN = "TURNED_IN"
    RETURNED = "RETURNED"


class StatusDescriptor(CamelModel):
    code: str  # a StatusCode, or the raw submission state for anything else
    label: str
    late: bool = False


class Metrics(CamelModel):
    # counters are filled in while a report is assembled
    model_config = ConfigDict(frozen=False)

    total_assigned: int = 0
    turned_in: int = 0
    returned: int = 0
    graded: int = 0
    missing: int = 0
    late: int = 0


class ReportFilters(CamelModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class Activity(CamelModel):
    id: str
    title: str
    work_type: Optional[str] = None
    link: Optional[str] = None
    due_date: Optional[str] = None
    due_date_label: Optional[str] = None
    submitted_at: Optional[str] = None
    submitted_at_label: Optional[str] = None
    status: StatusDescriptor
    grade: Optional[str] = None


class StudentSummaryReport(CamelModel):
    course: Course
    student: Student
    filters: ReportFilters
    summary: Metrics
    activities: list[Activity] = []


class MissingWorkReport(CamelModel):
    course: Course
    student: Student
    filters: ReportFilters
    total_missing: int
    assignments: list[Activity] = []
