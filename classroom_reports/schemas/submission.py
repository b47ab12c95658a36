from datetime import datetime
from enum import Enum
from typing import Optional

from classroom_reports.schemas.base import CamelModel


class SubmissionState(str, Enum):
    NEW = "NEW"
    CREATED = "CREATED"
    DRAFT = "DRAFT"
    TURNED_IN = "TURNED_IN"
    RETURNED = "RETURNED"
    RECLAIMED_BY_STUDENT = "RECLAIMED_BY_STUDENT"


class Submission(CamelModel):
    id: str
    user_id: str
    course_work_id: str
    # kept as a plain string so states outside SubmissionState pass through
    state: str
    late: bool = False
    update_time: Optional[datetime] = None
    assigned_grade: Optional[float] = None
    draft_grade: Optional[float] = None
