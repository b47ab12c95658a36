from datetime import datetime
from typing import Optional

from classroom_reports.schemas.base import CamelModel


class DueDate(CamelModel):
    year: int
    month: int
    day: int


class TimeOfDay(CamelModel):
    # Classroom omits zero-valued parts, so each may be missing independently.
    hours: Optional[int] = None
    minutes: Optional[int] = None
    seconds: Optional[int] = None


class CourseworkItem(CamelModel):
    id: str
    title: str = ""
    work_type: Optional[str] = None
    due_date: Optional[DueDate] = None
    due_time: Optional[TimeOfDay] = None
    creation_time: Optional[datetime] = None
    update_time: Optional[datetime] = None
    alternate_link: Optional[str] = None
