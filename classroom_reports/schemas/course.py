from typing import Optional

from classroom_reports.schemas.base import CamelModel


class Course(CamelModel):
    id: str
    name: str
    section: Optional[str] = None
    alternate_link: Optional[str] = None


class Student(CamelModel):
    user_id: str
    name: str
    email: Optional[str] = None
    photo_url: Optional[str] = None


class Roster(CamelModel):
    course: Course
    students: list[Student] = []
