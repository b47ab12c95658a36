from fastapi import APIRouter, Depends

from classroom_reports.core.deps import get_accessor
from classroom_reports.schemas.course import Course, Roster
from classroom_reports.services.classroom import ClassroomAccessor

router = APIRouter()


@router.get("/courses", response_model=list[Course])
def list_active_courses(accessor: ClassroomAccessor = Depends(get_accessor)):
    return accessor.list_active_courses()


@router.get(
    "/courses/{course_id}/roster",
    response_model=Roster,
    responses={404: {"description": "Course not found"}},
)
def get_course_roster(
    course_id: str,
    accessor: ClassroomAccessor = Depends(get_accessor),
):
    return accessor.get_roster(course_id)
