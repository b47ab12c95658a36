from typing import Optional

from fastapi import APIRouter, Depends, Query

from classroom_reports.core.deps import get_report_service
from classroom_reports.schemas.report import MissingWorkReport, StudentSummaryReport
from classroom_reports.services.reports import ReportService

router = APIRouter()

# courseId/userId are optional here so the report service can name what is missing
REPORT_ERRORS = {
    400: {"description": "Missing courseId/userId or malformed date"},
    404: {"description": "Course or student not found"},
    502: {"description": "Classroom API failure"},
}


@router.get("/reports/student-summary", response_model=StudentSummaryReport, responses=REPORT_ERRORS)
def get_student_summary_report(
    course_id: Optional[str] = Query(None, alias="courseId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD, inclusive"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
    reports: ReportService = Depends(get_report_service),
):
    return reports.build_student_summary(course_id, user_id, start_date, end_date)


@router.get("/reports/missing-work", response_model=MissingWorkReport, responses=REPORT_ERRORS)
def get_missing_work_report(
    course_id: Optional[str] = Query(None, alias="courseId"),
    user_id: Optional[str] = Query(None, alias="userId"),
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD, inclusive"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
    reports: ReportService = Depends(get_report_service),
):
    return reports.build_missing_work_report(course_id, user_id, start_date, end_date)
