"""Server-rendered pages: course picker, roster, and the two reports."""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.templating import Jinja2Templates

from classroom_reports.core.deps import get_accessor, get_report_service
from classroom_reports.services.classroom import ClassroomAccessor
from classroom_reports.services.reports import ReportService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/")
def index(request: Request, accessor: ClassroomAccessor = Depends(get_accessor)):
    courses = accessor.list_active_courses()
    return templates.TemplateResponse(request, "index.html", {"courses": courses})


@router.get("/courses/{course_id}")
def roster_page(
    request: Request,
    course_id: str,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    accessor: ClassroomAccessor = Depends(get_accessor),
):
    roster = accessor.get_roster(course_id)
    return templates.TemplateResponse(
        request,
        "roster.html",
        {"roster": roster, "start_date": start_date or "", "end_date": end_date or ""},
    )


@router.get("/courses/{course_id}/students/{user_id}")
def summary_page(
    request: Request,
    course_id: str,
    user_id: str,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    reports: ReportService = Depends(get_report_service),
):
    report = reports.build_student_summary(course_id, user_id, start_date, end_date)
    return templates.TemplateResponse(request, "summary.html", {"report": report})


@router.get("/courses/{course_id}/students/{user_id}/missing")
def missing_work_page(
    request: Request,
    course_id: str,
    user_id: str,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    reports: ReportService = Depends(get_report_service),
):
    report = reports.build_missing_work_report(course_id, user_id, start_date, end_date)
    return templates.TemplateResponse(request, "missing.html", {"report": report})
