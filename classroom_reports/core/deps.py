from fastapi import Depends

from classroom_reports.clients.google_classroom import build_classroom_service
from classroom_reports.core.config import Settings, get_settings
from classroom_reports.services.classroom import ClassroomAccessor, upstream_call
from classroom_reports.services.reports import ReportService


# every request gets its own Classroom client; httplib2 connections are not thread-safe.
def get_classroom_service(settings: Settings = Depends(get_settings)):
    with upstream_call("Classroom credentials"):
        return build_classroom_service(settings)


def get_accessor(
    service=Depends(get_classroom_service),
    settings: Settings = Depends(get_settings),
) -> ClassroomAccessor:
    return ClassroomAccessor(service, page_size=settings.page_size)


def get_report_service(accessor: ClassroomAccessor = Depends(get_accessor)) -> ReportService:
    return ReportService(accessor)
