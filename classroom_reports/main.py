import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from classroom_reports.core.config import get_settings
from classroom_reports.core.errors import ReportError, make_report_error_handler
from classroom_reports.core.logging_middleware import LoggingMiddleware
from classroom_reports.routers.courses import router as courses_router
from classroom_reports.routers.reports import router as reports_router
from classroom_reports.routers.ui import router as ui_router
from classroom_reports.routers.ui import templates

settings = get_settings()

logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.app_name, debug=settings.debug)

# Middleware
app.add_middleware(LoggingMiddleware)
if settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.add_exception_handler(ReportError, make_report_error_handler(templates))


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Include routers
app.include_router(courses_router, prefix="/api", tags=["courses"])
app.include_router(reports_router, prefix="/api", tags=["reports"])
app.include_router(ui_router, include_in_schema=False)
