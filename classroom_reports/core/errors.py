"""Service errors and their translation to HTTP responses.

Services raise these; the handler registered in ``main`` turns them into a
JSON body for ``/api`` callers or an error page for the HTML views.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

logger = logging.getLogger(__name__)


class ReportError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReportError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ReportError):
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(ReportError):
    status_code = status.HTTP_502_BAD_GATEWAY


def require_fields(**fields) -> None:
    """Raise ValidationError listing every blank field, by its wire name."""
    missing = [name for name, value in fields.items() if value is None or str(value).strip() == ""]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


def make_report_error_handler(templates: Jinja2Templates):
    def report_error_handler(request: Request, exc: ReportError):
        logger.warning(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            type(exc).__name__,
        )
        if request.url.path.startswith("/api"):
            return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})
        return templates.TemplateResponse(
            request,
            "error.html",
            {"error_type": type(exc).__name__, "message": exc.message},
            status_code=exc.status_code,
        )

    return report_error_handler
