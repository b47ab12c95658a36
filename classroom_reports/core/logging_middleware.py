import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """One line per request; failed report requests are logged as warnings."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()

        # the query string holds courseId/userId and the date window
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s -> unhandled error (%.2fs)",
                request.method,
                target,
                time.monotonic() - start,
            )
            raise

        duration = time.monotonic() - start

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %s (%.2fs)",
            request.method,
            target,
            response.status_code,
            duration,
        )

        return response
