"""FastAPI request logging middleware.

Logs one line per request with method, path, status code and elapsed time.

Usage::

    from backend.middleware import RequestLoggingMiddleware

    app.add_middleware(RequestLoggingMiddleware)
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request and its outcome."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        logger.info(f"<-- {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                f"--> {request.method} {request.url.path} failed after {elapsed_ms:.0f}ms"
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"--> {request.method} {request.url.path} "
            f"{response.status_code} {elapsed_ms:.0f}ms"
        )
        return response
