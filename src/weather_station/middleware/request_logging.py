"""Request logging middleware."""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and processing time.

    The processing time in milliseconds is also returned to clients in the
    ``X-Process-Time`` header. Requests failing with an unhandled exception
    are logged here too, but their 500 response is built by the server error
    handler further out and carries no timing header.
    """

    # Paths that are not logged
    QUIET_PATHS = {
        "/api/weather/health",
        "/favicon.ico",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Time the request and log its outcome.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/endpoint in chain

        Returns:
            Response from the rest of the chain
        """
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            # The server error handler answers outside this middleware
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(
                f"{request.method} {request.url.path} failed after "
                f"{elapsed_ms:.2f} ms: {type(e).__name__}"
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}"

        if request.url.path not in self.QUIET_PATHS:
            client_host = request.client.host if request.client else "unknown"
            logger.info(
                f"{client_host} {request.method} {request.url.path} -> "
                f"{response.status_code} ({elapsed_ms:.2f} ms)"
            )

        return response
