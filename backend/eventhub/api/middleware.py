"""
Request middleware for logging, timing, request ID tracking and the auth gate.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog

from eventhub.api.auth import resolve_auth_context
from eventhub.core.logging import get_logger

logger = get_logger(__name__)


class AuthGateMiddleware(BaseHTTPMiddleware):
    """
    Decodes the bearer token (if any) and stores the resulting AuthContext on
    ``request.state.auth``. Never rejects a request: operations that need an
    authenticated caller check the flag themselves.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        auth = resolve_auth_context(request.headers.get("authorization"))
        request.state.auth = auth
        if auth.is_authenticated:
            structlog.contextvars.bind_contextvars(user_id=auth.user_id)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that:
    1. Assigns a unique request ID to each request
    2. Logs request method, path, status code, and duration
    3. Binds request context to structlog for correlation
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = str(uuid.uuid4())[:8]
        start_time = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                "request_failed",
                error=str(e),
                duration_ms=duration_ms,
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms}ms"
        return response
