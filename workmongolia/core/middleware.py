"""HTTP middleware: request IDs and access logging"""

import time
import uuid
from typing import Any, Callable, Dict
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from workmongolia.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def request_id_of(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def _request_fields(request: Request) -> Dict[str, Any]:
    return {
        "request_id": request_id_of(request),
        "method": request.method,
        "path": request.url.path,
    }


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuse the caller's X-Request-ID or mint one, and echo it back"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    One access log line per request.

    Reads are logged at DEBUG and writes at INFO, so admin changes to master
    data stay visible at the default level. Server errors are logged at ERROR.
    Must run inside ``RequestIDMiddleware`` to see the request ID.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        fields = _request_fields(request)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            logger.error(f"{request.method} {request.url.path} raised {e!r}", extra=fields, exc_info=True)
            raise

        fields["status_code"] = response.status_code
        fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)

        if response.status_code >= 500:
            level = "error"
        elif request.method in ("GET", "HEAD", "OPTIONS"):
            level = "debug"
        else:
            level = "info"
        getattr(logger, level)(f"{request.method} {request.url.path} -> {response.status_code}", extra=fields)

        return response
