"""Request trace id middleware.

Each request gets a trace id, taken from the ``X-Trace-Id`` header when the
caller sends one. The id is bound into structlog's context variables, so
every log line written while the request is handled carries ``trace_id``.
It is also stored on ``request.state`` for the exception handlers and echoed
back in the response header.
"""

from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

TRACE_ID_HEADER = "X-Trace-Id"


def get_trace_id() -> str | None:
    """Return the trace id of the request being handled, or None."""
    return structlog.contextvars.get_contextvars().get("trace_id")


class TraceMiddleware(BaseHTTPMiddleware):
    """Correlate logs, error bodies and responses of one request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid4())
        request.state.trace_id = trace_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[TRACE_ID_HEADER] = trace_id
        return response
