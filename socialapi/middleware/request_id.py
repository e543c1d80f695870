"""
Social API: Request Correlation
=================================

What:  Gives every request a correlation ID, echoes it in the X-Request-ID
       response header, and stamps it on every log record emitted while
       the request is handled.
How:   RequestIDMiddleware stores the ID in a ContextVar; RequestIDLogFilter
       copies it onto log records as `request_id` so the log format can
       print it. Error bodies read the same ContextVar.

Accepted incoming IDs:
    Printable, non-blank, at most 64 characters. Anything else is replaced
    with a fresh 8-character hex ID so log lines stay one line each.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(incoming: str) -> str:
    """Return the client's ID when it is safe to log, otherwise a new one."""
    candidate = incoming.strip()
    if candidate and len(candidate) <= MAX_REQUEST_ID_LENGTH and candidate.isprintable():
        return candidate
    return new_request_id()


class RequestIDLogFilter(logging.Filter):
    """
    Adds `request_id` to every record passing through the handler.

    Outside a request the attribute is "-". A record that already carries
    request_id (passed through `extra=`) keeps its value.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get("") or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER, ""))

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
