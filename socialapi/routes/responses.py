"""
Social API: Handler Response Helpers
======================================

What:  Builds the non-entity responses route handlers return directly.
How:   Returning a Response instance from a handler bypasses response_model,
       which is how handlers emit error bodies and the empty 200 used for
       missing messages.
"""

import logging
from typing import Any, Optional

from fastapi import Response
from fastapi.responses import JSONResponse

from socialapi.middleware.request_id import request_id_var
from socialapi.results import FailureKind, Result

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details,
            "request_id": request_id_var.get(""),
        },
    )


def failure_response(result: Result[Any], status_code: int) -> JSONResponse:
    """
    Translate a failed Result into an error body with the endpoint's status code.

    Storage causes are logged here and never included in the body.
    """
    failure = result.failure
    if failure.kind is FailureKind.SERVICE_FAILURE:
        logger.error("Service failure: %s | Cause: %r", failure.reason, failure.cause)
    else:
        logger.info("Request rejected (%s): %s", failure.kind.value, failure.reason)
    return error_response(status_code, failure.kind.value, failure.reason)


def empty_response() -> Response:
    """200 with no body."""
    return Response(status_code=200)
