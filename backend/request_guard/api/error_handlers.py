"""Error Handlers — every failure, ours or the framework's, leaves through map_outcome.

Invariants:
    - RequestValidationError (framework body decoding) → TransportFailure → 400
    - Starlette HTTPException 404 → RouteNotFound; any other status → RoutingFailure
    - Exception (catch-all) → Unclassified → 500, logged with traceback, never leaked
    - Log records are written at the outcome's severity (ErrorSeverity.log_level)
    - Routes build their failure responses with error_response() too

Design Decisions:
    - Handlers only translate exceptions into outcomes; status and body are
      chosen in one place (core/response_mapping.py)
    - Starlette's HTTPException (not FastAPI's) is registered so router-level
      404/405 responses are caught as well
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from request_guard.config import get_settings
from request_guard.core.outcomes import (
    Outcome, RouteNotFound, RoutingFailure, TransportFailure, Unclassified, join_path,
)
from request_guard.core.response_mapping import map_outcome

logger = logging.getLogger(__name__)


def error_response(
    outcome: Outcome, path: str | None = None, headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Map an outcome to a JSONResponse; Unclassified failures go to the operational log."""
    status_code, body = map_outcome(
        outcome, list_summaries=get_settings().list_error_summaries,
    )
    if isinstance(outcome, Unclassified):
        logger.log(
            outcome.severity.log_level,
            f"Unhandled exception on {path}: {outcome.error!r}",
            exc_info=outcome.error,
            extra={
                "category": outcome.category.value,
                "severity": outcome.severity.value,
                "route": path,
            },
        )
    return JSONResponse(
        status_code=status_code, content=body.to_response(), headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_transport_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_transport_error_handler(app: FastAPI) -> None:
    """Framework-decoded bodies (POST /create-basic) fail here."""

    @app.exception_handler(RequestValidationError)
    async def transport_error_handler(request: Request, exc: RequestValidationError):
        outcome = TransportFailure(cause=describe_cause(exc.errors()))
        logger.log(
            outcome.severity.log_level,
            f"Body deserialization failed on {request.url.path}: {outcome.cause}",
            extra={
                "category": outcome.category.value,
                "severity": outcome.severity.value,
                "route": request.url.path,
            },
        )
        return error_response(outcome, request.url.path)


def _register_http_error_handler(app: FastAPI) -> None:
    """Routing-level errors raised by Starlette (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            outcome = RouteNotFound()
        else:
            outcome = RoutingFailure(status_code=exc.status_code, message=str(exc.detail))
        return error_response(outcome, request.url.path, getattr(exc, "headers", None))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Catch-all — never leaks internal details."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return error_response(Unclassified(error=exc), request.url.path)


def describe_cause(errors) -> str | None:
    """First framework error as "path: message", with the leading "body" segment dropped.

    Malformed JSON has no field path (its loc holds a byte offset), so only the
    message and the parser's reason are reported.
    """
    if not errors:
        return None
    first = errors[0]
    if first.get("type") == "json_invalid":
        reason = (first.get("ctx") or {}).get("error")
        return f"{first['msg']}: {reason}" if reason else first["msg"]
    loc = tuple(first.get("loc", ()))
    if loc and loc[0] == "body":
        loc = loc[1:]
    path = join_path(loc)
    return f"{path}: {first['msg']}" if path else first["msg"]
