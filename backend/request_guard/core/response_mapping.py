"""Response Mapping — outcome → (status code, ErrorResponse). The only place statuses are chosen.

Invariants:
    - RouteNotFound      → 404 "Not Found", no errors
    - DecodeFailure      → 400, message embeds the path, no structured errors
    - ValidationFailure  → 400 "field errors", flattened FieldErrors
    - TransportFailure   → 400, cause text (or "BAD_REQUEST" without a cause)
    - RoutingFailure     → its own status code and message
    - anything else      → 500 "Internal Server Error"; nothing about the error reaches the client

Design Decisions:
    - Pure mapper: logging of Unclassified failures is done by the API shell
      (api/error_handlers.py) which owns the operational log
"""

from request_guard.core.flatten import flatten
from request_guard.core.outcomes import (
    DecodeFailure, ErrorResponse, Outcome, RouteNotFound, RoutingFailure,
    TransportFailure, ValidationFailure,
)


NOT_FOUND_MESSAGE: str = "Not Found"
FIELD_ERRORS_MESSAGE: str = "field errors"
BAD_REQUEST_MESSAGE: str = "BAD_REQUEST"
INTERNAL_ERROR_MESSAGE: str = "Internal Server Error"


def map_outcome(outcome: Outcome, *, list_summaries: bool = True) -> tuple[int, ErrorResponse]:
    """Map a failure outcome to its HTTP status and response body."""
    if isinstance(outcome, RouteNotFound):
        return 404, ErrorResponse(message=NOT_FOUND_MESSAGE)

    if isinstance(outcome, DecodeFailure):
        return 400, ErrorResponse(message=str(outcome))

    if isinstance(outcome, ValidationFailure):
        return 400, ErrorResponse(
            message=FIELD_ERRORS_MESSAGE,
            errors=flatten(outcome.tree, list_summaries=list_summaries),
        )

    if isinstance(outcome, TransportFailure):
        return 400, ErrorResponse(
            message=outcome.cause or BAD_REQUEST_MESSAGE,
        )

    if isinstance(outcome, RoutingFailure):
        return outcome.status_code, ErrorResponse(message=outcome.message)

    return 500, ErrorResponse(
        message=INTERNAL_ERROR_MESSAGE,
    )
