"""Pipeline Outcomes — typed results every stage returns instead of raising.

Invariants:
    - Each failure kind maps to exactly one ErrorCategory
    - DecodeFailure is owned by the decode stage and never merged with validation errors
    - ErrorResponse.to_response() is the only wire shape: {"message", "errors"}
    - Unclassified keeps the original error for the operational log only

Design Decisions:
    - Outcome values over exceptions: routes and handlers match them explicitly
      and hand them to core/response_mapping.py (no global interception)
    - Paths kept as tuples of str | int, rendered as pets[2].name
"""

from dataclasses import dataclass

from request_guard.core.errors import ErrorCategory, ErrorSeverity
from request_guard.core.validation_tree import StructNode


PathSegment = str | int


def join_path(path: tuple[PathSegment, ...]) -> str:
    """Render ("pets", 2, "name") as "pets[2].name"."""
    out = ""
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif out:
            out += f".{segment}"
        else:
            out = segment
    return out


# ─── Failure Outcomes ────────────────────────────────────────────

@dataclass(frozen=True)
class DecodeFailure:
    """Raw input could not be coerced into the Record shape."""
    path: tuple[PathSegment, ...]
    message: str
    category = ErrorCategory.DECODE
    severity = ErrorSeverity.INFO

    @property
    def joined_path(self) -> str:
        return join_path(self.path)

    def __str__(self) -> str:
        if not self.path:
            return f"JSON path error: {self.message}"
        return f"JSON path error: {self.joined_path}: {self.message}"


@dataclass(frozen=True)
class ValidationFailure:
    """Well-formed input that violates declared rules."""
    tree: StructNode
    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.INFO


@dataclass(frozen=True)
class TransportFailure:
    """Body read / framework deserialization failed before the core ran."""
    cause: str | None = None
    category = ErrorCategory.TRANSPORT
    severity = ErrorSeverity.WARNING


@dataclass(frozen=True)
class RouteNotFound:
    category = ErrorCategory.ROUTING
    severity = ErrorSeverity.INFO


@dataclass(frozen=True)
class RoutingFailure:
    """Any other routing-level HTTP error (e.g. 405 Method Not Allowed)."""
    status_code: int
    message: str
    category = ErrorCategory.ROUTING
    severity = ErrorSeverity.INFO


@dataclass(frozen=True)
class Unclassified:
    error: BaseException
    category = ErrorCategory.INTERNAL
    severity = ErrorSeverity.CRITICAL


Outcome = (
    DecodeFailure | ValidationFailure | TransportFailure
    | RouteNotFound | RoutingFailure | Unclassified
)


# ─── Wire Contract ───────────────────────────────────────────────

@dataclass(frozen=True)
class FieldError:
    field: str
    field_errors: list[str]

    def to_response(self) -> dict:
        return {"field": self.field, "field_errors": list(self.field_errors)}


@dataclass(frozen=True)
class ErrorResponse:
    message: str
    errors: list[FieldError] | None = None

    def to_response(self) -> dict:
        """Convert to the JSON body sent to clients."""
        return {
            "message": self.message,
            "errors": (
                None if self.errors is None
                else [e.to_response() for e in self.errors]
            ),
        }
