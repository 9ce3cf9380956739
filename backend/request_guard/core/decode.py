"""Path-Tracking Decoder — bytes into a Record, or the exact path where decoding broke.

Invariants:
    - decode() never raises for client input: it returns a Record or a DecodeFailure
    - DecodeFailure.path is the full chain of field names / list indices to the
      offending value (("pets", 2, "name")), never just "somewhere in the body"
    - Malformed JSON and a non-object top level produce an empty path
    - Deterministic: same bytes + shape always give the same result or failure

Design Decisions:
    - pydantic's JSON validator is the parsing primitive: it already reports a
      loc for every error, the decoder keeps only the first one so one request
      yields one decode failure
    - Rules in Record.field_rules are NOT run here; only declared types are enforced
"""

from typing import TypeVar

from pydantic import ValidationError

from request_guard.core.outcomes import DecodeFailure
from request_guard.core.records import Record


R = TypeVar("R", bound=Record)


def decode(raw: bytes | str, shape: type[R]) -> R | DecodeFailure:
    """Decode raw JSON into shape. Pure — no side effects."""
    try:
        return shape.model_validate_json(raw)
    except ValidationError as exc:
        return failure_from_errors(exc.errors(include_url=False))


def failure_from_errors(errors: list[dict]) -> DecodeFailure:
    """Build a DecodeFailure from pydantic-style error dicts (first error wins)."""
    if not errors:
        return DecodeFailure(path=(), message="invalid request body")
    first = errors[0]
    return DecodeFailure(path=tuple(first.get("loc", ())), message=first["msg"])
