"""Request Pipeline — decode → validate, returning a Record or a failure outcome.

Invariants:
    - Never raises for client input; the route matches the returned value
    - Decode failures stop the pipeline: validation only sees fully decoded records
    - Client failures logged at their outcome severity (INFO) with category,
      severity and path fields, never the raw body

Design Decisions:
    - Two entry points mirror the two raw-body endpoints: decode_only for
      /create-path, decode_and_validate for /create-validator
"""

import logging
from typing import TypeVar

from request_guard.core.decode import decode
from request_guard.core.outcomes import DecodeFailure, ValidationFailure
from request_guard.core.records import Record
from request_guard.core.validate import validate
from request_guard.core.validation_tree import count_violations

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def decode_only(raw: bytes, shape: type[R]) -> R | DecodeFailure:
    """Decode raw bytes into shape, reporting the failing field path."""
    result = decode(raw, shape)
    if isinstance(result, DecodeFailure):
        _log_decode_failure(shape, result)
    return result


def decode_and_validate(
    raw: bytes, shape: type[R],
) -> R | DecodeFailure | ValidationFailure:
    """Decode, then apply every rule of shape's rule table."""
    result = decode_only(raw, shape)
    if isinstance(result, DecodeFailure):
        return result

    tree = validate(result)
    if tree is None:
        return result
    failure = ValidationFailure(tree=tree)
    logger.log(
        failure.severity.log_level,
        f"{shape.__name__} failed validation",
        extra={
            "category": failure.category.value,
            "severity": failure.severity.value,
            "violation_count": count_violations(tree),
        },
    )
    return failure


def _log_decode_failure(shape: type[Record], failure: DecodeFailure) -> None:
    logger.log(
        failure.severity.log_level,
        f"{shape.__name__} decode failed: {failure.message}",
        extra={
            "category": failure.category.value,
            "severity": failure.severity.value,
            "path": failure.joined_path or None,
        },
    )
