"""Validation Rules — the fixed set of per-field constraints a Record can declare.

Invariants:
    - Scalar rules (Email, LengthRange, NumericRange) evaluate to a Violation or None
    - Structural rules (Nested, EachElement) never evaluate a value themselves;
      the engine recurses on them (core/validate.py)
    - params preserve declaration order: declared bounds first, then "value"
    - Wire names match the public contract: "email", "length", "range"

Design Decisions:
    - Frozen dataclasses: a rule table is built once at class-definition time
      and shared read-only by every request
    - Email shape checked with two regexes (local part, domain) plus an IP
      literal fallback instead of a third-party validator: the contract is
      shape only, no deliverability or DNS lookups
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Any, ClassVar

from request_guard.core.validation_tree import Violation


EMAIL_LOCAL_MAX: int = 64
EMAIL_DOMAIN_MAX: int = 255

_LOCAL_PART_RE = re.compile(r"^[a-z0-9.!#$%&'*+/=?^_`{|}~-]+\Z", re.IGNORECASE | re.ASCII)
_DOMAIN_RE = re.compile(
    r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"
    r"(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)*\Z",
    re.IGNORECASE | re.ASCII,
)
_IP_LITERAL_RE = re.compile(r"^\[([a-f0-9:.]+)\]\Z", re.IGNORECASE | re.ASCII)


# ─── Scalar Rules ────────────────────────────────────────────────

@dataclass(frozen=True)
class Email:
    """Value must look like local@domain."""
    name: ClassVar[str] = "email"

    def check(self, value: Any) -> Violation | None:
        if isinstance(value, str) and is_email(value):
            return None
        return Violation(
            rule_name=self.name,
            params={"value": value},
            message="must be a valid email address",
        )


@dataclass(frozen=True)
class LengthRange:
    """Character count (str) or item count (list) within [min, max], inclusive."""
    min: int | None = None
    max: int | None = None
    name: ClassVar[str] = "length"

    def __post_init__(self):
        if self.min is None and self.max is None:
            raise ValueError("LengthRange needs at least one of min/max")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"LengthRange min {self.min} > max {self.max}")

    def check(self, value: Any) -> Violation | None:
        count = len(value)
        too_short = self.min is not None and count < self.min
        too_long = self.max is not None and count > self.max
        if not (too_short or too_long):
            return None
        return Violation(
            rule_name=self.name,
            params=_bounds(self.min, self.max, value),
            message=_range_message("length", self.min, self.max),
        )


@dataclass(frozen=True)
class NumericRange:
    """Number within [min, max]; max is unbounded unless set."""
    min: float | None = None
    max: float | None = None
    name: ClassVar[str] = "range"

    def __post_init__(self):
        if self.min is None and self.max is None:
            raise ValueError("NumericRange needs at least one of min/max")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"NumericRange min {self.min} > max {self.max}")

    def check(self, value: Any) -> Violation | None:
        below = self.min is not None and value < self.min
        above = self.max is not None and value > self.max
        if not (below or above):
            return None
        return Violation(
            rule_name=self.name,
            params=_bounds(self.min, self.max, value),
            message=_range_message("value", self.min, self.max),
        )


# ─── Structural Rules ────────────────────────────────────────────

@dataclass(frozen=True)
class Nested:
    """Delegate to the sub-Record's own rule table."""
    name: ClassVar[str] = "nested"


@dataclass(frozen=True)
class EachElement:
    """Apply Nested to every item of a list of Records."""
    name: ClassVar[str] = "each"


Rule = Email | LengthRange | NumericRange | Nested | EachElement

STRUCTURAL_RULES: tuple[type, ...] = (Nested, EachElement)


# ─── Helpers ─────────────────────────────────────────────────────

def is_email(value: str) -> bool:
    """Single '@', non-empty local part and domain, each within RFC length limits."""
    if value.count("@") != 1:
        return False
    local, domain = value.split("@")
    if not local or not domain:
        return False
    if len(local) > EMAIL_LOCAL_MAX or len(domain) > EMAIL_DOMAIN_MAX:
        return False
    if not _LOCAL_PART_RE.match(local):
        return False
    if _DOMAIN_RE.match(domain):
        return True
    return _is_ip_literal(domain)


def _is_ip_literal(domain: str) -> bool:
    match = _IP_LITERAL_RE.match(domain)
    if not match:
        return False
    try:
        ipaddress.ip_address(match.group(1))
    except ValueError:
        return False
    return True


def _bounds(low, high, value) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if low is not None:
        params["min"] = low
    if high is not None:
        params["max"] = high
    params["value"] = value
    return params


def _range_message(subject: str, low, high) -> str:
    if low is not None and high is not None:
        return f"{subject} must be between {low} and {high}"
    if low is not None:
        return f"{subject} must be at least {low}"
    return f"{subject} must be at most {high}"
