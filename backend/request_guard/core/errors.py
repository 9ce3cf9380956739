"""Error Taxonomy — failure categories for every way a request can be rejected.

Invariants:
    - Every outcome carries an ErrorCategory and an ErrorSeverity; the severity
      sets the level its failure is logged at by the API shell and services
    - Client failures (decode, validation, transport, routing) are 4xx; only
      INTERNAL is 5xx and only INTERNAL is logged with a traceback
    - Client input never raises: failures travel as outcome values (core/outcomes.py)

Design Decisions:
    - str Enums: serialize to JSON log fields without custom encoders
    - RecordDefinitionError is the one exception in core/: it signals a broken
      rule table at class-definition (import) time, never a bad request
"""

import logging
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability; picks the log level of each failure."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return getattr(logging, self.name)


class ErrorCategory(str, Enum):
    """High-level failure categories, one per outcome kind."""
    DECODE = "decode"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    ROUTING = "routing"
    INTERNAL = "internal"


class RecordDefinitionError(Exception):
    """A Record's rule table does not match its declared fields."""

    def __init__(self, record_name: str, field_name: str, reason: str):
        super().__init__(f"{record_name}.{field_name}: {reason}")
        self.record_name = record_name
        self.field_name = field_name
        self.reason = reason
