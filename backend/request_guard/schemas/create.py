"""Create Schemas — the request record accepted by the /create-* endpoints.

Invariants:
    - Address.street: 2-10 chars; Address.street_no: non-negative int, at least 1
    - Pet.name: 3-20 chars
    - CreateRequest.email must look like an email; address and every pet are
      validated with their own rule tables

Design Decisions:
    - Types live in the annotations (enforced when decoding), rules in
      field_rules (enforced by core/validate.py): a wrong type is a decode
      error with a path, a broken rule is a field error
"""

from typing import Any

from pydantic import BaseModel

from request_guard.core.records import Record, StrictStr, Unsigned
from request_guard.core.rules import (
    EachElement, Email, LengthRange, Nested, NumericRange,
)


class Address(Record):
    street: StrictStr
    street_no: Unsigned

    field_rules = {
        "street": [LengthRange(min=2, max=10)],
        "street_no": [NumericRange(min=1)],
    }


class Pet(Record):
    name: StrictStr

    field_rules = {
        "name": [LengthRange(min=3, max=20)],
    }


class CreateRequest(Record):
    email: StrictStr
    address: Address
    pets: list[Pet]

    field_rules = {
        "email": [Email()],
        "address": [Nested()],
        "pets": [EachElement()],
    }


class CreateAccepted(BaseModel):
    """Echo of the accepted request."""
    message: str = "called with"
    data: dict[str, Any]
