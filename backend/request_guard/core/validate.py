"""Validation Engine — applies every Record's rule table, recursively.

Invariants:
    - validate() is PURE: no IO, no state, only the record's values and declared rules
    - Every scalar rule on a field is evaluated, in declaration order; all
      failures are reported (no short-circuit)
    - Fields are visited in declaration order; list items in index order
    - Empty nodes are never emitted; an all-valid record returns None

Design Decisions:
    - Returns None | StructNode rather than raising: the caller wraps a tree
      into ValidationFailure (core/outcomes.py)
    - A None value (optional field left out) is skipped by every rule:
      presence is a decode-time concern
"""

from request_guard.core.records import Record, rules_for
from request_guard.core.rules import EachElement, Nested
from request_guard.core.validation_tree import (
    FieldNode, ListNode, StructNode, ValidationNode, Violation,
)


def validate(record: Record) -> StructNode | None:
    """Validate record against its class's rule table. None means OK."""
    children: dict[str, ValidationNode] = {}
    for field_name in type(record).model_fields:
        rules = rules_for(type(record), field_name)
        if not rules:
            continue
        node = _validate_field(getattr(record, field_name), rules)
        if node is not None:
            children[field_name] = node
    if not children:
        return None
    return StructNode(children=children)


def _validate_field(value, rules) -> ValidationNode | None:
    # Structural rules are alone on their field (enforced in core/records.py).
    first = rules[0]
    if isinstance(first, Nested):
        return None if value is None else validate(value)
    if isinstance(first, EachElement):
        return _validate_each(value)
    if value is None:
        return None

    violations: list[Violation] = []
    for rule in rules:
        violation = rule.check(value)
        if violation is not None:
            violations.append(violation)
    if not violations:
        return None
    return FieldNode(violations=tuple(violations))


def _validate_each(items) -> ListNode | None:
    failed: dict[int, ValidationNode] = {}
    for index, item in enumerate(items or ()):
        node = validate(item)
        if node is not None:
            failed[index] = node
    if not failed:
        return None
    return ListNode(items=failed)
