"""Validation Tree — sparse, recursive record of which fields broke which rules.

Invariants:
    - Three variants only: FieldNode (leaf), StructNode (record), ListNode (sequence)
    - A node exists only if it holds at least one Violation, directly or transitively
    - StructNode children keep field-declaration order; ListNode items keep
      ascending index order (dict insertion order, filled by core/validate.py)

Design Decisions:
    - Tagged union of frozen dataclasses over a class hierarchy with virtual
      methods: traversal lives in core/flatten.py as one explicit recursive function
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Violation:
    """One failed rule: wire name, its params (bounds + offending value), human message."""
    rule_name: str
    params: dict[str, Any]
    message: str


@dataclass(frozen=True)
class FieldNode:
    violations: tuple[Violation, ...]


@dataclass(frozen=True)
class StructNode:
    children: dict[str, "ValidationNode"] = field(default_factory=dict)


@dataclass(frozen=True)
class ListNode:
    items: dict[int, "ValidationNode"] = field(default_factory=dict)


ValidationNode = FieldNode | StructNode | ListNode


def count_violations(node: ValidationNode) -> int:
    """Total number of Violations in a subtree (used for log fields)."""
    if isinstance(node, FieldNode):
        return len(node.violations)
    if isinstance(node, StructNode):
        return sum(count_violations(child) for child in node.children.values())
    return sum(count_violations(item) for item in node.items.values())
