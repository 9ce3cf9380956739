"""Error Flattener — turns a DecodeFailure or a validation tree into FieldErrors.

Invariants:
    - DecodeFailure → exactly one FieldError (joined path, [message])
    - Validation tree → depth-first walk in field-declaration order; one
      FieldError per FieldNode, messages "{rule_name}: {params}" in rule order
    - Each struct-valued list item first gets a summary FieldError at
      "field[i]" (direct field errors joined with " | "), then is expanded
    - Same input, same output: no hash or alphabetical ordering anywhere

Design Decisions:
    - params rendered with json.dumps (insertion-ordered keys), so messages are
      byte-identical across runs and readable by clients
    - The list summary duplicates what the expansion reports. Kept on by
      default for clients that read the summary line; list_summaries=False
      drops it (Settings.list_error_summaries)
"""

import json

from request_guard.core.outcomes import DecodeFailure, FieldError, join_path
from request_guard.core.validation_tree import (
    FieldNode, ListNode, StructNode, ValidationNode, Violation,
)


SUMMARY_SEPARATOR: str = " | "


def flatten(
    error: DecodeFailure | ValidationNode, *, list_summaries: bool = True,
) -> list[FieldError]:
    """Flatten a decode failure or validation tree into an ordered FieldError list."""
    if isinstance(error, DecodeFailure):
        return [FieldError(field=error.joined_path, field_errors=[error.message])]
    return _walk(error, (), list_summaries)


def render_violation(violation: Violation) -> str:
    params = json.dumps(violation.params, ensure_ascii=False, default=str)
    return f"{violation.rule_name}: {params}"


def _walk(node: ValidationNode, path: tuple, list_summaries: bool) -> list[FieldError]:
    if isinstance(node, FieldNode):
        return [FieldError(
            field=join_path(path),
            field_errors=[render_violation(v) for v in node.violations],
        )]

    out: list[FieldError] = []
    if isinstance(node, StructNode):
        for name, child in node.children.items():
            out.extend(_walk(child, path + (name,), list_summaries))
        return out

    for index, item in node.items.items():
        item_path = path + (index,)
        if list_summaries and isinstance(item, StructNode):
            summary = _summarize(item)
            if summary:
                out.append(FieldError(field=join_path(item_path), field_errors=[summary]))
        out.extend(_walk(item, item_path, list_summaries))
    return out


def _summarize(node: StructNode) -> str:
    """One line for the item's direct field errors: "name: errors: length: {...}"."""
    parts = [
        f"{name}: errors: {', '.join(render_violation(v) for v in child.violations)}"
        for name, child in node.children.items()
        if isinstance(child, FieldNode)
    ]
    return SUMMARY_SEPARATOR.join(parts)
