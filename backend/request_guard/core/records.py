"""Records — pydantic models that carry their own per-field rule tables.

Invariants:
    - field_rules is declared on the class and checked once, when the class is created
    - Every key of field_rules names a declared field
    - A field's rules are either all scalar (Email, LengthRange, NumericRange)
      or exactly one structural rule (Nested, EachElement), never a mix
    - Every rule fits its field's declared type (Nested on a Record, EachElement
      on list[Record], LengthRange on str/list, NumericRange on int/float,
      Email on str); a misfit raises RecordDefinitionError at import time
    - Scalar fields declared with StrictStr / Unsigned refuse coercion, so a
      string street_no fails decoding instead of being converted

Design Decisions:
    - Rule table as data (ClassVar mapping) over validator decorators: the
      engine (core/validate.py) consults it, pydantic never runs it, so decode
      and validation stay two separate stages with separate error shapes
    - __pydantic_init_subclass__ over __init_subclass__: model_fields is only
      populated after pydantic finishes building the class
"""

from types import UnionType
from typing import (
    Annotated, Any, ClassVar, Mapping, Sequence, Union, get_args, get_origin,
)

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from request_guard.core.errors import RecordDefinitionError
from request_guard.core.rules import (
    STRUCTURAL_RULES, EachElement, LengthRange, Nested, NumericRange, Rule,
)


RuleTable = Mapping[str, Sequence[Rule]]

# Non-negative integer, no coercion from strings or floats.
Unsigned = Annotated[int, Field(strict=True, ge=0)]

__all__ = ["Record", "RuleTable", "StrictStr", "Unsigned", "rules_for"]


class Record(BaseModel):
    """Base for every decodable, validatable request shape."""

    model_config = ConfigDict(extra="ignore")

    field_rules: ClassVar[RuleTable] = {}

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        _check_rule_table(cls)


def rules_for(record_cls: type[Record], field_name: str) -> tuple[Rule, ...]:
    """Declared rules for one field, in declaration order (empty if none)."""
    return tuple(record_cls.field_rules.get(field_name, ()))


def _check_rule_table(cls: type[Record]) -> None:
    for field_name, rules in cls.field_rules.items():
        if field_name not in cls.model_fields:
            raise RecordDefinitionError(
                cls.__name__, field_name, "rule declared for an unknown field",
            )
        structural = [r for r in rules if isinstance(r, STRUCTURAL_RULES)]
        if structural and len(rules) > 1:
            raise RecordDefinitionError(
                cls.__name__, field_name,
                "Nested/EachElement cannot be combined with other rules",
            )
        annotation = _unwrap(cls.model_fields[field_name].annotation)
        for rule in rules:
            if not _rule_fits(rule, annotation):
                raise RecordDefinitionError(
                    cls.__name__, field_name,
                    f"{type(rule).__name__} does not apply to {annotation!r}",
                )


def _unwrap(annotation: Any) -> Any:
    """Strip Annotated metadata and a single "| None"."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
            continue
        if origin in (Union, UnionType):
            args = [a for a in get_args(annotation) if a is not type(None)]
            if len(args) == 1:
                annotation = args[0]
                continue
        return annotation


def _is_record(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, Record)


def _is_list(annotation: Any) -> bool:
    return annotation is list or get_origin(annotation) is list


def _rule_fits(rule: Rule, annotation: Any) -> bool:
    if isinstance(rule, Nested):
        return _is_record(annotation)
    if isinstance(rule, EachElement):
        args = get_args(annotation)
        return _is_list(annotation) and len(args) == 1 and _is_record(_unwrap(args[0]))
    if isinstance(rule, LengthRange):
        return annotation is str or _is_list(annotation)
    if isinstance(rule, NumericRange):
        return annotation in (int, float)
    return annotation is str
