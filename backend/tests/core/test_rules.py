"""Rules — tests for the scalar rule checks and their params.

Tests cover:
    - Email accepts common shapes and IP literals, rejects the rest
    - Unicode look-alikes of ASCII letters are not accepted by the
      case-insensitive match
    - LengthRange is inclusive and counts characters, not bytes
    - NumericRange has an unbounded max unless set
    - params keep declaration order with the offending value last
    - Bounds are checked when the rule is declared
"""

import pytest

from request_guard.core.rules import (
    EMAIL_LOCAL_MAX, Email, LengthRange, NumericRange, is_email,
)


# ─── Email ───────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [
    "user@example.com",
    "first.last+tag@sub.example.org",
    "UPPER@EXAMPLE.COM",
    "a@localhost",
    "a@[127.0.0.1]",
    "a@[::1]",
])
def test_is_email_accepts(value):
    assert is_email(value)


@pytest.mark.parametrize("value", [
    "",
    "not-an-email",
    "@example.com",
    "user@",
    "a@b@example.com",
    "user name@example.com",
    "user@-example.com",
    "user@example..com",
    "a@[999.1.1.1]",
    "x" * (EMAIL_LOCAL_MAX + 1) + "@example.com",
    "\u017f@example.com",
    "\u212a@example.com",
    "user@\u212aexample.com",
])
def test_is_email_rejects(value):
    assert not is_email(value)


def test_email_violation_carries_value():
    violation = Email().check("not-an-email")
    assert violation is not None
    assert violation.rule_name == "email"
    assert violation.params == {"value": "not-an-email"}


def test_email_passes_valid_address():
    assert Email().check("jane@example.com") is None


def test_email_rejects_non_string():
    assert Email().check(42) is not None


# ─── LengthRange ─────────────────────────────────────────────────

def test_length_inclusive_bounds():
    rule = LengthRange(min=2, max=10)
    assert rule.check("ab") is None
    assert rule.check("a" * 10) is None


def test_length_too_short():
    violation = LengthRange(min=2, max=10).check("A")
    assert violation.rule_name == "length"
    assert list(violation.params.items()) == [("min", 2), ("max", 10), ("value", "A")]


def test_length_too_long():
    assert LengthRange(min=2, max=10).check("a" * 11) is not None


def test_length_counts_characters():
    assert LengthRange(max=3).check("äöü") is None


def test_length_min_only_omits_max_param():
    violation = LengthRange(min=3).check("ab")
    assert violation.params == {"min": 3, "value": "ab"}


def test_length_applies_to_lists():
    assert LengthRange(min=1).check([]) is not None
    assert LengthRange(min=1).check([1]) is None


def test_length_requires_a_bound():
    with pytest.raises(ValueError):
        LengthRange()


def test_length_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        LengthRange(min=5, max=2)


# ─── NumericRange ────────────────────────────────────────────────

def test_range_below_min():
    violation = NumericRange(min=1).check(0)
    assert violation.rule_name == "range"
    assert violation.params == {"min": 1, "value": 0}


def test_range_at_min_passes():
    assert NumericRange(min=1).check(1) is None


def test_range_unbounded_max():
    assert NumericRange(min=1).check(10**12) is None


def test_range_above_max():
    violation = NumericRange(min=1, max=5).check(6)
    assert violation.params == {"min": 1, "max": 5, "value": 6}


def test_range_requires_a_bound():
    with pytest.raises(ValueError):
        NumericRange()
