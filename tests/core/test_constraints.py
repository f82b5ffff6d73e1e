# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_constraints.py
#   file_relpath : tests/core/test_constraints.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit and property tests for the constraint extractor."""

from __future__ import annotations

import sys
from decimal import Decimal

from hypothesis import given
from hypothesis import strategies as st

from tests.conftest import parametrize
from typeschema.constants import EMAIL_PATTERN, URL_PATTERN
from typeschema.core.constraints import (
    PatternSet,
    extract_constraints,
    format_decimal,
    to_decimal,
)
from typeschema.descriptors.annotations import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    EmailAddress,
    JsonName,
    MaxLength,
    MinLength,
    Range,
    Required,
    Url,
)


def test_integer_range() -> None:
    c = extract_constraints([Range(18, 120)])
    assert c.minimum == Decimal(18)
    assert c.maximum == Decimal(120)
    assert format_decimal(c.minimum) == "18"


def test_float_range_uses_two_fixed_decimals() -> None:
    c = extract_constraints([Range(20.50, 300.5)])
    assert c.minimum is not None and c.maximum is not None
    assert format_decimal(c.minimum) == "20.50"
    assert format_decimal(c.maximum) == "300.50"


@parametrize(
    "annotation, expected_min, expected_max",
    [
        (Range(INT32_MIN, 10), None, Decimal(10)),
        (Range(INT64_MIN, INT64_MAX), None, None),
        (Range(0, INT32_MAX), Decimal(0), None),
        (Range(-sys.float_info.max, 1.5), None, Decimal("1.50")),
        (Range(float("-inf"), float("inf")), None, None),
        (Range(None, 5), None, Decimal(5)),
    ],
)
def test_sentinel_bounds_are_omitted(
    annotation: Range,
    expected_min: Decimal | None,
    expected_max: Decimal | None,
) -> None:
    c = extract_constraints([annotation])
    assert c.minimum == expected_min
    assert c.maximum == expected_max


def test_length_and_patterns() -> None:
    c = extract_constraints([MinLength(2), MaxLength(255), EmailAddress()])
    assert c.validation_items() == [
        ("maxLength", 255),
        ("minLength", 2),
        ("pattern", EMAIL_PATTERN),
    ]
    assert extract_constraints([Url()]).pattern == URL_PATTERN


def test_custom_patterns() -> None:
    patterns = PatternSet(email=".+@.+", url="^https://")
    assert extract_constraints([EmailAddress()], patterns=patterns).pattern == ".+@.+"
    assert extract_constraints([Url()], patterns=patterns).pattern == "^https://"


def test_later_annotation_of_same_kind_wins() -> None:
    assert extract_constraints([MaxLength(10), MaxLength(20)]).max_length == 20


def test_unknown_annotations_are_ignored() -> None:
    c = extract_constraints([JsonName("x"), "doc string", 42])
    assert c.to_dict() == {}
    assert c.required_flag is None


@parametrize(
    "annotations, nullable, flag, optional",
    [
        ([], False, None, False),
        ([], True, False, True),
        ([Required()], False, True, False),
        ([Required()], True, True, False),
    ],
)
def test_required_flag_and_optional_suffix(
    annotations: list[object],
    nullable: bool,
    flag: bool | None,
    optional: bool,
) -> None:
    c = extract_constraints(annotations, nullable=nullable)
    assert c.required_flag is flag
    assert c.optional is optional


@given(
    lo=st.integers(min_value=INT32_MIN + 1, max_value=INT32_MAX - 1),
    hi=st.integers(min_value=INT32_MIN + 1, max_value=INT32_MAX - 1),
)
def test_non_sentinel_integer_bounds_are_kept_exactly(lo: int, hi: int) -> None:
    c = extract_constraints([Range(lo, hi)])
    assert c.minimum == Decimal(lo)
    assert c.maximum == Decimal(hi)
    assert format_decimal(Decimal(lo)) == str(lo)


@given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e300, max_value=1e300))
def test_float_bounds_always_have_two_decimals(value: float) -> None:
    rendered: str = format_decimal(to_decimal(value))
    assert rendered.rsplit(".", 1)[1].isdigit()
    assert len(rendered.rsplit(".", 1)[1]) == 2
