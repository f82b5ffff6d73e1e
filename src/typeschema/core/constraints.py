# topmark:header:start
#
#   project      : TypeSchema
#   file         : constraints.py
#   file_relpath : src/typeschema/core/constraints.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Constraint extractor.

Maps the validation annotations of a member onto a
[`Constraints`][typeschema.core.constraints.Constraints] set:

| Annotation        | Constraint                                  |
|-------------------|---------------------------------------------|
| `MaxLength(n)`    | `maxLength = n`                             |
| `MinLength(n)`    | `minLength = n`                             |
| `Range(lo, hi)`   | `minimum = lo`, `maximum = hi` (sentinels omitted) |
| `Required()`      | `required = True`                           |
| `EmailAddress()`  | `pattern = <email pattern>`                 |
| `Url()`           | `pattern = <url pattern>`                   |

Range bounds equal to the theoretical minimum/maximum of their numeric type
(``Int32``, ``Int64`` or ``Double``), infinities and ``None`` mean "unbounded"
and produce no constraint. Bounds are kept as `Decimal`: integer bounds
exactly, floating-point bounds with two fixed decimals, so rendering never
depends on the host locale or on binary float noise.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Context, Decimal
from typing import TYPE_CHECKING, Final

from typeschema.constants import EMAIL_PATTERN, URL_PATTERN
from typeschema.descriptors.annotations import (
    DOUBLE_MAX,
    DOUBLE_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    EmailAddress,
    MaxLength,
    MinLength,
    Range,
    Required,
    Url,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typeschema.descriptors.annotations import Number

_TWO_PLACES: Final[Decimal] = Decimal("0.01")
# Wide enough to quantize any finite double to two decimals.
_BOUND_CONTEXT: Final[Context] = Context(prec=sys.float_info.max_10_exp + 3)


@dataclass(frozen=True)
class PatternSet:
    """Regular expressions emitted for the pattern annotations."""

    email: str = EMAIL_PATTERN
    url: str = URL_PATTERN


DEFAULT_PATTERNS: Final[PatternSet] = PatternSet()


@dataclass(frozen=True)
class Constraints:
    """Validation constraints of one scalar member.

    Attributes:
        minimum: Inclusive numeric lower bound.
        maximum: Inclusive numeric upper bound.
        min_length: Minimum length.
        max_length: Maximum length.
        pattern: Regular expression the value must match.
        required: True if an explicit `Required` annotation is attached.
        nullable: True if the member is a nullable value type.
    """

    minimum: Decimal | None = None
    maximum: Decimal | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    required: bool = False
    nullable: bool = False

    @property
    def required_flag(self) -> bool | None:
        """Tri-state ``required`` flag of the JSON-Schema output.

        True for an explicit `Required`, False for a nullable member without
        it, None (omitted) otherwise.
        """
        if self.required:
            return True
        if self.nullable:
            return False
        return None

    @property
    def optional(self) -> bool:
        """True if the RAML property name gets the optional ``?`` suffix."""
        return self.nullable and not self.required

    def validation_items(self) -> list[tuple[str, object]]:
        """Return the set validation keywords in canonical order (no ``required``)."""
        items: list[tuple[str, object]] = []
        if self.max_length is not None:
            items.append(("maxLength", self.max_length))
        if self.min_length is not None:
            items.append(("minLength", self.min_length))
        if self.minimum is not None:
            items.append(("minimum", self.minimum))
        if self.maximum is not None:
            items.append(("maximum", self.maximum))
        if self.pattern is not None:
            items.append(("pattern", self.pattern))
        return items

    def to_dict(self) -> dict[str, object]:
        """Return the set constraints keyed by their schema keyword."""
        return dict(self.validation_items())


def is_unbounded_min(value: Number | None) -> bool:
    """True if ``value`` stands for "no lower bound"."""
    if value is None:
        return True
    if isinstance(value, int) and not isinstance(value, bool):
        return value in (INT32_MIN, INT64_MIN)
    return math.isnan(value) or (math.isinf(value) and value < 0) or abs(DOUBLE_MIN - value) < 1


def is_unbounded_max(value: Number | None) -> bool:
    """True if ``value`` stands for "no upper bound"."""
    if value is None:
        return True
    if isinstance(value, int) and not isinstance(value, bool):
        return value in (INT32_MAX, INT64_MAX)
    return math.isnan(value) or (math.isinf(value) and value > 0) or abs(DOUBLE_MAX - value) < 1


def to_decimal(value: Number) -> Decimal:
    """Convert a range bound to a fixed-precision `Decimal`.

    Integers convert exactly; floats are rounded to two decimals.
    """
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(repr(float(value))).quantize(_TWO_PLACES, context=_BOUND_CONTEXT)


def format_decimal(value: Decimal) -> str:
    """Render a bound with locale-invariant formatting (``18``, ``20.50``)."""
    return format(value, "f")


def extract_constraints(
    annotations: Iterable[object],
    *,
    nullable: bool = False,
    patterns: PatternSet = DEFAULT_PATTERNS,
) -> Constraints:
    """Build the constraint set of a member from its annotations.

    Args:
        annotations: Annotations attached to the member; unknown objects are ignored.
        nullable: Whether the member's declared type is a nullable value type.
        patterns: Regular expressions used for `EmailAddress` and `Url`.

    Returns:
        The extracted constraints. Later annotations of the same kind win.
    """
    values: dict[str, object] = {}
    for annotation in annotations:
        if isinstance(annotation, MaxLength):
            values["max_length"] = annotation.length
        elif isinstance(annotation, MinLength):
            values["min_length"] = annotation.length
        elif isinstance(annotation, Range):
            if not is_unbounded_min(annotation.minimum):
                assert annotation.minimum is not None
                values["minimum"] = to_decimal(annotation.minimum)
            if not is_unbounded_max(annotation.maximum):
                assert annotation.maximum is not None
                values["maximum"] = to_decimal(annotation.maximum)
        elif isinstance(annotation, Required):
            values["required"] = True
        elif isinstance(annotation, EmailAddress):
            values["pattern"] = patterns.email
        elif isinstance(annotation, Url):
            values["pattern"] = patterns.url
    return Constraints(nullable=nullable, **values)  # type: ignore[arg-type]
