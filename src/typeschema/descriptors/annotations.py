# topmark:header:start
#
#   project      : TypeSchema
#   file         : annotations.py
#   file_relpath : src/typeschema/descriptors/annotations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation annotations attached to type members.

These are the recognized annotation kinds. Each is a small frozen dataclass
carrying its semantic payload; the constraint extractor
([`typeschema.core.constraints`][typeschema.core.constraints]) maps them onto
schema constraints.

With the Python descriptor source they are attached through
``typing.Annotated``:

```python
from typing import Annotated

from typeschema.descriptors.annotations import MaxLength, Range, Required


@dataclass
class Person:
    name: Annotated[str, Required(), MaxLength(255)]
    age: Annotated[int, Range(18, 120)]
```

Any other object found in the annotation list is ignored.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final, Union

# Sentinels standing for "unbounded" range ends.
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
DOUBLE_MIN: Final[float] = -sys.float_info.max
DOUBLE_MAX: Final[float] = sys.float_info.max

Number = Union[int, float]


@dataclass(frozen=True)
class MaxLength:
    """Maximum string/collection length."""

    length: int


@dataclass(frozen=True)
class MinLength:
    """Minimum string/collection length."""

    length: int


@dataclass(frozen=True)
class Range:
    """Inclusive numeric range.

    A bound equal to the theoretical minimum/maximum of its numeric type
    (see the module-level sentinels) or ``None`` means "unbounded".
    """

    minimum: Number | None = None
    maximum: Number | None = None


@dataclass(frozen=True)
class Required:
    """The member must be present."""


@dataclass(frozen=True)
class EmailAddress:
    """The member holds an e-mail address."""


@dataclass(frozen=True)
class Url:
    """The member holds an absolute ftp/http/https URL."""


@dataclass(frozen=True)
class JsonName:
    """Serialized name of a member, used instead of its declared name."""

    name: str


#: Annotation kinds understood by the constraint extractor.
VALIDATION_ANNOTATIONS: Final[tuple[type, ...]] = (
    MaxLength,
    MinLength,
    Range,
    Required,
    EmailAddress,
    Url,
)


def is_annotation(obj: object) -> bool:
    """Return True if ``obj`` is one of the recognized annotation kinds."""
    return isinstance(obj, (*VALIDATION_ANNOTATIONS, JsonName))
