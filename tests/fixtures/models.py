# topmark:header:start
#
#   project      : TypeSchema
#   file         : models.py
#   file_relpath : tests/fixtures/models.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python classes used as description targets across the test-suite.

The CLI tests import them by name (``tests.fixtures.models:Owner``), so this
module must stay importable without side effects.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Annotated, ClassVar, Generic, Optional, TypeVar

from typeschema.descriptors.annotations import (
    INT32_MIN,
    EmailAddress,
    JsonName,
    MaxLength,
    MinLength,
    Range,
    Required,
    Url,
)

T = TypeVar("T")


class Status(Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


@dataclass
class Address:
    street: Annotated[str, MinLength(2), MaxLength(255)]
    homepage: Annotated[Optional[str], Url()] = None


@dataclass
class Pet:
    name: str
    kind: Annotated[str, JsonName("species")]


@dataclass
class Owner:
    name: Annotated[str, Required(), MaxLength(255)]
    email: Annotated[str, EmailAddress()]
    age: Annotated[int, Range(18, 120)]
    status: Status
    address: Address
    tags: list[str]
    pets: dict[str, Pet]
    balance: Annotated[Optional[Decimal], Range(20.50, 300.50)] = None
    registry_id: ClassVar[str] = "owners"


@dataclass
class Person:
    name: str


@dataclass
class Employee(Person):
    salary: Annotated[float, Range(INT32_MIN, 300.5)]


class Badge:
    """Read-only view: no writable members."""

    def __init__(self, code: str) -> None:
        self._code = code

    @property
    def code(self) -> str:
        return self._code


class Account:
    """Plain class mixing annotated attributes and properties."""

    owner: str
    _secret: str

    def __init__(self, owner: str, limit: int) -> None:
        self.owner = owner
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        self._limit = value

    @property
    def display_name(self) -> str:
        return self.owner.title()


@dataclass
class TreeNode:
    label: str
    parent: Optional[TreeNode] = None
    children: list[TreeNode] = field(default_factory=lambda: [])


class Figure(abc.ABC):
    """Polymorphic base without members of its own."""


@dataclass
class Circle(Figure):
    __schema_name__ = "Round"

    radius: float


@dataclass
class Square(Figure):
    side: float


@dataclass
class Drawing:
    title: str
    figure: Figure


@dataclass
class Grid:
    cells: list[list[int]]


@dataclass
class Catalog:
    title: str
    prices: dict[str, Decimal]


@dataclass
class Envelope(Generic[T]):
    payload: T
    error: Optional[str] = None


@dataclass
class Unresolvable:
    missing: DoesNotExist  # type: ignore[name-defined]  # noqa: F821


class Billing:
    @dataclass
    class Contact:
        email: Annotated[str, EmailAddress()]


class Shipping:
    @dataclass
    class Contact:
        phone: str


class Support:
    @dataclass
    class Contact:
        hours: str


@dataclass
class Customer:
    """Three distinct types that share the name ``Contact``."""

    billing: Billing.Contact
    shipping: Shipping.Contact
    support: Support.Contact
