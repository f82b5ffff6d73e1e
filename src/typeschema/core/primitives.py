# topmark:header:start
#
#   project      : TypeSchema
#   file         : primitives.py
#   file_relpath : src/typeschema/core/primitives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Primitive mapper: host primitive type -> schema scalar keyword.

A pure lookup table keyed by primitive descriptor name. Only descriptors
flagged as primitive are looked up, so an object type that happens to be named
``String`` is never mistaken for a scalar.

The table can be extended or overridden from configuration
(``[primitives]`` section).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

    from typeschema.descriptors.model import TypeDescriptor

DEFAULT_KEYWORDS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Boolean": "boolean",
        "Byte": "integer",
        "Int16": "integer",
        "Int32": "integer",
        "Int64": "integer",
        "Single": "number",
        "Double": "number",
        "Decimal": "number",
        "Char": "string",
        "String": "string",
        "DateTime": "date-time",
        "DateTimeOffset": "date-time",
        "Guid": "string",
        "Uri": "string",
    }
)


class PrimitiveMapper:
    """Fixed lookup from primitive descriptors to schema keywords."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        table: dict[str, str] = dict(DEFAULT_KEYWORDS)
        if overrides:
            table.update(overrides)
        self._table: Mapping[str, str] = MappingProxyType(table)

    def keyword(self, descriptor: TypeDescriptor) -> str | None:
        """Return the scalar keyword of ``descriptor``, or None if it is not a mapped primitive."""
        if not descriptor.primitive:
            return None
        return self._table.get(descriptor.name)

    def as_mapping(self) -> Mapping[str, str]:
        """Return a read-only view of the lookup table."""
        return self._table


DEFAULT_MAPPER: Final[PrimitiveMapper] = PrimitiveMapper()
