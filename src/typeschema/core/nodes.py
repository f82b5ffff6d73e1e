# topmark:header:start
#
#   project      : TypeSchema
#   file         : nodes.py
#   file_relpath : src/typeschema/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema nodes: the in-memory form of one shape before serialization.

Node kinds:

* [`ScalarNode`][typeschema.core.nodes.ScalarNode] - a keyword plus constraints;
  enumerations are string scalars with allowed values.
* [`ArrayNode`][typeschema.core.nodes.ArrayNode] - an item reference or inline item node.
* [`MapNode`][typeschema.core.nodes.MapNode] - an object with the single synthetic
  property ``"[]"`` referencing the value type.
* [`ObjectNode`][typeschema.core.nodes.ObjectNode] - optional parent reference plus
  ordered properties.

A property is either an inline node or a
[`TypeRef`][typeschema.core.nodes.TypeRef] naming a registered node (or a
primitive keyword).

Every node exposes ``to_dict()``, the RAML-shaped mapping picked up by
[`normalize_payload`][typeschema.core.serializers.normalize_payload].
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union

from typeschema.constants import MAP_PROPERTY_KEY
from typeschema.core.constraints import Constraints


@dataclass(frozen=True)
class TypeRef:
    """Reference to a registered type name or a primitive keyword.

    Attributes:
        type: Registered name, or scalar keyword for primitive items.
        name: Declared name of the referenced element type, echoed for array items.
    """

    type: str
    name: str | None = None

    def referenced_names(self) -> Iterator[str]:
        yield self.type

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {"type": self.type}
        if self.name is not None:
            result["name"] = self.name
        return result


@dataclass(frozen=True)
class ScalarNode:
    """Scalar with an optional list of allowed values and constraints."""

    keyword: str
    enum: tuple[str, ...] | None = None
    constraints: Constraints = field(default_factory=Constraints)

    def referenced_names(self) -> Iterator[str]:
        yield from ()

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {"type": self.keyword}
        if self.enum is not None:
            result["enum"] = list(self.enum)
        result.update(self.constraints.to_dict())
        return result


@dataclass(frozen=True)
class ArrayNode:
    """Array whose items are a reference or an inline (nested array) node."""

    items: PropertyRef

    def referenced_names(self) -> Iterator[str]:
        yield from self.items.referenced_names()

    def to_dict(self) -> dict[str, object]:
        return {"type": "array", "items": self.items.to_dict()}


@dataclass(frozen=True)
class MapNode:
    """Dictionary shape: an object with one synthetic ``"[]"`` property."""

    value: TypeRef

    @property
    def properties(self) -> Mapping[str, PropertyRef]:
        return {MAP_PROPERTY_KEY: self.value}

    def referenced_names(self) -> Iterator[str]:
        yield from self.value.referenced_names()

    def to_dict(self) -> dict[str, object]:
        return {
            "type": "object",
            "properties": {MAP_PROPERTY_KEY: self.value.to_dict()},
        }


@dataclass(frozen=True)
class ObjectNode:
    """Object with an optional parent type reference and ordered properties.

    Attributes:
        parent: Registered name of the base type, if any.
        properties: Property name (``?``-suffixed when optional) to property.
    """

    parent: str | None = None
    properties: Mapping[str, PropertyRef] = field(default_factory=dict)

    def referenced_names(self) -> Iterator[str]:
        if self.parent is not None:
            yield self.parent
        for prop in self.properties.values():
            yield from prop.referenced_names()

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {"type": self.parent or "object"}
        if self.properties:
            result["properties"] = {k: v.to_dict() for k, v in self.properties.items()}
        return result


SchemaNode = Union[ScalarNode, ArrayNode, MapNode, ObjectNode]
PropertyRef = Union[ScalarNode, ArrayNode, MapNode, ObjectNode, TypeRef]
