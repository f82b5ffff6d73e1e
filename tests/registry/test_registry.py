# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_registry.py
#   file_relpath : tests/registry/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit and property tests for the type registry."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typeschema.core.errors import NameExhaustedError
from typeschema.core.nodes import ObjectNode, ScalarNode, TypeRef
from typeschema.descriptors.model import TypeDescriptor
from typeschema.registry.types import TypeRegistry


def test_colliding_base_names_get_integer_suffixes() -> None:
    registry = TypeRegistry()
    first, second, third = (TypeDescriptor.object("Foo") for _ in range(3))

    assert registry.reserve(first) == "Foo"
    assert registry.reserve(second) == "Foo0"
    assert registry.reserve(third) == "Foo1"


def test_reserving_twice_returns_the_same_name() -> None:
    registry = TypeRegistry()
    foo = TypeDescriptor.object("Foo")
    assert registry.reserve(foo) == registry.reserve(foo) == "Foo"
    assert registry.name_of(foo) == "Foo"
    assert registry.is_taken("Foo")


def test_reserved_names_are_not_yet_registered() -> None:
    registry = TypeRegistry()
    registry.reserve(TypeDescriptor.object("Foo"))
    assert len(registry) == 0
    assert "Foo" not in registry


def test_insert_keeps_the_first_node() -> None:
    registry = TypeRegistry()
    foo = TypeDescriptor.object("Foo")
    first = ScalarNode("string")

    assert registry.insert(foo, first) == "Foo"
    assert registry.insert(foo, ScalarNode("integer")) == "Foo"
    assert registry["Foo"] is first
    assert registry.names() == ("Foo",)


def test_name_exhaustion_is_fatal() -> None:
    registry = TypeRegistry(max_name_attempts=2)
    for _ in range(3):
        registry.reserve(TypeDescriptor.object("Foo"))

    with pytest.raises(NameExhaustedError) as exc_info:
        registry.reserve(TypeDescriptor.object("Foo"))
    assert exc_info.value.base_name == "Foo"
    assert exc_info.value.attempts == 2


def test_unresolved_references() -> None:
    registry = TypeRegistry()
    registry.insert(
        TypeDescriptor.object("Owner"),
        ObjectNode(properties={"Pet": TypeRef("Pet"), "Name": ScalarNode("string")}),
    )
    assert registry.unresolved_references() == ["Pet"]

    registry.insert(TypeDescriptor.object("Pet"), ObjectNode(properties={"Id": TypeRef("integer")}))
    assert registry.unresolved_references(keywords=["integer"]) == []


def test_views_are_read_only_and_ordered() -> None:
    registry = TypeRegistry()
    for name in ("B", "A", "C"):
        registry.insert(TypeDescriptor.object(name), ScalarNode("string"))
    assert list(registry) == ["B", "A", "C"]
    with pytest.raises(TypeError):
        registry.as_mapping()["D"] = ScalarNode("string")  # type: ignore[index]
    assert registry.to_dict() == {name: {"type": "string"} for name in ("B", "A", "C")}


@given(st.lists(st.sampled_from(["Foo", "Foo0", "Bar", "Foo1"]), max_size=40))
def test_every_distinct_type_gets_a_unique_name(declared: list[str]) -> None:
    registry = TypeRegistry()
    types = [TypeDescriptor.object(name) for name in declared]

    names: list[str] = [registry.reserve(t) for t in types]

    assert len(set(names)) == len(types)
    for t, name in zip(types, names):
        assert name.startswith(t.name)
        assert registry.name_of(t) == name
