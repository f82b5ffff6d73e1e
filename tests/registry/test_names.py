# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_names.py
#   file_relpath : tests/registry/test_names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for canonical type names."""

from __future__ import annotations

from tests.fixtures import descriptors
from typeschema.descriptors.model import TypeDescriptor
from typeschema.descriptors.primitives import INT32, STRING
from typeschema.registry.names import type_name


def test_plain_types_use_their_declared_name() -> None:
    assert type_name(descriptors.owner()) == "Owner"
    assert type_name(INT32) == "Int32"


def test_dictionaries_are_named_after_their_value_type() -> None:
    assert type_name(TypeDescriptor.dictionary(STRING, descriptors.owner())) == "OwnerMap"


def test_arrays_are_named_recursively() -> None:
    assert type_name(TypeDescriptor.array(descriptors.owner())) == "ListOfOwner"
    nested = TypeDescriptor.sequence(TypeDescriptor.sequence(INT32))
    assert type_name(nested) == "ListOfListOfInt32"
    assert type_name(TypeDescriptor.sequence(TypeDescriptor.dictionary(STRING, INT32))) == (
        "ListOfInt32Map"
    )


def test_wrappers_are_named_after_their_payload() -> None:
    wrapped = TypeDescriptor.wrapper("Envelope", TypeDescriptor.array(STRING))
    assert type_name(wrapped) == "ListOfString"
