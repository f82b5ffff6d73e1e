# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_raml_serializers.py
#   file_relpath : tests/raml/test_raml_serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for RAML library and JSON payload rendering."""

from __future__ import annotations

import json
from typing import Any

import yaml

from tests.fixtures import descriptors
from typeschema.constants import TYPESCHEMA_VERSION
from typeschema.descriptors.annotations import Range
from typeschema.descriptors.model import TypeDescriptor
from typeschema.descriptors.primitives import DECIMAL, STRING
from typeschema.raml.builder import build_raml_types
from typeschema.raml.serializers import serialize_raml_library, serialize_registry_json
from typeschema.registry.types import TypeRegistry


def test_library_header_and_layout() -> None:
    registry, _ = build_raml_types(descriptors.owner())

    text: str = serialize_raml_library(registry)

    assert text == (
        "#%RAML 1.0 Library\n"
        "types:\n"
        "  Owner:\n"
        "    type: object\n"
        "    properties:\n"
        "      Name:\n"
        "        type: string\n"
        "        maxLength: 255\n"
        "      Age?:\n"
        "        type: integer\n"
        "        minimum: 18\n"
        "        maximum: 120\n"
    )


def test_decimal_bounds_keep_two_decimals() -> None:
    price = TypeDescriptor.object("Price")
    price.add_member("Amount", DECIMAL, annotations=(Range(20.5, 300.5),))
    registry, _ = build_raml_types(price)

    text: str = serialize_raml_library(registry)

    assert "minimum: 20.50\n" in text
    assert "maximum: 300.50\n" in text
    loaded: Any = yaml.safe_load(text)
    assert loaded["types"]["Price"]["properties"]["Amount"] == {
        "type": "number",
        "minimum": 20.5,
        "maximum": 300.5,
    }


def test_map_property_key_round_trips() -> None:
    registry, _ = build_raml_types(TypeDescriptor.dictionary(STRING, descriptors.owner()))

    loaded: Any = yaml.safe_load(serialize_raml_library(registry))

    assert list(loaded["types"]) == ["Owner", "OwnerMap"]
    assert loaded["types"]["OwnerMap"] == {
        "type": "object",
        "properties": {"[]": {"type": "Owner"}},
    }


def test_empty_registry() -> None:
    assert serialize_raml_library(TypeRegistry()) == "#%RAML 1.0 Library\ntypes: {}\n"


def test_json_payload() -> None:
    registry, root = build_raml_types(descriptors.owner())

    payload: Any = json.loads(serialize_registry_json(registry, root))

    assert payload["meta"] == {"tool": "typeschema", "version": TYPESCHEMA_VERSION}
    assert payload["root"] == "Owner"
    assert payload["types"]["Owner"]["properties"]["Age?"] == {
        "type": "integer",
        "minimum": 18,
        "maximum": 120,
    }


def test_json_payload_without_root() -> None:
    payload: Any = json.loads(serialize_registry_json(TypeRegistry(), ""))
    assert payload["root"] is None
    assert payload["types"] == {}
