# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_serializers.py
#   file_relpath : tests/core/test_serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for payload normalization and JSON serialization."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from typeschema.constants import TYPESCHEMA_VERSION
from typeschema.core.constraints import Constraints
from typeschema.core.formats import TypesFormat
from typeschema.core.nodes import ScalarNode
from typeschema.core.serializers import build_meta_payload, normalize_payload, serialize_json_object


def test_normalize_payload_conversions() -> None:
    node = ScalarNode("number", constraints=Constraints(minimum=Decimal(18), maximum=Decimal("20.50")))
    payload = {
        "path": Path("a") / "b.toml",
        "format": TypesFormat.RAML,
        "node": node,
        "items": (1, 2),
    }
    assert normalize_payload(payload) == {
        "path": str(Path("a") / "b.toml"),
        "format": "raml",
        "node": {"type": "number", "minimum": 18, "maximum": 20.5},
        "items": [1, 2],
    }


def test_serialize_json_object_has_no_trailing_newline() -> None:
    text: str = serialize_json_object({"a": [1]}, indent=4)
    assert not text.endswith("\n")
    assert text == '{\n    "a": [\n        1\n    ]\n}'


def test_meta_payload() -> None:
    meta = build_meta_payload()
    assert meta == {"tool": "typeschema", "version": TYPESCHEMA_VERSION}
    assert json.loads(serialize_json_object(meta))["tool"] == "typeschema"
