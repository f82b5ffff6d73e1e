# topmark:header:start
#
#   project      : TypeSchema
#   file         : serializers.py
#   file_relpath : src/typeschema/core/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure payload normalization and JSON serialization utilities.

This module converts already-built output objects (schema nodes, registries,
plain dicts) into JSON-serializable structures and strings.

It is intentionally:
- Console-free (no printing)
- Click-free
- side-effect-free (serialization only)

Conventions:
- `json.dumps()` does not append a trailing newline.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, TypedDict, cast

from typeschema.constants import JSON_SCHEMA_INDENT, TYPESCHEMA_VERSION


class MetaPayload(TypedDict):
    """Metadata describing the TypeSchema runtime for machine output."""

    tool: str
    version: str


def build_meta_payload() -> MetaPayload:
    """Build a small metadata payload with tool name and version."""
    return {"tool": "typeschema", "version": TYPESCHEMA_VERSION}


def decimal_to_number(value: Decimal) -> int | float:
    """Return ``value`` as an int when it is integral, else as a float."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions:
      - `Path` -> `str`
      - `Enum` -> `Enum.value`
      - `Decimal` -> `int` (integral) or `float`
      - object with callable `.to_dict()` -> normalize(`.to_dict()`)
      - `Mapping` -> `dict[str, normalized value]`
      - `list/tuple/set/frozenset` -> `list[normalized item]`

    Notes:
      - Payload objects should implement `to_dict()` if they want custom
        serialization; dataclasses are not converted implicitly.
      - Mapping keys are stringified to keep JSON object keys valid.

    Args:
        obj: The payload object to normalize.

    Returns:
        A JSON-serializable representation of `obj`.
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, Decimal):
        return decimal_to_number(obj)

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj


def serialize_json_object(obj: object, *, indent: int = JSON_SCHEMA_INDENT) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline).

    Args:
        obj: The object to serialize.
        indent: Indentation width.

    Returns:
        A pretty-printed JSON string (no trailing newline).
    """
    normalized: object = normalize_payload(obj)
    return json.dumps(normalized, indent=indent, ensure_ascii=False)
