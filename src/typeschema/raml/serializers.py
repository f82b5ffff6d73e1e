# topmark:header:start
#
#   project      : TypeSchema
#   file         : serializers.py
#   file_relpath : src/typeschema/raml/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of a populated [`TypeRegistry`][typeschema.registry.types.TypeRegistry].

Two outputs are supported:

* a RAML 1.0 library (``#%RAML 1.0 Library`` header plus a ``types:`` mapping),
  emitted with PyYAML;
* a JSON machine payload ``{"meta", "root", "types"}`` built with
  [`normalize_payload`][typeschema.core.serializers.normalize_payload].

Numeric range bounds keep their fixed two-decimal form in the RAML text
(``maximum: 300.50``) and become plain JSON numbers in the machine payload.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

import yaml

from typeschema.constants import RAML_LIBRARY_HEADER
from typeschema.core.constraints import format_decimal
from typeschema.core.serializers import build_meta_payload, serialize_json_object

if TYPE_CHECKING:
    from typeschema.registry.types import TypeRegistry


class RamlDumper(yaml.SafeDumper):
    """YAML dumper aware of `Decimal` range bounds."""


def _represent_decimal(dumper: yaml.SafeDumper, value: Decimal) -> yaml.ScalarNode:
    exponent = value.as_tuple().exponent
    tag = "tag:yaml.org,2002:float" if isinstance(exponent, int) and exponent < 0 else "tag:yaml.org,2002:int"
    return dumper.represent_scalar(tag, format_decimal(value))


RamlDumper.add_representer(Decimal, _represent_decimal)


def registry_to_dict(registry: TypeRegistry) -> dict[str, Any]:
    """Return the registry as a plain ``name -> type`` dict in insertion order.

    Range bounds stay `Decimal`.
    """
    return dict(registry.to_dict())


def serialize_raml_library(registry: TypeRegistry) -> str:
    """Render the registry as a RAML 1.0 library.

    Args:
        registry: The populated registry.

    Returns:
        The library text, ending with a newline. An empty registry renders as
        ``types: {}``.
    """
    body: str = yaml.dump(
        {"types": registry_to_dict(registry)},
        Dumper=RamlDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return f"{RAML_LIBRARY_HEADER}\n{body}"


def serialize_registry_json(registry: TypeRegistry, root: str) -> str:
    """Render the registry and its root name as a JSON machine payload."""
    payload: dict[str, object] = {
        "meta": build_meta_payload(),
        "root": root or None,
        "types": registry_to_dict(registry),
    }
    return serialize_json_object(payload)
