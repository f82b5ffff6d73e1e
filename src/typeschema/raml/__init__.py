# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/raml/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RAML 1.0 type synthesis and library rendering."""

from __future__ import annotations

from .builder import RamlTypeBuilder, build_raml_types
from .serializers import registry_to_dict, serialize_raml_library, serialize_registry_json

__all__ = [
    "RamlTypeBuilder",
    "build_raml_types",
    "registry_to_dict",
    "serialize_raml_library",
    "serialize_registry_json",
]
