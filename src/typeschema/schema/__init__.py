# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-Schema (draft-03) document synthesis."""

from __future__ import annotations

from .builder import JsonSchemaBuilder, build_json_schema
from .serializers import serialize_json_schema

__all__ = [
    "JsonSchemaBuilder",
    "build_json_schema",
    "serialize_json_schema",
]
