# topmark:header:start
#
#   project      : TypeSchema
#   file         : serializers.py
#   file_relpath : src/typeschema/schema/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty printer for JSON-Schema trees."""

from __future__ import annotations

from typeschema.constants import JSON_SCHEMA_INDENT
from typeschema.core.serializers import serialize_json_object


def serialize_json_schema(tree: object, *, indent: int = JSON_SCHEMA_INDENT) -> str:
    """Render a schema tree as indented JSON text.

    Key order is preserved. Decimal bounds become JSON numbers.
    """
    return serialize_json_object(tree, indent=indent)
