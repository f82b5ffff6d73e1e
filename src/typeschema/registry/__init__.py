# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type registry and canonical type names."""

from __future__ import annotations

from .names import type_name
from .types import TypeRegistry

__all__ = [
    "TypeRegistry",
    "type_name",
]
