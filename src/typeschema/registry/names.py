# topmark:header:start
#
#   project      : TypeSchema
#   file         : names.py
#   file_relpath : src/typeschema/registry/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical type names.

The base name of a shape is its declared name, except for:

* dictionaries: ``<ValueTypeName>Map`` (``OwnerMap``);
* arrays: ``ListOf<ElementTypeName>``, applied recursively
  (``ListOfListOfInt32``).

Result wrappers are named after their payload. Uniqueness is not handled here;
see [`TypeRegistry.reserve`][typeschema.registry.types.TypeRegistry.reserve].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeschema.constants import LIST_NAME_PREFIX, MAP_NAME_SUFFIX
from typeschema.core.shapes import unwrap

if TYPE_CHECKING:
    from typeschema.descriptors.model import TypeDescriptor


def type_name(descriptor: TypeDescriptor) -> str:
    """Return the canonical base name of ``descriptor``."""
    target: TypeDescriptor = unwrap(descriptor)
    if target.key_type is not None and target.value_type is not None:
        return type_name(target.value_type) + MAP_NAME_SUFFIX
    if target.element_type is not None:
        return LIST_NAME_PREFIX + type_name(target.element_type)
    return target.name
