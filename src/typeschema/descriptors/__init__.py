# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/descriptors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type descriptors and the annotations attached to their members.

The builders only ever see [`TypeDescriptor`][typeschema.descriptors.TypeDescriptor]
graphs; [`typeschema.descriptors.python`][typeschema.descriptors.python]
produces them from Python classes.
"""

from __future__ import annotations

from .annotations import EmailAddress, JsonName, MaxLength, MinLength, Range, Required, Url
from .model import ROOT_OBJECT, MemberDescriptor, TypeDescriptor

__all__ = [
    "ROOT_OBJECT",
    "EmailAddress",
    "JsonName",
    "MaxLength",
    "MemberDescriptor",
    "MinLength",
    "Range",
    "Required",
    "TypeDescriptor",
    "Url",
]
