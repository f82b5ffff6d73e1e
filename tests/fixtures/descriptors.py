# topmark:header:start
#
#   project      : TypeSchema
#   file         : descriptors.py
#   file_relpath : tests/fixtures/descriptors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hand-written descriptor tables.

They exercise the builders without the Python descriptor source, the way a
non-Python type system would feed them.
"""

from __future__ import annotations

from typeschema.descriptors.annotations import MaxLength, Range, Required
from typeschema.descriptors.model import ROOT_OBJECT, TypeDescriptor
from typeschema.descriptors.primitives import INT32, STRING


def owner() -> TypeDescriptor:
    """``Owner { Name: string (required, <= 255), Age: int? (18..120) }``."""
    d = TypeDescriptor.object("Owner", base=ROOT_OBJECT)
    d.add_member("Name", STRING, annotations=(Required(), MaxLength(255)))
    d.add_member("Age", INT32, nullable=True, annotations=(Range(18, 120),))
    return d


def read_only() -> TypeDescriptor:
    """A type whose only member is read-only."""
    d = TypeDescriptor.object("Snapshot")
    d.add_member("Taken", STRING, writable=False)
    return d


def person_and_employee() -> tuple[TypeDescriptor, TypeDescriptor]:
    person = TypeDescriptor.object("Person")
    person.add_member("Name", STRING)
    employee = TypeDescriptor.object("Employee", base=person)
    employee.add_member("Badge", INT32)
    return person, employee


def linked_node() -> TypeDescriptor:
    """``Node { Value: int, Next: Node }``: a self-referential type."""
    node = TypeDescriptor.object("Node")
    node.add_member("Value", INT32)
    node.add_member("Next", node)
    return node
