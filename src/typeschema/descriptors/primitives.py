# topmark:header:start
#
#   project      : TypeSchema
#   file         : primitives.py
#   file_relpath : src/typeschema/descriptors/primitives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in primitive type descriptors.

The primitive vocabulary is portable: names follow the common CLR/JVM style
(``Int32``, ``Double``, ``DateTime``) so generated names such as
``ListOfInt32`` are stable no matter which descriptor source produced them.
Every descriptor here is a singleton; descriptor sources must reuse them.
"""

from __future__ import annotations

from typeschema.descriptors.model import TypeDescriptor

BOOLEAN = TypeDescriptor.primitive_type("Boolean")
BYTE = TypeDescriptor.primitive_type("Byte")
INT16 = TypeDescriptor.primitive_type("Int16")
INT32 = TypeDescriptor.primitive_type("Int32")
INT64 = TypeDescriptor.primitive_type("Int64")
SINGLE = TypeDescriptor.primitive_type("Single")
DOUBLE = TypeDescriptor.primitive_type("Double")
DECIMAL = TypeDescriptor.primitive_type("Decimal")
CHAR = TypeDescriptor.primitive_type("Char")
STRING = TypeDescriptor.primitive_type("String")
DATETIME = TypeDescriptor.primitive_type("DateTime")
DATETIME_OFFSET = TypeDescriptor.primitive_type("DateTimeOffset")
GUID = TypeDescriptor.primitive_type("Guid")
URI = TypeDescriptor.primitive_type("Uri")

BUILTIN_PRIMITIVES: tuple[TypeDescriptor, ...] = (
    BOOLEAN,
    BYTE,
    INT16,
    INT32,
    INT64,
    SINGLE,
    DOUBLE,
    DECIMAL,
    CHAR,
    STRING,
    DATETIME,
    DATETIME_OFFSET,
    GUID,
    URI,
)
