# topmark:header:start
#
#   project      : TypeSchema
#   file         : __init__.py
#   file_relpath : src/typeschema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema package.

TypeSchema derives data-contract schemas from type descriptions: a RAML 1.0
type library ([`typeschema.raml`][typeschema.raml]) and self-contained
JSON-Schema draft-03 documents ([`typeschema.schema`][typeschema.schema]).
Python classes are described with
[`PythonDescriptorSource`][typeschema.descriptors.python.PythonDescriptorSource];
any other type system can feed the builders with hand-made
[`TypeDescriptor`][typeschema.descriptors.model.TypeDescriptor] graphs.

```python
from typeschema import build_json_schema, build_raml_types, describe

registry, root = build_raml_types(describe(Owner))
schema = build_json_schema(describe(Owner))
```
"""

from __future__ import annotations

from typeschema.config.model import Config, MutableConfig
from typeschema.core.errors import (
    ConfigError,
    DescriptorError,
    NameExhaustedError,
    TypeschemaError,
)
from typeschema.descriptors.annotations import (
    EmailAddress,
    JsonName,
    MaxLength,
    MinLength,
    Range,
    Required,
    Url,
)
from typeschema.descriptors.model import MemberDescriptor, TypeDescriptor
from typeschema.descriptors.python import PythonDescriptorSource, describe
from typeschema.raml.builder import RamlTypeBuilder, build_raml_types
from typeschema.registry.types import TypeRegistry
from typeschema.schema.builder import JsonSchemaBuilder, build_json_schema

__all__ = [
    "Config",
    "ConfigError",
    "DescriptorError",
    "EmailAddress",
    "JsonName",
    "JsonSchemaBuilder",
    "MaxLength",
    "MemberDescriptor",
    "MinLength",
    "MutableConfig",
    "NameExhaustedError",
    "PythonDescriptorSource",
    "RamlTypeBuilder",
    "Range",
    "Required",
    "TypeDescriptor",
    "TypeRegistry",
    "TypeschemaError",
    "Url",
    "build_json_schema",
    "build_raml_types",
    "describe",
]
