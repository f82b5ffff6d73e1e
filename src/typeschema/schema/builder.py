# topmark:header:start
#
#   project      : TypeSchema
#   file         : builder.py
#   file_relpath : src/typeschema/schema/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-Schema (draft-03) document builder.

[`JsonSchemaBuilder.get`][typeschema.schema.builder.JsonSchemaBuilder.get]
renders one self-contained document for a root type:

* an object root becomes ``{"$schema", "type": "object", "id", "properties"}``;
* an array root becomes ``{"$schema", "type": "array", "items": {...}}``;
* a root without writable members (or a dictionary root) has no document.

Nested object members are inlined once per document with an ``id`` and the
member's validation keywords; later occurrences (including cycles) become
``{"$ref": "<name>"}``. A member whose type has no writable members is
replaced by a ``oneOf`` over the known subclasses of that type, each listed
under ``definitions``. Dictionary members are dropped.

Each call to `get`/`build` starts with an empty emitted set and an empty
``definitions`` table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typeschema.config.logging import get_logger
from typeschema.constants import JSON_SCHEMA_DRAFT_03, JSON_SCHEMA_INDENT
from typeschema.core.constraints import DEFAULT_PATTERNS, extract_constraints
from typeschema.core.primitives import DEFAULT_MAPPER
from typeschema.core.shapes import unwrap
from typeschema.schema.serializers import serialize_json_schema

if TYPE_CHECKING:
    from typeschema.config.logging import TypeschemaLogger
    from typeschema.config.model import Config
    from typeschema.core.constraints import PatternSet
    from typeschema.core.primitives import PrimitiveMapper
    from typeschema.descriptors.model import MemberDescriptor, TypeDescriptor

logger: TypeschemaLogger = get_logger(__name__)

JsonObject = dict[str, Any]

# Marks a member whose type has no writable members of its own.
_NO_SHAPE: Any = object()


class JsonSchemaBuilder:
    """Render JSON-Schema documents for type descriptors.

    Args:
        mapper: Primitive keyword lookup.
        patterns: Regular expressions for the pattern annotations.
        schema_uri: Value of the root ``$schema`` keyword.
        indent: Indentation width of the rendered document.
    """

    def __init__(
        self,
        *,
        mapper: PrimitiveMapper = DEFAULT_MAPPER,
        patterns: PatternSet = DEFAULT_PATTERNS,
        schema_uri: str = JSON_SCHEMA_DRAFT_03,
        indent: int = JSON_SCHEMA_INDENT,
    ) -> None:
        self.mapper = mapper
        self.patterns = patterns
        self.schema_uri = schema_uri
        self.indent = indent
        self._emitted: dict[int, TypeDescriptor] = {}
        self._definitions: dict[str, TypeDescriptor] = {}

    @classmethod
    def from_config(cls, config: Config) -> JsonSchemaBuilder:
        return cls(
            mapper=config.primitive_mapper(),
            patterns=config.pattern_set(),
            schema_uri=config.schema_uri,
            indent=config.schema_indent,
        )

    def get(self, descriptor: TypeDescriptor) -> str | None:
        """Return the pretty-printed schema of ``descriptor``.

        Returns:
            The JSON text, or None when the root type has no writable members
            (or is a dictionary).
        """
        tree: JsonObject | None = self.build(descriptor)
        if tree is None:
            return None
        return serialize_json_schema(tree, indent=self.indent)

    def build(self, descriptor: TypeDescriptor) -> JsonObject | None:
        """Return the schema of ``descriptor`` as a plain dict (see `get`)."""
        self._emitted = {}
        self._definitions = {}

        root: TypeDescriptor = unwrap(descriptor)
        schema: JsonObject
        if root.is_dictionary:
            logger.debug("No JSON schema for dictionary root %s", root.name)
            return None

        if root.is_array:
            assert root.element_type is not None
            element: TypeDescriptor = unwrap(root.element_type)
            if not element.writable_members:
                logger.debug("No JSON schema for %s: element has no writable members", root.name)
                return None
            self._mark(element)
            schema = {
                "$schema": self.schema_uri,
                "type": "array",
                "items": {
                    "type": "object",
                    "id": element.name,
                    "properties": self._properties(element),
                },
            }
        else:
            if not root.writable_members:
                logger.debug("No JSON schema for %s: no writable members", root.name)
                return None
            self._mark(root)
            schema = {
                "$schema": self.schema_uri,
                "type": "object",
                "id": root.name,
                "properties": self._properties(root),
            }

        definitions: JsonObject = self._build_definitions()
        if definitions:
            schema["definitions"] = definitions
        return schema

    # --- bookkeeping ---

    def _mark(self, descriptor: TypeDescriptor) -> None:
        self._emitted[id(descriptor)] = descriptor

    def _is_emitted(self, descriptor: TypeDescriptor) -> bool:
        return id(descriptor) in self._emitted

    def _build_definitions(self) -> JsonObject:
        # Rendering a definition may register further subclasses: loop until stable.
        built: JsonObject = {}
        while len(built) < len(self._definitions):
            for name, subclass in list(self._definitions.items()):
                if name in built:
                    continue
                built[name] = {
                    "type": "object",
                    "properties": self._properties(subclass),
                }
        return built

    # --- members ---

    def _properties(self, owner: TypeDescriptor) -> JsonObject:
        properties: JsonObject = {}
        for member in owner.writable_members:
            schema: JsonObject | None = self._property(member)
            if schema is None:
                logger.trace("Dropping member %s.%s from JSON schema", owner.name, member.name)
                continue
            properties[member.serialized_name] = schema
        return properties

    def _property(self, member: MemberDescriptor) -> JsonObject | None:
        member_type: TypeDescriptor = unwrap(member.type)

        if member_type.is_enum:
            return self._scalar(member, None, enum=member_type.enum_names)

        keyword: str | None = self.mapper.keyword(member_type)
        if keyword is not None:
            return self._scalar(member, keyword)

        nested: Any = self._nested(member_type, member)
        if nested is _NO_SHAPE:
            return self._one_of(member_type)
        return nested

    def _scalar(
        self,
        member: MemberDescriptor,
        keyword: str | None,
        *,
        enum: tuple[str, ...] | None = None,
    ) -> JsonObject:
        constraints = extract_constraints(
            member.annotations,
            nullable=member.nullable,
            patterns=self.patterns,
        )
        schema: JsonObject = {}
        if keyword is not None:
            schema["type"] = keyword
        if enum is not None:
            schema["enum"] = list(enum)
        if constraints.required_flag is not None:
            schema["required"] = constraints.required_flag
        schema.update(constraints.validation_items())
        return schema

    def _nested(self, member_type: TypeDescriptor, member: MemberDescriptor) -> Any:
        """Return the nested schema, None to drop the member, or `_NO_SHAPE`."""
        if member_type.is_dictionary:
            return None
        if member_type.is_array:
            return self._nested_array(member_type)
        if not member_type.writable_members:
            return _NO_SHAPE

        if self._is_emitted(member_type):
            return {"$ref": member_type.name}
        self._mark(member_type)
        schema: JsonObject = {"type": "object"}
        if member.is_required:
            schema["required"] = True
        constraints = extract_constraints(member.annotations, patterns=self.patterns)
        schema.update(constraints.validation_items())
        schema["id"] = member_type.name
        schema["properties"] = self._properties(member_type)
        return schema

    def _nested_array(self, array_type: TypeDescriptor) -> Any:
        assert array_type.element_type is not None
        element: TypeDescriptor = unwrap(array_type.element_type)

        if element.is_enum:
            return {"type": "array", "items": {"type": "string", "enum": list(element.enum_names or ())}}
        keyword: str | None = self.mapper.keyword(element)
        if keyword is not None:
            return {"type": "array", "items": {"type": keyword}}
        if element.is_dictionary or element.is_array or not element.writable_members:
            return _NO_SHAPE

        items: JsonObject
        if self._is_emitted(element):
            items = {"$ref": element.name}
        else:
            self._mark(element)
            items = {
                "type": "object",
                "id": element.name,
                "properties": self._properties(element),
            }
        return {"type": "array", "items": items}

    def _one_of(self, member_type: TypeDescriptor) -> JsonObject | None:
        subclasses: tuple[TypeDescriptor, ...] = member_type.known_subclasses()
        if not subclasses:
            logger.trace("Dropping member of type %s: no members and no subclasses",
                         member_type.name)
            return None

        refs: list[JsonObject] = []
        seen: set[str] = set()
        for subclass in subclasses:
            name: str = subclass.resolved_name
            if name in seen:
                continue
            seen.add(name)
            refs.append({"$ref": f"#/definitions/{name}"})
            self._definitions.setdefault(name, subclass)
        return {"type": "object", "oneOf": refs}


def build_json_schema(
    descriptor: TypeDescriptor,
    *,
    config: Config | None = None,
) -> str | None:
    """Render the JSON schema of ``descriptor`` with a fresh builder."""
    builder = JsonSchemaBuilder.from_config(config) if config is not None else JsonSchemaBuilder()
    return builder.get(descriptor)
