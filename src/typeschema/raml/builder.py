# topmark:header:start
#
#   project      : TypeSchema
#   file         : builder.py
#   file_relpath : src/typeschema/raml/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RAML type builder.

Populates a [`TypeRegistry`][typeschema.registry.types.TypeRegistry] with one
named schema node per distinct shape reachable from the types passed to
[`RamlTypeBuilder.add`][typeschema.raml.builder.RamlTypeBuilder.add].

Shapes:
    * arrays (one or two levels) become `ArrayNode`s whose items name the
      element type (registered) or carry its scalar keyword;
    * dictionaries become `MapNode`s with a single ``"[]"`` property;
    * enums become string `ScalarNode`s listing the allowed values;
    * objects become `ObjectNode`s; a non-trivial base type is registered first
      (even without writable members of its own) and referenced as the parent.

Members:
    Enums, primitives (with constraints), arrays and dictionaries are inlined;
    any other member type is registered on its own and referenced by name.
    Members whose type has no representable shape are silently dropped. A
    nullable member without `Required` gets the optional ``?`` name suffix.

A builder instance is one synthesis run: it owns the visited set, and every
`add` on it shares the same registry, so a type submitted twice keeps its
first name. Use [`build_raml_types`][typeschema.raml.builder.build_raml_types]
for a fresh, single-root run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typeschema.config.logging import get_logger
from typeschema.constants import OPTIONAL_PROPERTY_SUFFIX
from typeschema.core.constraints import DEFAULT_PATTERNS, extract_constraints
from typeschema.core.nodes import ArrayNode, MapNode, ObjectNode, ScalarNode, TypeRef
from typeschema.core.primitives import DEFAULT_MAPPER
from typeschema.core.shapes import Classification, Shape, classify, unwrap
from typeschema.registry.names import type_name
from typeschema.registry.types import TypeRegistry

if TYPE_CHECKING:
    from typeschema.config.logging import TypeschemaLogger
    from typeschema.config.model import Config
    from typeschema.core.constraints import Constraints, PatternSet
    from typeschema.core.nodes import PropertyRef, SchemaNode
    from typeschema.core.primitives import PrimitiveMapper
    from typeschema.descriptors.model import MemberDescriptor, TypeDescriptor

logger: TypeschemaLogger = get_logger(__name__)


class RamlTypeBuilder:
    """Build RAML types for type descriptors into a registry.

    Args:
        registry: Registry to populate; a new one is created when omitted.
        mapper: Primitive keyword lookup.
        patterns: Regular expressions for the pattern annotations.
    """

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        *,
        mapper: PrimitiveMapper = DEFAULT_MAPPER,
        patterns: PatternSet = DEFAULT_PATTERNS,
    ) -> None:
        self.registry: TypeRegistry = registry if registry is not None else TypeRegistry()
        self.mapper = mapper
        self.patterns = patterns
        # Identity-keyed visited set; values keep the descriptors alive.
        self._visited: dict[int, TypeDescriptor] = {}

    @classmethod
    def from_config(cls, config: Config, registry: TypeRegistry | None = None) -> RamlTypeBuilder:
        """Return a builder using the primitive table, patterns and name limit of ``config``."""
        if registry is None:
            registry = TypeRegistry(max_name_attempts=config.max_name_attempts)
        return cls(
            registry,
            mapper=config.primitive_mapper(),
            patterns=config.pattern_set(),
        )

    def add(self, descriptor: TypeDescriptor) -> str:
        """Register ``descriptor`` (and everything it references).

        Args:
            descriptor: The type to register.

        Returns:
            The registered name, or an empty string if the type has no
            representable shape.

        Raises:
            NameExhaustedError: If no unique name can be found for a type.
        """
        classification: Classification = classify(descriptor, self.mapper)
        target: TypeDescriptor = classification.type

        if id(target) in self._visited:
            return self.registry.name_of(target) or ""

        if not classification.is_supported:
            logger.debug("Skipping %s: no representable shape", target.name)
            return ""

        # Mark before recursing so cycles resolve to a name reference.
        self._visited[id(target)] = target
        name: str = self.registry.reserve(target)
        logger.trace("Building %s as %s (%s)", target.name, name, classification.shape.value)

        node: SchemaNode = self._build(classification)
        self.registry.insert(target, node)
        return name

    # --- shapes ---

    def _build(self, classification: Classification) -> SchemaNode:
        shape: Shape = classification.shape
        if shape is Shape.ARRAY:
            return self._array(classification)
        if shape is Shape.DICTIONARY:
            return self._map(classification)
        if shape is Shape.ENUMERATION:
            return self._enum(classification.type)
        if shape is Shape.PRIMITIVE:
            assert classification.keyword is not None
            return ScalarNode(classification.keyword)
        return self._object(classification.type)

    def _enum(self, descriptor: TypeDescriptor) -> ScalarNode:
        return ScalarNode("string", enum=descriptor.enum_names or ())

    def _array(self, classification: Classification) -> ArrayNode:
        assert classification.element is not None
        items: TypeRef = self._element_ref(classification.element)
        if classification.depth == 2:
            return ArrayNode(ArrayNode(items))
        return ArrayNode(items)

    def _map(self, classification: Classification) -> MapNode:
        assert classification.value is not None
        return MapNode(self._element_ref(classification.value, echo_name=False))

    def _element_ref(self, element: TypeDescriptor, *, echo_name: bool = True) -> TypeRef:
        """Reference an element/value type: its keyword if primitive, else its registered name."""
        ref: str | None = self.mapper.keyword(element)
        if ref is None:
            ref = self.add(element)
        return TypeRef(ref, name=type_name(element) if echo_name else None)

    def _parent(self, base: TypeDescriptor) -> str:
        """Register a base type as an object, even one without writable members."""
        target: TypeDescriptor = unwrap(base)
        if id(target) in self._visited:
            return self.registry.name_of(target) or ""

        self._visited[id(target)] = target
        name: str = self.registry.reserve(target)
        logger.trace("Building base type %s as %s", target.name, name)
        self.registry.insert(target, self._object(target))
        return name

    def _object(self, descriptor: TypeDescriptor) -> ObjectNode:
        parent: str | None = None
        if descriptor.has_parent:
            assert descriptor.base is not None
            parent = self._parent(descriptor.base) or None

        properties: dict[str, PropertyRef] = {}
        for member in descriptor.writable_members:
            constraints: Constraints = extract_constraints(
                member.annotations,
                nullable=member.nullable,
                patterns=self.patterns,
            )
            prop: PropertyRef | None = self._property(member, constraints)
            if prop is None:
                logger.trace("Dropping member %s.%s: no representable shape",
                             descriptor.name, member.name)
                continue
            properties[self._property_name(member, constraints)] = prop
        return ObjectNode(parent=parent, properties=properties)

    # --- members ---

    def _property_name(self, member: MemberDescriptor, constraints: Constraints) -> str:
        if constraints.optional:
            return member.serialized_name + OPTIONAL_PROPERTY_SUFFIX
        return member.serialized_name

    def _property(self, member: MemberDescriptor, constraints: Constraints) -> PropertyRef | None:
        classification: Classification = classify(member.type, self.mapper)
        shape: Shape = classification.shape

        if shape is Shape.ENUMERATION:
            return self._enum(classification.type)
        if shape is Shape.PRIMITIVE:
            assert classification.keyword is not None
            return ScalarNode(classification.keyword, constraints=constraints)
        if shape is Shape.ARRAY:
            return self._array(classification)
        if shape is Shape.DICTIONARY:
            return self._map(classification)

        name: str = self.add(member.type)
        if not name:
            return None
        return TypeRef(name)


def build_raml_types(
    descriptor: TypeDescriptor,
    *,
    config: Config | None = None,
) -> tuple[TypeRegistry, str]:
    """Run one RAML synthesis for a single root type.

    Args:
        descriptor: The root type.
        config: Optional configuration (primitive table, patterns, name limit).

    Returns:
        A fresh registry and the root type's registered name (empty when the
        root has no representable shape; the registry is then empty too).
    """
    builder = RamlTypeBuilder.from_config(config) if config is not None else RamlTypeBuilder()
    name: str = builder.add(descriptor)
    return builder.registry, name
