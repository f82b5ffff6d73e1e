# topmark:header:start
#
#   project      : TypeSchema
#   file         : shapes.py
#   file_relpath : src/typeschema/core/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type classifier.

[`classify`][typeschema.core.shapes.classify] decides which
[`Shape`][typeschema.core.shapes.Shape] a type descriptor has. Rules, in order:

1. result wrappers are replaced by their payload type and re-classified;
2. enums are `ENUMERATION`;
3. array-like types are `ARRAY` with a nesting depth of 1, or 2 when the
   element is itself array-like. Deeper nesting, or an innermost element that
   is not representable, makes the whole array `UNSUPPORTED`;
4. two-argument dictionaries are `DICTIONARY`; an unrepresentable value type
   makes the dictionary `UNSUPPORTED` (the key type is not modeled);
5. mapped primitives are `PRIMITIVE`;
6. anything else is an `OBJECT` if it has at least one writable member or a
   base type other than the universal root, and `UNSUPPORTED` otherwise.

Classification is a pure function of the descriptor and the primitive mapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from typeschema.config.logging import get_logger
from typeschema.core.primitives import DEFAULT_MAPPER

if TYPE_CHECKING:
    from typeschema.config.logging import TypeschemaLogger
    from typeschema.core.primitives import PrimitiveMapper
    from typeschema.descriptors.model import TypeDescriptor

logger: TypeschemaLogger = get_logger(__name__)

#: Deepest supported array nesting (``List<List<T>>``).
MAX_ARRAY_DEPTH: int = 2


class Shape(str, Enum):
    """Classification outcome for a type."""

    PRIMITIVE = "primitive"
    ENUMERATION = "enumeration"
    ARRAY = "array"
    DICTIONARY = "dictionary"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one descriptor.

    Attributes:
        shape: The shape of the (unwrapped) type.
        type: The classified descriptor, after unwrapping result wrappers.
        keyword: Scalar keyword for `PRIMITIVE` shapes.
        element: Innermost element type for `ARRAY` shapes.
        depth: Array nesting depth (1 or 2) for `ARRAY` shapes.
        value: Value type for `DICTIONARY` shapes.
    """

    shape: Shape
    type: TypeDescriptor
    keyword: str | None = None
    element: TypeDescriptor | None = None
    depth: int = 0
    value: TypeDescriptor | None = None

    @property
    def is_supported(self) -> bool:
        return self.shape is not Shape.UNSUPPORTED


def unwrap(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Replace result wrappers by their payload type (repeatedly)."""
    while descriptor.is_wrapper:
        assert descriptor.wrapper_payload is not None
        descriptor = descriptor.wrapper_payload
    return descriptor


def has_properties_or_parent(descriptor: TypeDescriptor) -> bool:
    """Object admission test: a writable member or a non-trivial base type."""
    return descriptor.has_parent or bool(descriptor.writable_members)


def classify(
    descriptor: TypeDescriptor,
    mapper: PrimitiveMapper = DEFAULT_MAPPER,
) -> Classification:
    """Classify a type descriptor.

    Args:
        descriptor: The type to classify.
        mapper: Primitive keyword lookup.

    Returns:
        The classification; `Shape.UNSUPPORTED` when the type has no
        representable shape.
    """
    target: TypeDescriptor = unwrap(descriptor)

    if target.is_enum:
        return Classification(Shape.ENUMERATION, target)

    if target.element_type is not None:
        return _classify_array(target, mapper)

    if target.value_type is not None and target.key_type is not None:
        value: Classification = classify(target.value_type, mapper)
        if not value.is_supported:
            logger.trace("Dictionary %s has an unsupported value type", target.name)
            return Classification(Shape.UNSUPPORTED, target)
        return Classification(Shape.DICTIONARY, target, value=value.type)

    keyword: str | None = mapper.keyword(target)
    if keyword is not None:
        return Classification(Shape.PRIMITIVE, target, keyword=keyword)

    if has_properties_or_parent(target):
        return Classification(Shape.OBJECT, target)

    logger.trace("Type %s has no writable members and no parent type", target.name)
    return Classification(Shape.UNSUPPORTED, target)


def _classify_array(target: TypeDescriptor, mapper: PrimitiveMapper) -> Classification:
    assert target.element_type is not None
    element: TypeDescriptor = unwrap(target.element_type)
    depth = 1
    while element.element_type is not None:
        depth += 1
        if depth > MAX_ARRAY_DEPTH:
            logger.debug("Array %s nests deeper than %d levels", target.name, MAX_ARRAY_DEPTH)
            return Classification(Shape.UNSUPPORTED, target)
        element = unwrap(element.element_type)

    inner: Classification = classify(element, mapper)
    if not inner.is_supported:
        logger.trace("Array %s has an unsupported element type", target.name)
        return Classification(Shape.UNSUPPORTED, target)
    return Classification(Shape.ARRAY, target, element=inner.type, depth=depth)
