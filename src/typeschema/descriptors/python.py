# topmark:header:start
#
#   project      : TypeSchema
#   file         : python.py
#   file_relpath : src/typeschema/descriptors/python.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Descriptor source for Python classes and type hints.

[`PythonDescriptorSource`][typeschema.descriptors.python.PythonDescriptorSource]
turns live Python types into [`TypeDescriptor`][typeschema.descriptors.model.TypeDescriptor]
graphs:

| Python type                                         | Descriptor                      |
|-----------------------------------------------------|---------------------------------|
| `bool`, `int`, `float`, `Decimal`, `str`, `datetime`, `UUID` | primitive singleton    |
| `enum.Enum` subclass                                | enum (member names)             |
| `list[X]`, `set[X]`, `tuple[X, ...]`, `Sequence[X]`, ... | array named ``List``       |
| `dict[K, V]`, `Mapping[K, V]`, `MutableMapping[K, V]` | dictionary                    |
| configured wrapper generic ``W[X]``                 | result wrapper around ``X``     |
| any other class                                     | object with base and members    |
| anything else (`Any`, unions, bare `list`, ...)     | opaque object without members   |

Members of a class are its dataclass ``init`` fields (or, for plain classes,
its annotated public attributes) followed by its public properties; a property
without a setter is read-only. Inherited members are included.

On a member, ``Optional[X]`` (or ``X | None``) sets ``nullable`` and
``Annotated[X, ...]`` supplies the annotations (metadata that is not a
recognized annotation is ignored). A class can be renamed in
``definitions`` with a ``__schema_name__`` class attribute.

Descriptors are memoized per source: describing the same type twice returns
the same descriptor, and self-referencing classes terminate.
"""

from __future__ import annotations

import abc
import collections.abc
import dataclasses
import importlib
import inspect
import types
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    ClassVar,
    Generic,
    Protocol,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)
from uuid import UUID

from typeschema.config.logging import get_logger
from typeschema.core.errors import DescriptorError
from typeschema.descriptors.annotations import is_annotation
from typeschema.descriptors.model import TypeDescriptor
from typeschema.descriptors.primitives import BOOLEAN, DATETIME, DECIMAL, DOUBLE, GUID, INT32, STRING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from typeschema.config.logging import TypeschemaLogger

logger: TypeschemaLogger = get_logger(__name__)

PYTHON_PRIMITIVES: Mapping[type, TypeDescriptor] = types.MappingProxyType(
    {
        bool: BOOLEAN,
        int: INT32,
        float: DOUBLE,
        Decimal: DECIMAL,
        str: STRING,
        datetime: DATETIME,
        UUID: GUID,
    }
)

SEQUENCE_ORIGINS: tuple[Any, ...] = (
    list,
    set,
    frozenset,
    tuple,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

MAPPING_ORIGINS: tuple[Any, ...] = (
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)

SCHEMA_NAME_ATTR = "__schema_name__"

# Bases that never count as a parent type.
IGNORED_BASES: tuple[Any, ...] = (object, Generic, Protocol, abc.ABC)


def load_target(target: str) -> Any:
    """Import the object named by ``target``.

    Args:
        target: ``"package.module:QualName"`` (or ``"package.module.QualName"``).

    Returns:
        The imported object.

    Raises:
        DescriptorError: If the module cannot be imported or the attribute
            does not exist.
    """
    if ":" in target:
        module_name, _, qualname = target.partition(":")
    else:
        module_name, _, qualname = target.rpartition(".")
    if not module_name or not qualname:
        raise DescriptorError(f"Invalid target '{target}': expected 'module:QualName'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise DescriptorError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise DescriptorError(f"Module '{module_name}' has no attribute '{qualname}'") from exc
    return obj


def unpack_hint(hint: Any) -> tuple[Any, bool, tuple[object, ...]]:
    """Strip ``Annotated`` and ``Optional`` layers from a member type hint.

    Returns:
        ``(type, nullable, annotations)``.
    """
    nullable = False
    annotations: tuple[object, ...] = ()
    while True:
        origin: Any = get_origin(hint)
        if origin is Annotated:
            hint, *extra = get_args(hint)
            annotations += tuple(extra)
            continue
        if origin is Union or origin is types.UnionType:
            args: tuple[Any, ...] = get_args(hint)
            non_none: list[Any] = [a for a in args if a is not type(None)]
            if len(non_none) == 1 and len(non_none) < len(args):
                nullable = True
                hint = non_none[0]
                continue
        return hint, nullable, annotations


def _is_private(name: str) -> bool:
    return name.startswith("_")


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def _concrete_subclasses(cls: type) -> list[type]:
    """Return the non-abstract subclasses of ``cls``, transitively, in discovery order."""
    found: list[type] = []
    pending: list[type] = list(cls.__subclasses__())
    while pending:
        sub: type = pending.pop(0)
        if sub in found:
            continue
        found.append(sub)
        pending.extend(sub.__subclasses__())
    return [sub for sub in found if not inspect.isabstract(sub)]


class PythonDescriptorSource:
    """Produce memoized type descriptors for Python types.

    Args:
        wrappers: Generic classes treated as result wrappers (``Result[Owner]``
            is described as ``Owner``).
    """

    def __init__(self, wrappers: Iterable[type] = ()) -> None:
        self.wrappers: tuple[type, ...] = tuple(wrappers)
        self._cache: dict[Any, TypeDescriptor] = {}

    def describe(self, tp: Any) -> TypeDescriptor:
        """Return the descriptor of ``tp``.

        ``Annotated`` and ``Optional`` layers around ``tp`` are ignored here;
        they only matter on members.

        Raises:
            DescriptorError: If the type hints of a class cannot be resolved.
        """
        tp, _, _ = unpack_hint(tp)
        try:
            cached: TypeDescriptor | None = self._cache.get(tp)
        except TypeError:
            # Unhashable hint objects are described without memoization.
            return self._opaque(tp)
        if cached is not None:
            return cached
        return self._create(tp)

    # --- creation ---

    def _remember(self, tp: Any, descriptor: TypeDescriptor) -> TypeDescriptor:
        self._cache[tp] = descriptor
        return descriptor

    def _create(self, tp: Any) -> TypeDescriptor:
        if isinstance(tp, type) and tp in PYTHON_PRIMITIVES:
            return self._remember(tp, PYTHON_PRIMITIVES[tp])

        origin: Any = get_origin(tp)
        if origin is not None:
            return self._remember(tp, self._generic(tp, origin, get_args(tp)))

        if isinstance(tp, type) and issubclass(tp, Enum):
            return self._remember(tp, TypeDescriptor.enum(tp.__name__, [m.name for m in tp]))

        if isinstance(tp, type) and tp not in SEQUENCE_ORIGINS and tp not in MAPPING_ORIGINS:
            return self._describe_class(tp)

        return self._remember(tp, self._opaque(tp))

    def _opaque(self, tp: Any) -> TypeDescriptor:
        name: str = getattr(tp, "__name__", None) or repr(tp)
        logger.trace("Describing %s as an opaque type", name)
        return TypeDescriptor.object(name)

    def _generic(self, tp: Any, origin: Any, args: tuple[Any, ...]) -> TypeDescriptor:
        if origin in self.wrappers and len(args) == 1:
            return TypeDescriptor.wrapper(origin.__name__, self.describe(args[0]))

        if origin in SEQUENCE_ORIGINS:
            if origin is tuple:
                if len(args) == 2 and args[1] is Ellipsis:
                    return TypeDescriptor.sequence(self.describe(args[0]))
                return self._opaque(tp)
            if len(args) == 1:
                return TypeDescriptor.sequence(self.describe(args[0]))

        if origin in MAPPING_ORIGINS and len(args) == 2:
            return TypeDescriptor.dictionary(self.describe(args[0]), self.describe(args[1]))

        return self._opaque(tp)

    def _describe_class(self, cls: type) -> TypeDescriptor:
        descriptor: TypeDescriptor = TypeDescriptor.object(
            cls.__name__,
            schema_name=cls.__dict__.get(SCHEMA_NAME_ATTR),
        )
        # Cache before members so self-references resolve to this descriptor.
        self._remember(cls, descriptor)

        base: type | None = next(
            (b for b in cls.__bases__ if b not in IGNORED_BASES),
            None,
        )
        if base is not None:
            descriptor.base = self.describe(base)
        descriptor.subclass_loader = lambda: [self.describe(s) for s in _concrete_subclasses(cls)]

        for name, hint, writable in self._members(cls):
            member_type, nullable, annotations = unpack_hint(hint)
            descriptor.add_member(
                name,
                self.describe(member_type),
                nullable=nullable,
                annotations=tuple(a for a in annotations if is_annotation(a)),
                writable=writable,
            )
        logger.trace("Described class %s with %d members", cls.__name__, len(descriptor.members))
        return descriptor

    def _members(self, cls: type) -> Iterator[tuple[str, Any, bool]]:
        """Yield ``(name, hint, writable)`` for the public members of ``cls``."""
        hints: dict[str, Any] = self._hints(cls)
        seen: set[str] = set()

        if dataclasses.is_dataclass(cls):
            for f in dataclasses.fields(cls):
                if not f.init or _is_private(f.name):
                    continue
                seen.add(f.name)
                yield f.name, hints.get(f.name, f.type), True
        else:
            for name, hint in hints.items():
                if _is_private(name) or _is_class_var(hint):
                    continue
                seen.add(name)
                yield name, hint, True

        properties: dict[str, property] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, property) and not _is_private(name) and name not in seen:
                    properties[name] = attr
        for name, prop in properties.items():
            hint: Any = self._hints(prop.fget).get("return", Any) if prop.fget else Any
            yield name, hint, prop.fset is not None

    def _hints(self, obj: Any) -> dict[str, Any]:
        try:
            return get_type_hints(obj, include_extras=True)
        except (NameError, TypeError) as exc:
            raise DescriptorError(f"Cannot resolve type hints of {obj!r}: {exc}") from exc


def describe(tp: Any, *, wrappers: Iterable[type] = ()) -> TypeDescriptor:
    """Describe ``tp`` with a fresh [`PythonDescriptorSource`][typeschema.descriptors.python.PythonDescriptorSource]."""
    return PythonDescriptorSource(wrappers).describe(tp)
