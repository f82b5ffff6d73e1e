# topmark:header:start
#
#   project      : TypeSchema
#   file         : types.py
#   file_relpath : src/typeschema/registry/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RAML-style type registry.

An append-only, insertion-ordered mapping from unique type names to schema
nodes. Insertion order is the emission order of the RAML library.

Names are handed out in two steps:

1. [`reserve`][typeschema.registry.types.TypeRegistry.reserve] assigns a unique
   name to a descriptor as soon as a builder starts processing it, so a cycle
   back to a type still in progress resolves to its final name;
2. [`insert`][typeschema.registry.types.TypeRegistry.insert] stores the finished
   node under that name.

A base name already owned by a *different* descriptor gets an integer suffix
(``Foo``, ``Foo0``, ``Foo1``, ...). Running out of suffixes raises
[`NameExhaustedError`][typeschema.core.errors.NameExhaustedError].

Typical usage:
    ```python
    registry = TypeRegistry()
    builder = RamlTypeBuilder(registry)
    builder.add(owner_descriptor)
    for name, node in registry.items():
        print(name, node.to_dict())
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from typeschema.config.logging import get_logger
from typeschema.constants import MAX_UNIQUE_NAME_ATTEMPTS
from typeschema.core.errors import NameExhaustedError
from typeschema.registry.names import type_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typeschema.config.logging import TypeschemaLogger
    from typeschema.core.nodes import SchemaNode
    from typeschema.descriptors.model import TypeDescriptor

logger: TypeschemaLogger = get_logger(__name__)


class TypeRegistry(Mapping[str, "SchemaNode"]):
    """Ordered, read-only oriented name -> schema node mapping.

    Args:
        max_name_attempts: Number of integer suffixes tried before giving up
            on a colliding base name.
    """

    def __init__(self, *, max_name_attempts: int = MAX_UNIQUE_NAME_ATTEMPTS) -> None:
        self.max_name_attempts = max_name_attempts
        self._nodes: dict[str, SchemaNode] = {}
        # Name -> owning descriptor, for reserved and inserted names alike.
        self._owners: dict[str, TypeDescriptor] = {}
        # id(descriptor) -> name; descriptors are kept alive by `_owners`.
        self._names: dict[int, str] = {}

    # --- Mapping protocol ---

    def __getitem__(self, name: str) -> SchemaNode:
        return self._nodes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"TypeRegistry({list(self._nodes)!r})"

    # --- naming ---

    def name_of(self, descriptor: TypeDescriptor) -> str | None:
        """Return the name assigned to ``descriptor``, or None if it has none yet."""
        return self._names.get(id(descriptor))

    def is_taken(self, name: str) -> bool:
        """True if ``name`` is reserved or registered (by any descriptor)."""
        return name in self._owners

    def unique_name(self, base_name: str) -> str:
        """Return the first free ``<base_name><n>`` for n = 0, 1, ...

        Raises:
            NameExhaustedError: If no free name is found within
                ``max_name_attempts`` suffixes.
        """
        for i in range(self.max_name_attempts):
            candidate = f"{base_name}{i}"
            if not self.is_taken(candidate):
                return candidate
        raise NameExhaustedError(base_name, self.max_name_attempts)

    def reserve(self, descriptor: TypeDescriptor) -> str:
        """Assign (or return the already assigned) unique name of ``descriptor``."""
        assigned: str | None = self.name_of(descriptor)
        if assigned is not None:
            return assigned

        name: str = type_name(descriptor)
        if self.is_taken(name):
            unique: str = self.unique_name(name)
            logger.debug("Type name %s is taken by another type, using %s", name, unique)
            name = unique

        self._owners[name] = descriptor
        self._names[id(descriptor)] = name
        return name

    def insert(self, descriptor: TypeDescriptor, node: SchemaNode) -> str:
        """Store ``node`` under the name of ``descriptor`` (reserving it if needed).

        Returns:
            The registered name. A descriptor that already has a node keeps it.
        """
        name: str = self.reserve(descriptor)
        if name in self._nodes:
            return name
        self._nodes[name] = node
        logger.trace("Registered type %s", name)
        return name

    # --- views ---

    def names(self) -> tuple[str, ...]:
        """Return the registered names in insertion order."""
        return tuple(self._nodes)

    def as_mapping(self) -> Mapping[str, SchemaNode]:
        """Return a read-only view of the registry."""
        return MappingProxyType(self._nodes)

    def unresolved_references(self, keywords: Iterable[str] = ()) -> list[str]:
        """Return references that are neither registered names nor ``keywords``.

        An empty result means the registry is closed: every reference embedded
        in a node resolves.
        """
        allowed: set[str] = set(self._nodes) | set(keywords)
        missing: list[str] = []
        for node in self._nodes.values():
            for ref in node.referenced_names():
                if ref not in allowed and ref not in missing:
                    missing.append(ref)
        return missing

    def to_dict(self) -> dict[str, object]:
        return {name: node.to_dict() for name, node in self._nodes.items()}
