# topmark:header:start
#
#   project      : TypeSchema
#   file         : model.py
#   file_relpath : src/typeschema/descriptors/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type descriptors: the only view of a type the builders depend on.

A [`TypeDescriptor`][typeschema.descriptors.model.TypeDescriptor] identifies one
shape: a primitive, an enum, an array/list, a dictionary, a result wrapper or a
plain object with an optional base type and an ordered list of members.

Descriptors are compared by **identity**: two descriptors describe the same
shape only if they are the same object. Descriptor sources
(see [`typeschema.descriptors.python`][typeschema.descriptors.python]) memoize
them so the identity of a type is stable within a graph; hand-written
descriptor tables simply reuse the same instances.

Descriptors are mutable so cyclic graphs can be wired after construction:

```python
node = TypeDescriptor.object("Node")
node.add_member("Next", node)
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from typeschema.descriptors.annotations import JsonName, Required

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence


@dataclass(eq=False)
class MemberDescriptor:
    """A named, typed, annotated member of an object type.

    Attributes:
        name: Declared member name.
        type: Declared type of the member.
        nullable: True if the declared type is a nullable value type
            (``Optional[int]``); makes the RAML property optional unless
            the member is explicitly required.
        annotations: Attached annotations (validation kinds, `JsonName`, ...).
        writable: False for read-only members; those never reach the output.
    """

    name: str
    type: TypeDescriptor = field(repr=False)
    nullable: bool = False
    annotations: tuple[object, ...] = ()
    writable: bool = True

    @property
    def is_required(self) -> bool:
        """True if a `Required` annotation is attached."""
        return any(isinstance(a, Required) for a in self.annotations)

    @property
    def serialized_name(self) -> str:
        """Return the `JsonName` rename if present, else the declared name."""
        for annotation in self.annotations:
            if isinstance(annotation, JsonName):
                return annotation.name
        return self.name


@dataclass(eq=False)
class TypeDescriptor:
    """Descriptor of one type shape.

    Exactly one of the shape slots is normally set; an object descriptor
    leaves them all empty and carries members instead.

    Attributes:
        name: Declared type name (``"Owner"``, ``"Int32"``, ``"List"``).
        base: Base type, or ``None`` when the type derives from the universal
            root object type.
        primitive: True for host primitives (mapped to schema keywords).
        enum_names: Literal member names when the type is an enum.
        wrapper_payload: Payload type when the type is a result wrapper.
        element_type: Element type when the type is array-like.
        key_type: Key type when the type is a dictionary.
        value_type: Value type when the type is a dictionary.
        members: Ordered members (writable and read-only).
        schema_name: Rename used when the type is listed under
            ``definitions``; defaults to ``name``.
        subclasses: Statically known subclasses.
        subclass_loader: Optional lazy provider of known subclasses; takes
            precedence over ``subclasses``.
    """

    name: str
    base: TypeDescriptor | None = field(default=None, repr=False)
    primitive: bool = False
    enum_names: tuple[str, ...] | None = None
    wrapper_payload: TypeDescriptor | None = field(default=None, repr=False)
    element_type: TypeDescriptor | None = field(default=None, repr=False)
    key_type: TypeDescriptor | None = field(default=None, repr=False)
    value_type: TypeDescriptor | None = field(default=None, repr=False)
    members: list[MemberDescriptor] = field(default_factory=list, repr=False)
    schema_name: str | None = None
    subclasses: list[TypeDescriptor] = field(default_factory=list, repr=False)
    subclass_loader: Callable[[], Sequence[TypeDescriptor]] | None = field(
        default=None, repr=False
    )

    # --- factories ---

    @classmethod
    def primitive_type(cls, name: str) -> TypeDescriptor:
        """Return a host primitive descriptor."""
        return cls(name=name, primitive=True)

    @classmethod
    def object(
        cls,
        name: str,
        *,
        base: TypeDescriptor | None = None,
        schema_name: str | None = None,
    ) -> TypeDescriptor:
        """Return an object descriptor without members (add them with `add_member`)."""
        return cls(name=name, base=base, schema_name=schema_name)

    @classmethod
    def enum(cls, name: str, names: Iterable[str]) -> TypeDescriptor:
        """Return an enum descriptor with the given literal member names."""
        return cls(name=name, enum_names=tuple(names))

    @classmethod
    def array(cls, element: TypeDescriptor) -> TypeDescriptor:
        """Return a plain array descriptor (``Owner[]``)."""
        return cls(name=f"{element.name}[]", element_type=element)

    @classmethod
    def sequence(cls, element: TypeDescriptor, *, name: str = "List") -> TypeDescriptor:
        """Return a one-argument generic sequence descriptor (``List<Owner>``)."""
        return cls(name=name, element_type=element)

    @classmethod
    def dictionary(
        cls,
        key: TypeDescriptor,
        value: TypeDescriptor,
        *,
        name: str = "Dictionary",
    ) -> TypeDescriptor:
        """Return a two-argument dictionary descriptor."""
        return cls(name=name, key_type=key, value_type=value)

    @classmethod
    def wrapper(cls, name: str, payload: TypeDescriptor) -> TypeDescriptor:
        """Return a result-wrapper descriptor around ``payload``."""
        return cls(name=name, wrapper_payload=payload)

    # --- mutation ---

    def add_member(
        self,
        name: str,
        type_: TypeDescriptor,
        *,
        nullable: bool = False,
        annotations: Iterable[object] = (),
        writable: bool = True,
    ) -> MemberDescriptor:
        """Append a member and return it."""
        member = MemberDescriptor(
            name=name,
            type=type_,
            nullable=nullable,
            annotations=tuple(annotations),
            writable=writable,
        )
        self.members.append(member)
        return member

    # --- shape queries ---

    @property
    def is_enum(self) -> bool:
        return self.enum_names is not None

    @property
    def is_wrapper(self) -> bool:
        return self.wrapper_payload is not None

    @property
    def is_array(self) -> bool:
        return self.element_type is not None

    @property
    def is_dictionary(self) -> bool:
        return self.key_type is not None and self.value_type is not None

    @property
    def has_parent(self) -> bool:
        """True if the base type is something other than the universal root."""
        return self.base is not None and self.base is not ROOT_OBJECT

    @property
    def writable_members(self) -> tuple[MemberDescriptor, ...]:
        """Return the writable members, in declaration order."""
        return tuple(m for m in self.members if m.writable)

    @property
    def resolved_name(self) -> str:
        """Return the rename if present, else the declared name."""
        return self.schema_name or self.name

    def known_subclasses(self) -> tuple[TypeDescriptor, ...]:
        """Return the known concrete subclasses of this type."""
        if self.subclass_loader is not None:
            return tuple(self.subclass_loader())
        return tuple(self.subclasses)

    def __repr__(self) -> str:
        # Members may point back at this descriptor: keep repr shallow.
        return f"TypeDescriptor({self.name!r})"


#: The universal root object type; a base equal to it counts as "no base".
ROOT_OBJECT: TypeDescriptor = TypeDescriptor(name="Object")
