"""
Type nodes: the intermediate representation shared by all emitters.

Inference produces a tree of these nodes with ``ObjectType`` carrying the
structure of each JSON object. The naming pass then hoists every object
into the schema graph and replaces it with an ``ObjectRef``.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

from .formats import FormatTag


@dataclass(frozen=True)
class NullType:
    """A JSON null."""


@dataclass(frozen=True)
class BoolType:
    """A JSON boolean."""


@dataclass(frozen=True)
class IntType:
    """An integral number; width is 64 once outside signed 32-bit range."""

    width: int = 32


@dataclass(frozen=True)
class FloatType:
    """A non-integral number."""


@dataclass(frozen=True)
class StrType:
    """A string, optionally tagged with a semantic format."""

    format: Optional[FormatTag] = None


@dataclass(frozen=True)
class UnknownType:
    """Placeholder for values with no inferable type (e.g. empty arrays)."""


@dataclass(frozen=True, eq=False)
class ArrayType:
    """A JSON array typed by its first element."""

    element: "TypeNode"

    def __eq__(self, other):
        if not isinstance(other, ArrayType):
            return NotImplemented
        return array_depth(self) == array_depth(other)

    def __hash__(self):
        return hash(("array",) + array_depth(self))


@dataclass(frozen=True)
class ObjectRef:
    """Reference to a named declaration in the schema graph."""

    name: str


@dataclass(frozen=True)
class Property:
    """One key of a JSON object, as seen by the structural pass."""

    key: str
    node: "TypeNode"
    # First sample value for scalar keys; not part of the structure
    example: Any = field(default=None, compare=False, hash=False)

    @property
    def nullable(self) -> bool:
        return isinstance(self.node, NullType)


@dataclass(frozen=True, eq=False)
class ObjectType:
    """
    Structure of one JSON object before naming.

    ``shape_id`` identifies the structure (keys and field types, ignoring
    key order); two objects with the same id are structurally identical.
    Equality and hashing go through the id so comparing deep trees never
    recurses.
    """

    key_hint: str
    properties: Tuple[Property, ...] = field(default_factory=tuple)
    shape_id: int = -1

    def __eq__(self, other):
        if not isinstance(other, ObjectType):
            return NotImplemented
        return self.shape_id == other.shape_id

    def __hash__(self):
        return hash(("object", self.shape_id))


TypeNode = Union[
    NullType,
    BoolType,
    IntType,
    FloatType,
    StrType,
    UnknownType,
    ArrayType,
    ObjectRef,
    ObjectType,
]


def array_depth(node: TypeNode) -> Tuple[int, TypeNode]:
    """Unwrap nested arrays, returning (depth, innermost element node)."""
    depth = 0
    while isinstance(node, ArrayType):
        depth += 1
        node = node.element
    return depth, node


def describe(node: TypeNode) -> str:
    """Short human-readable description, used in warnings and logs."""
    depth, leaf = array_depth(node)
    if isinstance(leaf, ObjectRef):
        label = leaf.name
    elif isinstance(leaf, ObjectType):
        label = f"object<{leaf.key_hint}>"
    elif isinstance(leaf, IntType):
        label = f"int{leaf.width}"
    elif isinstance(leaf, StrType) and leaf.format:
        label = f"string({leaf.format.value})"
    else:
        label = type(leaf).__name__.replace("Type", "").lower()
    return "array<" * depth + label + ">" * depth
