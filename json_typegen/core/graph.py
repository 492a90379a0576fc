"""
Schema graph: the named object types discovered for one inference run.

``GraphBuilder`` is the naming pass. It walks the structural tree produced
by ``SchemaInferencer``, hoists every object into a named ``ObjectShape``
and replaces it with an ``ObjectRef``. Two policies decide when two objects
share a declaration:

* ``LEGACY``: objects deriving the same name are the same type. The first
  shape registered under a name wins and later shapes are dropped.
* ``STRUCTURAL``: objects with the same structure share a declaration;
  different structures competing for one name get numeric suffixes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Set

from .naming import NameSanitizer, NamingCase
from .nodes import ArrayType, NullType, ObjectRef, ObjectType, Property, TypeNode, array_depth
from ..logging_config import get_logger

logger = get_logger(__name__)


class NamingPolicy(Enum):
    """How object shapes are mapped to declaration names."""

    LEGACY = "legacy"
    STRUCTURAL = "structural"


@dataclass
class FieldDef:
    """A single field of a named object type."""

    key: str  # Original JSON key, kept for aliases/tags
    name: str
    node: TypeNode
    nullable: bool = False
    example: Any = None

    @property
    def is_renamed(self) -> bool:
        return self.name != self.key


@dataclass
class ObjectShape:
    """A named object declaration."""

    name: str
    key_hint: str
    fields: List[FieldDef] = field(default_factory=list)
    shape_id: int = -1

    def get_field(self, name: str) -> Optional[FieldDef]:
        """Get field by generated name."""
        for field_def in self.fields:
            if field_def.name == name:
                return field_def
        return None

    @property
    def keys(self) -> List[str]:
        return [f.key for f in self.fields]


@dataclass
class SchemaGraph:
    """All named types of one run, with the root distinguished."""

    root: str
    root_node: TypeNode = field(default_factory=NullType)
    types: Dict[str, ObjectShape] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def root_is_object(self) -> bool:
        return isinstance(self.root_node, ObjectRef)

    def ordered_types(self) -> List[ObjectShape]:
        """Root declaration first, then the rest in insertion order."""
        ordered = []
        if self.root in self.types:
            ordered.append(self.types[self.root])
        ordered.extend(shape for name, shape in self.types.items() if name != self.root)
        return ordered

    def iter_fields(self) -> Iterator[FieldDef]:
        for shape in self.types.values():
            yield from shape.fields

    def has_renamed_fields(self) -> bool:
        return any(f.is_renamed for f in self.iter_fields())

    def iter_leaf_nodes(self) -> Iterator[TypeNode]:
        """Innermost (non-array) node of the root and of every field."""
        yield array_depth(self.root_node)[1]
        for field_def in self.iter_fields():
            yield array_depth(field_def.node)[1]

    def validate(self) -> List[str]:
        """Check graph invariants, returning a list of problems."""
        problems = []
        for leaf in self.iter_leaf_nodes():
            if isinstance(leaf, ObjectType):
                problems.append(f"Unresolved object shape '{leaf.key_hint}'")
            elif isinstance(leaf, ObjectRef) and leaf.name not in self.types:
                problems.append(f"Dangling reference to '{leaf.name}'")
        for shape in self.types.values():
            names = [f.name for f in shape.fields]
            if len(names) != len(set(names)):
                problems.append(f"Duplicate field names in '{shape.name}'")
        return problems


@dataclass
class _ShapeJob:
    shape: ObjectShape
    properties: tuple
    index: int = 0
    used_names: Set[str] = field(default_factory=set)


class GraphBuilder:
    """Assigns declaration names to the shapes of a structural type tree."""

    def __init__(
        self,
        sanitizer: NameSanitizer,
        field_case: NamingCase = NamingCase.PRESERVE,
        policy: NamingPolicy = NamingPolicy.LEGACY,
    ):
        self.sanitizer = sanitizer
        self.field_case = field_case
        self.policy = policy

    def build(self, root_node: TypeNode, root_name: str = "Root") -> SchemaGraph:
        """
        Build the named schema graph for an inferred tree.

        Args:
            root_node: Output of ``SchemaInferencer.infer``
            root_name: Name for the root declaration

        Returns:
            SchemaGraph with every object hoisted to a named type
        """
        graph = SchemaGraph(root=self.sanitizer.class_name_for(root_name))
        self._by_shape: Dict[int, str] = {}
        self._jobs: List[_ShapeJob] = []

        graph.root_node = self._resolve(root_node, graph)

        while self._jobs:
            job = self._jobs[-1]
            if job.index >= len(job.properties):
                self._jobs.pop()
                continue

            prop: Property = job.properties[job.index]
            job.index += 1
            job.shape.fields.append(self._make_field(prop, job, graph))

        logger.debug(
            "Built schema graph with %d types (policy=%s)", len(graph.types), self.policy.value
        )
        return graph

    def _make_field(self, prop: Property, job: _ShapeJob, graph: SchemaGraph) -> FieldDef:
        base = self.sanitizer.field_name_for(prop.key, self.field_case)
        name = base
        counter = 1
        while name in job.used_names:
            name = f"{base}_{counter}"
            counter += 1
        if name != base:
            self._warn(
                graph,
                f"Field '{prop.key}' in {job.shape.name} renamed to '{name}' "
                f"to avoid a duplicate field name",
            )
        job.used_names.add(name)

        # Resolving may register a new shape and push its job; it is then
        # processed before the remaining fields of this shape (pre-order).
        node = self._resolve(prop.node, graph)
        return FieldDef(
            key=prop.key, name=name, node=node, nullable=prop.nullable, example=prop.example
        )

    def _resolve(self, node: TypeNode, graph: SchemaGraph) -> TypeNode:
        depth, leaf = array_depth(node)
        if not isinstance(leaf, ObjectType):
            return node

        resolved: TypeNode = ObjectRef(self._name_for(leaf, graph))
        for _ in range(depth):
            resolved = ArrayType(resolved)
        return resolved

    def _name_for(self, obj: ObjectType, graph: SchemaGraph) -> str:
        if self.policy == NamingPolicy.STRUCTURAL:
            return self._name_structural(obj, graph)
        return self._name_legacy(obj, graph)

    def _name_legacy(self, obj: ObjectType, graph: SchemaGraph) -> str:
        name = self.sanitizer.class_name_for(obj.key_hint)
        existing = graph.types.get(name)
        if existing is not None:
            if existing.shape_id != obj.shape_id:
                self._warn(
                    graph,
                    f"Object at key '{obj.key_hint}' reuses existing type {name}; "
                    f"its fields {[p.key for p in obj.properties]} were dropped",
                )
            return name

        self._register(name, obj, graph)
        return name

    def _name_structural(self, obj: ObjectType, graph: SchemaGraph) -> str:
        if obj.shape_id in self._by_shape:
            return self._by_shape[obj.shape_id]

        base = self.sanitizer.class_name_for(obj.key_hint)
        name = base
        counter = 2
        while name in graph.types:
            name = f"{base}{counter}"
            counter += 1
        if name != base:
            self._warn(
                graph,
                f"Type name {base} is taken by a different shape; "
                f"object at key '{obj.key_hint}' declared as {name}",
            )

        self._by_shape[obj.shape_id] = name
        self._register(name, obj, graph)
        return name

    def _register(self, name: str, obj: ObjectType, graph: SchemaGraph) -> None:
        shape = ObjectShape(name=name, key_hint=obj.key_hint, shape_id=obj.shape_id)
        graph.types[name] = shape
        self._jobs.append(_ShapeJob(shape=shape, properties=obj.properties))

    def _warn(self, graph: SchemaGraph, message: str) -> None:
        logger.debug(message)
        graph.warnings.append(message)


def build_graph(
    root_node: TypeNode,
    root_name: str,
    sanitizer: NameSanitizer,
    field_case: NamingCase = NamingCase.PRESERVE,
    policy: NamingPolicy = NamingPolicy.LEGACY,
) -> SchemaGraph:
    """Convenience wrapper around ``GraphBuilder.build``."""
    return GraphBuilder(sanitizer, field_case, policy).build(root_node, root_name)
