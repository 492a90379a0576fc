"""
Structural type inference over a parsed JSON value.

Produces a ``TypeNode`` tree in which every object is an ``ObjectType``
carrying its structure but no declaration name yet. Naming happens in a
separate pass (see ``graph.py``).

The walk uses an explicit work stack instead of recursion so that deeply
nested documents are bounded by ``max_depth`` rather than by the
interpreter's recursion limit.
"""

from typing import Any, Dict, List, Optional

from .config import DEFAULT_MAX_DEPTH
from .formats import detect_format
from .generator import TooDeepError
from .nodes import (
    ArrayType,
    BoolType,
    FloatType,
    IntType,
    NullType,
    ObjectType,
    Property,
    StrType,
    TypeNode,
    UnknownType,
    array_depth,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Work stack opcodes
_VISIT = 0
_BUILD_ARRAY = 1
_BUILD_OBJECT = 2


class SchemaInferencer:
    """Infers a structural type tree from one JSON sample."""

    def __init__(self, detect_formats: bool = True, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the inferencer.

        Args:
            detect_formats: Tag strings with semantic formats (email, uuid, ...)
            max_depth: Maximum container nesting before TooDeepError is raised
        """
        self.detect_formats = detect_formats
        self.max_depth = max_depth
        self.warnings: List[str] = []
        self._shape_ids: Dict[Any, int] = {}

    def infer(self, value: Any, key_hint: str = "Root") -> TypeNode:
        """
        Infer the type tree of a parsed JSON value.

        Args:
            value: Output of ``json.loads``
            key_hint: Key used to name the value if it is an object

        Returns:
            Root node of the inferred tree

        Raises:
            TooDeepError: If nesting exceeds ``max_depth``
        """
        results: List[TypeNode] = []
        stack: List[tuple] = [(_VISIT, value, key_hint, 0, "$")]

        while stack:
            op, payload, key, depth, path = stack.pop()

            if op == _BUILD_ARRAY:
                results.append(ArrayType(results.pop()))
                continue

            if op == _BUILD_OBJECT:
                results.append(self._build_object(payload, key, results))
                continue

            if isinstance(payload, dict):
                self._check_depth(depth, path)
                stack.append((_BUILD_OBJECT, payload, key, depth, path))
                for child_key in reversed(list(payload)):
                    stack.append(
                        (_VISIT, payload[child_key], child_key, depth + 1, f"{path}.{child_key}")
                    )

            elif isinstance(payload, list):
                self._check_depth(depth, path)
                if not payload:
                    self._warn(f"Empty array at {path}: element type is unknown")
                    results.append(ArrayType(UnknownType()))
                    continue
                stack.append((_BUILD_ARRAY, None, key, depth, path))
                # First element only; the array shares its key hint with it
                stack.append((_VISIT, payload[0], key, depth + 1, f"{path}[0]"))

            else:
                results.append(self.infer_scalar(payload))

        return results.pop()

    def infer_scalar(self, value: Any) -> TypeNode:
        """Infer the type of a non-container JSON value."""
        if value is None:
            return NullType()
        if isinstance(value, bool):
            return BoolType()
        # 10.0 and 1e10 count as integers, like 10
        if isinstance(value, int) or (isinstance(value, float) and value.is_integer()):
            if INT32_MIN <= value <= INT32_MAX:
                return IntType(32)
            return IntType(64)
        if isinstance(value, float):
            return FloatType()
        if isinstance(value, str):
            if self.detect_formats:
                return StrType(detect_format(value))
            return StrType()
        return UnknownType()

    def _build_object(
        self, obj: Dict[str, Any], key_hint: str, results: List[TypeNode]
    ) -> ObjectType:
        keys = list(obj)
        count = len(keys)
        children = results[len(results) - count :] if count else []
        if count:
            del results[len(results) - count :]

        properties = tuple(
            Property(k, node, _example(obj[k])) for k, node in zip(keys, children)
        )
        signature = frozenset((p.key, self._signature(p.node)) for p in properties)
        shape_id = self._shape_ids.setdefault(signature, len(self._shape_ids))

        return ObjectType(key_hint=key_hint, properties=properties, shape_id=shape_id)

    def _signature(self, node: TypeNode) -> Any:
        """Flat, hashable structural signature of a node."""
        depth, leaf = array_depth(node)
        if isinstance(leaf, ObjectType):
            leaf_sig: Any = ("object", leaf.shape_id)
        else:
            leaf_sig = leaf
        return (depth, leaf_sig)

    def _check_depth(self, depth: int, path: str) -> None:
        if depth >= self.max_depth:
            raise TooDeepError(
                f"JSON nesting exceeds the maximum depth of {self.max_depth} at {path}"
            )

    def _warn(self, message: str) -> None:
        logger.debug(message)
        self.warnings.append(message)


def _example(value: Any) -> Any:
    """Sample value worth showing in documentation: strings and numbers only."""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return value
    return None


def infer_type(
    value: Any,
    key_hint: str = "Root",
    detect_formats: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
    warnings: Optional[List[str]] = None,
) -> TypeNode:
    """Convenience wrapper around ``SchemaInferencer.infer``."""
    inferencer = SchemaInferencer(detect_formats=detect_formats, max_depth=max_depth)
    node = inferencer.infer(value, key_hint)
    if warnings is not None:
        warnings.extend(inferencer.warnings)
    return node
