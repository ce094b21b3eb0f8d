"""TraversalNode: a classified, located wrapper around one raw JSON value.

A TraversalNode is built once per raw value.  Construction classifies the
value (see ``classifier.classify``) and, for arrays and objects, eagerly wraps
every child in its own TraversalNode located one segment deeper.  After
construction a node never changes: ``accept`` only reads it.

Children are built with an explicit stack rather than by recursion, so a
document's nesting depth is bounded by ``TraversalConfig.max_depth`` only,
never by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, assert_never

from json_traversal.config import DEFAULT_CONFIG, TraversalConfig
from json_traversal.errors import MaxDepthExceededError
from json_traversal.tree.classifier import classify
from json_traversal.tree.kinds import NodeKind
from json_traversal.tree.path import PathContext
from json_traversal.visitor.protocols import Override

if TYPE_CHECKING:
    from json_traversal.visitor.protocols import JsonVisitor

__all__ = ["TraversalNode"]

logger = getLogger(__name__)

R = TypeVar("R")

# kind, location, unvisited (segment, raw child) pairs, finished (segment, child)
_Frame = tuple[
    NodeKind,
    PathContext,
    Iterator[tuple[str, Any]],
    list[tuple[str, "TraversalNode"]],
]


@dataclass(frozen=True, slots=True, init=False)
class TraversalNode:
    """A JSON value together with its kind and its location in the document.

    Attributes:
        kind:     Which of the six JSON kinds the value is (see NodeKind).
        value:    NULL    -> None
                  BOOLEAN -> bool
                  NUMBER  -> int for integral values, else float / Decimal
                  STRING  -> str
                  ARRAY   -> tuple of child TraversalNodes, in order
                  OBJECT  -> read-only mapping of key -> child TraversalNode
        location: Where the value sits in the document.

    Equality is structural: kind, value (recursively) and location must all
    match, so the same value at two different locations yields unequal nodes.

    Example::

        node = TraversalNode({"a": [True]})
        node.kind                                    # NodeKind.OBJECT
        node.value["a"].value[0].location.pointer    # "/a/0"
    """

    kind: NodeKind
    value: Any
    location: PathContext

    def __init__(
        self,
        raw: Any,
        location: PathContext | None = None,
        config: TraversalConfig | None = None,
    ) -> None:
        """Classify ``raw`` and wrap its children.

        Args:
            raw:      Any JSON-like value.
            location: Where ``raw`` sits in the document.  Defaults to the root.
            config:   Classification options.  Defaults to ``TraversalConfig()``.

        Raises:
            UnsupportedValueKindError: If ``raw`` or any value nested in it is
                not JSON-like.
            MaxDepthExceededError: If the document nests deeper than
                ``config.max_depth``.
        """
        location = location if location is not None else PathContext.root()
        config = config if config is not None else DEFAULT_CONFIG

        kind, value = _build(raw, location, config)
        _fill(self, kind, value, location)

    @classmethod
    def _assemble(
        cls, kind: NodeKind, value: Any, location: PathContext
    ) -> TraversalNode:
        """Create a node from an already classified and wrapped value."""
        node = object.__new__(cls)
        _fill(node, kind, value, location)
        return node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TraversalNode):
            return NotImplemented
        # Tuple comparison checks identity first, so the shared NaN object
        # the classifier returns compares equal to itself.
        return (self.kind, self.value, self.location) == (
            other.kind,
            other.value,
            other.location,
        )

    def __hash__(self) -> int:
        # Object values are unhashable mappings; kind and location suffice
        # because equal nodes always share both.
        return hash((self.kind, self.location))

    @property
    def children(self) -> tuple[TraversalNode, ...]:
        """Child nodes in document order; empty for scalar kinds."""
        if self.kind is NodeKind.ARRAY:
            return self.value  # type: ignore[no-any-return]
        if self.kind is NodeKind.OBJECT:
            return tuple(self.value.values())
        return ()

    @property
    def is_leaf(self) -> bool:
        return not self.kind.is_composite

    def accept(self, visitor: JsonVisitor[R]) -> R:
        """Dispatch this node to ``visitor`` and return the visit result.

        Exactly one kind handler is called, with this node's location as its
        last argument.  Composite handlers receive the child nodes; recursing
        into them is up to the visitor.  ``visitor.finished_visiting`` is then
        called exactly once: an ``Override`` it returns replaces the handler's
        result, ``None`` keeps it.

        Exceptions raised by the visitor propagate unchanged.

        Raises:
            TypeError: If ``finished_visiting`` returns anything other than
                an ``Override`` or ``None``.
        """
        location = self.location
        result: R
        match self.kind:
            case NodeKind.NULL:
                result = visitor.visit_null(location)
            case NodeKind.BOOLEAN:
                result = visitor.visit_boolean(self.value, location)
            case NodeKind.NUMBER:
                if isinstance(self.value, int):
                    result = visitor.visit_integer(self.value, location)
                else:
                    result = visitor.visit_number(self.value, location)
            case NodeKind.STRING:
                result = visitor.visit_string(self.value, location)
            case NodeKind.ARRAY:
                result = visitor.visit_array(self.value, location)
            case NodeKind.OBJECT:
                result = visitor.visit_object(self.value, location)
            case _:
                assert_never(self.kind)

        override = visitor.finished_visiting(location)
        if override is None:
            return result
        if not isinstance(override, Override):
            msg = (
                f"finished_visiting must return Override or None, "
                f"got {type(override).__name__} at {location.fragment}"
            )
            raise TypeError(msg)
        return override.value


def _fill(
    node: TraversalNode, kind: NodeKind, value: Any, location: PathContext
) -> None:
    object.__setattr__(node, "kind", kind)
    object.__setattr__(node, "value", value)
    object.__setattr__(node, "location", location)


def _classify_at(
    raw: Any, location: PathContext, config: TraversalConfig
) -> tuple[NodeKind, Any]:
    if config.max_depth is not None and location.depth > config.max_depth:
        logger.debug(f"Refusing node at {location}: max_depth={config.max_depth}")
        raise MaxDepthExceededError(location, config.max_depth)
    return classify(raw, location, config)


def _entries(kind: NodeKind, value: Any) -> Iterator[tuple[str, Any]]:
    if kind is NodeKind.ARRAY:
        return ((str(idx), item) for idx, item in enumerate(value))
    return iter(value.items())


def _freeze(kind: NodeKind, built: list[tuple[str, TraversalNode]]) -> Any:
    if kind is NodeKind.ARRAY:
        return tuple(child for _, child in built)
    return MappingProxyType(dict(built))


def _build(
    raw: Any, location: PathContext, config: TraversalConfig
) -> tuple[NodeKind, Any]:
    """Classify ``raw`` and wrap every nested value, depth first.

    Returns the root's ``(kind, value)``; every descendant is already a
    TraversalNode inside ``value``.
    """
    kind, value = _classify_at(raw, location, config)
    if not kind.is_composite:
        return kind, value

    stack: list[_Frame] = [(kind, location, _entries(kind, value), [])]
    while True:
        kind, location, pending, built = stack[-1]
        for segment, item in pending:
            child_location = location.with_segment(segment)
            child_kind, child_value = _classify_at(item, child_location, config)
            if child_kind.is_composite:
                entries = _entries(child_kind, child_value)
                stack.append((child_kind, child_location, entries, []))
                break
            child = TraversalNode._assemble(child_kind, child_value, child_location)
            built.append((segment, child))
        else:
            stack.pop()
            value = _freeze(kind, built)
            if not stack:
                return kind, value
            # the segment of a finished frame is the last one of its location
            node = TraversalNode._assemble(kind, value, location)
            stack[-1][3].append((location.segments[-1], node))
