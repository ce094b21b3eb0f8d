"""Kind guards for code that consumes TraversalNodes.

Each ``require_*`` function checks a node's kind and returns its value in the
expected shape, or raises ``SchemaError`` pointing at the node's location.
Schema loaders use them to reject documents such as ``{"type": true}`` where
only a string is allowed.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from logging import getLogger

from json_traversal.errors import SchemaError
from json_traversal.tree.kinds import NodeKind
from json_traversal.tree.nodes import TraversalNode

__all__ = [
    "require_array",
    "require_boolean",
    "require_integer",
    "require_kind",
    "require_number",
    "require_object",
    "require_string",
]

logger = getLogger(__name__)


def _fail(node: TraversalNode, *expected: str) -> SchemaError:
    found = node.kind.display_name
    logger.debug(f"Guard failed at {node.location}: expected {expected}, found {found}")
    return SchemaError(node.location, expected, found)


def require_kind(node: TraversalNode, *kinds: NodeKind) -> TraversalNode:
    """Return ``node`` if its kind is one of ``kinds``.

    Raises:
        SchemaError: Otherwise; the message lists every accepted kind.
    """
    if node.kind not in kinds:
        raise _fail(node, *(kind.display_name for kind in kinds))
    return node


def require_string(node: TraversalNode) -> str:
    """Return the string held by ``node``.

    Raises:
        SchemaError: If ``node`` is not a STRING node.
    """
    return require_kind(node, NodeKind.STRING).value  # type: ignore[no-any-return]


def require_boolean(node: TraversalNode) -> bool:
    return require_kind(node, NodeKind.BOOLEAN).value  # type: ignore[no-any-return]


def require_number(node: TraversalNode) -> int | float | Decimal:
    return require_kind(node, NodeKind.NUMBER).value  # type: ignore[no-any-return]


def require_integer(node: TraversalNode) -> int:
    """Return the integer held by ``node``.

    Raises:
        SchemaError: If ``node`` is not a NUMBER node, or holds a number with
            a fractional part (reported as found "Number").
    """
    value = require_kind(node, NodeKind.NUMBER).value
    if not isinstance(value, int):
        raise _fail(node, "Integer")
    return value


def require_array(node: TraversalNode) -> tuple[TraversalNode, ...]:
    """Return the child nodes of an ARRAY node."""
    return require_kind(node, NodeKind.ARRAY).value  # type: ignore[no-any-return]


def require_object(node: TraversalNode) -> Mapping[str, TraversalNode]:
    """Return the key -> child mapping of an OBJECT node."""
    return require_kind(node, NodeKind.OBJECT).value  # type: ignore[no-any-return]
