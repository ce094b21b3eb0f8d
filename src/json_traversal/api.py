"""Public API functions for json-traversal.

Shortcuts over TraversalNode for the common one-shot cases: traverse, locations
and to_python.  Each call builds a fresh node tree and, where needed, a fresh
visitor, so calls never share state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from json_traversal.tree.nodes import TraversalNode
from json_traversal.visitor.builtin import LocationIndexer, PythonValueVisitor

if TYPE_CHECKING:
    from json_traversal.config import TraversalConfig
    from json_traversal.tree.path import PathContext
    from json_traversal.visitor.protocols import JsonVisitor

__all__ = ["locations", "to_python", "traverse"]

R = TypeVar("R")


def traverse(
    document: Any,
    visitor: JsonVisitor[R],
    location: PathContext | None = None,
    config: TraversalConfig | None = None,
) -> R:
    """Wrap ``document`` in a TraversalNode and dispatch it to ``visitor``.

    Args:
        document: Any JSON-like value (dict, list, str, int, float, bool, None).
        visitor:  A JsonVisitor-conformant object.
        location: Location of ``document`` within an enclosing document.
                  Defaults to the root.
        config:   Classification options. Defaults to ``TraversalConfig()``.

    Returns:
        Whatever ``TraversalNode.accept`` returns for the root node.

    Raises:
        UnsupportedValueKindError: If ``document`` contains a non-JSON value.
    """
    return TraversalNode(document, location, config).accept(visitor)


def locations(document: Any, config: TraversalConfig | None = None) -> list[str]:
    """Return the JSON Pointer of every value in ``document``.

    Pointers are listed in post-order: children before their parent, the
    root ("") last.

    Args:
        document: Any JSON-like value.
        config:   Classification options. Defaults to ``TraversalConfig()``.

    Returns:
        A list of RFC 6901 pointer strings, one per value in the document.
    """
    indexer = LocationIndexer()
    traverse(document, indexer, config=config)
    return list(indexer.index)


def to_python(node: TraversalNode) -> Any:
    """Rebuild the plain Python value (lists, dicts, scalars) behind ``node``."""
    return node.accept(PythonValueVisitor())
