"""Ready-made visitors built on BaseVisitor.

- LocationIndexer: records the location of every node in a document.
- PythonValueVisitor: rebuilds plain Python values from a node tree.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from json_traversal.visitor.base import BaseVisitor

if TYPE_CHECKING:
    from json_traversal.tree.nodes import TraversalNode
    from json_traversal.tree.path import PathContext
    from json_traversal.visitor.protocols import Override

__all__ = ["LocationIndexer", "PythonValueVisitor"]


class LocationIndexer(BaseVisitor[None]):
    """Indexes every visited location; recursion comes from BaseVisitor.

    Registration happens in ``finished_visiting`` only, so it runs once per
    node whatever its kind.  Because composite handlers recurse before the
    hook fires, the index is in post-order: each node after all of its
    descendants, the root last.

    Example::

        indexer = LocationIndexer()
        TraversalNode({"a": [1]}).accept(indexer)
        list(indexer.index)   # ["/a/0", "/a", ""]
    """

    def __init__(self) -> None:
        self.index: dict[str, PathContext] = {}

    def finished_visiting(self, location: PathContext) -> Override[None] | None:
        self.index[location.pointer] = location
        return None


class PythonValueVisitor(BaseVisitor[Any]):
    """Rebuilds the plain Python value a node tree was built from.

    Arrays become lists and objects become dicts; the canonical null marker
    comes back as None.  Integral floats come back as ints if the tree was
    built with ``integral_floats_as_integers=True``.
    """

    def visit_boolean(self, value: bool, location: PathContext) -> bool:
        return value

    def visit_number(
        self, value: int | float | Decimal, location: PathContext
    ) -> int | float | Decimal:
        return value

    def visit_string(self, value: str, location: PathContext) -> str:
        return value

    def visit_array(
        self, items: tuple[TraversalNode, ...], location: PathContext
    ) -> list[Any]:
        return [child.accept(self) for child in items]

    def visit_object(
        self, members: Mapping[str, TraversalNode], location: PathContext
    ) -> dict[str, Any]:
        return {key: child.accept(self) for key, child in members.items()}
