"""BaseVisitor: a JsonVisitor that walks the whole document and returns None.

Subclass it and override only the handlers you care about.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from json_traversal.tree.nodes import TraversalNode
    from json_traversal.tree.path import PathContext
    from json_traversal.visitor.protocols import Override

__all__ = ["BaseVisitor"]

R = TypeVar("R")


class BaseVisitor(Generic[R]):
    """Visitor whose default handlers all return None.

    ``visit_array`` and ``visit_object`` accept every child before returning,
    so a subclass that only overrides, say, ``visit_string`` still sees every
    string in the document.

    ``visit_integer`` forwards to ``visit_number``, so a subclass that treats
    all numbers alike only needs to override ``visit_number``.

    ``finished_visiting`` returns None, i.e. never overrides.
    """

    def visit_null(self, location: PathContext) -> R | None:
        return None

    def visit_boolean(self, value: bool, location: PathContext) -> R | None:
        return None

    def visit_integer(self, value: int, location: PathContext) -> R | None:
        return self.visit_number(value, location)

    def visit_number(
        self, value: int | float | Decimal, location: PathContext
    ) -> R | None:
        return None

    def visit_string(self, value: str, location: PathContext) -> R | None:
        return None

    def visit_array(
        self, items: tuple[TraversalNode, ...], location: PathContext
    ) -> R | None:
        for child in items:
            child.accept(self)
        return None

    def visit_object(
        self, members: Mapping[str, TraversalNode], location: PathContext
    ) -> R | None:
        for child in members.values():
            child.accept(self)
        return None

    def finished_visiting(self, location: PathContext) -> Override[R] | None:
        return None
