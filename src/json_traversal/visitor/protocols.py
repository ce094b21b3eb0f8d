"""JsonVisitor Protocol and the Override result wrapper.

A visitor has one handler per JSON kind plus a finishing hook.  Any class with
conformant methods satisfies ``JsonVisitor`` -- no inheritance required --
although subclassing ``BaseVisitor`` saves writing handlers you don't need.

Example::

    from json_traversal import BaseVisitor, Override, TraversalNode

    class Redactor(BaseVisitor[object]):
        def visit_string(self, value, location):
            return value

        def finished_visiting(self, location):
            if location.last == "password":
                return Override("***")
            return None

    TraversalNode("hunter2").accept(Redactor())   # "hunter2"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from json_traversal.tree.nodes import TraversalNode
    from json_traversal.tree.path import PathContext

__all__ = ["JsonVisitor", "Override"]

T = TypeVar("T")
R_co = TypeVar("R_co", covariant=True)


@dataclass(frozen=True, slots=True)
class Override(Generic[T]):
    """Result of a finishing hook that replaces the kind handler's result.

    Returning ``None`` from ``finished_visiting`` means "keep the handler's
    result"; returning ``Override(None)`` means "the result is None".
    """

    value: T


@runtime_checkable
class JsonVisitor(Protocol[R_co]):
    """Structural protocol for visitors accepted by ``TraversalNode.accept``.

    Every handler receives the current node's location as its last argument.
    ``visit_array`` and ``visit_object`` receive child TraversalNodes, not raw
    values; a visitor that wants to recurse calls ``child.accept(self)``.

    ``visit_integer`` is called for integral numbers and ``visit_number`` for
    all other numbers (floats and non-integral Decimals).

    ``finished_visiting`` runs after the kind handler on every ``accept``.
    """

    def visit_null(self, location: PathContext) -> R_co: ...

    def visit_boolean(self, value: bool, location: PathContext) -> R_co: ...

    def visit_integer(self, value: int, location: PathContext) -> R_co: ...

    def visit_number(self, value: float | Decimal, location: PathContext) -> R_co: ...

    def visit_string(self, value: str, location: PathContext) -> R_co: ...

    def visit_array(
        self, items: tuple[TraversalNode, ...], location: PathContext
    ) -> R_co: ...

    def visit_object(
        self, members: Mapping[str, TraversalNode], location: PathContext
    ) -> R_co: ...

    def finished_visiting(self, location: PathContext) -> Override[R_co] | None: ...
