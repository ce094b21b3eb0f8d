"""RecordingVisitor: a JsonVisitor that remembers every call it receives.

Lets tests assert on exactly which handlers ``accept`` called, with which
arguments and locations, without patching or spying on methods.

Example::

    visitor = RecordingVisitor()
    TraversalNode(True).accept(visitor)  # "boolean"
    visitor.calls    # [VisitRecord("visit_boolean", True, root)]
    visitor.finished # [root]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_traversal.tree.nodes import TraversalNode
    from json_traversal.tree.path import PathContext
    from json_traversal.visitor.protocols import Override

__all__ = ["RecordingVisitor", "VisitRecord"]


@dataclass(frozen=True, slots=True)
class VisitRecord:
    """One kind-handler call.

    Attributes:
        handler:  Name of the handler method, e.g. "visit_boolean".
        value:    The value argument (None for visit_null).  For composites,
                  the tuple / mapping of child nodes exactly as received.
        location: The location argument.
    """

    handler: str
    value: Any
    location: PathContext


@dataclass
class RecordingVisitor:
    """Visitor that records its calls and returns canned results.

    Each kind handler returns the handler name without the ``visit_`` prefix
    ("null", "boolean", "integer", ...), unless ``results`` maps the handler
    name to something else.  ``finished_visiting`` returns ``finish_result``.

    Attributes:
        results:       Per-handler return values, keyed by handler name.
        finish_result: What ``finished_visiting`` returns (None: no override).
        recurse:       When True, composite handlers call ``accept`` on every
                       child, so the whole document gets recorded.
        calls:         Kind-handler calls, in call order.
        finished:      Locations passed to ``finished_visiting``, in call order.
    """

    results: dict[str, Any] = field(default_factory=dict)
    finish_result: Override[Any] | None = None
    recurse: bool = False
    calls: list[VisitRecord] = field(default_factory=list)
    finished: list[PathContext] = field(default_factory=list)

    def _record(self, handler: str, value: Any, location: PathContext) -> Any:
        self.calls.append(VisitRecord(handler, value, location))
        return self.results.get(handler, handler.removeprefix("visit_"))

    def calls_to(self, handler: str) -> list[VisitRecord]:
        """Return the recorded calls to one handler, in call order."""
        return [call for call in self.calls if call.handler == handler]

    def visit_null(self, location: PathContext) -> Any:
        return self._record("visit_null", None, location)

    def visit_boolean(self, value: bool, location: PathContext) -> Any:
        return self._record("visit_boolean", value, location)

    def visit_integer(self, value: int, location: PathContext) -> Any:
        return self._record("visit_integer", value, location)

    def visit_number(self, value: float | Decimal, location: PathContext) -> Any:
        return self._record("visit_number", value, location)

    def visit_string(self, value: str, location: PathContext) -> Any:
        return self._record("visit_string", value, location)

    def visit_array(
        self, items: tuple[TraversalNode, ...], location: PathContext
    ) -> Any:
        result = self._record("visit_array", items, location)
        if self.recurse:
            for child in items:
                child.accept(self)
        return result

    def visit_object(
        self, members: Mapping[str, TraversalNode], location: PathContext
    ) -> Any:
        result = self._record("visit_object", members, location)
        if self.recurse:
            for child in members.values():
                child.accept(self)
        return result

    def finished_visiting(self, location: PathContext) -> Override[Any] | None:
        self.finished.append(location)
        return self.finish_result
