"""Visitor subpackage: the contract TraversalNode.accept dispatches to.

Re-exports:
- JsonVisitor: runtime-checkable Protocol, one handler per kind + finishing hook
- Override: finishing-hook result that replaces the handler's result
- BaseVisitor: no-op defaults to subclass
- LocationIndexer, PythonValueVisitor: ready-made recursive visitors
"""

from json_traversal.visitor.base import BaseVisitor
from json_traversal.visitor.builtin import LocationIndexer, PythonValueVisitor
from json_traversal.visitor.protocols import JsonVisitor, Override

__all__ = [
    "BaseVisitor",
    "JsonVisitor",
    "LocationIndexer",
    "Override",
    "PythonValueVisitor",
]
