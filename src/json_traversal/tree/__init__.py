"""Tree subpackage: located, classified wrappers around raw JSON values.

Re-exports the public API for the tree module:
- PathContext: immutable JSON Pointer location of a node
- NodeKind: StrEnum of the six JSON value kinds
- NULL / JsonNull: canonical null marker, treated exactly like None
- TraversalNode: classified value + location, with visitor dispatch
- classify: the raw value -> NodeKind classification function
"""

from json_traversal.tree.classifier import classify
from json_traversal.tree.kinds import NULL, JsonNull, NodeKind
from json_traversal.tree.nodes import TraversalNode
from json_traversal.tree.path import PathContext

__all__ = ["NULL", "JsonNull", "NodeKind", "PathContext", "TraversalNode", "classify"]
