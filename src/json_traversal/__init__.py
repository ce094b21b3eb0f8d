"""JSON traversal - typed, located visitor dispatch over JSON documents."""

from __future__ import annotations

from json_traversal.api import locations, to_python, traverse
from json_traversal.config import TraversalConfig
from json_traversal.errors import (
    MaxDepthExceededError,
    SchemaError,
    TraversalError,
    UnsupportedValueKindError,
)
from json_traversal.guards import (
    require_array,
    require_boolean,
    require_integer,
    require_kind,
    require_number,
    require_object,
    require_string,
)
from json_traversal.tree import NULL, JsonNull, NodeKind, PathContext, TraversalNode
from json_traversal.visitor import (
    BaseVisitor,
    JsonVisitor,
    LocationIndexer,
    Override,
    PythonValueVisitor,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "NULL",
    "BaseVisitor",
    "JsonNull",
    "JsonVisitor",
    "LocationIndexer",
    "MaxDepthExceededError",
    "NodeKind",
    "Override",
    "PathContext",
    "PythonValueVisitor",
    "SchemaError",
    "TraversalConfig",
    "TraversalError",
    "TraversalNode",
    "UnsupportedValueKindError",
    "locations",
    "require_array",
    "require_boolean",
    "require_integer",
    "require_kind",
    "require_number",
    "require_object",
    "require_string",
    "to_python",
    "traverse",
]
