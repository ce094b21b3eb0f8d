"""NodeKind StrEnum and the canonical JSON null marker.

NodeKind is the closed set of value kinds a TraversalNode can hold.  NULL is
the document-level null marker for producers that need a value distinct from
Python's ``None`` (e.g. to mark "explicitly null" while ``None`` means
"absent").  The traversal engine treats both identically.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Final

__all__ = ["NULL", "JsonNull", "NodeKind"]


class NodeKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"   : integral and fractional numbers alike
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def display_name(self) -> str:
        """Capitalised name used in error messages, e.g. "Boolean"."""
        return self.value.capitalize()

    @property
    def is_composite(self) -> bool:
        return self in (NodeKind.ARRAY, NodeKind.OBJECT)


class JsonNull:
    """Type of the ``NULL`` singleton.  Falsy, and equal only to itself."""

    __slots__ = ()
    _instance: JsonNull | None = None

    def __new__(cls) -> JsonNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL"

    def __reduce__(self) -> str:
        return "NULL"


NULL: Final = JsonNull()
