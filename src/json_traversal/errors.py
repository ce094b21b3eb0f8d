"""Exception hierarchy for json-traversal.

Engine errors derive from ``TraversalError``.  ``SchemaError`` is the domain
error raised by guard utilities (``json_traversal.guards``); it is not an
engine error and ``TraversalNode.accept`` lets it propagate untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_traversal.tree.path import PathContext

__all__ = [
    "MaxDepthExceededError",
    "SchemaError",
    "TraversalError",
    "UnsupportedValueKindError",
]


class TraversalError(Exception):
    """Base class for errors raised by the traversal engine itself."""


class UnsupportedValueKindError(TraversalError, TypeError):
    """A raw value could not be classified into one of the six node kinds.

    Subclasses ``TypeError`` so callers catching the builtin for "not a JSON
    value" keep working.

    Attributes:
        value:    The offending raw value.
        location: Where in the document the value was found.
    """

    def __init__(self, value: Any, location: PathContext, reason: str = "") -> None:
        self.value = value
        self.location = location
        kind = type(value).__name__
        msg = f"{location.fragment}: unsupported JSON value of type {kind!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class MaxDepthExceededError(TraversalError, ValueError):
    """The document nests deeper than ``TraversalConfig.max_depth`` allows."""

    def __init__(self, location: PathContext, max_depth: int) -> None:
        self.location = location
        self.max_depth = max_depth
        super().__init__(
            f"{location.fragment}: depth {location.depth} exceeds max_depth={max_depth}"
        )


class SchemaError(Exception):
    """A node failed an expected-kind check performed by a guard utility.

    The message follows the ``"<location>: expected type: X, found: Y"``
    convention so it can be surfaced to schema authors directly.

    Attributes:
        location: Location of the offending node.
        expected: Display names of the accepted kinds.
        found:    Display name of the node's actual kind.
    """

    def __init__(
        self, location: PathContext, expected: tuple[str, ...], found: str
    ) -> None:
        self.location = location
        self.expected = expected
        self.found = found
        expected_text = " or ".join(expected)
        super().__init__(
            f"{location.fragment}: expected type: {expected_text}, found: {found}"
        )
