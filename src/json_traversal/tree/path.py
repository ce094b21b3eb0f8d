"""PathContext: immutable JSON Pointer location of a node within a document.

A PathContext is an ordered tuple of path segments.  Object keys are used
verbatim; array indices are stored as their decimal string.  Descending into a
child never mutates the parent context -- ``with_segment`` returns a new one --
so sibling branches of a traversal can never observe each other's paths.

Rendering follows RFC 6901:
- Root renders as "" (empty string)
- Each segment renders as "/{escaped}" with "~" -> "~0" and "/" -> "~1"
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, unquote

__all__ = ["PathContext", "escape_segment", "unescape_segment"]

# Characters left unencoded in the URI-fragment form of a pointer
_FRAGMENT_SAFE = "/~!$&'()*+,;=:@"


def escape_segment(segment: str) -> str:
    """Escape one segment for use in a JSON Pointer.

    Order matters: "~" must be escaped before "/" or the "~" introduced by
    "~1" would itself be escaped.
    """
    return segment.replace("~", "~0").replace("/", "~1")


def unescape_segment(segment: str) -> str:
    """Reverse ``escape_segment``.

    Raises:
        ValueError: If ``segment`` contains a "~" not followed by "0" or "1".
    """
    pos = segment.find("~")
    while pos != -1:
        if segment[pos + 1 : pos + 2] not in ("0", "1"):
            msg = f"invalid escape sequence in JSON Pointer segment {segment!r}"
            raise ValueError(msg)
        pos = segment.find("~", pos + 2)
    return segment.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True, slots=True)
class PathContext:
    """Location of a node, as an immutable sequence of pointer segments.

    Attributes:
        segments: Path segments from the document root, outermost first.
            A tuple, so handing it to callers exposes no mutable state.

    Example::

        root = PathContext.root()
        ctx = root.with_segment("items").with_index(0)
        ctx.segments   # ("items", "0")
        ctx.pointer    # "/items/0"
        root.segments  # () -- unchanged
    """

    segments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Callers may pass any iterable; never keep a reference to a mutable one.
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def root(cls) -> PathContext:
        """Return the context of a document root (no segments)."""
        return _ROOT

    @classmethod
    def from_pointer(cls, pointer: str) -> PathContext:
        """Parse a JSON Pointer, or its "#"-prefixed URI-fragment form.

        Raises:
            ValueError: If the pointer is non-empty and does not start with
                "/", or contains an invalid "~" escape.
        """
        if pointer.startswith("#"):
            pointer = unquote(pointer[1:])
        if pointer == "":
            return _ROOT
        if not pointer.startswith("/"):
            msg = f"JSON Pointer must be empty or start with '/', got {pointer!r}"
            raise ValueError(msg)
        return cls(tuple(unescape_segment(s) for s in pointer[1:].split("/")))

    def with_segment(self, segment: str) -> PathContext:
        """Return a new context with ``segment`` appended; self is unchanged."""
        return PathContext((*self.segments, segment))

    def with_index(self, index: int) -> PathContext:
        """Return a new context for array element ``index``."""
        return self.with_segment(str(index))

    @property
    def parent(self) -> PathContext:
        """Context of the enclosing value.  The root is its own parent."""
        if not self.segments:
            return self
        return PathContext(self.segments[:-1])

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def last(self) -> str | None:
        """Final segment, or None at the root."""
        return self.segments[-1] if self.segments else None

    @property
    def pointer(self) -> str:
        """RFC 6901 JSON Pointer string, e.g. "/a~1b/0"."""
        return "".join(f"/{escape_segment(s)}" for s in self.segments)

    @property
    def fragment(self) -> str:
        """URI-fragment form of the pointer, e.g. "#/definitions/my%20type"."""
        return "#" + quote(self.pointer, safe=_FRAGMENT_SAFE)

    def __str__(self) -> str:
        return self.pointer


_ROOT = PathContext()
