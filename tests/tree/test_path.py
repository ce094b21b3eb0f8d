"""Tests for PathContext and the RFC 6901 segment escaping helpers.

Covers:
- Root context has no segments
- with_segment / with_index derive new contexts without touching the parent
- Immutability (FrozenInstanceError, tuple segments)
- Pointer and URI-fragment rendering, including "~" and "/" escaping
- from_pointer parsing and its error cases
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_traversal.tree.path import PathContext, escape_segment, unescape_segment

# ---------------------------------------------------------------------------
# Construction and derivation
# ---------------------------------------------------------------------------


class TestDerivation:
    def test_root_has_no_segments(self) -> None:
        assert PathContext.root().segments == ()

    def test_root_is_shared(self) -> None:
        assert PathContext.root() is PathContext.root()

    def test_with_segment_appends(self) -> None:
        ctx = PathContext.root().with_segment("a").with_segment("b")
        assert ctx.segments == ("a", "b")

    def test_with_segment_leaves_parent_unchanged(self) -> None:
        parent = PathContext(("a",))
        child = parent.with_segment("b")
        assert parent.segments == ("a",)
        assert child is not parent

    def test_siblings_do_not_alias(self) -> None:
        parent = PathContext(("items",))
        first = parent.with_index(0)
        second = parent.with_index(1)
        assert first.segments == ("items", "0")
        assert second.segments == ("items", "1")

    def test_with_index_stringifies(self) -> None:
        assert PathContext.root().with_index(12).segments == ("12",)

    def test_list_segments_are_frozen_to_tuple(self) -> None:
        source = ["a", "b"]
        ctx = PathContext(source)  # type: ignore[arg-type]
        source.append("c")
        assert ctx.segments == ("a", "b")
        assert isinstance(ctx.segments, tuple)

    def test_equality_is_by_segments(self) -> None:
        assert PathContext.root().with_segment("a") == PathContext(("a",))
        assert hash(PathContext(("a",))) == hash(PathContext(("a",)))

    def test_cannot_assign_segments(self) -> None:
        ctx = PathContext(("a",))
        with pytest.raises(FrozenInstanceError):
            ctx.segments = ("b",)  # type: ignore[misc]


class TestNavigation:
    def test_parent(self) -> None:
        assert PathContext(("a", "b")).parent == PathContext(("a",))

    def test_parent_of_root_is_root(self) -> None:
        root = PathContext.root()
        assert root.parent is root

    def test_depth(self) -> None:
        assert PathContext.root().depth == 0
        assert PathContext(("a", "0", "b")).depth == 3

    def test_last(self) -> None:
        assert PathContext.root().last is None
        assert PathContext(("a", "0")).last == "0"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_root_pointer_is_empty(self) -> None:
        assert PathContext.root().pointer == ""

    def test_simple_pointer(self) -> None:
        assert PathContext(("a", "0", "b")).pointer == "/a/0/b"

    def test_pointer_escapes_tilde_and_slash(self) -> None:
        assert PathContext(("a/b", "m~n")).pointer == "/a~1b/m~0n"

    def test_empty_segment(self) -> None:
        assert PathContext(("",)).pointer == "/"

    def test_str_is_pointer(self) -> None:
        assert str(PathContext(("a", "1"))) == "/a/1"

    def test_root_fragment(self) -> None:
        assert PathContext.root().fragment == "#"

    def test_fragment_percent_encodes(self) -> None:
        assert PathContext(("definitions", "my type")).fragment == (
            "#/definitions/my%20type"
        )

    def test_fragment_keeps_pointer_escapes(self) -> None:
        assert PathContext(("a/b",)).fragment == "#/a~1b"


class TestEscaping:
    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("plain", "plain"),
            ("a/b", "a~1b"),
            ("m~n", "m~0n"),
            ("~1", "~01"),
            ("/~", "~1~0"),
        ],
    )
    def test_escape(self, raw: str, escaped: str) -> None:
        assert escape_segment(raw) == escaped
        assert unescape_segment(escaped) == raw

    @pytest.mark.parametrize("bad", ["~", "a~", "~2", "x~y"])
    def test_unescape_rejects_bad_sequences(self, bad: str) -> None:
        with pytest.raises(ValueError, match="invalid escape"):
            unescape_segment(bad)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestFromPointer:
    def test_empty_is_root(self) -> None:
        assert PathContext.from_pointer("") == PathContext.root()

    def test_hash_alone_is_root(self) -> None:
        assert PathContext.from_pointer("#") == PathContext.root()

    def test_plain_pointer(self) -> None:
        assert PathContext.from_pointer("/a/0").segments == ("a", "0")

    def test_escaped_pointer(self) -> None:
        assert PathContext.from_pointer("/a~1b/m~0n").segments == ("a/b", "m~n")

    def test_fragment_form(self) -> None:
        ctx = PathContext.from_pointer("#/definitions/my%20type")
        assert ctx.segments == ("definitions", "my type")

    def test_trailing_slash_is_empty_segment(self) -> None:
        assert PathContext.from_pointer("/a/").segments == ("a", "")

    def test_round_trip(self) -> None:
        ctx = PathContext(("a/b", "", "m~n", "0"))
        assert PathContext.from_pointer(ctx.pointer) == ctx
        assert PathContext.from_pointer(ctx.fragment) == ctx

    def test_missing_leading_slash(self) -> None:
        with pytest.raises(ValueError, match="must be empty or start with"):
            PathContext.from_pointer("a/b")

    def test_bad_escape(self) -> None:
        with pytest.raises(ValueError, match="invalid escape"):
            PathContext.from_pointer("/a~2")
