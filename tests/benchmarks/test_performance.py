"""Performance benchmark suite for json-traversal.

Measures the two phases separately:
- construction: classifying a raw document into a TraversalNode tree
- traversal: a full recursive visit of an already-built tree

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

from json_traversal import LocationIndexer, PythonValueVisitor, TraversalNode


def _index(node: TraversalNode) -> int:
    indexer = LocationIndexer()
    node.accept(indexer)
    return len(indexer.index)


class TestConstruction:
    """Benchmarks for building node trees."""

    def test_flat_100(self, benchmark, doc_flat_100):  # type: ignore[no-untyped-def]
        node = benchmark(TraversalNode, doc_flat_100)
        # Verify the result is valid (not just timing)
        assert len(node.value) == 100

    def test_nested_1k(self, benchmark, doc_nested_1k):  # type: ignore[no-untyped-def]
        node = benchmark(TraversalNode, doc_nested_1k)
        assert len(node.value) == 10

    def test_deep_10k(self, benchmark, doc_deep_10k):  # type: ignore[no-untyped-def]
        node = benchmark(TraversalNode, doc_deep_10k)
        assert node.value["root"].location.pointer == "/root"


class TestTraversal:
    """Benchmarks for visiting prebuilt node trees."""

    def test_index_flat_100(self, benchmark, doc_flat_100):  # type: ignore[no-untyped-def]
        node = TraversalNode(doc_flat_100)
        assert benchmark(_index, node) == 101

    def test_index_deep_10k(self, benchmark, doc_deep_10k):  # type: ignore[no-untyped-def]
        node = TraversalNode(doc_deep_10k)
        assert benchmark(_index, node) > 10_000

    def test_to_python_nested_1k(self, benchmark, doc_nested_1k):  # type: ignore[no-untyped-def]
        node = TraversalNode(doc_nested_1k)
        assert benchmark(node.accept, PythonValueVisitor()) == doc_nested_1k
