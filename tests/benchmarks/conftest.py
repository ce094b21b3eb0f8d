"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: ~100-value flat, ~1k-value nested, ~10k-value deeply nested.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic mixed scalar values."""
    scalars: list[Any] = [None, True, 1, 2.5, "text"]
    return {f"{prefix}_{i}": scalars[i % len(scalars)] for i in range(num_keys)}


def _make_nested_1k() -> dict[str, Any]:
    """10 sections x (10 records x 9 leaves + array) ~= 1k values."""
    doc: dict[str, Any] = {}
    for i in range(10):
        doc[f"section_{i}"] = {
            f"record_{j}": {
                **generate_flat_object(8, prefix=f"field_{i}_{j}"),
                "tags": [f"t{k}" for k in range(j % 3)],
            }
            for j in range(10)
        }
    return doc


def _make_deep_10k() -> dict[str, Any]:
    """5 levels of 6-way fan-out objects ending in 8-element arrays ~= 10k values."""

    def level(depth: int) -> Any:
        if depth == 0:
            return [k * 0.5 for k in range(8)]
        return {f"n{depth}_{k}": level(depth - 1) for k in range(6)}

    return {"root": level(4)}


@pytest.fixture
def doc_flat_100() -> dict[str, Any]:
    """100-key flat object of mixed scalars."""
    return generate_flat_object(100)


@pytest.fixture
def doc_nested_1k() -> dict[str, Any]:
    """~1k-value nested object."""
    return _make_nested_1k()


@pytest.fixture
def doc_deep_10k() -> dict[str, Any]:
    """~10k-value deeply nested object."""
    return _make_deep_10k()
