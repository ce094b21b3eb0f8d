"""pytest plugin for json-traversal.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import pytest

from json_traversal.testing import RecordingVisitor


@pytest.fixture
def recording_visitor() -> RecordingVisitor:
    """Fixture that returns a fresh RecordingVisitor.

    Function-scoped: the visitor accumulates calls, so every test gets its own.

    Usage in tests::

        def test_bool(recording_visitor):
            assert TraversalNode(True).accept(recording_visitor) == "boolean"
            assert recording_visitor.calls_to("visit_boolean")[0].value is True

    Returns:
        A ``RecordingVisitor`` with default canned results and no recursion.
    """
    return RecordingVisitor()
