"""Integrations subpackage for json-traversal.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``recording_visitor`` fixture

The plugin module is loaded by pytest itself and is not re-exported here, so
importing json_traversal never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
