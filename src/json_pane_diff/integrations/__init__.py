"""Integrations subpackage for json-pane-diff.

Contains integration adapters for external frameworks:
- pytest plugin providing the ``assert_json_matches`` fixture
  (auto-discovered via the pytest11 entry point)
"""

from __future__ import annotations

__all__: list[str] = []
