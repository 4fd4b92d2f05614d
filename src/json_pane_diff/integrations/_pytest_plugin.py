"""pytest plugin for json-pane-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_pane_diff import DiffConfig, compare


def _as_text(document: Any) -> str:
    if isinstance(document, str):
        return document
    return json.dumps(document, ensure_ascii=False)


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture that returns a callable JSON-document asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh PaneComparator per call).

    Usage in tests::

        def test_payload(assert_json_matches):
            assert_json_matches({"team": "Alpha"}, '{"team": "Alpha"}')

        def test_drift(assert_json_matches):
            with pytest.raises(AssertionError, match=r"CHANGED: \\$\\.team"):
                assert_json_matches({"team": "Alpha"}, {"team": "Beta"})

    Returns:
        A callable ``_assert(actual, expected, config=None, max_listed=20) -> None``
        accepting raw JSON text or decoded values on either side.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
        max_listed: int = 20,
    ) -> None:
        """Assert that two JSON documents have no structural differences.

        Args:
            actual:     Document produced by the code under test.
            expected:   Reference document.
            config:     Optional DiffConfig.
            max_listed: Maximum number of change lines in the failure message.

        Raises:
            AssertionError: When either document is invalid JSON, or when the
                documents differ.  The message lists the changes as
                ``KIND: path`` lines.
        """
        result = compare(_as_text(actual), _as_text(expected), config=config)
        if result.parse_errors:
            raise AssertionError(
                f"JSON documents could not be compared: {result.error_text}"
            )
        if result.changes:
            listed = [str(change) for change in result.changes[:max_listed]]
            hidden = len(result.changes) - len(listed)
            if hidden > 0:
                listed.append(f"...and {hidden} more.")
            raise AssertionError(
                f"JSON documents differ: {len(result.changes)} difference(s)\n  "
                + "\n  ".join(listed)
            )

    return _assert
