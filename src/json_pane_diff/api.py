"""Public API functions for json-pane-diff.

Each call creates a fresh PaneComparator (or StructuralDiffer) so that no
state survives between calls.
"""

from __future__ import annotations

from typing import Any

from json_pane_diff.algorithm.changes import ChangeRecord
from json_pane_diff.algorithm.config import DiffConfig
from json_pane_diff.algorithm.differ import StructuralDiffer
from json_pane_diff.comparator import PaneComparator
from json_pane_diff.parser import parse_document
from json_pane_diff.result import ComparisonResult, FormatResult
from json_pane_diff.tree.builder import TreeBuilder

__all__ = ["compare", "diff", "format_documents", "parse_document"]

_builder = TreeBuilder()


def compare(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
) -> ComparisonResult:
    """Compare two raw documents and return both annotated panes.

    Args:
        left_text:  Raw text of the left document.
        right_text: Raw text of the right document.
        config:     Comparison parameters.  Defaults to ``DiffConfig()``.

    Returns:
        A ``ComparisonResult``.  Invalid JSON on either side yields
        ``mode=PLAIN_TEXT`` with the parse errors attached; it never raises.
    """
    return PaneComparator(config=config).compare(left_text, right_text)


def format_documents(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
) -> FormatResult:
    """Pretty-print both documents independently.

    A side that is not valid JSON is returned unchanged, with its error in
    ``parse_errors``.
    """
    return PaneComparator(config=config).format(left_text, right_text)


def diff(
    left: Any,
    right: Any,
    config: DiffConfig | None = None,
) -> list[ChangeRecord]:
    """Structurally diff two decoded JSON values.

    Args:
        left:   First JSON value (dict, list, str, int, float, bool, None).
        right:  Second JSON value.
        config: Comparison parameters.  Defaults to ``DiffConfig()``.

    Returns:
        The ordered change records; empty when the values are equal.

    Raises:
        TypeError: If either value contains a non-JSON Python type.
        ValueError: If either value contains NaN or an infinity.
    """
    differ = StructuralDiffer(config=config)
    return differ.diff(_builder.build(left), _builder.build(right))

