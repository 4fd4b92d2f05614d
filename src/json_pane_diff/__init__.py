"""json-pane-diff - structural JSON diff with side-by-side annotated views."""

from __future__ import annotations

import logging

from json_pane_diff.algorithm.changes import ChangeKind, ChangeRecord
from json_pane_diff.algorithm.config import DiffConfig
from json_pane_diff.api import compare, diff, format_documents, parse_document
from json_pane_diff.comparator import PaneComparator
from json_pane_diff.render.records import LineClass, LineRecord, Side
from json_pane_diff.result import (
    ComparisonMode,
    ComparisonResult,
    FormatResult,
    ParseErrors,
)
from json_pane_diff.tree.path import Path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChangeKind",
    "ChangeRecord",
    "ComparisonMode",
    "ComparisonResult",
    "DiffConfig",
    "FormatResult",
    "LineClass",
    "LineRecord",
    "PaneComparator",
    "ParseErrors",
    "Path",
    "Side",
    "compare",
    "diff",
    "format_documents",
    "parse_document",
]
