"""PaneComparator: orchestrator that wires parser, differs, and renderers.

This is the wiring layer between the raw algorithm pieces and the public
API.  It turns two raw texts into a ``ComparisonResult`` holding the change
list and both panes' display lines.

Architecture:
- compare() starts a wall-clock timer and parses both texts.
- Both parsed: StructuralDiffer -> HighlightIndex -> TreeRenderer per side.
- Either failed: positional line diff -> raw renderer per side, with both
  parse errors carried on the result.  A parse failure never raises.
- Key-similarity scores are memoized in a per-instance ``ScoreCache``.  The
  scorer is pure, so the cache changes timing only, never results.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from json_pane_diff.algorithm.changes import HighlightIndex
from json_pane_diff.algorithm.config import DiffConfig
from json_pane_diff.algorithm.differ import StructuralDiffer
from json_pane_diff.algorithm.lines import diff_lines
from json_pane_diff.algorithm.similarity import EditDistanceScorer
from json_pane_diff.cache import ScoreCache
from json_pane_diff.parser import parse_document
from json_pane_diff.render.formatter import format_text
from json_pane_diff.render.raw import render_raw
from json_pane_diff.render.records import Side
from json_pane_diff.render.tree import TreeRenderer
from json_pane_diff.result import (
    ComparisonMode,
    ComparisonResult,
    FormatResult,
    ParseErrors,
)

if TYPE_CHECKING:
    from json_pane_diff.protocols import SimilarityScorer

__all__ = ["PaneComparator"]

logger = logging.getLogger(__name__)


class PaneComparator:
    """Orchestrator for two-pane JSON comparison.

    Example::

        from json_pane_diff.comparator import PaneComparator

        cmp = PaneComparator()
        result = cmp.compare('{"email": "a@x.io"}', '{"emial": "a@x.io"}')
        result.mode                          # ComparisonMode.STRUCTURAL
        [str(c) for c in result.changes]     # ["CHANGED: $.email", "CHANGED: $.emial"]
        [l.text for l in result.right_lines] # ['{', '  "emial": "a@x.io"', '}']
    """

    def __init__(
        self,
        scorer: SimilarityScorer | None = None,
        config: DiffConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            scorer: Key-name similarity scorer for rename detection.  Defaults
                to ``EditDistanceScorer()``.
            config: Comparison parameters.  Defaults to ``DiffConfig()``.
            max_cache_size: Maximum number of key-pair scores held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``DiffConfig``.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        raw_scorer = scorer if scorer is not None else EditDistanceScorer()
        self._scorer = ScoreCache(raw_scorer, max_size=max_cache_size)
        self._differ = StructuralDiffer(scorer=self._scorer, config=self._config)
        self._renderer = TreeRenderer(indent=self._config.indent)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left_text: str, right_text: str) -> ComparisonResult:
        """Compare two raw documents.

        Args:
            left_text:  Raw text of the left document.
            right_text: Raw text of the right document.

        Returns:
            A ``ComparisonResult``; STRUCTURAL when both texts are valid JSON,
            PLAIN_TEXT otherwise.
        """
        t0 = time.perf_counter()

        left = parse_document(left_text)
        right = parse_document(right_text)

        if left.node is not None and right.node is not None:
            changes = self._differ.diff(left.node, right.node)
            highlights = HighlightIndex.from_changes(changes)
            left_lines = self._renderer.render(left.node, highlights, Side.LEFT)
            right_lines = self._renderer.render(right.node, highlights, Side.RIGHT)
            logger.debug(
                "Structural comparison: %d change(s), %d/%d lines",
                len(changes),
                len(left_lines),
                len(right_lines),
            )
            return ComparisonResult(
                mode=ComparisonMode.STRUCTURAL,
                changes=tuple(changes),
                left_lines=tuple(left_lines),
                right_lines=tuple(right_lines),
                parse_errors=ParseErrors(),
                computation_time_ms=(time.perf_counter() - t0) * 1000.0,
            )

        errors = ParseErrors(left=left.error, right=right.error)
        logger.debug("Falling back to plain-text comparison: %s", errors.describe())

        line_diff = diff_lines(left_text, right_text)
        return ComparisonResult(
            mode=ComparisonMode.PLAIN_TEXT,
            changes=(),
            left_lines=tuple(render_raw(left_text, line_diff.left, Side.LEFT)),
            right_lines=tuple(render_raw(right_text, line_diff.right, Side.RIGHT)),
            parse_errors=errors,
            computation_time_ms=(time.perf_counter() - t0) * 1000.0,
        )

    def format(self, left_text: str, right_text: str) -> FormatResult:
        """Pretty-print each side that parses; pass the others through.

        Args:
            left_text:  Raw text of the left document.
            right_text: Raw text of the right document.

        Returns:
            A ``FormatResult``.
        """
        left, left_error = format_text(left_text, self._config.indent)
        right, right_error = format_text(right_text, self._config.indent)
        return FormatResult(
            left=left,
            right=right,
            parse_errors=ParseErrors(left=left_error, right=right_error),
        )
