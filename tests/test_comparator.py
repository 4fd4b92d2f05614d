"""Tests for PaneComparator - the orchestrator behind compare() and format.

Covers:
- Structural mode: change list, both panes, highlights
- Plain-text fallback: parse errors on either or both sides, line classes
- Config forwarding (indent, rename detection)
- Custom scorers are wrapped in the per-instance score cache
- computation_time_ms is always a non-negative float
- Documents nested up to the parser's depth limit compare structurally
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from json_pane_diff.algorithm.changes import ChangeKind
from json_pane_diff.algorithm.config import DiffConfig
from json_pane_diff.comparator import PaneComparator
from json_pane_diff.parser import (
    DEPTH_EXCEEDED_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    MAX_DEPTH,
)
from json_pane_diff.render.records import LineClass, LineRecord
from json_pane_diff.result import ComparisonMode

LEFT = '{"user": {"id": 12, "roles": ["admin", "editor"]}, "team": "Alpha"}'
RIGHT = '{"user": {"id": 12, "roles": ["admin", "viewer"]}, "team": "Alpha", "x": 1}'

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _classes(lines: tuple[LineRecord, ...]) -> list[LineClass]:
    return [line.classification for line in lines]


@pytest.fixture
def cmp() -> PaneComparator:
    return PaneComparator()


# ---------------------------------------------------------------------------
# Structural mode
# ---------------------------------------------------------------------------


class TestStructuralMode:
    def test_identical_documents(self, cmp: PaneComparator) -> None:
        result = cmp.compare('{"team": "Alpha"}', '{"team": "Alpha"}')
        assert result.mode == ComparisonMode.STRUCTURAL
        assert result.changes == ()
        assert not result.parse_errors
        assert result.has_differences is False
        assert set(_classes(result.left_lines)) == {LineClass.NONE}
        assert set(_classes(result.right_lines)) == {LineClass.NONE}

    def test_change_list(self, cmp: PaneComparator) -> None:
        result = cmp.compare(LEFT, RIGHT)
        assert [str(c) for c in result.changes] == [
            "CHANGED: $.user.roles[1]",
            "ADDED: $.x",
        ]

    def test_panes_are_pretty_printed(self, cmp: PaneComparator) -> None:
        result = cmp.compare('{"a":[1]}', '{"a":[1]}')
        assert [line.text for line in result.left_lines] == [
            "{",
            '  "a": [',
            "    1",
            "  ]",
            "}",
        ]

    def test_highlights(self, cmp: PaneComparator) -> None:
        result = cmp.compare(LEFT, RIGHT)
        left_marked = [
            l.text.strip()
            for l in result.left_lines
            if l.classification != LineClass.NONE
        ]
        right_marked = {
            l.text.strip(): l.classification
            for l in result.right_lines
            if l.classification != LineClass.NONE
        }
        assert left_marked == ['"editor"']
        assert right_marked == {
            '"viewer"': LineClass.CHANGED,
            '"x": 1': LineClass.ADDED,
        }

    def test_whitespace_in_input_is_irrelevant(self, cmp: PaneComparator) -> None:
        result = cmp.compare('{\n\t"a" : 1\n}', '{"a":1}')
        assert result.changes == ()
        assert result.mode == ComparisonMode.STRUCTURAL

    def test_rename(self, cmp: PaneComparator) -> None:
        result = cmp.compare('{"email": "a@x.io"}', '{"emial": "a@x.io"}')
        assert [str(c) for c in result.changes] == [
            "CHANGED: $.email",
            "CHANGED: $.emial",
        ]
        assert [l.text for l in result.right_lines] == [
            "{",
            '  "emial": "a@x.io"',
            "}",
        ]
        assert result.right_lines[1].classification == LineClass.CHANGED


# ---------------------------------------------------------------------------
# Plain-text fallback
# ---------------------------------------------------------------------------


class TestPlainTextMode:
    def test_invalid_left(self, cmp: PaneComparator) -> None:
        result = cmp.compare("{invalid", '{"a": 1}')
        assert result.mode == ComparisonMode.PLAIN_TEXT
        assert result.changes == ()
        assert result.parse_errors.left
        assert result.parse_errors.right is None
        assert result.error_text.startswith("Left JSON: ")
        assert _classes(result.left_lines) == [LineClass.CHANGED]
        assert _classes(result.right_lines) == [LineClass.CHANGED]

    def test_lines_are_raw_and_pathless(self, cmp: PaneComparator) -> None:
        result = cmp.compare('{"a": 1,\n}', '{"a": 1,\n "b": 2}')
        assert [l.text for l in result.left_lines] == ['{"a": 1,', "}"]
        assert all(l.path is None for l in result.left_lines)
        assert _classes(result.left_lines) == [LineClass.NONE, LineClass.CHANGED]

    def test_both_invalid(self, cmp: PaneComparator) -> None:
        result = cmp.compare("[1,", "{")
        assert result.parse_errors.left and result.parse_errors.right
        assert " | Right JSON: " in result.error_text

    def test_empty_side(self, cmp: PaneComparator) -> None:
        result = cmp.compare('{"a": 1}', "   ")
        assert result.mode == ComparisonMode.PLAIN_TEXT
        assert result.parse_errors.right == EMPTY_INPUT_MESSAGE
        assert result.error_text == f"Right JSON: {EMPTY_INPUT_MESSAGE}"

    def test_extra_lines(self, cmp: PaneComparator) -> None:
        result = cmp.compare("a\nb\nc", "a")
        assert _classes(result.left_lines) == [
            LineClass.NONE,
            LineClass.REMOVED,
            LineClass.REMOVED,
        ]
        assert _classes(result.right_lines) == [LineClass.NONE]
        assert result.has_differences is True

    def test_identical_invalid_texts(self, cmp: PaneComparator) -> None:
        result = cmp.compare("{oops", "{oops")
        assert result.mode == ComparisonMode.PLAIN_TEXT
        assert result.has_differences is False
        assert result.parse_errors


# ---------------------------------------------------------------------------
# Configuration and scorers
# ---------------------------------------------------------------------------


class TestConfiguration:
    def test_default_config(self, cmp: PaneComparator) -> None:
        assert cmp.config == DiffConfig()

    def test_indent_forwarded_to_renderer(self) -> None:
        result = PaneComparator(config=DiffConfig(indent=4)).compare("[1]", "[1]")
        assert result.left_lines[1].text == "    1"

    def test_renames_disabled(self) -> None:
        cmp = PaneComparator(config=DiffConfig(detect_renames=False))
        result = cmp.compare('{"email": 1}', '{"emial": 1}')
        assert [str(c) for c in result.changes] == [
            "REMOVED: $.email",
            "ADDED: $.emial",
        ]

    def test_custom_scorer_is_cached(self) -> None:
        calls: list[tuple[str, str]] = []

        class CountingScorer:
            def similarity(self, a: str, b: str) -> float:
                calls.append((a, b))
                return 0.0

        cmp = PaneComparator(scorer=CountingScorer())
        doc_left = '[{"aa": 1}, {"aa": 2}, {"aa": 3}]'
        doc_right = '[{"bb": 1}, {"bb": 2}, {"bb": 3}]'
        result = cmp.compare(doc_left, doc_right)
        assert calls == [("aa", "bb")]
        assert len(result.changes) == 6


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


class TestFormat:
    def test_both_valid(self, cmp: PaneComparator) -> None:
        result = cmp.format('{"a":1}', "[true,null]")
        assert result.left == '{\n  "a": 1\n}'
        assert result.right == "[\n  true,\n  null\n]"
        assert not result.parse_errors

    def test_invalid_side_unchanged(self, cmp: PaneComparator) -> None:
        result = cmp.format('{"a":1}', "{oops")
        assert result.left == '{\n  "a": 1\n}'
        assert result.right == "{oops"
        assert result.parse_errors.right
        assert result.parse_errors.left is None

    def test_indent_from_config(self) -> None:
        result = PaneComparator(config=DiffConfig(indent=4)).format("[1]", "[]")
        assert result.left == "[\n    1\n]"
        assert result.right == "[]"


# ---------------------------------------------------------------------------
# Timing and logging
# ---------------------------------------------------------------------------


class TestTimingAndLogging:
    @pytest.mark.parametrize(("left", "right"), [("[1]", "[2]"), ("{", "}")])
    def test_computation_time(
        self, cmp: PaneComparator, left: str, right: str
    ) -> None:
        result = cmp.compare(left, right)
        assert isinstance(result.computation_time_ms, float)
        assert result.computation_time_ms >= 0.0

    def test_stateless_between_calls(self, cmp: PaneComparator) -> None:
        first = cmp.compare(LEFT, RIGHT)
        second = cmp.compare(LEFT, RIGHT)
        assert first.changes == second.changes
        assert first.left_lines == second.left_lines
        assert first.right_lines == second.right_lines

    def test_fallback_logged_at_debug(
        self, cmp: PaneComparator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="json_pane_diff"):
            cmp.compare("{", "{}")
        assert any("plain-text" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


# ---------------------------------------------------------------------------
# Deep nesting
# ---------------------------------------------------------------------------


def _nested_array(depth: int, leaf: str) -> str:
    return "[" * depth + leaf + "]" * depth


def _nested_object(depth: int, leaf: str) -> str:
    return '{"k": ' * depth + leaf + "}" * depth


class TestDeepNesting:
    @pytest.mark.parametrize("build", [_nested_array, _nested_object])
    def test_identical_documents_at_limit(
        self, cmp: PaneComparator, build: Callable[[int, str], str]
    ) -> None:
        doc = build(MAX_DEPTH, "1")
        result = cmp.compare(doc, doc)
        assert result.mode == ComparisonMode.STRUCTURAL
        assert result.changes == ()
        assert len(result.left_lines) == 2 * MAX_DEPTH + 1

    @pytest.mark.parametrize("build", [_nested_array, _nested_object])
    def test_innermost_change_at_limit(
        self, cmp: PaneComparator, build: Callable[[int, str], str]
    ) -> None:
        result = cmp.compare(build(MAX_DEPTH, "1"), build(MAX_DEPTH, "2"))
        assert result.mode == ComparisonMode.STRUCTURAL
        assert len(result.changes) == 1
        assert len(result.changes[0].path.segments) == MAX_DEPTH
        assert result.right_lines[MAX_DEPTH].classification == LineClass.CHANGED

    def test_added_subtree_at_limit(self, cmp: PaneComparator) -> None:
        left = "[" + _nested_array(MAX_DEPTH - 1, "1") + "]"
        right = "[" + _nested_array(MAX_DEPTH - 1, "1") + ", 0]"
        result = cmp.compare(left, right)
        assert [str(c) for c in result.changes] == ["ADDED: $[1]"]

    def test_removed_deep_subtree(self, cmp: PaneComparator) -> None:
        inner = _nested_array(MAX_DEPTH - 1, "1")
        result = cmp.compare(f"[0, {inner}]", "[0]")
        assert len(result.changes) == MAX_DEPTH
        assert all(c.kind == ChangeKind.REMOVED for c in result.changes)

    def test_past_limit_falls_back_to_plain_text(self, cmp: PaneComparator) -> None:
        doc = _nested_array(MAX_DEPTH + 1, "1")
        result = cmp.compare(doc, _nested_array(MAX_DEPTH, "1"))
        assert result.mode == ComparisonMode.PLAIN_TEXT
        assert result.error_text == f"Left JSON: {DEPTH_EXCEEDED_MESSAGE}"

    def test_far_past_limit_does_not_raise(self, cmp: PaneComparator) -> None:
        doc = _nested_array(400, "1")
        result = cmp.compare(doc, doc)
        assert result.mode == ComparisonMode.PLAIN_TEXT
        assert result.parse_errors.left == DEPTH_EXCEEDED_MESSAGE
