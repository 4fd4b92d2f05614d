"""Positional line differ used when either document is not valid JSON.

Line ``i`` of the left text is compared with line ``i`` of the right text
and nothing else: there is no alignment, so a line inserted near the top
marks every later line as changed.  Structural comparison is meaningless
for text that does not parse, and the fallback only needs to show where
the two texts stop agreeing.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_pane_diff.algorithm.changes import ChangeKind

__all__ = ["LineDiff", "diff_lines", "split_lines"]


def split_lines(text: str) -> list[str]:
    """Split on ``"\\n"`` only; a trailing newline yields a final empty line."""
    return text.split("\n")


@dataclass(frozen=True, slots=True)
class LineDiff:
    """Per-line classification of both texts.

    Attributes:
        left:  One entry per left line: REMOVED, CHANGED, or None.
        right: One entry per right line: ADDED, CHANGED, or None.
    """

    left: tuple[ChangeKind | None, ...]
    right: tuple[ChangeKind | None, ...]


def diff_lines(left_text: str, right_text: str) -> LineDiff:
    """Classify every line of both texts by position.

    Args:
        left_text:  Raw left document.
        right_text: Raw right document.

    Returns:
        A ``LineDiff`` with exactly one entry per line of each text.
    """
    left_lines = split_lines(left_text)
    right_lines = split_lines(right_text)
    left: list[ChangeKind | None] = [None] * len(left_lines)
    right: list[ChangeKind | None] = [None] * len(right_lines)

    for idx in range(max(len(left_lines), len(right_lines))):
        if idx >= len(left_lines):
            right[idx] = ChangeKind.ADDED
        elif idx >= len(right_lines):
            left[idx] = ChangeKind.REMOVED
        elif left_lines[idx] != right_lines[idx]:
            left[idx] = ChangeKind.CHANGED
            right[idx] = ChangeKind.CHANGED

    return LineDiff(left=tuple(left), right=tuple(right))
