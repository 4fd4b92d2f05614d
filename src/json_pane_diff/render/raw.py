"""Raw renderer: plain-text lines plus line-differ classes as LineRecords."""

from __future__ import annotations

from collections.abc import Sequence

from json_pane_diff.algorithm.changes import ChangeKind
from json_pane_diff.algorithm.lines import split_lines
from json_pane_diff.render.records import LineRecord, Side, classify

__all__ = ["render_raw"]


def render_raw(
    text: str, classes: Sequence[ChangeKind | None], side: Side
) -> list[LineRecord]:
    """Render ``text`` line by line for ``side``.

    REMOVED lines are highlighted only on the left pane, ADDED only on the
    right, CHANGED on both.  Records carry no path.

    Args:
        text:    Raw document text.
        classes: Per-line classes from ``diff_lines`` for this side.  Missing
                 entries count as unchanged.
        side:    Pane being rendered.
    """
    records = []
    for idx, line in enumerate(split_lines(text)):
        kind = classes[idx] if idx < len(classes) else None
        records.append(LineRecord(line, None, classify(kind, side)))
    return records
