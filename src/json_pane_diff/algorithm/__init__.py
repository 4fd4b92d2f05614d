"""algorithm subpackage: public API for structural and line differencing.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_pane_diff.algorithm import StructuralDiffer
    from json_pane_diff.tree import TreeBuilder

    builder = TreeBuilder()
    changes = StructuralDiffer().diff(
        builder.build({"email": "a@x.io"}), builder.build({"emial": "a@x.io"})
    )
    [str(c) for c in changes]   # ["CHANGED: $.email", "CHANGED: $.emial"]
"""

from __future__ import annotations

from json_pane_diff.algorithm.changes import ChangeKind, ChangeRecord, HighlightIndex
from json_pane_diff.algorithm.config import DiffConfig
from json_pane_diff.algorithm.differ import StructuralDiffer
from json_pane_diff.algorithm.lines import LineDiff, diff_lines
from json_pane_diff.algorithm.matcher import RenameMatch, match_renames
from json_pane_diff.algorithm.similarity import EditDistanceScorer, similarity

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "DiffConfig",
    "HighlightIndex",
    "EditDistanceScorer",
    "LineDiff",
    "RenameMatch",
    "StructuralDiffer",
    "diff_lines",
    "match_renames",
    "similarity",
]
