"""StructuralDiffer: recursive comparison of two JsonNode trees.

Walks both trees simultaneously and reports every difference as a
``ChangeRecord`` addressed by ``Path``.

Architecture:
- Equal scalars:  nothing reported.  Containers are never compared whole;
                  equal subtrees simply recurse without reporting anything.
- ARRAY / ARRAY:  positional.  An index on one side only is reported for the
                  element and again for every path inside it, because the
                  renderer looks highlights up per line path, not per subtree.
- OBJECT / OBJECT: three passes.  Keys on both sides recurse; left-only keys
                  try the rename matcher against this object's right-only
                  keys; remaining right-only keys are additions.
- Anything else:  one CHANGED record at the current path.

A detected rename is reported as CHANGED at both key paths, and the inner
differences of the renamed value are reported twice: under the left key's
path and rebased under the right key's path, so each pane shows them under
the key name it displays.  The returned list is therefore not minimal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_pane_diff.algorithm.changes import ChangeKind, ChangeRecord
from json_pane_diff.algorithm.config import DiffConfig
from json_pane_diff.algorithm.matcher import match_renames
from json_pane_diff.algorithm.similarity import EditDistanceScorer
from json_pane_diff.tree.builder import iter_paths
from json_pane_diff.tree.nodes import JsonNode, NodeKind
from json_pane_diff.tree.path import Path

if TYPE_CHECKING:
    from json_pane_diff.protocols import SimilarityScorer

__all__ = ["StructuralDiffer"]


class StructuralDiffer:
    """Recursive structural differ with key-rename detection.

    Example::

        from json_pane_diff.tree import TreeBuilder

        builder = TreeBuilder()
        differ = StructuralDiffer()
        changes = differ.diff(builder.build([1, 2]), builder.build([1, 2, 3]))
        [str(c) for c in changes]   # ["ADDED: $[2]"]
    """

    def __init__(
        self,
        scorer: SimilarityScorer | None = None,
        config: DiffConfig | None = None,
    ) -> None:
        """Initialise the differ.

        Args:
            scorer: Key-name similarity scorer used for rename detection.
                Defaults to ``EditDistanceScorer()``.
            config: Comparison parameters.  Defaults to ``DiffConfig()``.
        """
        self._scorer = scorer if scorer is not None else EditDistanceScorer()
        self._config = config if config is not None else DiffConfig()

    def diff(
        self, left: JsonNode, right: JsonNode, path: Path | None = None
    ) -> list[ChangeRecord]:
        """Compare two trees and return the ordered list of differences.

        Args:
            left:  Left tree (or subtree).
            right: Right tree (or subtree).
            path:  Path of ``left``/``right`` in their documents.  Defaults to
                the root ``$``.

        Returns:
            Change records in discovery order; empty when the trees are equal.
        """
        changes: list[ChangeRecord] = []
        self._diff_node(left, right, path if path is not None else Path.root(), changes)
        return changes

    def _diff_node(
        self,
        left: JsonNode,
        right: JsonNode,
        path: Path,
        changes: list[ChangeRecord],
    ) -> None:
        if left.kind == NodeKind.ARRAY and right.kind == NodeKind.ARRAY:
            self._diff_arrays(left, right, path, changes)
            return

        if left.kind == NodeKind.OBJECT and right.kind == NodeKind.OBJECT:
            self._diff_objects(left, right, path, changes)
            return

        # same-kind containers were handled above, so these are scalars
        if left.kind == right.kind and left.value == right.value:
            return

        changes.append(ChangeRecord.changed(path, left, right))

    def _diff_arrays(
        self,
        left: JsonNode,
        right: JsonNode,
        path: Path,
        changes: list[ChangeRecord],
    ) -> None:
        n_left = len(left.items)
        n_right = len(right.items)
        for idx in range(max(n_left, n_right)):
            item_path = path.index(idx)
            if idx >= n_left:
                self._report_subtree(
                    ChangeKind.ADDED, right.items[idx], item_path, changes
                )
            elif idx >= n_right:
                self._report_subtree(
                    ChangeKind.REMOVED, left.items[idx], item_path, changes
                )
            else:
                self._diff_node(left.items[idx], right.items[idx], item_path, changes)

    def _report_subtree(
        self,
        kind: ChangeKind,
        node: JsonNode,
        path: Path,
        changes: list[ChangeRecord],
    ) -> None:
        """Report ``node`` and every node inside it as one-sided."""
        for sub_path, sub_node in iter_paths(node, path):
            if kind == ChangeKind.ADDED:
                changes.append(ChangeRecord.added(sub_path, sub_node))
            else:
                changes.append(ChangeRecord.removed(sub_path, sub_node))

    def _diff_objects(
        self,
        left: JsonNode,
        right: JsonNode,
        path: Path,
        changes: list[ChangeRecord],
    ) -> None:
        left_only = [k for k in left.keys() if not right.has_key(k)]
        right_only = [k for k in right.keys() if not left.has_key(k)]

        # Pass 1: exact key matches always win over rename detection.
        for key, left_child in left.members:
            if right.has_key(key):
                self._diff_node(left_child, right.get(key), path.key(key), changes)

        # Pass 2: left-only keys, renamed or removed.
        if self._config.detect_renames:
            renames = match_renames(
                left_only,
                right_only,
                self._scorer,
                threshold=self._config.rename_threshold,
            ).mapping
        else:
            renames = {}

        for key in left_only:
            left_path = path.key(key)
            left_child = left.get(key)
            right_key = renames.get(key)
            if right_key is None:
                changes.append(ChangeRecord.removed(left_path, left_child))
                continue

            right_path = path.key(right_key)
            right_child = right.get(right_key)
            changes.append(ChangeRecord.changed(left_path, left_child, right_child))
            changes.append(ChangeRecord.changed(right_path, left_child, right_child))

            inner = self.diff(left_child, right_child, left_path)
            changes.extend(inner)
            changes.extend(c.rebased(left_path, right_path) for c in inner)

        # Pass 3: right-only keys not consumed by a rename.
        claimed = set(renames.values())
        for key in right_only:
            if key not in claimed:
                changes.append(ChangeRecord.added(path.key(key), right.get(key)))
