"""ChangeRecord and HighlightIndex: the differ's output and its lookup view.

The structural differ produces an ordered list of ``ChangeRecord`` objects;
the tree renderer never walks that list directly but asks a
``HighlightIndex`` built from it which kind of change, if any, sits at the
path of each line it emits.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Any

from json_pane_diff.tree.nodes import JsonNode
from json_pane_diff.tree.path import Path

__all__ = ["ChangeKind", "ChangeRecord", "HighlightIndex"]


class ChangeKind(StrEnum):
    """Kind of a reported difference.

    - ADDED:   the path exists only in the right document.
    - REMOVED: the path exists only in the left document.
    - CHANGED: the path holds different values, or is one end of a rename.
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """One difference between the left and right documents.

    Attributes:
        kind:  Which kind of difference this is.
        path:  Where the difference is.  For a rename, one record carries the
               left key's path and a twin record the right key's path.
        left:  Value on the left side; None for ADDED.
        right: Value on the right side; None for REMOVED.
    """

    kind: ChangeKind
    path: Path
    left: JsonNode | None = None
    right: JsonNode | None = None

    @classmethod
    def added(cls, path: Path, node: JsonNode) -> ChangeRecord:
        return cls(ChangeKind.ADDED, path, right=node)

    @classmethod
    def removed(cls, path: Path, node: JsonNode) -> ChangeRecord:
        return cls(ChangeKind.REMOVED, path, left=node)

    @classmethod
    def changed(cls, path: Path, left: JsonNode, right: JsonNode) -> ChangeRecord:
        return cls(ChangeKind.CHANGED, path, left=left, right=right)

    @property
    def payload(self) -> Any:
        """Plain Python view of the record's values.

        The one-sided value for ADDED/REMOVED; ``(left, right)`` for CHANGED.
        """
        if self.kind == ChangeKind.ADDED:
            return self._plain(self.right, "right")
        if self.kind == ChangeKind.REMOVED:
            return self._plain(self.left, "left")
        return (self._plain(self.left, "left"), self._plain(self.right, "right"))

    def _plain(self, node: JsonNode | None, side: str) -> Any:
        if node is None:
            raise ValueError(
                f"{self.kind.upper()} record at {self.path} has no {side} value"
            )
        return node.to_python()

    def rebased(self, old_prefix: Path, new_prefix: Path) -> ChangeRecord:
        """Return a copy whose path has ``old_prefix`` swapped for ``new_prefix``."""
        return replace(self, path=self.path.rebase(old_prefix, new_prefix))

    def __str__(self) -> str:
        return f"{self.kind.upper()}: {self.path}"


@dataclass(frozen=True, slots=True)
class HighlightIndex:
    """Path sets of the added, removed, and changed records of one comparison.

    A path belongs to at most one set.  When several records share a path,
    the one latest in the change list decides.
    """

    added: frozenset[Path] = frozenset()
    removed: frozenset[Path] = frozenset()
    changed: frozenset[Path] = frozenset()

    @classmethod
    def from_changes(cls, changes: Iterable[ChangeRecord]) -> HighlightIndex:
        latest: dict[Path, ChangeKind] = {}
        for change in changes:
            latest[change.path] = change.kind

        def _paths(kind: ChangeKind) -> frozenset[Path]:
            return frozenset(p for p, k in latest.items() if k == kind)

        return cls(
            added=_paths(ChangeKind.ADDED),
            removed=_paths(ChangeKind.REMOVED),
            changed=_paths(ChangeKind.CHANGED),
        )

    def lookup(self, path: Path) -> ChangeKind | None:
        """Return the kind of change recorded at ``path``, or None."""
        if path in self.added:
            return ChangeKind.ADDED
        if path in self.removed:
            return ChangeKind.REMOVED
        if path in self.changed:
            return ChangeKind.CHANGED
        return None
