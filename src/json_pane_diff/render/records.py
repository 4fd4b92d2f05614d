"""LineRecord and its enums: one annotated display line of a pane."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from json_pane_diff.algorithm.changes import ChangeKind
from json_pane_diff.tree.path import Path

__all__ = ["LineClass", "LineRecord", "Side", "classify"]


class Side(StrEnum):
    """Which pane a rendering is for."""

    LEFT = auto()
    RIGHT = auto()


class LineClass(StrEnum):
    """Highlight applied to a rendered line."""

    NONE = auto()
    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


_VISIBLE: dict[Side, dict[ChangeKind, LineClass]] = {
    # A path added on the right has no left line; one removed has no right line.
    Side.LEFT: {
        ChangeKind.REMOVED: LineClass.REMOVED,
        ChangeKind.CHANGED: LineClass.CHANGED,
    },
    Side.RIGHT: {
        ChangeKind.ADDED: LineClass.ADDED,
        ChangeKind.CHANGED: LineClass.CHANGED,
    },
}


def classify(kind: ChangeKind | None, side: Side) -> LineClass:
    """Map a change kind to the highlight it shows on ``side``."""
    if kind is None:
        return LineClass.NONE
    return _VISIBLE[side].get(kind, LineClass.NONE)


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One rendered output line.

    Attributes:
        text:           Line content without the newline.
        path:           Node the line belongs to; None for plain-text lines.
        classification: Highlight for the line.
    """

    text: str
    path: Path | None = None
    classification: LineClass = LineClass.NONE
