"""TreeRenderer: pretty-prints a JsonNode tree as diff-annotated lines.

Emits one ``LineRecord`` per opening bracket, closing bracket, and scalar,
indented per nesting level.  Every line carries the path of the node it
belongs to, and its highlight is looked up from a ``HighlightIndex`` by that
path, so the left and right panes are rendered independently yet highlight
the same logical changes.

Layout rules:
- A container's opening and closing lines carry the container's path.
- An object member renders as ``"key": value``; when the value is a
  container the opening bracket sits on the member line.
- Every element/member except the last in its container gets a trailing
  comma.
- Object members keep their stored order.

Joining the texts with newlines yields valid JSON equal to the input.
"""

from __future__ import annotations

import json

from json_pane_diff.algorithm.changes import HighlightIndex
from json_pane_diff.render.records import LineRecord, Side, classify
from json_pane_diff.tree.nodes import JsonNode, NodeKind
from json_pane_diff.tree.path import Path

__all__ = ["TreeRenderer"]

_BRACKETS = {NodeKind.OBJECT: ("{", "}"), NodeKind.ARRAY: ("[", "]")}


def _scalar_text(node: JsonNode) -> str:
    return json.dumps(node.value, ensure_ascii=False)


class TreeRenderer:
    """Renders one document for one pane.

    Example::

        renderer = TreeRenderer()
        lines = renderer.render(tree, HighlightIndex(), Side.LEFT)
        print("\\n".join(line.text for line in lines))
    """

    def __init__(self, indent: int = 2) -> None:
        self._indent = " " * indent

    def render(
        self, node: JsonNode, highlights: HighlightIndex, side: Side
    ) -> list[LineRecord]:
        """Render ``node`` for ``side``.

        Args:
            node:       Root of the document to render.
            highlights: Change paths of the comparison being displayed.
            side:       Pane being rendered; decides which change kinds show.

        Returns:
            The display lines, top to bottom.
        """
        lines: list[LineRecord] = []
        self._walk(node, Path.root(), 0, "", True, highlights, side, lines)
        return lines

    def _walk(
        self,
        node: JsonNode,
        path: Path,
        depth: int,
        prefix: str,
        is_last: bool,
        highlights: HighlightIndex,
        side: Side,
        lines: list[LineRecord],
    ) -> None:
        indent = self._indent * depth
        comma = "" if is_last else ","
        line_class = classify(highlights.lookup(path), side)

        if not node.is_container:
            text = f"{indent}{prefix}{_scalar_text(node)}{comma}"
            lines.append(LineRecord(text, path, line_class))
            return

        opening, closing = _BRACKETS[node.kind]
        lines.append(LineRecord(f"{indent}{prefix}{opening}", path, line_class))

        if node.kind == NodeKind.OBJECT:
            last = len(node.members) - 1
            for pos, (key, child) in enumerate(node.members):
                member_prefix = f"{json.dumps(key, ensure_ascii=False)}: "
                self._walk(
                    child,
                    path.key(key),
                    depth + 1,
                    member_prefix,
                    pos == last,
                    highlights,
                    side,
                    lines,
                )
        else:
            last = len(node.items) - 1
            for idx, child in enumerate(node.items):
                self._walk(
                    child,
                    path.index(idx),
                    depth + 1,
                    "",
                    idx == last,
                    highlights,
                    side,
                    lines,
                )

        lines.append(LineRecord(f"{indent}{closing}{comma}", path, line_class))
