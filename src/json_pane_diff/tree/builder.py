"""TreeBuilder: converts any decoded JSON value into a typed JsonNode tree.

Uses recursive dispatch to convert dicts, lists, and scalar values into
immutable ``JsonNode`` objects.  Object members keep the dict's insertion
order, which is the order the keys appeared in the source text.

Also provides ``iter_paths`` for walking a tree together with the ``Path``
of every node, which the differ uses to flag every descendant of an array
element that exists on one side only.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from json_pane_diff.tree.nodes import JsonNode, NodeKind
from json_pane_diff.tree.path import Path

# Type alias for decoded JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any decoded JSON value into a typed JsonNode tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Example::
        builder = TreeBuilder()
        tree = builder.build({"user": {"id": 12}})
        # tree: OBJECT -> ("user", OBJECT -> ("id", NUMBER 12))
    """

    def build(self, value: JsonValue) -> JsonNode:
        """Convert a decoded JSON value to a JsonNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            The root JsonNode.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type,
                or an object key is not a string.
            ValueError: If a float is NaN or infinite.
        """
        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return JsonNode(kind=NodeKind.BOOLEAN, value=value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return JsonNode(
                kind=NodeKind.ARRAY, items=tuple(self.build(item) for item in value)
            )

        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(
                f"Out of range float values are not JSON compliant: {value!r}"
            )

        if isinstance(value, (int, float)):
            return JsonNode(kind=NodeKind.NUMBER, value=value)

        if isinstance(value, str):
            return JsonNode(kind=NodeKind.STRING, value=value)

        if value is None:
            return JsonNode(kind=NodeKind.NULL)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: dict[Any, Any]) -> JsonNode:
        members = []
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            members.append((key, self.build(val)))
        return JsonNode(kind=NodeKind.OBJECT, members=tuple(members))


def iter_paths(node: JsonNode, path: Path) -> Iterator[tuple[Path, JsonNode]]:
    """Yield ``(path, node)`` for ``node`` and every descendant, depth first.

    The node itself comes first, then members/items in stored order.
    """
    yield path, node
    if node.kind == NodeKind.OBJECT:
        for key, child in node.members:
            yield from iter_paths(child, path.key(key))
    elif node.kind == NodeKind.ARRAY:
        for idx, child in enumerate(node.items):
            yield from iter_paths(child, path.index(idx))
