"""JsonNode dataclass and NodeKind StrEnum: the parsed JSON value model.

A JSON document is held as an immutable tree of ``JsonNode`` objects whose
``kind`` tags which of the six JSON value shapes the node carries.  The
differ and renderers dispatch on ``kind`` rather than inspecting Python
types, so ``True`` and ``1`` (which Python considers equal) stay distinct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeKind(StrEnum):
    """Enumeration of the JSON value shapes.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int or float, compared numerically
    - STRING  -> "string"
    - OBJECT  -> "object"  : ordered key/value members
    - ARRAY   -> "array"   : ordered items
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()


@dataclass(frozen=True, slots=True)
class JsonNode:
    """A node in the parsed JSON tree.

    Attributes:
        kind:     Which JSON shape this node is (see NodeKind).
        value:    The Python scalar for NULL/BOOLEAN/NUMBER/STRING nodes;
                  None for containers.
        members:  ``(key, node)`` pairs of an OBJECT in insertion order;
                  empty for every other kind.
        items:    Elements of an ARRAY in order; empty for every other kind.
    """

    kind: NodeKind
    value: Any = None
    members: tuple[tuple[str, JsonNode], ...] = ()
    items: tuple[JsonNode, ...] = ()
    _index: dict[str, JsonNode] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        # Duplicate keys are collapsed by the decoder, so the index is 1:1.
        object.__setattr__(self, "_index", dict(self.members))

    @property
    def is_container(self) -> bool:
        return self.kind in (NodeKind.OBJECT, NodeKind.ARRAY)

    def keys(self) -> list[str]:
        """Return the OBJECT member keys in insertion order."""
        return [key for key, _ in self.members]

    def has_key(self, key: str) -> bool:
        return key in self._index

    def get(self, key: str) -> JsonNode:
        """Return the member value stored under ``key``.

        Raises:
            KeyError: If this node has no member named ``key``.
        """
        return self._index[key]

    def to_python(self) -> Any:
        """Convert back to plain Python values (dict, list, scalars)."""
        if self.kind == NodeKind.OBJECT:
            return {key: child.to_python() for key, child in self.members}
        if self.kind == NodeKind.ARRAY:
            return [child.to_python() for child in self.items]
        return self.value
