"""Path: structured address of a node inside a JsonNode tree.

A path is a tuple of segments, each either a ``str`` object key or an
``int`` array index.  Its text form starts at ``$``:

- a key appends ``.key``
- an index appends ``[index]``

Keys that are empty or contain ``.``, ``[`` or ``]`` cannot be written in
dotted form without colliding with the separators, so they are written as a
JSON-quoted bracket segment instead: ``$["a.b"]``.  ``Path.parse`` accepts
both spellings, so ``Path.parse(str(p)) == p`` for every path.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

__all__ = ["Path", "PathSyntaxError"]

_SEPARATORS = frozenset(".[]")

_DECODER = json.JSONDecoder()

Segment = str | int


class PathSyntaxError(ValueError):
    """Raised by ``Path.parse`` for text outside the path grammar."""


def _format_segment(segment: Segment) -> str:
    if isinstance(segment, int):
        return f"[{segment}]"
    if segment and not _SEPARATORS.intersection(segment):
        return f".{segment}"
    return f"[{json.dumps(segment, ensure_ascii=False)}]"


@dataclass(frozen=True, slots=True)
class Path:
    """Immutable sequence of key/index segments rooted at ``$``.

    Example::

        path = Path.root().key("user").key("roles").index(1)
        str(path)                       # "$.user.roles[1]"
        Path.parse("$.user.roles[1]")   # == path
    """

    segments: tuple[Segment, ...] = ()

    @classmethod
    def root(cls) -> Path:
        return cls()

    def key(self, name: str) -> Path:
        """Return the path of member ``name`` below this path."""
        return Path((*self.segments, name))

    def index(self, idx: int) -> Path:
        """Return the path of element ``idx`` below this path."""
        return Path((*self.segments, idx))

    def startswith(self, prefix: Path) -> bool:
        """True when ``prefix`` is this path or one of its ancestors."""
        size = len(prefix.segments)
        return self.segments[:size] == prefix.segments

    def rebase(self, old_prefix: Path, new_prefix: Path) -> Path:
        """Swap ``old_prefix`` for ``new_prefix``; paths outside it are unchanged."""
        if not self.startswith(old_prefix):
            return self
        return Path(new_prefix.segments + self.segments[len(old_prefix.segments) :])

    def __str__(self) -> str:
        return "$" + "".join(_format_segment(s) for s in self.segments)

    @classmethod
    def parse(cls, text: str) -> Path:
        """Parse the text form produced by ``str(path)``.

        Raises:
            PathSyntaxError: If ``text`` is not a valid path.
        """
        if not text.startswith("$"):
            raise PathSyntaxError(f"Path must start with '$': {text!r}")

        segments: list[Segment] = []
        pos = 1
        while pos < len(text):
            ch = text[pos]
            if ch == ".":
                end = pos + 1
                while end < len(text) and text[end] not in ".[":
                    end += 1
                name = text[pos + 1 : end]
                if not name or "]" in name:
                    raise PathSyntaxError(
                        f"Invalid key at offset {pos} in {text!r}"
                    )
                segments.append(name)
                pos = end
            elif ch == "[":
                if text.startswith('"', pos + 1):
                    try:
                        name, end = _DECODER.raw_decode(text, pos + 1)
                    except json.JSONDecodeError as exc:
                        raise PathSyntaxError(
                            f"Invalid quoted key at offset {pos} in {text!r}: {exc.msg}"
                        ) from exc
                    segments.append(name)
                else:
                    end = text.find("]", pos)
                    digits = text[pos + 1 : end] if end != -1 else ""
                    if not (digits.isascii() and digits.isdigit()):
                        raise PathSyntaxError(
                            f"Invalid index at offset {pos} in {text!r}"
                        )
                    segments.append(int(digits))
                if not text.startswith("]", end):
                    raise PathSyntaxError(f"Expected ']' at offset {end} in {text!r}")
                pos = end + 1
            else:
                raise PathSyntaxError(
                    f"Unexpected character {ch!r} at offset {pos} in {text!r}"
                )
        return cls(tuple(segments))
