"""Canonical pretty-printing for the format request."""

from __future__ import annotations

import json

from json_pane_diff.parser import parse_document
from json_pane_diff.tree.nodes import JsonNode

__all__ = ["format_text", "pretty_print"]


def pretty_print(node: JsonNode, indent: int = 2) -> str:
    """Serialize ``node`` with ``indent`` spaces per level, keys in stored order."""
    return json.dumps(node.to_python(), indent=indent, ensure_ascii=False)


def format_text(text: str, indent: int = 2) -> tuple[str, str | None]:
    """Pretty-print ``text`` if it parses.

    Returns:
        ``(formatted, None)`` on success, or ``(text, error)`` with the
        input unchanged when it is not valid JSON.
    """
    outcome = parse_document(text)
    if outcome.node is None:
        return text, outcome.error
    return pretty_print(outcome.node, indent), None
