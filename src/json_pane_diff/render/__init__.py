"""render subpackage: turns documents and diff results into display lines.

- TreeRenderer: pretty-printed, path-tagged lines of a parsed document
- render_raw: plain-text lines classified by the positional line differ
- format_text / pretty_print: canonical formatting for the format request
"""

from json_pane_diff.render.formatter import format_text, pretty_print
from json_pane_diff.render.raw import render_raw
from json_pane_diff.render.records import LineClass, LineRecord, Side
from json_pane_diff.render.tree import TreeRenderer

__all__ = [
    "LineClass",
    "LineRecord",
    "Side",
    "TreeRenderer",
    "format_text",
    "pretty_print",
    "render_raw",
]
