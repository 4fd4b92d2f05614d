"""Tree subpackage for the parsed JSON value model.

Re-exports the public API for the tree module:
- JsonNode: immutable tagged-union node of a parsed JSON document
- NodeKind: StrEnum of the six JSON value shapes
- Path: structured node address with a ``$.a[0]`` text form
- TreeBuilder: converts decoded Python values into JsonNode trees
"""

from json_pane_diff.tree.builder import TreeBuilder, iter_paths
from json_pane_diff.tree.nodes import JsonNode, NodeKind
from json_pane_diff.tree.path import Path, PathSyntaxError

__all__ = [
    "JsonNode",
    "NodeKind",
    "Path",
    "PathSyntaxError",
    "TreeBuilder",
    "iter_paths",
]
