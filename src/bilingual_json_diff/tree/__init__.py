"""Tree subpackage: path codec, leaf walker and path resolver.

Re-exports the public API for the tree module:
- Key, Index, Leaf, JsonKind, MISSING, kind_of: value types
- encode_path / decode_path: canonical path key codec
- TreeWalker, LeafMode: stack-based leaf enumeration
- collect_string_paths / flatten: walker conveniences
- get_by_path / has_path: path resolution
"""

from bilingual_json_diff.tree.nodes import (
    MISSING,
    Index,
    JsonKind,
    Key,
    Leaf,
    Path,
    PathSegment,
    kind_of,
)
from bilingual_json_diff.tree.path import as_segment, decode_path, encode_path
from bilingual_json_diff.tree.resolver import get_by_path, has_path
from bilingual_json_diff.tree.walker import (
    DEFAULT_MAX_NODES,
    LeafMode,
    TreeWalker,
    collect_string_paths,
    flatten,
)

__all__ = [
    "DEFAULT_MAX_NODES",
    "MISSING",
    "Index",
    "JsonKind",
    "Key",
    "Leaf",
    "LeafMode",
    "Path",
    "PathSegment",
    "TreeWalker",
    "as_segment",
    "collect_string_paths",
    "decode_path",
    "encode_path",
    "flatten",
    "get_by_path",
    "has_path",
    "kind_of",
]
