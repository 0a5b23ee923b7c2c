"""Content trees: tagged node model and the path flattener."""

from langledger.content.paths import (
    PATH_SEPARATOR,
    ContentPath,
    FlatContent,
    flatten,
    format_path,
    iter_leaves,
    parse_path,
    unflatten,
)
from langledger.content.tree import (
    MapNode,
    Node,
    NumberLeaf,
    OtherLeaf,
    SeqNode,
    StringLeaf,
    ingest,
    to_plain,
)

__all__ = [
    "PATH_SEPARATOR",
    "ContentPath",
    "FlatContent",
    "flatten",
    "format_path",
    "iter_leaves",
    "parse_path",
    "unflatten",
    "MapNode",
    "Node",
    "NumberLeaf",
    "OtherLeaf",
    "SeqNode",
    "StringLeaf",
    "ingest",
    "to_plain",
]
