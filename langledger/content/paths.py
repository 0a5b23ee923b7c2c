"""Path flattener: nested content tree <-> flat path-to-text mapping.

Paths serialize as dot-joined segments. Sequence indices are integers, so
an all-digit segment means "sequence index" when a flat mapping is turned
back into a tree.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping
from typing import Any, Union

from langledger.content.tree import NODE_TYPES, Node, ingest

PATH_SEPARATOR = "."

Segment = Union[str, int]
ContentPath = tuple[Segment, ...]
FlatContent = dict[str, str]


def format_path(path: ContentPath) -> str:
    """Dot-join a structural path into its display form."""
    return sys.intern(PATH_SEPARATOR.join(str(segment) for segment in path))


def parse_path(text: str) -> ContentPath:
    """Split a display path; ASCII-digit segments become sequence indices."""
    if not text:
        raise ValueError("path must not be empty")
    return tuple(
        int(segment) if segment.isascii() and segment.isdigit() else segment
        for segment in text.split(PATH_SEPARATOR)
    )


def iter_leaves(node: Node, prefix: ContentPath = ()) -> Iterator[tuple[ContentPath, str]]:
    """Depth-first walk yielding ``(path, text)`` for every translatable leaf.

    String and number leaves are translatable. Empty strings and every other
    leaf kind are skipped.
    """
    if node.kind == "map":
        for key, child in node.children:
            yield from iter_leaves(child, prefix + (key,))
    elif node.kind == "seq":
        for index, item in enumerate(node.items):
            yield from iter_leaves(item, prefix + (index,))
    elif node.kind == "string":
        if node.value and prefix:
            yield prefix, node.value
    elif node.kind == "number":
        if prefix:
            yield prefix, node.as_text()


def flatten(tree: Any) -> FlatContent:
    """Flatten a plain nested tree into ``{"a.b.0": "text"}``."""
    node = tree if isinstance(tree, NODE_TYPES) else ingest(tree)
    return {format_path(path): text for path, text in iter_leaves(node)}


def _container_for(segment: Segment) -> Any:
    return [] if isinstance(segment, int) else {}


def _assign(container: Any, segment: Segment, value: Any) -> None:
    if isinstance(container, list):
        if not isinstance(segment, int):
            raise ValueError(f"cannot use key {segment!r} on a sequence")
        while len(container) <= segment:
            container.append(None)
        container[segment] = value
    else:
        container[str(segment)] = value


def _lookup(container: Any, segment: Segment) -> Any:
    if isinstance(container, list):
        if isinstance(segment, int) and segment < len(container):
            return container[segment]
        return None
    return container.get(str(segment))


def unflatten(flat: Mapping[str, str]) -> dict[str, Any]:
    """Rebuild a nested tree from a flat mapping.

    Intermediate nodes are created as needed: a list when the next segment
    is a sequence index, a dict otherwise. Sequence gaps are filled with None.

    Raises:
        ValueError: If one path runs through a leaf recorded by another.
    """
    root: dict[str, Any] = {}
    for text_path, value in flat.items():
        path = parse_path(text_path)
        node: Any = root
        for depth, segment in enumerate(path[:-1]):
            child = _lookup(node, segment)
            if child is None:
                child = _container_for(path[depth + 1])
                _assign(node, segment, child)
            elif not isinstance(child, (dict, list)):
                raise ValueError(f"path {text_path!r} runs through a leaf value")
            node = child
        _assign(node, path[-1], value)
    return root

