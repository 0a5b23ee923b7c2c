"""Tagged content-tree model.

A content tree arrives as plain nested mappings and sequences. ``ingest``
converts it once into tagged nodes; everything downstream dispatches on the
node ``kind`` instead of inspecting Python runtime types.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class StringLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str


class NumberLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int | float

    def as_text(self) -> str:
        """Render the number the way the content was originally authored.

        Integral floats drop the fractional part (``1.0 -> "1"``).
        """
        v = self.value
        if isinstance(v, float):
            if math.isnan(v):
                return "NaN"
            if math.isinf(v):
                return "Infinity" if v > 0 else "-Infinity"
            if v.is_integer():
                return str(int(v))
        return str(v)


class OtherLeaf(BaseModel):
    """Any leaf that is neither text nor a number (booleans, null, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["other"] = "other"
    value: Any = None


class MapNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["map"] = "map"
    children: tuple[tuple[str, Node], ...] = ()


class SeqNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["seq"] = "seq"
    items: tuple[Node, ...] = ()


Node = Annotated[
    Union[StringLeaf, NumberLeaf, OtherLeaf, MapNode, SeqNode],
    Field(discriminator="kind"),
]
NODE_TYPES = (StringLeaf, NumberLeaf, OtherLeaf, MapNode, SeqNode)

MapNode.model_rebuild()
SeqNode.model_rebuild()


def ingest(obj: Any) -> Node:
    """Tag a plain nested structure."""
    # bool subclasses int but is not a translatable number
    if isinstance(obj, bool):
        return OtherLeaf(value=obj)
    if isinstance(obj, str):
        return StringLeaf(value=obj)
    if isinstance(obj, (int, float)):
        return NumberLeaf(value=obj)
    if isinstance(obj, Mapping):
        return MapNode(children=tuple((str(k), ingest(v)) for k, v in obj.items()))
    if isinstance(obj, Sequence) and not isinstance(obj, (bytes, bytearray)):
        return SeqNode(items=tuple(ingest(item) for item in obj))
    return OtherLeaf(value=obj)


def to_plain(node: Node) -> Any:
    """Inverse of ``ingest``: back to dicts, lists and scalars."""
    if node.kind == "map":
        return {key: to_plain(child) for key, child in node.children}
    if node.kind == "seq":
        return [to_plain(item) for item in node.items]
    return node.value
