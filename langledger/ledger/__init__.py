"""Metadata ledger: schema, skeleton construction and normalization."""

from langledger.ledger.schema import (
    Info,
    InfoItem,
    Ledger,
    Meta,
    MetaItem,
    MetaKey,
    validate_entry,
)
from langledger.ledger.skeleton import (
    build_skeleton,
    flat_content_from_ledger,
    normalize,
)

__all__ = [
    "Info",
    "InfoItem",
    "Ledger",
    "Meta",
    "MetaItem",
    "MetaKey",
    "validate_entry",
    "build_skeleton",
    "flat_content_from_ledger",
    "normalize",
]
