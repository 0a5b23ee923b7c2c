"""Staleness evaluator: compare ledger entries with the live source."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from langledger.content.paths import flatten
from langledger.languages import LangCode, parse_lang
from langledger.ledger.schema import Info, InfoItem, Ledger, MetaItem


def is_actual(item: MetaItem, current_src_value: str | None, src_lang: LangCode) -> bool:
    """An entry is actual when its recorded source still matches the live
    value, a translation exists, and it was produced from ``src_lang``."""
    return (
        item.src_value == current_src_value
        and bool(item.dist_value)
        and item.src_lang == src_lang
    )


def evaluate(
    meta: Ledger | Mapping[str, Any],
    content: Any,
    src_lang: LangCode | str,
) -> Info:
    """Derive an InfoItem for every ledger entry.

    The live value is read from the flattened content, so numeric leaves
    compare by their text form and vanished paths resolve to None.
    """
    ledger = Ledger.from_meta(meta)
    src_lang = parse_lang(src_lang)
    flat = flatten(content)
    info: Info = {}
    for key, item in ledger.items():
        current = flat.get(key.path)
        info[key] = InfoItem(
            src_lang=item.src_lang,
            src_value=item.src_value,
            dist_lang=item.dist_lang,
            dist_value=item.dist_value,
            current_src_value=current,
            actual=is_actual(item, current, src_lang),
        )
    return info
