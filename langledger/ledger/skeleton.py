"""Ledger construction and normalization against the current content."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from langledger.content.paths import FlatContent, flatten
from langledger.languages import LangCode, parse_lang, parse_langs
from langledger.ledger.schema import Ledger, MetaItem, MetaKey, has_signal, validate_entry


def build_skeleton(
    src_lang: LangCode | str,
    dist_langs: Iterable[LangCode | str],
    content: Any,
) -> Ledger:
    """Baseline ledger for content that has never been translated.

    One entry per (target language, leaf path). The source language is
    trivially translated into itself, so its entries carry the leaf value
    as ``dist_value``; every other language starts untranslated.
    """
    src_lang = parse_lang(src_lang)
    flat = flatten(content)
    items: dict[MetaKey, MetaItem] = {}
    for lang in parse_langs(dist_langs):
        for path, value in flat.items():
            items[MetaKey(lang, path)] = MetaItem(
                src_lang=src_lang,
                src_value=value,
                dist_lang=lang,
                dist_value=value if lang == src_lang else None,
            )
    return Ledger(items)


def normalize(
    stored: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode | str,
    dist_langs: Iterable[LangCode | str],
    content: Any,
) -> Ledger:
    """Reconcile a stored ledger with the current content structure.

    Stored entries without a translated value or without a source value are
    discarded first. The rest are validated, then laid over a fresh skeleton:
    paths that still exist keep their history, vanished paths and languages
    outside ``dist_langs`` drop out, new paths get skeleton entries.

    Raises:
        LedgerValidationError: If a remaining stored entry is malformed.
    """
    if isinstance(stored, Ledger):
        useful = {k: v for k, v in stored.items() if has_signal(v)}
    else:
        useful = dict(
            validate_entry(key, entry)
            for key, entry in (stored or {}).items()
            if has_signal(entry)
        )
    skeleton = build_skeleton(src_lang, dist_langs, content)
    return skeleton.with_items((key, useful[key]) for key in skeleton if key in useful)


def flat_content_from_ledger(ledger: Ledger, lang: LangCode | str) -> FlatContent:
    """Target-language content recorded in the ledger (translated entries only)."""
    lang = parse_lang(lang)
    return {
        key.path: item.dist_value
        for key, item in ledger.items()
        if key.lang == lang and item.dist_value
    }
