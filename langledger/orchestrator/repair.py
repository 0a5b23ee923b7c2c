"""Metadata repair: make the ledger agree with hand-edited translations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from langledger.content.paths import flatten
from langledger.languages import LangCode, parse_lang
from langledger.ledger.schema import Ledger, MetaItem, MetaKey

logger = logging.getLogger(__name__)


def fix(
    src_content: Any,
    dist_content: Any,
    meta: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode | str,
    dist_lang: LangCode | str,
) -> Ledger:
    """Record every leaf of ``dist_content`` as the current translation of the
    matching ``src_content`` leaf.

    Paths missing from ``dist_content``, or whose source text is empty, keep
    whatever the ledger already says. The provider is never consulted.

    Raises:
        LedgerValidationError: If ``meta`` or a language code is malformed.
    """
    ledger = Ledger.from_meta(meta)
    src_lang = parse_lang(src_lang)
    dist_lang = parse_lang(dist_lang)
    flat_src = flatten(src_content)

    writes: dict[MetaKey, MetaItem] = {}
    for path, dist_value in flatten(dist_content).items():
        src_value = flat_src.get(path)
        if not src_value:
            continue
        writes[MetaKey.of(dist_lang, path)] = MetaItem(
            src_lang=src_lang,
            src_value=src_value,
            dist_lang=dist_lang,
            dist_value=dist_value,
        )
    logger.debug("Fixed %d ledger entries for %s", len(writes), dist_lang)
    return ledger.with_items(writes)
