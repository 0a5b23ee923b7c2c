"""Staleness evaluation and the query views built on it."""

from langledger.staleness.evaluator import evaluate, is_actual
from langledger.staleness.queries import (
    LangStatus,
    StalenessReport,
    info_for_lang,
    is_fully_translated,
    not_translated_keys,
    not_translated_langs,
    summarize,
)

__all__ = [
    "evaluate",
    "is_actual",
    "LangStatus",
    "StalenessReport",
    "info_for_lang",
    "is_fully_translated",
    "not_translated_keys",
    "not_translated_langs",
    "summarize",
]
