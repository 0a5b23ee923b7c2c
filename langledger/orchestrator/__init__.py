"""Orchestration: dry-run checks, translation dispatch and ledger repair."""

from langledger.orchestrator.repair import fix
from langledger.orchestrator.translate import (
    MSG_IDENTICAL_LANGS,
    MSG_NO_SOURCE_KEYS,
    MSG_NOTHING_TO_TRANSLATE,
    CheckResult,
    MultiTranslationOutcome,
    TranslationOutcome,
    check,
    normalize_for_lang,
    translate,
    translate_many,
)

__all__ = [
    "fix",
    "MSG_IDENTICAL_LANGS",
    "MSG_NO_SOURCE_KEYS",
    "MSG_NOTHING_TO_TRANSLATE",
    "CheckResult",
    "MultiTranslationOutcome",
    "TranslationOutcome",
    "check",
    "normalize_for_lang",
    "translate",
    "translate_many",
]
