"""Query layer: views derived from an evaluated Info mapping."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from langledger.languages import LangCode, parse_lang
from langledger.ledger.schema import Info


def not_translated_keys(info: Info, lang: LangCode | str | None = None) -> list[str]:
    """Paths of non-actual entries, in discovery order, optionally for one language."""
    target = parse_lang(lang) if lang is not None else None
    return [
        key.path
        for key, item in info.items()
        if not item.actual and (target is None or key.lang == target)
    ]


def not_translated_langs(info: Info) -> set[LangCode]:
    return {item.dist_lang for item in info.values() if not item.actual}


def is_fully_translated(info: Info, lang: LangCode | str | None = None) -> bool:
    return not not_translated_keys(info, lang)


def info_for_lang(info: Info, lang: LangCode | str) -> Info:
    lang = parse_lang(lang)
    return {key: item for key, item in info.items() if item.dist_lang == lang}


# ---------------------------------------------------------------------------
# Summary report
# ---------------------------------------------------------------------------


class LangStatus(BaseModel):
    """Counts for one target language."""

    model_config = ConfigDict()

    lang: LangCode
    total: int = 0
    actual: int = 0
    outdated: int = 0
    untranslated: int = 0

    @computed_field
    @property
    def stale(self) -> int:
        return self.outdated + self.untranslated

    @computed_field
    @property
    def fully_translated(self) -> bool:
        return self.stale == 0


class StalenessReport(BaseModel):
    """Per-language staleness overview of a ledger."""

    model_config = ConfigDict()

    src_lang: LangCode
    langs: list[LangStatus] = Field(default_factory=list)

    @computed_field
    @property
    def fully_translated(self) -> bool:
        return all(status.fully_translated for status in self.langs)

    @computed_field
    @property
    def pending_langs(self) -> list[LangCode]:
        return [status.lang for status in self.langs if not status.fully_translated]


def summarize(info: Info, src_lang: LangCode | str) -> StalenessReport:
    """Count actual, outdated (translated but stale) and untranslated entries."""
    by_lang: dict[LangCode, LangStatus] = {}
    for item in info.values():
        status = by_lang.setdefault(item.dist_lang, LangStatus(lang=item.dist_lang))
        status.total += 1
        if item.actual:
            status.actual += 1
        elif item.dist_value:
            status.outdated += 1
        else:
            status.untranslated += 1
    return StalenessReport(src_lang=parse_lang(src_lang), langs=list(by_lang.values()))
