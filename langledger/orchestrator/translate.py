"""Translation orchestrator: dispatch exactly the stale keys of one target
language to a provider and fold the answers back into content and ledger.

Branches, in order: identical languages, empty source, nothing stale,
translate. The first three are reported through ``message`` and never
reach the provider.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from langledger.content.paths import FlatContent, flatten, unflatten
from langledger.languages import LangCode, parse_lang, parse_langs
from langledger.ledger.schema import Ledger, MetaItem, MetaKey, drop_signalless
from langledger.ledger.skeleton import flat_content_from_ledger, normalize
from langledger.provider.base import (
    TranslationProvider,
    TranslationRequest,
    merge_provider_result,
    validate_flat_mapping,
)
from langledger.staleness.evaluator import evaluate
from langledger.staleness.queries import not_translated_keys

logger = logging.getLogger(__name__)

MSG_IDENTICAL_LANGS = "Source and target languages are the same"
MSG_NO_SOURCE_KEYS = "There are no keys in source content"
MSG_NOTHING_TO_TRANSLATE = "There are no keys to translate"

DEFAULT_MAX_CONCURRENCY = 4


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class CheckResult(BaseModel):
    """Dry-run answer: would ``translate`` call the provider, and for what."""

    model_config = ConfigDict()

    src_lang: LangCode
    dist_lang: LangCode
    will_be_translated: bool
    not_translated_keys: list[str] = Field(default_factory=list)
    message: str | None = None


class TranslationOutcome(BaseModel):
    """Result of translating one target language."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dist_lang: LangCode
    content: Any
    meta: Ledger
    was_translated: bool
    message: str | None = None
    unresolved_keys: list[str] = Field(default_factory=list)


class MultiTranslationOutcome(BaseModel):
    """Per-language outcomes plus the merged ledger."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    results: dict[LangCode, TranslationOutcome] = Field(default_factory=dict)
    meta: Ledger

    @property
    def was_translated(self) -> bool:
        return any(result.was_translated for result in self.results.values())


class _Plan(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    src_lang: LangCode
    dist_lang: LangCode
    ledger: Ledger
    flat_src: FlatContent = Field(default_factory=dict)
    flat_dist: FlatContent = Field(default_factory=dict)
    previous_dist: FlatContent = Field(default_factory=dict)
    stale_keys: list[str] = Field(default_factory=list)
    message: str | None = None


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


def normalize_for_lang(
    meta: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode,
    dist_lang: LangCode,
    content: Any,
) -> Ledger:
    """Normalize the ``dist_lang`` partition; other languages pass through.

    Stored entries without a source or translated value are dropped before
    validation, for every language.
    """
    ledger = Ledger.from_meta(drop_signalless(meta))
    partition = normalize(ledger.for_lang(dist_lang), src_lang, [dist_lang], content)
    return ledger.without_lang(dist_lang).merged(partition)


def _plan(
    content: Any,
    meta: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode | str,
    dist_lang: LangCode | str,
) -> _Plan:
    src_lang = parse_lang(src_lang)
    dist_lang = parse_lang(dist_lang)
    ledger = normalize_for_lang(meta, src_lang, dist_lang, content)
    plan = _Plan(src_lang=src_lang, dist_lang=dist_lang, ledger=ledger)

    if src_lang == dist_lang:
        plan.message = MSG_IDENTICAL_LANGS
        return plan

    info = evaluate(ledger, content, src_lang)
    plan.flat_src = flatten(content)
    recorded = flat_content_from_ledger(ledger, dist_lang)
    plan.stale_keys = not_translated_keys(info, dist_lang)
    stale = set(plan.stale_keys)
    plan.flat_dist = {k: v for k, v in recorded.items() if k not in stale}
    plan.previous_dist = {k: v for k, v in recorded.items() if k in stale}

    if not plan.flat_src:
        plan.message = MSG_NO_SOURCE_KEYS
    elif not plan.stale_keys:
        plan.message = MSG_NOTHING_TO_TRANSLATE
    return plan


def check(
    content: Any,
    meta: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode | str,
    dist_lang: LangCode | str,
) -> CheckResult:
    """Report what ``translate`` would do without doing it."""
    plan = _plan(content, meta, src_lang, dist_lang)
    return CheckResult(
        src_lang=plan.src_lang,
        dist_lang=plan.dist_lang,
        will_be_translated=plan.message is None,
        not_translated_keys=plan.stale_keys if plan.message is None else [],
        message=plan.message,
    )


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def _target_in_source_order(plan: _Plan, updated: FlatContent) -> FlatContent:
    """Target content laid out in source order; unresolved keys keep their
    outdated translation as the best available text."""
    target: FlatContent = {}
    for key in plan.flat_src:
        value = updated.get(key) or plan.previous_dist.get(key)
        if value:
            target[key] = value
    return target


async def translate(
    content: Any,
    meta: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode | str,
    dist_lang: LangCode | str,
    provider: TranslationProvider,
) -> TranslationOutcome:
    """Translate the stale keys of ``content`` into ``dist_lang``.

    Returns the rebuilt target-language tree and the updated ledger. Keys the
    provider leaves unresolved stay stale and get no ledger write.

    Raises:
        LedgerValidationError: If ``meta`` is malformed.
        ProviderResponseError: If the provider answer cannot be merged.
    """
    plan = _plan(content, meta, src_lang, dist_lang)

    if plan.src_lang == plan.dist_lang:
        logger.debug("Skipping %s -> %s: %s", plan.src_lang, plan.dist_lang, plan.message)
        return TranslationOutcome(
            dist_lang=plan.dist_lang,
            content=content,
            meta=plan.ledger,
            was_translated=False,
            message=plan.message,
        )
    if plan.message is not None:
        logger.debug("Skipping %s -> %s: %s", plan.src_lang, plan.dist_lang, plan.message)
        return TranslationOutcome(
            dist_lang=plan.dist_lang,
            content=unflatten({**plan.flat_dist, **plan.previous_dist}),
            meta=plan.ledger,
            was_translated=False,
            message=plan.message,
        )

    request = TranslationRequest(
        src_lang=plan.src_lang,
        dist_lang=plan.dist_lang,
        flat_src_content=plan.flat_src,
        flat_dist_content=plan.flat_dist,
        previous_dist_content=plan.previous_dist,
        not_translated_keys=plan.stale_keys,
    )
    logger.info(
        "Translating %d stale keys %s -> %s",
        len(plan.stale_keys),
        plan.src_lang,
        plan.dist_lang,
    )
    response = validate_flat_mapping(await provider.translate_batch(request))
    updated = merge_provider_result(request, response)

    writes: dict[MetaKey, MetaItem] = {}
    unresolved: list[str] = []
    for key in plan.stale_keys:
        src_value = plan.flat_src.get(key)
        dist_value = response.get(key)
        if not src_value or not dist_value:
            unresolved.append(key)
            continue
        writes[MetaKey.of(plan.dist_lang, key)] = MetaItem(
            src_lang=plan.src_lang,
            src_value=src_value,
            dist_lang=plan.dist_lang,
            dist_value=dist_value,
        )
    if unresolved:
        logger.warning(
            "Provider left %d keys unresolved for %s: %s",
            len(unresolved),
            plan.dist_lang,
            ", ".join(unresolved),
        )

    return TranslationOutcome(
        dist_lang=plan.dist_lang,
        content=unflatten(_target_in_source_order(plan, updated)),
        meta=plan.ledger.with_items(writes),
        was_translated=True,
        unresolved_keys=unresolved,
    )


async def translate_many(
    content: Any,
    meta: Ledger | Mapping[str, Any] | None,
    src_lang: LangCode | str,
    dist_langs: Iterable[LangCode | str],
    provider: TranslationProvider,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> MultiTranslationOutcome:
    """Run ``translate`` once per target language, at most ``max_concurrency``
    at a time, and merge the per-language ledgers.

    Ledger keys are partitioned by language, so each outcome only replaces
    its own partition. A failure for any language cancels the languages
    still in flight and propagates.
    """
    ledger = Ledger.from_meta(drop_signalless(meta))
    langs = parse_langs(dist_langs)
    semaphore = asyncio.Semaphore(max_concurrency)

    async def _one(lang: LangCode) -> TranslationOutcome:
        async with semaphore:
            return await translate(content, ledger, src_lang, lang, provider)

    tasks = [asyncio.create_task(_one(lang)) for lang in langs]
    try:
        outcomes = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    merged = ledger
    results: dict[LangCode, TranslationOutcome] = {}
    for outcome in outcomes:
        lang = outcome.dist_lang
        merged = merged.without_lang(lang).merged(outcome.meta.for_lang(lang))
        results[lang] = outcome
    return MultiTranslationOutcome(results=results, meta=merged)
