"""Provider contract: what the orchestrator hands a translation backend and
how it checks what comes back."""

from __future__ import annotations

import json
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from langledger.content.paths import FlatContent
from langledger.errors import ProviderResponseError
from langledger.languages import LangCode

_FLAT_MAPPING = TypeAdapter(dict[str, str])


class TranslationRequest(BaseModel):
    """One batch: a single source/target language pair and its stale keys.

    ``flat_dist_content`` holds the translations that are still in sync.
    ``previous_dist_content`` holds the outdated translations of stale keys,
    for context only; a provider must not echo them back as answers.
    """

    model_config = ConfigDict(frozen=True)

    src_lang: LangCode
    dist_lang: LangCode
    flat_src_content: dict[str, str]
    flat_dist_content: dict[str, str] = Field(default_factory=dict)
    previous_dist_content: dict[str, str] = Field(default_factory=dict)
    not_translated_keys: list[str]


@runtime_checkable
class TranslationProvider(Protocol):
    """Anything that can translate a batch of flat keys.

    Implementations return the target mapping they could produce; keys the
    provider could not resolve may be missing.
    """

    async def translate_batch(self, request: TranslationRequest) -> FlatContent: ...


def validate_flat_mapping(data: Any) -> FlatContent:
    """Check that a decoded response is a flat string-to-string mapping.

    Raises:
        ProviderResponseError: If it is not.
    """
    try:
        return _FLAT_MAPPING.validate_python(data, strict=True)
    except ValidationError as e:
        raise ProviderResponseError(
            f"provider response is not a flat string mapping: {json.dumps(data, default=str)[:500]}"
        ) from e


def parse_provider_arguments(raw: str | None) -> FlatContent:
    """Decode a JSON object of translations.

    Raises:
        ProviderResponseError: On missing, unparseable or ill-shaped JSON.
    """
    if not raw:
        raise ProviderResponseError("provider returned no translation arguments")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ProviderResponseError(f"failed to parse translation arguments: {raw[:500]}") from e
    return validate_flat_mapping(data)


def merge_provider_result(request: TranslationRequest, response: Any) -> FlatContent:
    """Fold a provider response into the partial target content.

    Only requested keys are taken from the response; everything already in
    ``request.flat_dist_content`` is kept, so the result is always a superset.
    Empty strings count as unresolved.
    """
    translated = validate_flat_mapping(response)
    merged = dict(request.flat_dist_content)
    for key in request.not_translated_keys:
        value = translated.get(key)
        if value:
            merged[key] = value
    return merged
