"""OpenAI-backed translation provider.

Sends one chat completion per batch and forces a ``finishTranslation`` tool
call whose parameters are exactly the stale keys, so the answer comes back
as a JSON object keyed by path.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from openai import AsyncOpenAI

from langledger.content.paths import FlatContent
from langledger.errors import ProviderConfigError, ProviderResponseError
from langledger.provider.base import (
    TranslationRequest,
    merge_provider_result,
    parse_provider_arguments,
)
from langledger.provider.pricing import (
    DEFAULT_MODEL,
    check_model,
    count_tokens,
    model_tokens_limit,
    request_price,
)

logger = logging.getLogger(__name__)

FUNCTION_NAME = "finishTranslation"


def _lines(content: dict[str, str]) -> str:
    return "\n".join(f"{key}: {value}" for key, value in content.items())


def build_request_content(
    request: TranslationRequest,
    show_old_dist_data: bool = False,
    show_not_changed_data: bool = False,
) -> str:
    """Render the user message for a batch.

    By default only the stale keys' source text is shown. With
    ``show_not_changed_data`` the whole source (and previous translation) is
    included for context; ``show_old_dist_data`` adds the previous
    translations at all.
    """
    stale = set(request.not_translated_keys)
    src_lang = request.src_lang.value
    dist_lang = request.dist_lang.value

    if show_not_changed_data:
        src_part = request.flat_src_content
        dist_part = {**request.flat_dist_content, **request.previous_dist_content}
    else:
        src_part = {k: v for k, v in request.flat_src_content.items() if k in stale}
        dist_part = dict(request.previous_dist_content)

    parts = [f"New original content, language {src_lang}:\n{_lines(src_part)}"]
    if show_old_dist_data and dist_part:
        parts.append(f"Previously translated content, language {dist_lang}:\n{_lines(dist_part)}")
    parts.append(
        f"Give me fresh translations for keys from {src_lang} language to {dist_lang} language:\n"
        + "\n".join(request.not_translated_keys)
    )
    return "\n\n".join(parts)


def build_tool(request: TranslationRequest) -> dict[str, Any]:
    """Tool schema requiring one string property per stale key."""
    src_lang = request.src_lang.value
    dist_lang = request.dist_lang.value
    return {
        "type": "function",
        "function": {
            "name": FUNCTION_NAME,
            "description": (
                f"Finish translation the content from {src_lang} to {dist_lang}. "
                f"This function should be called with already translated content "
                f"to language {dist_lang}."
            ),
            "parameters": {
                "type": "object",
                "properties": {key: {"type": "string"} for key in request.not_translated_keys},
                "required": list(request.not_translated_keys),
            },
        },
    }


def _tool_arguments(response: Any) -> str | None:
    try:
        message = response.choices[0].message
    except (AttributeError, IndexError) as e:
        raise ProviderResponseError("provider response has no message") from e
    for call in getattr(message, "tool_calls", None) or []:
        if call.function.name == FUNCTION_NAME:
            return call.function.arguments
    return None


class OpenAIProvider:
    """Translation provider on the OpenAI chat completions API.

    Credentials are passed in explicitly; the provider never reads the
    process environment.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        show_old_dist_data: bool = False,
        show_not_changed_data: bool = False,
        client: Any = None,
        token_counter: Callable[[str, str], int] = count_tokens,
    ) -> None:
        self.model = check_model(model)
        self.show_old_dist_data = show_old_dist_data
        self.show_not_changed_data = show_not_changed_data
        self._token_counter = token_counter
        if client is None:
            if not api_key:
                raise ProviderConfigError("OpenAI API key is not defined")
            client = AsyncOpenAI(api_key=api_key)
        self._client = client
        self.last_request: str = ""
        self.last_price: float = 0.0

    def _messages(self, request: TranslationRequest, content: str) -> list[dict[str, str]]:
        src_lang = request.src_lang.value
        dist_lang = request.dist_lang.value
        return [
            {
                "role": "system",
                "content": (
                    f"You are a translator. You should translate the content from {src_lang} "
                    f"to {dist_lang}. Whenever you call any function, you should pass already "
                    f"translated arguments."
                ),
            },
            {"role": "user", "content": content},
        ]

    async def translate_batch(self, request: TranslationRequest) -> FlatContent:
        """Translate the stale keys of one batch.

        Raises:
            ProviderConfigError: If the prompt exceeds the model's context.
            ProviderResponseError: If the tool call is missing or malformed.
        """
        if not request.not_translated_keys:
            return dict(request.flat_dist_content)

        content = build_request_content(
            request,
            show_old_dist_data=self.show_old_dist_data,
            show_not_changed_data=self.show_not_changed_data,
        )
        prompt_tokens = self._token_counter(content, self.model)
        limit = model_tokens_limit(self.model)
        if prompt_tokens > limit:
            raise ProviderConfigError(
                f"request needs ~{prompt_tokens} tokens, model {self.model} allows {limit}"
            )
        logger.debug("Request content:\n%s", content)

        response = await self._client.chat.completions.create(
            model=self.model,
            messages=self._messages(request, content),
            tools=[build_tool(request)],
            tool_choice={"type": "function", "function": {"name": FUNCTION_NAME}},
        )

        usage = getattr(response, "usage", None)
        self.last_request = content
        self.last_price = request_price(
            getattr(usage, "prompt_tokens", 0) or 0,
            getattr(usage, "completion_tokens", 0) or 0,
            self.model,
        )
        logger.info(
            "Translated %d keys %s -> %s with %s (%.4f USD)",
            len(request.not_translated_keys),
            request.src_lang.value,
            request.dist_lang.value,
            self.model,
            self.last_price,
        )
        arguments = parse_provider_arguments(_tool_arguments(response))
        return merge_provider_result(request, arguments)
