"""Token counting, context limits and request pricing for OpenAI chat models."""

from __future__ import annotations

import tiktoken

from langledger.errors import ProviderConfigError

DEFAULT_MODEL = "gpt-4-turbo"

# USD per 1k tokens: (input, output)
MODEL_PRICES_PER_1K: dict[str, tuple[float, float]] = {
    "gpt-4-turbo": (0.01, 0.03),
    "gpt-4o": (0.0025, 0.01),
    "gpt-4o-mini": (0.00015, 0.0006),
    "gpt-4.1": (0.002, 0.008),
    "gpt-4.1-mini": (0.0004, 0.0016),
}

MODEL_TOKEN_LIMITS: dict[str, int] = {
    "gpt-4-turbo": 128_000,
    "gpt-4o": 128_000,
    "gpt-4o-mini": 128_000,
    "gpt-4.1": 1_047_576,
    "gpt-4.1-mini": 1_047_576,
}

FALLBACK_ENCODING = "cl100k_base"


def check_model(model: str) -> str:
    """Raises ProviderConfigError for a model without pricing data."""
    if model not in MODEL_PRICES_PER_1K or model not in MODEL_TOKEN_LIMITS:
        raise ProviderConfigError(
            f"unsupported model {model!r}; expected one of {sorted(MODEL_PRICES_PER_1K)}"
        )
    return model


def request_price(prompt_tokens: int, completion_tokens: int, model: str = DEFAULT_MODEL) -> float:
    input_price, output_price = MODEL_PRICES_PER_1K[check_model(model)]
    return (prompt_tokens * input_price + completion_tokens * output_price) / 1000


def model_tokens_limit(model: str = DEFAULT_MODEL) -> int:
    return MODEL_TOKEN_LIMITS[check_model(model)]


def count_tokens(text: str, model: str = DEFAULT_MODEL) -> int:
    """Token count of ``text`` under the model's encoding.

    Models unknown to tiktoken fall back to ``cl100k_base``.
    """
    try:
        encoding = tiktoken.encoding_for_model(model)
    except KeyError:
        encoding = tiktoken.get_encoding(FALLBACK_ENCODING)
    return len(encoding.encode(text))
