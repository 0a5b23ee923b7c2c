"""Translation providers: the batch contract and the OpenAI implementation."""

from langledger.provider.base import (
    TranslationProvider,
    TranslationRequest,
    merge_provider_result,
    parse_provider_arguments,
    validate_flat_mapping,
)
from langledger.provider.config import ProviderConfig, build_provider, load_provider_config
from langledger.provider.openai_provider import (
    FUNCTION_NAME,
    OpenAIProvider,
    build_request_content,
    build_tool,
)
from langledger.provider.pricing import (
    DEFAULT_MODEL,
    count_tokens,
    model_tokens_limit,
    request_price,
)

__all__ = [
    "TranslationProvider",
    "TranslationRequest",
    "merge_provider_result",
    "parse_provider_arguments",
    "validate_flat_mapping",
    "ProviderConfig",
    "build_provider",
    "load_provider_config",
    "FUNCTION_NAME",
    "OpenAIProvider",
    "build_request_content",
    "build_tool",
    "DEFAULT_MODEL",
    "count_tokens",
    "model_tokens_limit",
    "request_price",
]
