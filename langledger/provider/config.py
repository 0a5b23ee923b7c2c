"""Provider configuration loaded from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from langledger.provider.openai_provider import OpenAIProvider
from langledger.provider.pricing import DEFAULT_MODEL, MODEL_PRICES_PER_1K


class ProviderConfig(BaseModel):
    """Settings for the OpenAI provider and for multi-language runs."""

    model_config = ConfigDict(extra="forbid")

    model: str = DEFAULT_MODEL
    api_key: SecretStr | None = None
    show_old_dist_data: bool = False
    show_not_changed_data: bool = False
    max_concurrency: int = Field(default=4, ge=1)

    @field_validator("model")
    @classmethod
    def known_model(cls, v: str) -> str:
        if v not in MODEL_PRICES_PER_1K:
            raise ValueError(f"model must be one of {sorted(MODEL_PRICES_PER_1K)}")
        return v


def load_provider_config(path: Path) -> ProviderConfig:
    """Read a ProviderConfig from a YAML file.

    Raises:
        ValueError: If the file is not a YAML mapping or fails validation.
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Provider config YAML must be a mapping")
    return ProviderConfig.model_validate(data)


def build_provider(config: ProviderConfig, api_key: str | None = None) -> OpenAIProvider:
    """Create an OpenAIProvider; ``api_key`` wins over the config's key."""
    if api_key is None and config.api_key is not None:
        api_key = config.api_key.get_secret_value()
    return OpenAIProvider(
        api_key=api_key,
        model=config.model,
        show_old_dist_data=config.show_old_dist_data,
        show_not_changed_data=config.show_not_changed_data,
    )
