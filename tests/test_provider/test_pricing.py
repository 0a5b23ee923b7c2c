"""Tests for pricing and model limits."""

import pytest

from langledger.errors import ProviderConfigError
from langledger.provider.pricing import model_tokens_limit, request_price


class TestPricing:
    """request_price() and model_tokens_limit()."""

    def test_price(self):
        assert request_price(1000, 1000, "gpt-4-turbo") == pytest.approx(0.04)

    def test_zero_tokens_free(self):
        assert request_price(0, 0) == 0

    def test_limit(self):
        assert model_tokens_limit("gpt-4o") == 128_000

    def test_unknown_model(self):
        with pytest.raises(ProviderConfigError):
            request_price(1, 1, "mystery")
