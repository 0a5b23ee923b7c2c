"""Error taxonomy shared by the ledger, orchestrator and provider layers.

No-op outcomes (identical languages, empty source, nothing stale) are not
errors; they are reported as messages on result models.
"""

from __future__ import annotations


class LedgerValidationError(ValueError):
    """A supplied ledger entry or language code does not conform."""

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        if key is not None:
            message = f"{key}: {message}"
        super().__init__(message)


class ProviderConfigError(RuntimeError):
    """The translation provider cannot issue a request as configured."""


class ProviderResponseError(RuntimeError):
    """The translation provider returned something that cannot be merged."""
