"""langledger: translation staleness ledger for nested localization content.

Tracks, per target language and leaf path, which source value produced the
last translation, and dispatches exactly the stale keys to a provider.
"""

__version__ = "0.1.0"
