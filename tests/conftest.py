"""Shared fixtures for the langledger test suite."""

from pathlib import Path

import pytest


# ── Path fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def repo_root() -> Path:
    """Root of the langledger repo."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def package_root(repo_root: Path) -> Path:
    """Root of the langledger Python package."""
    return repo_root / "langledger"


@pytest.fixture
def tmp_locales_dir(tmp_path: Path) -> Path:
    """Temporary directory for content and meta files."""
    d = tmp_path / "locales"
    d.mkdir()
    return d


# ── Fake provider ────────────────────────────────────────────────────────────

class RecordingProvider:
    """Provider stub: answers from a fixed dictionary and records requests.

    ``answers`` maps path -> translated text. Paths without an answer are
    left out of the response, like a provider that could not resolve them.
    """

    def __init__(self, answers=None, raw_response=None, error=None):
        self.answers = dict(answers or {})
        self.raw_response = raw_response
        self.error = error
        self.requests = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def translate_batch(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_response is not None:
            return self.raw_response
        response = dict(request.flat_dist_content)
        for key in request.not_translated_keys:
            if key in self.answers:
                response[key] = self.answers[key]
        return response


@pytest.fixture
def make_provider():
    """Factory for RecordingProvider instances."""
    return RecordingProvider


@pytest.fixture
def provider():
    """RecordingProvider with French answers for the sample content."""
    return RecordingProvider({
        "title": "Bonjour",
        "menu.home": "Accueil",
        "menu.about": "À propos",
        "items.0": "Premier",
        "items.1": "Second",
        "count": "3",
    })


# ── Sample content ──────────────────────────────────────────────────────────

@pytest.fixture
def sample_content() -> dict:
    """Nested English content with mapping, sequence and ignored leaves."""
    return {
        "title": "Hello",
        "menu": {
            "home": "Home",
            "about": "About",
        },
        "items": ["First", "Second"],
        "count": 3,
        "enabled": True,
        "missing": None,
    }


@pytest.fixture
def sample_flat() -> dict:
    """Expected flat form of ``sample_content``."""
    return {
        "title": "Hello",
        "menu.home": "Home",
        "menu.about": "About",
        "items.0": "First",
        "items.1": "Second",
        "count": "3",
    }


@pytest.fixture
def translated_fr_meta(sample_flat) -> dict:
    """Persisted ledger where every sample key is translated into French."""
    fr = {
        "title": "Bonjour",
        "menu.home": "Accueil",
        "menu.about": "À propos",
        "items.0": "Premier",
        "items.1": "Second",
        "count": "3",
    }
    return {
        f"fr.{path}": {
            "srcLang": "en",
            "srcValue": value,
            "distLang": "fr",
            "distValue": fr[path],
        }
        for path, value in sample_flat.items()
    }
