"""Tests for skeleton construction and normalization."""

import pytest

from langledger.errors import LedgerValidationError
from langledger.languages import LangCode
from langledger.ledger.schema import Ledger, MetaKey
from langledger.ledger.skeleton import build_skeleton, flat_content_from_ledger, normalize


class TestBuildSkeleton:
    """build_skeleton() baseline ledger."""

    def test_one_entry_per_lang_and_path(self, sample_content, sample_flat):
        ledger = build_skeleton("en", ["fr", "de"], sample_content)
        assert len(ledger) == 2 * len(sample_flat)
        assert MetaKey.of("de", "menu.about") in ledger

    def test_foreign_languages_untranslated(self, sample_content):
        ledger = build_skeleton("en", ["fr"], sample_content)
        item = ledger["fr.title"]
        assert item.src_lang == LangCode.en
        assert item.src_value == "Hello"
        assert item.dist_lang == LangCode.fr
        assert item.dist_value is None

    def test_source_language_translated_into_itself(self, sample_content):
        ledger = build_skeleton("en", ["en"], sample_content)
        for item in ledger.values():
            assert item.dist_value == item.src_value

    def test_ignored_leaves_have_no_entries(self, sample_content):
        ledger = build_skeleton("en", ["fr"], sample_content)
        assert "fr.enabled" not in ledger
        assert "fr.missing" not in ledger

    def test_unknown_language_rejected(self, sample_content):
        with pytest.raises(LedgerValidationError):
            build_skeleton("en", ["xx"], sample_content)


class TestNormalize:
    """normalize() reconciliation against current content."""

    def test_empty_meta_equals_skeleton(self, sample_content):
        assert normalize({}, "en", ["fr"], sample_content) == build_skeleton(
            "en", ["fr"], sample_content
        )

    def test_keeps_history_for_existing_paths(self, sample_content, translated_fr_meta):
        ledger = normalize(translated_fr_meta, "en", ["fr"], sample_content)
        assert ledger["fr.title"].dist_value == "Bonjour"

    def test_drops_removed_paths(self, sample_content, translated_fr_meta):
        del sample_content["menu"]
        ledger = normalize(translated_fr_meta, "en", ["fr"], sample_content)
        assert "fr.menu.home" not in ledger
        assert "fr.title" in ledger

    def test_adds_new_paths(self, sample_content, translated_fr_meta):
        sample_content["footer"] = "Bye"
        ledger = normalize(translated_fr_meta, "en", ["fr"], sample_content)
        assert ledger["fr.footer"].dist_value is None

    def test_drops_languages_outside_scope(self, sample_content, translated_fr_meta):
        ledger = normalize(translated_fr_meta, "en", ["de"], sample_content)
        assert ledger.langs() == [LangCode.de]

    def test_discards_entries_without_signal(self, sample_content):
        stored = {
            "fr.title": {"srcLang": "en", "srcValue": "Old", "distLang": "fr", "distValue": None},
            "fr.count": {"srcLang": "en", "srcValue": "", "distLang": "fr", "distValue": "3"},
        }
        ledger = normalize(stored, "en", ["fr"], sample_content)
        assert ledger["fr.title"].src_value == "Hello"
        assert ledger["fr.count"].dist_value is None

    def test_discarded_entries_are_not_validated(self, sample_content):
        stored = {"fr.title": {"srcLang": "zz", "srcValue": "x", "distLang": "fr", "distValue": None}}
        normalize(stored, "en", ["fr"], sample_content)

    def test_invalid_entry_fails(self, sample_content):
        stored = {"fr.title": {"srcLang": "zz", "srcValue": "x", "distLang": "fr", "distValue": "y"}}
        with pytest.raises(LedgerValidationError):
            normalize(stored, "en", ["fr"], sample_content)

    def test_idempotent(self, sample_content, translated_fr_meta):
        sample_content["footer"] = "Bye"
        del sample_content["items"]
        once = normalize(translated_fr_meta, "en", ["fr", "de", "en"], sample_content)
        twice = normalize(once, "en", ["fr", "de", "en"], sample_content)
        assert once == twice
        assert normalize(once.to_meta(), "en", ["fr", "de", "en"], sample_content) == once


class TestFlatContentFromLedger:
    """flat_content_from_ledger() target-language view."""

    def test_only_translated_entries(self, sample_content):
        ledger = build_skeleton("en", ["fr", "en"], sample_content)
        assert flat_content_from_ledger(ledger, "fr") == {}
        assert flat_content_from_ledger(ledger, "en")["menu.home"] == "Home"

    def test_paths_without_language(self, translated_fr_meta):
        flat = flat_content_from_ledger(Ledger.from_meta(translated_fr_meta), "fr")
        assert flat["items.0"] == "Premier"
