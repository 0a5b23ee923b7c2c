"""Tests for the command-line scripts."""

import importlib
import json
from pathlib import Path

import pytest


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False))
    return path


class TestScriptsImportable:
    """Every script exposes main()."""

    @pytest.mark.parametrize(
        "name", ["check_content", "translate_content", "fix_meta", "status_report"]
    )
    def test_has_main(self, name):
        mod = importlib.import_module(f"scripts.{name}")
        assert callable(mod.main)


class TestCheckContentCli:
    """scripts/check_content.py"""

    def test_pending_work(self, tmp_locales_dir, sample_content, capsys):
        from scripts.check_content import main

        content = _write(tmp_locales_dir / "en.json", sample_content)
        exit_code = main([
            "--content", str(content),
            "--meta", str(tmp_locales_dir / "meta.json"),
            "--src-lang", "en",
            "--dist-lang", "fr",
        ])
        assert exit_code == 1
        out = json.loads(capsys.readouterr().out)
        assert out["will_be_translated"] is True
        assert "title" in out["not_translated_keys"]

    def test_up_to_date(self, tmp_locales_dir, sample_content, translated_fr_meta):
        from scripts.check_content import main

        content = _write(tmp_locales_dir / "en.json", sample_content)
        meta = _write(tmp_locales_dir / "meta.json", translated_fr_meta)
        assert main([
            "--content", str(content), "--meta", str(meta),
            "--src-lang", "en", "--dist-lang", "fr",
        ]) == 0

    def test_bad_language(self, tmp_locales_dir, sample_content, capsys):
        from scripts.check_content import main

        content = _write(tmp_locales_dir / "en.json", sample_content)
        exit_code = main([
            "--content", str(content), "--meta", str(tmp_locales_dir / "meta.json"),
            "--src-lang", "en", "--dist-lang", "xx",
        ])
        assert exit_code == 2
        assert "Error:" in capsys.readouterr().err


class TestStatusReportCli:
    """scripts/status_report.py"""

    def test_report(self, tmp_locales_dir, sample_content, translated_fr_meta, capsys):
        from scripts.status_report import main

        content = _write(tmp_locales_dir / "en.json", sample_content)
        meta = _write(tmp_locales_dir / "meta.json", translated_fr_meta)
        exit_code = main([
            "--content", str(content), "--meta", str(meta),
            "--src-lang", "en", "--dist-lang", "fr", "--dist-lang", "de",
        ])
        assert exit_code == 1
        report = json.loads(capsys.readouterr().out)
        assert report["pending_langs"] == ["de"]


class TestFixMetaCli:
    """scripts/fix_meta.py"""

    def test_rewrites_meta(self, tmp_locales_dir):
        from scripts.fix_meta import main

        src = _write(tmp_locales_dir / "en.json", {"a": "X"})
        dist = _write(tmp_locales_dir / "fr.json", {"a": "Y"})
        meta = tmp_locales_dir / "meta.json"
        exit_code = main([
            "--src", str(src), "--dist", str(dist), "--meta", str(meta),
            "--src-lang", "en", "--dist-lang", "fr",
        ])
        assert exit_code == 0
        assert json.loads(meta.read_text()) == {
            "fr.a": {"srcLang": "en", "srcValue": "X", "distLang": "fr", "distValue": "Y"}
        }

    def test_yaml_files(self, tmp_locales_dir):
        from scripts.fix_meta import main

        src = tmp_locales_dir / "en.yaml"
        src.write_text("a: X\n")
        dist = tmp_locales_dir / "fr.yaml"
        dist.write_text("a: Y\n")
        meta = tmp_locales_dir / "meta.yaml"
        assert main([
            "--src", str(src), "--dist", str(dist), "--meta", str(meta),
            "--src-lang", "en", "--dist-lang", "fr",
        ]) == 0
        assert "distValue: Y" in meta.read_text()


class TestTranslateContentCli:
    """scripts/translate_content.py"""

    def test_translates_with_injected_provider(
        self, tmp_locales_dir, sample_content, provider, monkeypatch
    ):
        import langledger.provider
        from scripts.translate_content import main

        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setattr(langledger.provider, "build_provider", lambda config, api_key=None: provider)

        content = _write(tmp_locales_dir / "en.json", sample_content)
        meta = tmp_locales_dir / "meta.json"
        out_dir = tmp_locales_dir / "out"
        exit_code = main([
            "--content", str(content), "--meta", str(meta),
            "--src-lang", "en", "--dist-lang", "fr",
            "--output-dir", str(out_dir),
        ])
        assert exit_code == 0
        assert json.loads((out_dir / "fr.json").read_text())["title"] == "Bonjour"
        assert json.loads(meta.read_text())["fr.title"]["distValue"] == "Bonjour"

    def test_missing_api_key(self, tmp_locales_dir, sample_content, monkeypatch, capsys):
        from scripts.translate_content import main

        monkeypatch.chdir(tmp_locales_dir)
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        content = _write(tmp_locales_dir / "en.json", sample_content)
        exit_code = main([
            "--content", str(content), "--meta", str(tmp_locales_dir / "meta.json"),
            "--src-lang", "en", "--dist-lang", "fr",
            "--output-dir", str(tmp_locales_dir / "out"),
        ])
        assert exit_code == 2
        assert "API key" in capsys.readouterr().err
