"""CLI tool for a per-language staleness report of a meta ledger.

Usage:
    python3 scripts/status_report.py --content en.json --meta meta.json --src-lang en --dist-lang fr --dist-lang de
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run staleness report CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 if every language is fully translated, 1 otherwise,
                   2 on error.
    """
    parser = argparse.ArgumentParser(
        description="Summarize translation staleness per target language."
    )
    parser.add_argument("--content", required=True, help="Path to source content (JSON or YAML).")
    parser.add_argument("--meta", required=True, help="Path to meta ledger (may not exist yet).")
    parser.add_argument("--src-lang", required=True, help="Source language code.")
    parser.add_argument(
        "--dist-lang",
        required=True,
        action="append",
        help="Target language code (repeatable).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        from langledger.ledger import normalize
        from langledger.staleness import evaluate, summarize
        from langledger.storage import load_document

        content = load_document(Path(args.content), default={})
        meta = load_document(Path(args.meta), default={})

        ledger = normalize(meta, args.src_lang, args.dist_lang, content)
        report = summarize(evaluate(ledger, content, args.src_lang), args.src_lang)
        print(report.model_dump_json(indent=2))

        return 0 if report.fully_translated else 1

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
