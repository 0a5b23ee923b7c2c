"""CLI tool for a translation dry run: which keys would be sent for translation.

Usage:
    python3 scripts/check_content.py --content en.json --meta meta.json --src-lang en --dist-lang fr
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run translation check CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 if nothing needs translating, 1 if work is pending,
                   2 on error.
    """
    parser = argparse.ArgumentParser(
        description="Report which content keys are stale for a target language."
    )
    parser.add_argument("--content", required=True, help="Path to source content (JSON or YAML).")
    parser.add_argument("--meta", required=True, help="Path to meta ledger (may not exist yet).")
    parser.add_argument("--src-lang", required=True, help="Source language code.")
    parser.add_argument("--dist-lang", required=True, help="Target language code.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        from langledger.orchestrator import check
        from langledger.storage import load_document

        content = load_document(Path(args.content), default={})
        meta = load_document(Path(args.meta), default={})

        result = check(content, meta, args.src_lang, args.dist_lang)
        print(result.model_dump_json(indent=2))

        return 1 if result.will_be_translated else 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
