"""CLI tool to re-sync a meta ledger after translations were edited by hand.

Usage:
    python3 scripts/fix_meta.py --src en.json --dist fr.json --meta meta.json --src-lang en --dist-lang fr
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run meta fix CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 on success, 2 on error.
    """
    parser = argparse.ArgumentParser(
        description="Record edited target content as the current translation."
    )
    parser.add_argument("--src", required=True, help="Path to source content.")
    parser.add_argument("--dist", required=True, help="Path to edited target content.")
    parser.add_argument("--meta", required=True, help="Path to meta ledger; rewritten in place.")
    parser.add_argument("--src-lang", required=True, help="Source language code.")
    parser.add_argument("--dist-lang", required=True, help="Target language code.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        from langledger.orchestrator import fix
        from langledger.storage import load_document, write_document

        src_content = load_document(Path(args.src), default={})
        dist_content = load_document(Path(args.dist), default={})
        meta = load_document(Path(args.meta), default={})

        ledger = fix(src_content, dist_content, meta, args.src_lang, args.dist_lang)
        write_document(Path(args.meta), ledger.to_meta())
        print(f"Meta entries: {len(ledger)}")

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
