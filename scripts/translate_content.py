"""CLI tool to translate stale content keys into one or more target languages.

Usage:
    python3 scripts/translate_content.py --content en.json --meta meta.json \
        --src-lang en --dist-lang fr --dist-lang de --output-dir locales/
    python3 scripts/translate_content.py ... --config provider.yaml

The OpenAI key comes from the config file, or else from OPENAI_API_KEY
(a .env file in the working directory is honoured).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run translation CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 on success (including nothing to translate), 2 on error.
    """
    parser = argparse.ArgumentParser(
        description="Translate stale content keys and update the meta ledger."
    )
    parser.add_argument("--content", required=True, help="Path to source content (JSON or YAML).")
    parser.add_argument("--meta", required=True, help="Path to meta ledger; rewritten in place.")
    parser.add_argument("--src-lang", required=True, help="Source language code.")
    parser.add_argument(
        "--dist-lang",
        required=True,
        action="append",
        help="Target language code (repeatable).",
    )
    parser.add_argument(
        "--output-dir",
        required=True,
        help="Directory for translated content files (<lang>.json).",
    )
    parser.add_argument("--config", default=None, help="Path to provider config YAML.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        from dotenv import find_dotenv, load_dotenv

        from langledger.orchestrator import translate_many
        from langledger.provider import ProviderConfig, build_provider, load_provider_config
        from langledger.storage import load_document, write_document

        config = load_provider_config(Path(args.config)) if args.config else ProviderConfig()
        api_key = None
        if config.api_key is None:
            load_dotenv(find_dotenv(usecwd=True))
            api_key = os.environ.get("OPENAI_API_KEY")
        provider = build_provider(config, api_key=api_key)

        content = load_document(Path(args.content), default={})
        meta = load_document(Path(args.meta), default={})

        outcome = asyncio.run(translate_many(
            content,
            meta,
            args.src_lang,
            args.dist_lang,
            provider,
            max_concurrency=config.max_concurrency,
        ))

        output_dir = Path(args.output_dir)
        for lang, result in outcome.results.items():
            write_document(output_dir / f"{lang.value}.json", result.content)
            status = "translated" if result.was_translated else result.message
            print(f"{lang.value}: {status}")
            if result.unresolved_keys:
                print(f"  unresolved: {', '.join(result.unresolved_keys)}")
        write_document(Path(args.meta), outcome.meta.to_meta())

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
