# -*- coding: utf-8 -*-
"""Command-line interface for looking up translations and switching language."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from core.table_loader import RaggedRowError
from core.translation_store import TranslationStore
from infra.config import CONFIG_PATH, DEFAULT_DELIMITER, SETTINGS_PATH, TRANSLATIONS_PATH
from infra.models import load_config
from infra.settings import JsonSettingsStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up translated strings by item id.")
    parser.add_argument("item_ids", nargs="*", help="Item ids to translate.")
    parser.add_argument("--table", default=TRANSLATIONS_PATH, help="Path to the translation table.")
    parser.add_argument("--delimiter", default=DEFAULT_DELIMITER, help="Column delimiter of the table.")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to the JSON configuration.")
    parser.add_argument("--settings", default=SETTINGS_PATH, help="Where the preferred language is stored.")
    parser.add_argument("--language", help="Select (and remember) this language before translating.")
    parser.add_argument(
        "--list-languages",
        dest="list_languages",
        action="store_true",
        help="Print the available languages.",
    )
    parser.add_argument("--debug", action="store_true", help="Log lookup diagnostics to stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
        if args.debug:
            config = config.model_copy(update={"enable_debug_logging": True})
        store = TranslationStore.from_file(
            args.table,
            config=config,
            settings_store=JsonSettingsStore(args.settings),
            delimiter=args.delimiter,
        )
        selected = store.select_language(args.language) if args.language else None
    except (OSError, UnicodeDecodeError, ValidationError, RaggedRowError) as exc:
        print(f"Could not load translations: {exc}", file=sys.stderr, flush=True)
        return 2

    if args.language and selected is None:
        names = ", ".join(config.language_names())
        print(f"Unknown language: {args.language} (available: {names})", file=sys.stderr, flush=True)
        return 2

    if args.list_languages:
        current = store.get_current_language()
        for language in store.get_available_languages():
            marker = "*" if language is current else " "
            print(f"{marker} {language.name}", flush=True)

    status = 0
    for item_id in args.item_ids:
        text = store.get_translation(item_id)
        if text is None:
            print(f"No translation for: {item_id}", file=sys.stderr, flush=True)
            status = 1
            continue
        print(text, flush=True)
    return status


if __name__ == "__main__":
    sys.exit(main())
