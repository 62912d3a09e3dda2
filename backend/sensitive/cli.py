"""Command line administration for the sensitive word engine."""

from __future__ import annotations

import argparse
import logging
import sys

from sensitive.config import Settings
from sensitive.engine.errors import SensitiveError
from sensitive.engine.sensitive_filter import SensitiveFilter

log = logging.getLogger("sensitive")


def _engine(args: argparse.Namespace) -> SensitiveFilter:
    overrides = {}
    if args.word_file:
        overrides["word_file"] = args.word_file
    return SensitiveFilter.from_settings(Settings(**overrides))


def cmd_update_cache(args: argparse.Namespace) -> int:
    engine = _engine(args)
    engine.reset_trie()
    if engine.cache is None:
        print("Cache is disabled (set SENSITIVE_CACHE=true); nothing was saved.")
        return 1
    print(f"Snapshot {engine.cache_key} updated ({engine.store.count_words()} words).")
    return 0


def cmd_clear_cache(args: argparse.Namespace) -> int:
    engine = _engine(args)
    if not engine.clear_snapshot():
        print("Cache is disabled (set SENSITIVE_CACHE=true); nothing was cleared.")
        return 1
    print(f"Snapshot {engine.cache_key} cleared.")
    return 0


def cmd_filter(args: argparse.Namespace) -> int:
    print(_engine(args).filter(args.text))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    engine = _engine(args)
    found = list(dict.fromkeys(engine.search(args.text)))
    if found:
        print(f"Sensitive words found: {', '.join(found)}")
        return 1
    print("No sensitive words found.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensitive",
        description="Sensitive word filter -- manage the trie snapshot and test texts",
    )
    parser.add_argument("--word-file", type=str, default=None,
                        help="Path to a word list file (overrides SENSITIVE_WORD_FILE)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("update-cache", help="Rebuild the trie from the word source and save the snapshot") \
        .set_defaults(func=cmd_update_cache)
    sub.add_parser("clear-cache", help="Remove the saved trie snapshot") \
        .set_defaults(func=cmd_clear_cache)

    p_filter = sub.add_parser("filter", help="Print TEXT with sensitive words masked")
    p_filter.add_argument("text")
    p_filter.set_defaults(func=cmd_filter)

    p_check = sub.add_parser("check", help="Exit 1 if TEXT contains sensitive words")
    p_check.add_argument("text")
    p_check.set_defaults(func=cmd_check)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    try:
        return args.func(args)
    except SensitiveError as exc:
        log.error(f"{type(exc).__name__}: {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
