"""CLI command handlers for slugforge.

Each public ``handle_*`` function corresponds to a CLI subcommand and
encapsulates the wiring and output for that command.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Any

from slugforge.config import Replacement, Settings, SlugifyOptions, load_settings
from slugforge.errors import ActionableError
from slugforge.logging import configure_file_logging, logger, parse_level
from slugforge.text import slugify
from slugforge.transliteration import ALPHABETS
from slugforge.truncate import smart_truncate

REPLACEMENT_ARROW = "->"

# argparse dest -> SlugifyOptions field, for flags that override settings
_OPTION_FLAGS = (
    "max_length",
    "separator",
    "allowed_pattern",
    "stopwords",
    "strip_entities",
    "strip_decimal",
    "strip_hex",
    "word_boundary",
    "lowercase",
    "preserve_word_order",
)


def parse_replacement(raw: str) -> Replacement:
    """Split an ``OLD->NEW`` argument into a replacement pair."""
    if REPLACEMENT_ARROW not in raw:
        raise ActionableError.validation(
            field_name="replacements",
            reason=f"'{raw}' is missing the '{REPLACEMENT_ARROW}' arrow",
            suggestion="Write each replacement as OLD->NEW, e.g. '|->or'",
        )
    old, new = raw.split(REPLACEMENT_ARROW, 1)
    return old, new


def build_options(args: argparse.Namespace, base: SlugifyOptions) -> SlugifyOptions:
    """Layer explicitly passed CLI flags on top of *base* options."""
    overrides: dict[str, Any] = {
        name: getattr(args, name)
        for name in _OPTION_FLAGS
        if getattr(args, name, None) is not None
    }
    if args.replacements:
        overrides["replacements"] = tuple(parse_replacement(raw) for raw in args.replacements)
    return dataclasses.replace(base, **overrides)


def read_input(args: argparse.Namespace) -> str:
    """Return the text to process: positional words joined by spaces, or stdin."""
    if args.stdin:
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as exc:
            raise ActionableError.from_exception(
                exc, "stdin", "read_input", suggestion="Pipe UTF-8 encoded text"
            ) from None
    return " ".join(args.text)


def setup_file_logging(log_dir: str, level_name: str) -> None:
    """Attach a file handler, reporting a bad level or directory as actionable."""
    try:
        configure_file_logging(log_dir, level=parse_level(level_name))
    except (OSError, ValueError) as exc:
        raise ActionableError.from_exception(
            exc, "logging", "configure_file_logging", suggestion="Check --log-dir and --log-level"
        ) from None


def handle_slug(args: argparse.Namespace) -> None:
    """Slugify the given text and print the result."""
    settings = load_settings(args.config) if args.config else Settings()

    log_dir = args.log_dir or settings.logging.log_dir
    if log_dir:
        setup_file_logging(log_dir, args.log_level or settings.logging.level)

    options = build_options(args, settings.options)
    logger.debug("Slugifying with %s", options)

    text = read_input(args)
    if args.stdin:
        for line in text.splitlines():
            print(slugify(line, options))
    else:
        print(slugify(text, options))


def handle_truncate(args: argparse.Namespace) -> None:
    """Truncate the given text and print the result."""
    result = smart_truncate(
        read_input(args),
        args.max_length,
        args.word_boundary,
        args.separator,
        args.preserve_word_order,
    )
    print(result)


def handle_table(args: argparse.Namespace) -> None:
    """List transliteration entries, for every alphabet or just one."""
    names = [args.alphabet] if args.alphabet else list(ALPHABETS)
    for name in names:
        alphabet = ALPHABETS[name]
        print(f"{name} ({len(alphabet)} entries)")
        for char, replacement in alphabet.items():
            print(f"  {char} → {replacement or '(dropped)'}")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="slugforge",
        description="Convert arbitrary text into URL-safe slugs",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug detail to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- slug ----------------------------------------------------------------
    slug_p = sub.add_parser("slug", help="Slugify text (arguments or stdin)")
    slug_p.add_argument("text", nargs="*", help="Text to slugify; words are joined by spaces")
    slug_p.add_argument(
        "--stdin",
        action="store_true",
        help="Read text from stdin and slugify each line",
    )
    slug_p.add_argument("--config", type=str, default=None, metavar="PATH", help="Settings TOML file")
    slug_p.add_argument("--max-length", type=int, default=None, metavar="N", help="Maximum slug length (0 = unlimited)")
    slug_p.add_argument("--separator", type=str, default=None, help="Word separator (default: -)")
    slug_p.add_argument(
        "--word-boundary",
        action="store_true",
        default=None,
        help="Truncate on whole words only",
    )
    slug_p.add_argument(
        "--preserve-word-order",
        action="store_true",
        default=None,
        help="When truncating, never skip a word to fit a later one",
    )
    slug_p.add_argument(
        "--no-lowercase",
        dest="lowercase",
        action="store_false",
        default=None,
        help="Keep original letter case",
    )
    slug_p.add_argument("--stopwords", nargs="+", default=None, metavar="WORD", help="Words to drop from the slug")
    slug_p.add_argument(
        "--replacements",
        nargs="+",
        default=None,
        metavar="OLD->NEW",
        help="Substring replacements applied before and after slugifying",
    )
    slug_p.add_argument(
        "--allowed-pattern",
        type=str,
        default=None,
        metavar="REGEX",
        help="Regex matching one permitted character (default: [a-z0-9-])",
    )
    slug_p.add_argument(
        "--no-entities",
        dest="strip_entities",
        action="store_false",
        default=None,
        help="Keep HTML character entity references such as &amp;",
    )
    slug_p.add_argument(
        "--no-decimal",
        dest="strip_decimal",
        action="store_false",
        default=None,
        help="Keep decimal character references such as &#381;",
    )
    slug_p.add_argument(
        "--no-hexadecimal",
        dest="strip_hex",
        action="store_false",
        default=None,
        help="Keep hexadecimal character references such as &#x17D;",
    )
    slug_p.add_argument("--log-dir", type=str, default=None, metavar="DIR", help="Also write logs to DIR")
    slug_p.add_argument(
        "--log-level", type=str, default=None, metavar="LEVEL", help="Level for the log file (default: INFO)"
    )

    # -- truncate ------------------------------------------------------------
    trunc_p = sub.add_parser("truncate", help="Truncate text to a maximum length")
    trunc_p.add_argument("text", nargs="*", help="Text to truncate; words are joined by spaces")
    trunc_p.add_argument("--stdin", action="store_true", help="Read text from stdin")
    trunc_p.add_argument("--max-length", type=int, required=True, metavar="N", help="Maximum length")
    trunc_p.add_argument("--word-boundary", action="store_true", help="Cut on whole words only")
    trunc_p.add_argument("--separator", type=str, default=" ", help="Word delimiter (default: space)")
    trunc_p.add_argument(
        "--preserve-word-order",
        action="store_true",
        help="Never skip a word to fit a later one",
    )

    # -- table ---------------------------------------------------------------
    table_p = sub.add_parser("table", help="List the transliteration table")
    table_p.add_argument(
        "--alphabet",
        choices=list(ALPHABETS),
        default=None,
        help="Show one alphabet only (default: all)",
    )

    return parser


_HANDLERS = {
    "slug": handle_slug,
    "truncate": handle_truncate,
    "table": handle_table,
}


def main(argv: list[str] | None = None) -> None:
    """Parse *argv*, dispatch to the subcommand handler, and report errors."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        _HANDLERS[args.command](args)
    except ActionableError as exc:
        logger.debug("Command %s failed: %s", args.command, exc.to_dict())
        print(f"Error: {exc.error}", file=sys.stderr)
        if exc.suggestion:
            print(f"  Suggestion: {exc.suggestion}", file=sys.stderr)
        sys.exit(1)
