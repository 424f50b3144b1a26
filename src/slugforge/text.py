"""Text-to-slug pipeline.

Pure functions with no I/O.  Every stage consumes and returns a whole
``str``; an empty string is valid input to any stage.  Stage order is
significant: entity references are removed before transliteration, case
folding happens before the allowed-character filter, and truncation runs
on the internal ``-`` separator before the caller's separator is
substituted in.
"""

from __future__ import annotations

import dataclasses
import re
import unicodedata
from typing import Any

from slugforge.config import DEFAULT_OPTIONS, DEFAULT_SEPARATOR, Replacement, SlugifyOptions
from slugforge.transliteration import transliterate
from slugforge.truncate import smart_truncate, strip

QUOTE_PATTERN = re.compile(r"'+")
CHAR_ENTITY_PATTERN = re.compile(r"&\w+;")
DECIMAL_PATTERN = re.compile(r"&#\d+;")
HEX_PATTERN = re.compile(r"&#x[\da-fA-F]+;")
NUMBERS_PATTERN = re.compile(r"(?<=\d),(?=\d)")
DISALLOWED_CHARS_PATTERN = re.compile(r"[^a-zA-Z0-9-]+")
DISALLOWED_LOWER_CHARS_PATTERN = re.compile(r"[^a-z0-9-]+")
DUPLICATE_DASH_PATTERN = re.compile(r"-{2,}")


def slugify(text: str | None, options: SlugifyOptions | None = None, **overrides: Any) -> str:
    """Convert *text* to a URL-safe slug.

    *options* defaults to :data:`~slugforge.config.DEFAULT_OPTIONS`;
    keyword *overrides* replace individual fields and are validated the
    same way as a freshly constructed :class:`SlugifyOptions`.

    >>> slugify("C'est déjà l'été.")
    'c-est-deja-l-ete'
    >>> slugify("jaja---lol-méméméoo--a", max_length=9)
    'jaja-lol'
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    if overrides:
        opts = dataclasses.replace(opts, **overrides)

    if not text:
        return ""

    text = _apply_replacements(text, opts.replacements)

    text = QUOTE_PATTERN.sub(DEFAULT_SEPARATOR, text)

    if opts.strip_entities:
        text = CHAR_ENTITY_PATTERN.sub("", text)
    if opts.strip_decimal:
        text = DECIMAL_PATTERN.sub("", text)
    if opts.strip_hex:
        text = HEX_PATTERN.sub("", text)

    # Compose letter + combining mark into the precomposed form the table keys on
    text = unicodedata.normalize("NFC", text)
    text = transliterate(text)

    if opts.lowercase:
        text = text.lower()

    text = QUOTE_PATTERN.sub("", text)
    text = NUMBERS_PATTERN.sub("", text)

    text = _filter_disallowed(text, opts)

    text = DUPLICATE_DASH_PATTERN.sub(DEFAULT_SEPARATOR, text)
    text = strip(text, DEFAULT_SEPARATOR)

    if opts.stopwords:
        text = _remove_stopwords(text, opts)

    text = _apply_replacements(text, opts.replacements)

    if opts.max_length > 0:
        text = smart_truncate(
            text,
            opts.max_length,
            opts.word_boundary,
            DEFAULT_SEPARATOR,
            opts.preserve_word_order,
        )

    if opts.separator != DEFAULT_SEPARATOR:
        text = text.replace(DEFAULT_SEPARATOR, opts.separator)

    return text


def _apply_replacements(text: str, replacements: tuple[Replacement, ...]) -> str:
    for old, new in replacements:
        if isinstance(old, re.Pattern):
            text = old.sub(new, text)
        else:
            text = text.replace(old, new)
    return text


def _filter_disallowed(text: str, opts: SlugifyOptions) -> str:
    """Replace each run of characters outside the permitted set with ``-``."""
    allowed = opts.allowed_pattern
    if not isinstance(allowed, re.Pattern):
        pattern = DISALLOWED_LOWER_CHARS_PATTERN if opts.lowercase else DISALLOWED_CHARS_PATTERN
        return pattern.sub(DEFAULT_SEPARATOR, text)

    out: list[str] = []
    in_run = False
    for char in text:
        if char == DEFAULT_SEPARATOR or allowed.fullmatch(char):
            out.append(char)
            in_run = False
        elif not in_run:
            out.append(DEFAULT_SEPARATOR)
            in_run = True
    return "".join(out)


def _remove_stopwords(text: str, opts: SlugifyOptions) -> str:
    if opts.lowercase:
        stopwords = {word.lower() for word in opts.stopwords}
    else:
        stopwords = set(opts.stopwords)
    words = [word for word in text.split(DEFAULT_SEPARATOR) if word not in stopwords]
    return opts.separator.join(words)


__all__ = ["slugify"]
