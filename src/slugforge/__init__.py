"""slugforge — turn arbitrary text into URL-safe slugs."""

from slugforge.config import DEFAULT_OPTIONS, DEFAULT_SEPARATOR, SlugifyOptions
from slugforge.errors import ActionableError, ErrorType
from slugforge.text import slugify
from slugforge.transliteration import transliterate, transliterate_char
from slugforge.truncate import smart_truncate, strip

__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_SEPARATOR",
    "ActionableError",
    "ErrorType",
    "SlugifyOptions",
    "slugify",
    "smart_truncate",
    "strip",
    "transliterate",
    "transliterate_char",
]
