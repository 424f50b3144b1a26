"""Per-character transliteration of non-ASCII letters to ASCII spellings.

The table is an explicit policy, not derived from Unicode decomposition:
digraphs (``Æ`` → ``AE``, ``Ю`` → ``Yu``) and language-specific choices
(``Щ`` → ``Sh``, ``θ`` → ``8``) have no canonical decomposition.  Characters
without an entry pass through unchanged.

The per-alphabet maps overlap (``č`` is both Czech and Latvian, ``ö`` both
Latin and Turkish); overlapping entries always agree.
"""

from __future__ import annotations

LATIN_MAP: dict[str, str] = {
    "À": "A", "Á": "A", "Â": "A", "Ã": "A", "Ä": "A", "Å": "A", "Æ": "AE",
    "Ç": "C", "È": "E", "É": "E", "Ê": "E", "Ë": "E", "Ì": "I", "Í": "I",
    "Î": "I", "Ï": "I", "Ð": "D", "Ñ": "N", "Ò": "O", "Ó": "O", "Ô": "O",
    "Õ": "O", "Ö": "O", "Ő": "O", "Ø": "O", "Ù": "U", "Ú": "U", "Û": "U",
    "Ü": "U", "Ű": "U", "Ý": "Y", "Þ": "TH", "Ÿ": "Y", "ß": "ss", "à": "a",
    "á": "a", "â": "a", "ã": "a", "ä": "a", "å": "a", "æ": "ae", "ç": "c",
    "è": "e", "é": "e", "ê": "e", "ë": "e", "ì": "i", "í": "i", "î": "i",
    "ï": "i", "ð": "d", "ñ": "n", "ò": "o", "ó": "o", "ô": "o", "õ": "o",
    "ö": "o", "ő": "o", "ø": "o", "ù": "u", "ú": "u", "û": "u", "ü": "u",
    "ű": "u", "ý": "y", "þ": "th", "ÿ": "y",
}  # fmt: skip

LATIN_SYMBOLS_MAP: dict[str, str] = {
    "©": "(c)",
}

GREEK_MAP: dict[str, str] = {
    "α": "a", "β": "b", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "h",
    "θ": "8", "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "3",
    "ο": "o", "π": "p", "ρ": "r", "σ": "s", "τ": "t", "υ": "y", "φ": "f",
    "χ": "x", "ψ": "ps", "ω": "w", "ά": "a", "έ": "e", "ί": "i", "ό": "o",
    "ύ": "y", "ή": "h", "ώ": "w", "ς": "s", "ϊ": "i", "ΰ": "y", "ϋ": "y",
    "ΐ": "i", "Α": "A", "Β": "B", "Γ": "G", "Δ": "D", "Ε": "E", "Ζ": "Z",
    "Η": "H", "Θ": "8", "Ι": "I", "Κ": "K", "Λ": "L", "Μ": "M", "Ν": "N",
    "Ξ": "3", "Ο": "O", "Π": "P", "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y",
    "Φ": "F", "Χ": "X", "Ψ": "PS", "Ω": "W", "Ά": "A", "Έ": "E", "Ί": "I",
    "Ό": "O", "Ύ": "Y", "Ή": "H", "Ώ": "W", "Ϊ": "I", "Ϋ": "Y",
}  # fmt: skip

TURKISH_MAP: dict[str, str] = {
    "ş": "s", "Ş": "S", "ı": "i", "İ": "I", "ç": "c", "Ç": "C", "ü": "u",
    "Ü": "U", "ö": "o", "Ö": "O", "ğ": "g", "Ğ": "G",
}  # fmt: skip

RUSSIAN_MAP: dict[str, str] = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e", "ё": "yo",
    "ж": "zh", "з": "z", "и": "i", "й": "j", "к": "k", "л": "l", "м": "m",
    "н": "n", "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
    "ф": "f", "х": "h", "ц": "c", "ч": "ch", "ш": "sh", "щ": "sh", "ъ": "",
    "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya", "А": "A", "Б": "B",
    "В": "V", "Г": "G", "Д": "D", "Е": "E", "Ё": "Yo", "Ж": "Zh", "З": "Z",
    "И": "I", "Й": "J", "К": "K", "Л": "L", "М": "M", "Н": "N", "О": "O",
    "П": "P", "Р": "R", "С": "S", "Т": "T", "У": "U", "Ф": "F", "Х": "H",
    "Ц": "C", "Ч": "Ch", "Ш": "Sh", "Щ": "Sh", "Ъ": "", "Ы": "Y", "Ь": "",
    "Э": "E", "Ю": "Yu", "Я": "Ya",
}  # fmt: skip

UKRAINIAN_MAP: dict[str, str] = {
    "Є": "Ye", "І": "I", "Ї": "Yi", "Ґ": "G", "є": "ye", "і": "i", "ї": "yi",
    "ґ": "g",
}  # fmt: skip

CZECH_MAP: dict[str, str] = {
    "č": "c", "ď": "d", "ě": "e", "ň": "n", "ř": "r", "š": "s", "ť": "t",
    "ů": "u", "ž": "z", "Č": "C", "Ď": "D", "Ě": "E", "Ň": "N", "Ř": "R",
    "Š": "S", "Ť": "T", "Ů": "U", "Ž": "Z",
}  # fmt: skip

POLISH_MAP: dict[str, str] = {
    "ą": "a", "ć": "c", "ę": "e", "ł": "l", "ń": "n", "ó": "o", "ś": "s",
    "ź": "z", "ż": "z", "Ą": "A", "Ć": "C", "Ę": "E", "Ł": "L", "Ń": "N",
    "Ó": "O", "Ś": "S", "Ź": "Z", "Ż": "Z",
}  # fmt: skip

LATVIAN_MAP: dict[str, str] = {
    "ā": "a", "č": "c", "ē": "e", "ģ": "g", "ī": "i", "ķ": "k", "ļ": "l",
    "ņ": "n", "š": "s", "ū": "u", "ž": "z", "Ā": "A", "Č": "C", "Ē": "E",
    "Ģ": "G", "Ī": "I", "Ķ": "K", "Ļ": "L", "Ņ": "N", "Š": "S", "Ū": "U",
    "Ž": "Z",
}  # fmt: skip

# Alphabet name -> map, in merge order
ALPHABETS: dict[str, dict[str, str]] = {
    "latin": LATIN_MAP,
    "latin_symbols": LATIN_SYMBOLS_MAP,
    "greek": GREEK_MAP,
    "turkish": TURKISH_MAP,
    "russian": RUSSIAN_MAP,
    "ukrainian": UKRAINIAN_MAP,
    "czech": CZECH_MAP,
    "polish": POLISH_MAP,
    "latvian": LATVIAN_MAP,
}

TRANSLITERATION_TABLE: dict[str, str] = {
    char: replacement
    for alphabet in ALPHABETS.values()
    for char, replacement in alphabet.items()
}

# Code point -> replacement, for str.translate
_ORDINAL_TABLE: dict[int, str] = {ord(char): rep for char, rep in TRANSLITERATION_TABLE.items()}


def transliterate_char(char: str) -> str:
    """Return the ASCII spelling of *char*, or *char* itself when unmapped.

    >>> transliterate_char("Ж")
    'Zh'
    >>> transliterate_char("?")
    '?'
    """
    return TRANSLITERATION_TABLE.get(char, char)


def transliterate(text: str) -> str:
    """Map every character of *text* through the transliteration table.

    Replacements are never re-scanned, so a multi-character output is
    emitted verbatim.

    >>> transliterate("Þórr und Straße")
    'THorr und Strasse'
    """
    return text.translate(_ORDINAL_TABLE)


__all__ = [
    "ALPHABETS",
    "TRANSLITERATION_TABLE",
    "transliterate",
    "transliterate_char",
]
