"""Slug options and settings-file loading.

:class:`SlugifyOptions` is the immutable per-call configuration consumed by
:func:`slugforge.text.slugify`.  It validates itself on construction, so a
malformed value fails fast instead of silently producing a wrong slug.

:func:`load_settings` reads ``settings.toml`` and validates every field
before any text is processed.  The validated config is exposed as a
:class:`Settings` dataclass with typed fields for each section:
``slugify`` and ``logging``.
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path

from slugforge.errors import ActionableError
from slugforge.logging import LEVEL_NAMES, logger

DEFAULT_SEPARATOR = "-"

Replacement = tuple[str | re.Pattern[str], str]

# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SlugifyOptions:
    """Per-call slug configuration.

    ``allowed_pattern`` matches a single permitted character; a ``str`` is
    compiled on construction.  ``replacements`` pairs may use a literal
    ``str`` or a compiled pattern as their first element.  Sequences are
    normalized to tuples so instances stay hashable and immutable.
    """

    max_length: int = 0
    separator: str = DEFAULT_SEPARATOR
    allowed_pattern: str | re.Pattern[str] | None = None
    stopwords: tuple[str, ...] = ()
    replacements: tuple[Replacement, ...] = ()
    strip_entities: bool = True
    strip_decimal: bool = True
    strip_hex: bool = True
    word_boundary: bool = False
    lowercase: bool = True
    preserve_word_order: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ActionableError.validation(
                field_name="max_length",
                reason=f"must be an integer, got {type(self.max_length).__name__}",
            )
        if self.max_length < 0:
            raise ActionableError.validation(
                field_name="max_length",
                reason=f"is {self.max_length} — must be >= 0",
                suggestion="Use 0 to disable truncation",
            )

        if not isinstance(self.separator, str):
            raise ActionableError.validation(
                field_name="separator",
                reason=f"must be a string, got {type(self.separator).__name__}",
            )

        for flag in (
            "strip_entities",
            "strip_decimal",
            "strip_hex",
            "word_boundary",
            "lowercase",
            "preserve_word_order",
        ):
            if not isinstance(getattr(self, flag), bool):
                raise ActionableError.validation(
                    field_name=flag,
                    reason=f"must be a boolean, got {type(getattr(self, flag)).__name__}",
                )

        object.__setattr__(self, "allowed_pattern", _compile_allowed(self.allowed_pattern))
        object.__setattr__(self, "stopwords", _normalize_stopwords(self.stopwords))
        object.__setattr__(self, "replacements", _normalize_replacements(self.replacements))


def _compile_allowed(
    pattern: str | re.Pattern[str] | None,
) -> re.Pattern[str] | None:
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise ActionableError.validation(
            field_name="allowed_pattern",
            reason=f"must be a regular expression string, got {type(pattern).__name__}",
        )
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ActionableError.validation(
            field_name="allowed_pattern",
            reason=f"'{pattern}' is not a valid regular expression ({exc})",
            suggestion="Pass a character class such as '[a-z0-9_]'",
        ) from None


def _normalize_stopwords(stopwords: object) -> tuple[str, ...]:
    if isinstance(stopwords, str):
        raise ActionableError.validation(
            field_name="stopwords",
            reason="must be a sequence of words, not a single string",
            suggestion=f"Wrap the word in a list: [{stopwords!r}]",
        )
    try:
        words = tuple(stopwords)  # type: ignore[call-overload]
    except TypeError:
        raise ActionableError.validation(
            field_name="stopwords",
            reason=f"must be a sequence of strings, got {type(stopwords).__name__}",
        ) from None
    for word in words:
        if not isinstance(word, str):
            raise ActionableError.validation(
                field_name="stopwords",
                reason=f"contains non-string entry {word!r}",
            )
    return words


def _normalize_replacements(replacements: object) -> tuple[Replacement, ...]:
    try:
        pairs = tuple(replacements)  # type: ignore[call-overload]
    except TypeError:
        raise ActionableError.validation(
            field_name="replacements",
            reason=f"must be a sequence of (pattern, replacement) pairs, got {type(replacements).__name__}",
        ) from None

    normalized: list[Replacement] = []
    for pair in pairs:
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            raise ActionableError.validation(
                field_name="replacements",
                reason=f"entry {pair!r} is not a (pattern, replacement) pair",
                suggestion="Write each replacement as a two-item pair, e.g. ['|', 'or']",
            )
        old, new = pair
        if not isinstance(old, (str, re.Pattern)) or not isinstance(new, str):
            raise ActionableError.validation(
                field_name="replacements",
                reason=f"entry {pair!r} must pair a string or compiled pattern with a string",
            )
        if old == "":
            raise ActionableError.validation(
                field_name="replacements",
                reason="an empty search string would match between every character",
            )
        normalized.append((old, new))
    return tuple(normalized)


DEFAULT_OPTIONS = SlugifyOptions()

# ---------------------------------------------------------------------------
# Settings file
# ---------------------------------------------------------------------------


@dataclass
class LoggingConfig:
    """Logging settings from ``[logging]``."""

    log_dir: str | None = None
    level: str = "INFO"


@dataclass
class Settings:
    """Top-level validated configuration."""

    options: SlugifyOptions = field(default_factory=SlugifyOptions)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_SETTINGS_PATH = Path("config/settings.toml")

_OPTION_FIELDS = frozenset(f.name for f in fields(SlugifyOptions))


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~slugforge.errors.ActionableError`:
      - CONFIG if the file is missing or a key is unknown or misplaced
      - PARSE if the TOML is malformed
      - VALIDATION if field values are out of range

    Both ``[slugify]`` and ``[logging]`` are optional; missing sections
    fall back to defaults.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            suggestion=f"Create {filepath} or pass --config with an existing file",
        )

    raw_text = filepath.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            raw_error=str(exc),
            suggestion=f"Fix TOML syntax in {filepath}",
        ) from None

    settings = _validate(data, filepath)
    logger.debug("Loaded settings from %s", filepath)
    return settings


def _validate(data: dict[str, object], filepath: Path) -> Settings:
    """Validate raw TOML data and return a Settings instance."""

    # -- slugify section -----------------------------------------------------
    slug_data = _optional_section(data, "slugify", filepath)

    unknown = sorted(set(slug_data) - _OPTION_FIELDS)
    if unknown:
        raise ActionableError.config(
            field_name=f"slugify.{unknown[0]}",
            reason=f"Unknown key '{unknown[0]}' in [slugify] of {filepath}",
            suggestion=f"Valid keys are: {', '.join(sorted(_OPTION_FIELDS))}",
        )

    try:
        options = SlugifyOptions(**slug_data)  # type: ignore[arg-type]
    except ActionableError as exc:
        # Re-raise with the dotted settings path so the operator can find it
        context = exc.context or {}
        raise ActionableError.validation(
            field_name=f"slugify.{context.get('field', 'options')}",
            reason=context.get("reason", exc.error),
            suggestion=exc.suggestion,
        ) from None

    # -- logging section -----------------------------------------------------
    log_data = _optional_section(data, "logging", filepath)

    log_dir = log_data.get("log_dir")
    if log_dir is not None and not isinstance(log_dir, str):
        raise ActionableError.validation(
            field_name="logging.log_dir",
            reason=f"must be a path string, got {type(log_dir).__name__}",
        )

    level = str(log_data.get("level", "INFO")).upper()
    if level not in LEVEL_NAMES:
        raise ActionableError.validation(
            field_name="logging.level",
            reason=f"'{level}' is not a logging level",
            suggestion=f"Set [logging].level to one of {', '.join(LEVEL_NAMES)}",
        )

    return Settings(
        options=options,
        logging=LoggingConfig(log_dir=log_dir or None, level=level),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _optional_section(data: dict[str, object], name: str, filepath: Path) -> dict[str, object]:
    """Return a top-level section, ``{}`` when absent, or raise CONFIG error."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=name,
            reason=f"[{name}] must be a table, not {type(section).__name__}",
            suggestion=f"Define [{name}] as a TOML table in {filepath}",
        )
    return section
