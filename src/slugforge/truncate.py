"""Length-bounded truncation that can respect word boundaries.

Pure functions over ``str``; lengths are counted in characters, never
bytes, so a cut can never land inside a multi-byte sequence.
"""

from __future__ import annotations

from slugforge.errors import ActionableError
from slugforge.logging import logger


def strip(text: str, char: str) -> str:
    """Remove every leading and trailing repetition of *char* from *text*.

    Unlike :meth:`str.strip`, *char* is treated as a unit rather than a
    set of characters, and an empty *char* leaves *text* unchanged.

    >>> strip("--a-b--", "-")
    'a-b'
    """
    if not char:
        return text
    width = len(char)
    start, end = 0, len(text)
    while text.startswith(char, start, end):
        start += width
    while end - start >= width and text.endswith(char, start, end):
        end -= width
    return text[start:end]


def smart_truncate(
    text: str,
    max_length: int = 0,
    word_boundary: bool = False,
    separator: str = " ",
    preserve_word_order: bool = False,
) -> str:
    """Truncate *text* to at most *max_length* characters.

    With ``word_boundary`` the result is assembled from whole words split
    on *separator*.  Words that would overflow are skipped so that later,
    shorter words can still fill the space, unless ``preserve_word_order``
    is set, in which case accumulation stops at the first overflow.  When
    no word fits, the plain character cut is used instead.

    A *max_length* of ``0`` disables truncation.  Negative values raise a
    VALIDATION :class:`~slugforge.errors.ActionableError`.

    >>> smart_truncate("jaja-lol-mememeoo-a", 15, True, "-")
    'jaja-lol-a'
    >>> smart_truncate("jaja-lol-mememeoo-a", 15, True, "-", preserve_word_order=True)
    'jaja-lol'
    """
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise ActionableError.validation(
            field_name="max_length",
            reason=f"must be an integer, got {type(max_length).__name__}",
        )
    if max_length < 0:
        raise ActionableError.validation(
            field_name="max_length",
            reason=f"is {max_length} — must be >= 0",
            suggestion="Use 0 to disable truncation",
        )

    text = text.strip()

    if not max_length or len(text) < max_length:
        return text

    if not word_boundary:
        return strip(text[:max_length], separator)

    if not separator or separator not in text:
        return text[:max_length]

    truncated = ""
    for word in text.split(separator):
        if not word:
            continue
        next_len = len(truncated) + len(word)
        if next_len < max_length:
            truncated += word + separator
        elif next_len == max_length:
            truncated += word
            break
        elif preserve_word_order:
            break

    if not truncated:
        logger.debug("No whole word fits in %d characters; cutting mid-word", max_length)
        truncated = text[:max_length]

    return strip(truncated, separator)


__all__ = ["smart_truncate", "strip"]
