"""Global test configuration — shared fixtures and safety guards.

This conftest provides:

1. **Logger guard** — snapshots the ``slugforge`` logger's level and
   handlers before every test and restores them afterwards, closing any
   file handler a test (or a CLI invocation under test) added.  Without
   it, ``--verbose`` or ``--log-dir`` in one test leaks into the next.

2. **Shared sample corpus** — ``SAMPLE_TEXTS`` covers every alphabet in
   the transliteration table plus punctuation, entities and whitespace
   edge cases, for invariant-style tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from slugforge.logging import logger

if TYPE_CHECKING:
    from collections.abc import Iterator

SAMPLE_TEXTS: list[str] = [
    "This is a test ---",
    "C'est déjà l'été.",
    "jaja---lol-méméméoo--a",
    "1,000 items",
    "  already-lower  ",
    "Привет мир",
    "Θεσσαλονίκη",
    "İstanbul'da Işık",
    "Київ — столиця України",
    "Příliš žluťoučký kůň",
    "Zażółć gęślą jaźń",
    "Rīga, Ģirts un Ķemeri",
    "© 2024 Acme Corp™",
    "Ærøskøbing & Þingvellir",
    "foo &amp; bar &#9829; baz &#x2665;",
    "rock''n''roll",
    "Cafe\u0301 au lait",
    "漢字 test 123",
    "",
    "!!!",
    "___under___scores___",
    "Straße 10,5 km",
]


@pytest.fixture(autouse=True)
def _restore_logger() -> Iterator[None]:
    """Restore the slugforge logger to its pre-test level and handlers."""
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
