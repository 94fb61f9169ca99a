"""Presentation decorators wrapping any sentence source.

Each decorator takes something with ``produce() -> str`` and is itself one, so
they stack freely: ``HtmlVerseBreaker(DexonlineLinkAdder(provider))``.
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote_plus

from ..core.constants import VERSE_SEPARATOR
from ..data.normalization import capitalize_first_letter
from ..engine.providers import SentenceSource

DEXONLINE_URL = "https://dexonline.ro/definitie/"

# Runs of Unicode letters; digits, underscores and punctuation split words.
_LETTER_RUN = re.compile(r"[^\W\d_]+")


class FirstSentenceLetterCapitalizer:
    def __init__(self, source: SentenceSource) -> None:
        self.source = source

    def produce(self) -> str:
        return capitalize_first_letter(self.source.produce().strip())


class VerseLineCapitalizer:
    """Capitalizes the first letter of every verse."""

    def __init__(self, source: SentenceSource) -> None:
        self.source = source

    def produce(self) -> str:
        verses = self.source.produce().split(VERSE_SEPARATOR)
        return VERSE_SEPARATOR.join(capitalize_first_letter(verse.strip()) for verse in verses)


class HtmlVerseBreaker:
    def __init__(self, source: SentenceSource) -> None:
        self.source = source

    def produce(self) -> str:
        return self.source.produce().replace(VERSE_SEPARATOR, "<br/>")


class DexonlineLinkAdder:
    """Turns every word into a link to its dexonline.ro definition."""

    def __init__(self, source: SentenceSource) -> None:
        self.source = source

    def produce(self) -> str:
        return _LETTER_RUN.sub(lambda match: self._link(match.group(0)), self.source.produce())

    @staticmethod
    def _link(word: str) -> str:
        encoded = quote_plus(word.lower())
        return (
            f'<a href="{DEXONLINE_URL}{encoded}" target="_blank" rel="noopener" '
            f'data-word="{encoded}">{html.escape(word)}</a>'
        )
