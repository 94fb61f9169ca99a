"""Phrase service: one provider per style, each on its own dictionary copy."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Type

from ..core.exceptions import ConstraintSearchError, PhraseError
from ..data.dictionary import WordDictionary
from ..io.decorators import (
    DexonlineLinkAdder,
    FirstSentenceLetterCapitalizer,
    HtmlVerseBreaker,
    VerseLineCapitalizer,
)
from ..utils.logger import get_logger
from .providers import (
    ComparisonProvider,
    CoupletProvider,
    DefinitionProvider,
    FiveWordSentenceProvider,
    HaikuProvider,
    MirrorProvider,
    SentenceProvider,
    SentenceSource,
    TautogramProvider,
)

LOGGER = get_logger(__name__)


class SentenceStyle(str, Enum):
    HAIKU = "haiku"
    COUPLET = "couplet"
    COMPARISON = "comparison"
    DEFINITION = "definition"
    TAUTOGRAM = "tautogram"
    MIRROR = "mirror"
    FIVE_WORD = "five_word"


PROVIDER_CLASSES: Dict[SentenceStyle, Type[SentenceProvider]] = {
    SentenceStyle.HAIKU: HaikuProvider,
    SentenceStyle.COUPLET: CoupletProvider,
    SentenceStyle.COMPARISON: ComparisonProvider,
    SentenceStyle.DEFINITION: DefinitionProvider,
    SentenceStyle.TAUTOGRAM: TautogramProvider,
    SentenceStyle.MIRROR: MirrorProvider,
    SentenceStyle.FIVE_WORD: FiveWordSentenceProvider,
}

VERSE_STYLES = frozenset({SentenceStyle.HAIKU, SentenceStyle.COUPLET, SentenceStyle.MIRROR})


@dataclass
class PhraseServiceConfig:
    """Search budgets and output options for :class:`PhraseService`.

    ``max_attempts`` overrides the per-style default budget; ``seed`` makes
    every provider's dictionary copy reproducible.
    """

    max_attempts: Dict[SentenceStyle, int] = field(default_factory=dict)
    html: bool = False
    seed: Optional[int] = None


class PhraseService:
    """Serves sentences of every style from one read-only base dictionary.

    Providers are built lazily, each on a private copy of the base
    dictionary, so concurrent callers never share filter state. Each style is
    built under its own lock; the shared lock only guards publishing, so a
    slow search for one style never blocks the others. A style whose search
    failed is remembered as unsatisfiable until :meth:`reset`, which also
    swaps in a fresh, empty provider map. Providers already handed out keep
    working on their own copies.
    """

    UNSATISFIABLE_PLACEHOLDER = "Nu există suficiente cuvinte pentru acest tip de frază. Încearcă din nou."

    def __init__(self, dictionary: WordDictionary, config: Optional[PhraseServiceConfig] = None) -> None:
        self._base = dictionary
        self.config = config or PhraseServiceConfig()
        self._seeder = random.Random(self.config.seed) if self.config.seed is not None else None
        self._lock = threading.Lock()
        self._style_locks = {style: threading.Lock() for style in SentenceStyle}
        self._providers: Dict[SentenceStyle, SentenceProvider] = {}
        self._failures: Dict[SentenceStyle, str] = {}
        self._generation = 0

    def provider(self, style: SentenceStyle) -> SentenceProvider:
        style = SentenceStyle(style)
        with self._style_locks[style]:
            with self._lock:
                provider = self._providers.get(style)
                failure = self._failures.get(style)
                generation = self._generation
            if provider is not None:
                return provider
            if failure is not None:
                raise ConstraintSearchError(failure)

            try:
                provider = self._build(style, self._next_rng())
            except ConstraintSearchError as exc:
                with self._lock:
                    if generation == self._generation:
                        self._failures = {**self._failures, style: str(exc)}
                raise

            with self._lock:
                if generation == self._generation:
                    self._providers = {**self._providers, style: provider}
            return provider

    def _next_rng(self) -> Optional[random.Random]:
        if self._seeder is None:
            return None
        with self._lock:
            return random.Random(self._seeder.getrandbits(64))

    def _build(self, style: SentenceStyle, rng: Optional[random.Random]) -> SentenceProvider:
        provider_cls = PROVIDER_CLASSES[style]
        LOGGER.debug("Building %s on a copy of %r", provider_cls.__name__, self._base)
        return provider_cls(
            self._base.copy(rng=rng),
            max_attempts=self.config.max_attempts.get(style),
        )

    def reset(self) -> None:
        with self._lock:
            self._providers = {}
            self._failures = {}
            self._generation += 1
        LOGGER.info("Providers reset")

    def _decorated(self, style: SentenceStyle) -> SentenceSource:
        source: SentenceSource = self.provider(style)
        if style in VERSE_STYLES:
            source = VerseLineCapitalizer(source)
        elif style != SentenceStyle.DEFINITION:
            # Definitions already open with an upper-case headword.
            source = FirstSentenceLetterCapitalizer(source)
        if self.config.html:
            source = DexonlineLinkAdder(source)
            if style in VERSE_STYLES:
                source = HtmlVerseBreaker(source)
        return source

    def generate_strict(self, style: SentenceStyle) -> str:
        """Produce a sentence, letting lexicon failures propagate."""

        return self._decorated(SentenceStyle(style)).produce()

    def generate(self, style: SentenceStyle) -> str:
        """Produce a sentence, or the placeholder when the lexicon cannot satisfy ``style``."""

        try:
            return self.generate_strict(style)
        except PhraseError as exc:
            LOGGER.warning("Cannot generate %s: %s", SentenceStyle(style).value, exc)
            return self.UNSATISFIABLE_PLACEHOLDER

    def generate_all(self) -> Dict[str, str]:
        return {style.value: self.generate(style) for style in SentenceStyle}
