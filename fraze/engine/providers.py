"""Sentence providers, one per poetic or rhetorical style.

Each provider owns a :class:`~fraze.data.dictionary.WordDictionary` and, on
construction or :meth:`SentenceProvider.reset`, narrows it with filters until
the style's constraint can be met. :meth:`SentenceProvider.produce` then draws
from the narrowed dictionary.

Searches are bounded: when no anchor satisfies the constraint within
``max_attempts`` a :class:`ConstraintSearchError` is raised instead of spinning
on a lexicon that is too small.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Set, TypeVar

from ..core.constants import TAUTOGRAM_LETTERS, VERSE_SEPARATOR
from ..core.exceptions import ConstraintSearchError, InsufficientWordsError
from ..core.models import Adjective, Noun, Verb
from ..data.dictionary import WordDictionary, pick_distinct
from ..data.normalization import capitalize_first_letter
from ..utils.logger import get_logger
from .filters import HaikuFilter, InitialLetterFilter, RhymeFilter, RhymeSetFilter

LOGGER = get_logger(__name__)

T = TypeVar("T")


class SentenceSource(Protocol):
    """Anything that can produce a sentence: providers and their decorators."""

    def produce(self) -> str:
        ...


def require(value: Optional[T], what: str, style: str) -> T:
    """Return ``value`` or fail the current sentence when the draw came back empty."""

    if value is None:
        raise InsufficientWordsError(f"Dictionary has no {what} left for {style}")
    return value


def noun_adjective_combo(
    dictionary: WordDictionary,
    style: str = "sentence",
    used: Optional[Set[str]] = None,
) -> str:
    """Return an articulated noun followed by an agreeing adjective.

    Words already in ``used`` are avoided when the dictionary has others, and
    the drawn ones are added to it.
    """

    used = set() if used is None else used
    noun = require(dictionary.random_noun(exclude=used), "noun", style)
    adjective = require(dictionary.random_adjective(exclude=used), "adjective", style)
    used.update((noun.word, adjective.word))
    return f"{noun.articulated} {adjective.form_for(noun.gender)}"


class SentenceProvider(ABC):
    """Base class wiring a dictionary to a style-specific filter search."""

    style = "sentence"
    default_max_attempts = 1000

    def __init__(
        self,
        dictionary: WordDictionary,
        max_attempts: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._dictionary = dictionary
        self.max_attempts = max_attempts if max_attempts is not None else self.default_max_attempts
        self.logger = logger or LOGGER
        self.init_filters()

    @property
    def dictionary(self) -> WordDictionary:
        return self._dictionary

    def init_filters(self) -> None:
        """Narrow the dictionary for this style. Unconstrained styles keep it whole."""

    def reset(self) -> None:
        self.init_filters()

    @abstractmethod
    def produce(self) -> str:
        ...

    def _require(self, value: Optional[T], what: str) -> T:
        return require(value, what, self.style)

    def _combo(self, used: Set[str]) -> str:
        return noun_adjective_combo(self._dictionary, self.style, used)

    # Draws below avoid repeating a word of the same sentence while the
    # accepted lists still offer another one.
    def _noun(self, used: Set[str]) -> Noun:
        noun = self._require(self._dictionary.random_noun(exclude=used), "noun")
        used.add(noun.word)
        return noun

    def _adjective(self, used: Set[str]) -> Adjective:
        adjective = self._require(self._dictionary.random_adjective(exclude=used), "adjective")
        used.add(adjective.word)
        return adjective

    def _verb(self, used: Set[str]) -> Verb:
        verb = self._require(self._dictionary.random_verb(exclude=used), "verb")
        used.add(verb.word)
        return verb

    def _anchor_noun(self) -> Noun:
        noun = self._dictionary.random_noun()
        if noun is None:
            raise ConstraintSearchError(f"No nouns available to anchor a {self.style}")
        return noun

    def _exhausted(self) -> ConstraintSearchError:
        self.logger.warning(
            "Gave up searching %s constraints after %d attempts", self.style, self.max_attempts
        )
        return ConstraintSearchError(
            f"No feasible {self.style} constraint found in {self.max_attempts} attempts"
        )


class HaikuProvider(SentenceProvider):
    """5-7-5 haiku whose first and last nouns share a rhyme."""

    style = "haiku"

    rhyme: Optional[str] = None

    def init_filters(self) -> None:
        dictionary = self.dictionary
        for attempt in range(1, self.max_attempts + 1):
            dictionary.clear_filters()
            anchor = self._anchor_noun()
            haiku_filter = HaikuFilter(rhyme=anchor.rhyme, feminine=anchor.is_feminine)
            dictionary.add_filter(haiku_filter)
            if dictionary.random_noun() is not None:
                self.rhyme = anchor.rhyme
                self.logger.debug("Haiku anchored on '-%s' after %d attempts", anchor.rhyme, attempt)
                return
        raise self._exhausted()

    def produce(self) -> str:
        used: Set[str] = set()
        first_lines = self._combo(used).replace(" ", VERSE_SEPARATOR)
        verb = self._verb(used)
        noun = self._noun(used)
        return f"{first_lines} {verb.word}{VERSE_SEPARATOR}{noun.articulated}."


class CoupletProvider(SentenceProvider):
    """Two rhyming lines of the shape ``noun adjective verb noun.``"""

    style = "couplet"
    min_rhyming_nouns = 4

    rhyme: Optional[str] = None

    def init_filters(self) -> None:
        dictionary = self.dictionary
        for attempt in range(1, self.max_attempts + 1):
            dictionary.clear_filters()
            anchor = self._anchor_noun()
            dictionary.add_filter(RhymeFilter(anchor.rhyme))
            distinct = len(set(dictionary.accepted_nouns))
            if distinct >= self.min_rhyming_nouns:
                self.rhyme = anchor.rhyme
                self.logger.debug(
                    "Couplet rhyme '-%s' has %d nouns (attempt %d)", anchor.rhyme, distinct, attempt
                )
                return
        raise self._exhausted()

    def _line(self, used: Set[str]) -> str:
        combo = self._combo(used)
        verb = self._verb(used)
        noun = self._noun(used)
        return f"{combo} {verb.word} {noun.articulated}."

    def produce(self) -> str:
        used: Set[str] = set()
        first = self._line(used)
        second = capitalize_first_letter(self._line(used))
        return f"{first}{VERSE_SEPARATOR}{second}"


class TautogramProvider(SentenceProvider):
    """A sentence in which every word starts with the same letter."""

    style = "tautogram"
    default_max_attempts = 100

    letter: Optional[str] = None

    def __init__(
        self,
        dictionary: WordDictionary,
        max_attempts: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
        letters: str = TAUTOGRAM_LETTERS,
    ) -> None:
        self.letters = letters
        super().__init__(dictionary, max_attempts=max_attempts, logger=logger)

    def _has_enough_words(self) -> bool:
        dictionary = self.dictionary
        return (
            dictionary.random_noun() is not None
            and dictionary.random_adjective() is not None
            and dictionary.random_verb() is not None
        )

    def init_filters(self) -> None:
        dictionary = self.dictionary
        for attempt in range(1, self.max_attempts + 1):
            dictionary.clear_filters()
            letter = dictionary.rng.choice(self.letters)
            dictionary.add_filter(InitialLetterFilter(letter))
            if self._has_enough_words():
                self.letter = letter
                self.logger.debug("Tautogram letter '%s' found after %d attempts", letter, attempt)
                return
        raise self._exhausted()

    def produce(self) -> str:
        used: Set[str] = set()
        combo = self._combo(used)
        verb = self._verb(used)
        noun = self._noun(used)
        return f"{combo} {verb.word} {noun.articulated}."


class MirrorProvider(SentenceProvider):
    """ABBA quatrain: lines one and four rhyme, as do lines two and three."""

    style = "mirror"
    min_group_size = 2

    rhyme_a: Optional[str] = None
    rhyme_b: Optional[str] = None

    def init_filters(self) -> None:
        dictionary = self.dictionary
        dictionary.clear_filters()
        groups = dictionary.rhyme_groups(min_size=self.min_group_size)
        if len(groups) < 2:
            raise ConstraintSearchError(
                f"Mirror needs two rhymes with {self.min_group_size}+ nouns each, found {len(groups)}"
            )
        self.rhyme_a, self.rhyme_b = dictionary.rng.sample(sorted(groups), 2)
        self._nouns_a: List[Noun] = groups[self.rhyme_a]
        self._nouns_b: List[Noun] = groups[self.rhyme_b]
        dictionary.add_filter(RhymeSetFilter(frozenset((self.rhyme_a, self.rhyme_b))))
        self.logger.debug("Mirror rhymes '-%s' and '-%s'", self.rhyme_a, self.rhyme_b)

    def _line(self, nouns: List[Noun], punctuation: str, used: Set[str]) -> str:
        noun = self._require(pick_distinct(self.dictionary.rng, nouns, used), "noun")
        used.add(noun.word)
        adjective = self._adjective(used)
        verb = self._verb(used)
        return f"{noun.articulated} {adjective.form_for(noun.gender)} {verb.word}{punctuation}"

    def produce(self) -> str:
        used: Set[str] = set()
        lines = [
            self._line(self._nouns_a, ",", used),
            self._line(self._nouns_b, ",", used),
            self._line(self._nouns_b, ",", used),
            self._line(self._nouns_a, ".", used),
        ]
        return VERSE_SEPARATOR.join(lines)


class ComparisonProvider(SentenceProvider):
    """``<noun> e mai <adjective> decât <noun>.``"""

    style = "comparison"

    def produce(self) -> str:
        used: Set[str] = set()
        first = self._noun(used)
        adjective = self._adjective(used)
        second = self._noun(used)
        return (
            f"{first.articulated} e mai {adjective.form_for(first.gender)} "
            f"decât {second.articulated}."
        )


class DefinitionProvider(SentenceProvider):
    """Mock dictionary entry: ``WORD: <noun> <adjective> care <verb>.``"""

    style = "definition"

    def produce(self) -> str:
        used: Set[str] = set()
        defined = self._noun(used)
        noun = self._noun(used)
        adjective = self._adjective(used)
        verb = self._verb(used)
        return (
            f"{defined.word.upper()}: {noun.articulated} "
            f"{adjective.form_for(noun.gender)} care {verb.word}."
        )


class FiveWordSentenceProvider(SentenceProvider):
    style = "five_word"

    def produce(self) -> str:
        used: Set[str] = set()
        first = self._combo(used)
        verb = self._verb(used)
        return f"{first} {verb.word} {self._combo(used)}."
