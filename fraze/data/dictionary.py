"""Word collection split into accepted and refused entries by live filters."""

from __future__ import annotations

import random
import time
from collections import defaultdict
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..core.constants import ADJECTIVE_TAGS, NOUN_TAGS, VERB_TAGS, WordCategory
from ..core.models import Adjective, Noun, Verb, Word, WordFilter, category_of
from ..utils.logger import get_logger
from .normalization import fix_characters

LOGGER = get_logger(__name__)

T = TypeVar("T")
W = TypeVar("W", Noun, Adjective, Verb)

DISTINCT_REDRAWS = 8


def _pick(rng: random.Random, items: Sequence[T]) -> Optional[T]:
    if not items:
        return None
    return items[rng.randrange(len(items))]


def pick_distinct(
    rng: random.Random, items: Sequence[W], exclude: AbstractSet[str] = frozenset()
) -> Optional[W]:
    """Draw a word whose text is not in ``exclude``, repeating one only as a last resort.

    A few random redraws usually suffice; after that the alternatives are
    listed explicitly so a distinct word is found whenever one exists.
    """

    if not items:
        return None
    for _ in range(DISTINCT_REDRAWS):
        choice = items[rng.randrange(len(items))]
        if choice.word not in exclude:
            return choice
    others = [item for item in items if item.word not in exclude]
    return _pick(rng, others) or choice


class WordDictionary:
    """Romanian nouns, adjectives and verbs narrowed by a conjunction of filters.

    Each category is split into an ``accepted`` and a ``refused`` list. A word
    sits in ``accepted`` iff every active filter accepts it; the split is
    updated eagerly whenever a filter is added, removed or cleared, so random
    draws only ever look at the accepted list.

    Providers mutate the filter state, so each of them must work on its own
    :meth:`copy` of the loaded dictionary.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random(time.time_ns())
        self._accepted: Dict[WordCategory, List[Word]] = {category: [] for category in WordCategory}
        self._refused: Dict[WordCategory, List[Word]] = {category: [] for category in WordCategory}
        self._unrecognized: List[str] = []
        self._filters: List[WordFilter] = []

    def copy(self, rng: Optional[random.Random] = None) -> WordDictionary:
        """Return an independent snapshot with its own random source."""

        clone = WordDictionary(rng=rng)
        for category in WordCategory:
            clone._accepted[category] = list(self._accepted[category])
            clone._refused[category] = list(self._refused[category])
        clone._unrecognized = list(self._unrecognized)
        clone._filters = list(self._filters)
        return clone

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------
    def add_word(self, raw: str, tag: str) -> None:
        """Add one word-list entry, routing it by its grammatical ``tag``.

        Unknown tags are not an error: the entry is kept as ``"<word> : <tag>"``
        in the unrecognized bucket for later inspection.
        """

        word = fix_characters(raw)
        if tag in NOUN_TAGS:
            self._add(Noun(word, NOUN_TAGS[tag]))
        elif tag in ADJECTIVE_TAGS:
            self._add(Adjective(word))
        elif tag in VERB_TAGS:
            self._add(Verb(word))
        else:
            self._unrecognized.append(f"{word} : {tag}")

    def _add(self, word: Word) -> None:
        category = category_of(word)
        if self._matches_filters(word):
            self._accepted[category].append(word)
        else:
            self._refused[category].append(word)

    def _matches_filters(self, word: Word) -> bool:
        return all(accepts(word) for accepts in self._filters)

    # ------------------------------------------------------------------
    # Filters
    # ------------------------------------------------------------------
    def add_filter(self, word_filter: WordFilter) -> None:
        self._filters.append(word_filter)
        moved = 0
        for category in WordCategory:
            kept: List[Word] = []
            refused = self._refused[category]
            for word in self._accepted[category]:
                if word_filter(word):
                    kept.append(word)
                else:
                    refused.append(word)
                    moved += 1
            self._accepted[category] = kept
        LOGGER.debug("Added filter %r, %d words refused", word_filter, moved)

    def add_filters(self, filters: Iterable[WordFilter]) -> None:
        for word_filter in filters:
            self.add_filter(word_filter)

    def remove_filter(self, word_filter: WordFilter) -> None:
        """Drop ``word_filter`` and re-admit refused words passing all the others.

        More expensive than :meth:`add_filter`: acceptance of every refused word
        has to be re-derived from the remaining filters.
        """

        if word_filter not in self._filters:
            LOGGER.debug("Filter %r is not active, nothing to remove", word_filter)
            return
        self._filters.remove(word_filter)
        moved = 0
        for category in WordCategory:
            still_refused: List[Word] = []
            accepted = self._accepted[category]
            for word in self._refused[category]:
                if self._matches_filters(word):
                    accepted.append(word)
                    moved += 1
                else:
                    still_refused.append(word)
            self._refused[category] = still_refused
        LOGGER.debug("Removed filter %r, %d words accepted again", word_filter, moved)

    def clear_filters(self) -> None:
        self._filters.clear()
        for category in WordCategory:
            self._accepted[category].extend(self._refused[category])
            self._refused[category] = []

    @property
    def filters(self) -> Tuple[WordFilter, ...]:
        return tuple(self._filters)

    # ------------------------------------------------------------------
    # Random draws
    # ------------------------------------------------------------------
    @property
    def rng(self) -> random.Random:
        return self._rng

    def random_noun(self, exclude: AbstractSet[str] = frozenset()) -> Optional[Noun]:
        return pick_distinct(self._rng, self._accepted[WordCategory.NOUN], exclude)  # type: ignore[return-value]

    def random_adjective(self, exclude: AbstractSet[str] = frozenset()) -> Optional[Adjective]:
        return pick_distinct(self._rng, self._accepted[WordCategory.ADJECTIVE], exclude)  # type: ignore[return-value]

    def random_verb(self, exclude: AbstractSet[str] = frozenset()) -> Optional[Verb]:
        return pick_distinct(self._rng, self._accepted[WordCategory.VERB], exclude)  # type: ignore[return-value]

    def random_unrecognized(self) -> Optional[str]:
        return _pick(self._rng, self._unrecognized)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def accepted(self, category: WordCategory) -> Tuple[Word, ...]:
        return tuple(self._accepted[category])

    def refused(self, category: WordCategory) -> Tuple[Word, ...]:
        return tuple(self._refused[category])

    @property
    def accepted_nouns(self) -> Tuple[Noun, ...]:
        return self.accepted(WordCategory.NOUN)  # type: ignore[return-value]

    @property
    def unrecognized(self) -> Tuple[str, ...]:
        return tuple(self._unrecognized)

    def rhyme_groups(self, min_size: int = 1) -> Dict[str, List[Noun]]:
        """Group distinct accepted nouns by rhyme key, keeping groups of ``min_size``+."""

        groups: Dict[str, List[Noun]] = defaultdict(list)
        seen = set()
        for noun in self.accepted_nouns:
            if noun in seen:
                continue
            seen.add(noun)
            groups[noun.rhyme].append(noun)
        return {rhyme: nouns for rhyme, nouns in groups.items() if len(nouns) >= min_size}

    def total_accepted_count(self) -> int:
        return sum(len(words) for words in self._accepted.values())

    def total_refused_count(self) -> int:
        return sum(len(words) for words in self._refused.values())

    def total_unrecognized_count(self) -> int:
        return len(self._unrecognized)

    def total_word_count(self) -> int:
        return self.total_accepted_count() + self.total_refused_count() + self.total_unrecognized_count()

    def __repr__(self) -> str:
        return (
            f"WordDictionary(accepted={self.total_accepted_count()}, "
            f"refused={self.total_refused_count()}, "
            f"unrecognized={self.total_unrecognized_count()}, filters={len(self._filters)})"
        )
