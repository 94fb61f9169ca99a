"""Word filters installed by the sentence providers.

Filters are plain callables over a :data:`~fraze.core.models.Word`; these
frozen dataclasses keep the captured constraint visible in logs and comparable
when removed from a dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from ..core.models import Adjective, Noun, Word

HAIKU_NOUN_SYLLABLES = 5
HAIKU_VERB_SYLLABLES = 3
HAIKU_ADJECTIVE_SYLLABLES = 3


@dataclass(frozen=True)
class HaikuFilter:
    """Syllable budget for a 5-7-5 haiku anchored on one rhyme.

    Adjectives are counted on their base form. Feminine agreement usually adds
    a syllable, so masculine and neutral anchors ask for one more.
    """

    rhyme: str
    feminine: bool

    def __call__(self, word: Word) -> bool:
        if isinstance(word, Noun):
            return word.articulated_syllables == HAIKU_NOUN_SYLLABLES and word.rhyme == self.rhyme
        if isinstance(word, Adjective):
            return word.syllables == HAIKU_ADJECTIVE_SYLLABLES + (0 if self.feminine else 1)
        return word.syllables == HAIKU_VERB_SYLLABLES


@dataclass(frozen=True)
class RhymeFilter:
    """Accepts nouns sharing ``rhyme``; other categories pass untouched."""

    rhyme: str

    def __call__(self, word: Word) -> bool:
        if isinstance(word, Noun):
            return word.rhyme == self.rhyme
        return True


@dataclass(frozen=True)
class RhymeSetFilter:
    """Accepts nouns whose rhyme is one of ``rhymes``."""

    rhymes: FrozenSet[str]

    def __call__(self, word: Word) -> bool:
        if isinstance(word, Noun):
            return word.rhyme in self.rhymes
        return True


@dataclass(frozen=True)
class InitialLetterFilter:
    """Accepts words of any category starting with ``letter``, ignoring case."""

    letter: str

    def __call__(self, word: Word) -> bool:
        return word.word[:1].lower() == self.letter.lower()
