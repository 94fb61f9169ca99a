"""Lexical entry models supporting the phrase generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from ..data.morphology import articulate, feminize, rhyme_key, syllable_count
from .constants import NounGender, WordCategory


@dataclass(frozen=True)
class Noun:
    """A noun with its gender and singular definite form."""

    word: str
    gender: NounGender
    syllables: int = field(init=False, compare=False)
    rhyme: str = field(init=False, compare=False)
    articulated: str = field(init=False, compare=False)
    articulated_syllables: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        articulated = articulate(self.word, self.gender)
        object.__setattr__(self, "syllables", syllable_count(self.word))
        object.__setattr__(self, "rhyme", rhyme_key(self.word))
        object.__setattr__(self, "articulated", articulated)
        object.__setattr__(self, "articulated_syllables", syllable_count(articulated))

    @property
    def is_feminine(self) -> bool:
        return self.gender == NounGender.FEMININE


@dataclass(frozen=True)
class Adjective:
    """An adjective in its masculine base form plus the derived feminine."""

    word: str
    syllables: int = field(init=False, compare=False)
    rhyme: str = field(init=False, compare=False)
    feminine: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "syllables", syllable_count(self.word))
        object.__setattr__(self, "rhyme", rhyme_key(self.word))
        object.__setattr__(self, "feminine", feminize(self.word))

    def form_for(self, gender: NounGender) -> str:
        """Return the form agreeing with a noun of ``gender``."""
        return self.feminine if gender == NounGender.FEMININE else self.word


@dataclass(frozen=True)
class Verb:
    word: str
    syllables: int = field(init=False, compare=False)
    rhyme: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "syllables", syllable_count(self.word))
        object.__setattr__(self, "rhyme", rhyme_key(self.word))


Word = Union[Noun, Adjective, Verb]

WordFilter = Callable[[Word], bool]


def category_of(word: Word) -> WordCategory:
    if isinstance(word, Noun):
        return WordCategory.NOUN
    if isinstance(word, Adjective):
        return WordCategory.ADJECTIVE
    if isinstance(word, Verb):
        return WordCategory.VERB
    raise TypeError(f"Not a dictionary word: {word!r}")
