"""Shared constants and enumerations for the phrase generator."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Tuple


class NounGender(str, Enum):
    """Romanian noun genders, valued by their word-list tag."""

    MASCULINE = "M"
    FEMININE = "F"
    NEUTRAL = "N"


class WordCategory(str, Enum):
    """Grammatical categories kept apart by the dictionary."""

    NOUN = "noun"
    ADJECTIVE = "adjective"
    VERB = "verb"


VOWELS: FrozenSet[str] = frozenset("aeiouăâî")

# Diphthongs and triphthongs, longest first. Neologisms are not handled.
VOWEL_GROUPS: Tuple[str, ...] = (
    "iai", "eau", "iau", "oai", "ioa",
    "ia", "oa", "ea", "ua", "âu",
    "ou", "ei", "ai", "oi", "ie", "ui",
)

# Placeholder written over vowels that merge into a neighbouring one.
NEUTRALIZED = "z"

NOUN_TAGS = {
    "M": NounGender.MASCULINE,
    "F": NounGender.FEMININE,
    "N": NounGender.NEUTRAL,
    # Nouns with both genders are only added once, as masculine.
    "MF": NounGender.MASCULINE,
}
ADJECTIVE_TAGS: FrozenSet[str] = frozenset({"A"})
VERB_TAGS: FrozenSet[str] = frozenset({"VT", "V"})

# Letters frequent enough in Romanian to start a tautogram.
TAUTOGRAM_LETTERS = "abcdefghilmnoprstuvz"

VERSE_SEPARATOR = " / "
