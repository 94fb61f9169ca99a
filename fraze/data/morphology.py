"""Romanian morphology heuristics: syllables, rhymes, articles and agreement.

Every function here is pure and total: unexpected or empty input yields a
best-effort string or count, never an exception.
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.constants import NEUTRALIZED, VOWEL_GROUPS, VOWELS, NounGender

RHYME_LENGTH = 3

# (suffix, characters to drop, replacement) - the first matching suffix wins.
_FEMININE_RULES: Tuple[Tuple[str, int, str], ...] = (
    ("esc", 2, "ască"),
    ("eț", 1, "ață"),
    ("or", 1, "are"),
    ("os", 1, "asă"),
    ("iu", 1, "e"),
    ("ci", 1, "e"),
    ("ru", 1, "ă"),
)
_INVARIABLE_ENDINGS = ("e", "o", "i")


def is_vowel(char: str) -> bool:
    return char in VOWELS


def syllable_count(word: str) -> int:
    """Count syllables as the number of vowels left after merging vowel groups.

    Hiatus and diphthong are told apart by position only, so some loanwords
    (``bour``, ``spleen``, ``piui``) come out wrong.
    """

    chars = list(word)
    _neutralize_vowel_groups(chars)
    return sum(1 for char in chars if is_vowel(char))


def _neutralize_vowel_groups(chars: List[str]) -> None:
    length = len(chars)
    for group in VOWEL_GROUPS:
        size = len(group)
        index = 0
        while index < length - size + 1:
            if size == 3:
                if "".join(chars[index:index + 3]) == group:
                    chars[index] = NEUTRALIZED
                    chars[index + 2] = NEUTRALIZED
                    index += 2
            elif index > 0 and chars[index] == group[0] and chars[index + 1] == group[1]:
                # After a consonant the pair is read as a diphthong, after a
                # vowel as a hiatus with the previous vowel.
                if is_vowel(chars[index - 1]):
                    chars[index] = NEUTRALIZED
                else:
                    chars[index + 1] = NEUTRALIZED
                index += 1
            index += 1

    if (
        length >= 2
        and is_vowel(chars[-1])
        and is_vowel(chars[-2])
        and chars[-1] != chars[-2]
    ):
        chars[-2] = NEUTRALIZED


def rhyme_key(word: str) -> str:
    """Return the last three characters of ``word`` (or all of a shorter word)."""

    return word[-RHYME_LENGTH:]


def articulate(word: str, gender: NounGender) -> str:
    """Return the singular definite form of a noun."""

    if gender == NounGender.FEMININE:
        if word.endswith("ă") or word.endswith("ie"):
            return word[:-1] + "a"
        if word.endswith("a"):
            return word + "ua"
        return word + "a"
    if word.endswith("u"):
        return word + "l"
    return word + "ul"


def feminize(adjective: str) -> str:
    """Return the feminine singular form of a masculine adjective."""

    for suffix, drop, replacement in _FEMININE_RULES:
        if adjective.endswith(suffix):
            return adjective[: len(adjective) - drop] + replacement
    if adjective.endswith(_INVARIABLE_ENDINGS):
        return adjective
    return adjective + "ă"


__all__ = [
    "articulate",
    "feminize",
    "is_vowel",
    "rhyme_key",
    "syllable_count",
]
