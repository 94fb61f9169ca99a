"""Pretty-print helpers for dictionaries and generated sentences."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Mapping

from ..core.constants import VERSE_SEPARATOR, WordCategory

if TYPE_CHECKING:
    from ..data.dictionary import WordDictionary


def format_verses(sentence: str, indent: str = "  ") -> str:
    """Render ``" / "`` verse separators as indented lines."""

    return "\n".join(f"{indent}{verse}" for verse in sentence.split(VERSE_SEPARATOR))


def print_sentences(sentences: Mapping[str, str], *, stream=None) -> None:
    stream = stream or sys.stdout
    for label, sentence in sentences.items():
        print(f"[{label}]", file=stream)
        print(format_verses(sentence), file=stream)


def print_dictionary_stats(dictionary: WordDictionary, *, stream=None) -> None:
    """Print per-category accepted/refused counts and the unrecognized total."""

    stream = stream or sys.stdout
    print("--- Dictionary ---", file=stream)
    for category in WordCategory:
        accepted = len(dictionary.accepted(category))
        refused = len(dictionary.refused(category))
        print(f"  {category.value + ':':<12} {accepted:>7} accepted {refused:>7} refused", file=stream)
    print(f"  {'unrecognized:':<12} {dictionary.total_unrecognized_count():>7}", file=stream)
    print(f"  {'total:':<12} {dictionary.total_word_count():>7}", file=stream)
    print(f"  {'filters:':<12} {len(dictionary.filters):>7}", file=stream)

    groups = dictionary.rhyme_groups(min_size=2)
    if groups:
        largest = max(groups.items(), key=lambda item: len(item[1]))
        print(
            f"  Rhymes with 2+ nouns: {len(groups)} (largest '-{largest[0]}': {len(largest[1])})",
            file=stream,
        )
