"""Romanian phrase generator: haiku, couplets, tautograms and more.

This package exposes the public API surface via:

- ``fraze.data.dictionary.WordDictionary``: the filterable word collection.
- ``fraze.data.parser``: word-list parsing and loading.
- ``fraze.engine.providers``: one sentence provider per style.
- ``fraze.engine.service.PhraseService``: per-style providers on private
  dictionary copies, with presentation decorators applied.
"""

from .core.constants import NounGender, WordCategory
from .core.exceptions import (
    ConstraintSearchError,
    DictionaryLoadError,
    InsufficientWordsError,
    PhraseError,
)
from .core.models import Adjective, Noun, Verb
from .data.dictionary import WordDictionary
from .data.parser import load_dictionary, parse_lines, parse_text
from .engine.service import PhraseService, PhraseServiceConfig, SentenceStyle

__all__ = [
    "Adjective",
    "ConstraintSearchError",
    "DictionaryLoadError",
    "InsufficientWordsError",
    "Noun",
    "NounGender",
    "PhraseError",
    "PhraseService",
    "PhraseServiceConfig",
    "SentenceStyle",
    "Verb",
    "WordCategory",
    "WordDictionary",
    "load_dictionary",
    "parse_lines",
    "parse_text",
]

__version__ = "0.1.0"
