"""Custom exception hierarchy for phrase generation."""


class PhraseError(Exception):
    """Base exception for generator failures."""


class DictionaryLoadError(PhraseError):
    """Raised when the word list cannot be read or fetched."""


class InsufficientWordsError(PhraseError):
    """Raised when a sentence needs a word that the filtered dictionary lacks."""


class ConstraintSearchError(PhraseError):
    """Raised when a bounded filter search finds no feasible constraint."""
