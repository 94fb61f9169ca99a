"""Word-list parsing into a populated :class:`WordDictionary`."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, Optional

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .dictionary import WordDictionary

LOGGER = get_logger(__name__)


def parse_lines(lines: Iterable[str], rng: Optional[random.Random] = None) -> WordDictionary:
    """Build a dictionary from ``<word> <tag>`` lines.

    Lines with fewer than two whitespace-separated fields are skipped; any
    fields past the tag are ignored.
    """

    dictionary = WordDictionary(rng=rng)
    skipped = 0
    for line in lines:
        pieces = line.split()
        if len(pieces) < 2:
            skipped += 1
            continue
        dictionary.add_word(pieces[0], pieces[1])
    LOGGER.debug("Parsed %r, skipped %d short lines", dictionary, skipped)
    return dictionary


def parse_text(text: str, rng: Optional[random.Random] = None) -> WordDictionary:
    return parse_lines(text.splitlines(), rng=rng)


def load_dictionary(path: Path | str, rng: Optional[random.Random] = None) -> WordDictionary:
    """Read a UTF-8 word list from disk."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc

    dictionary = parse_text(text, rng=rng)
    LOGGER.info(
        "Loaded %d words from %s (%d unrecognized)",
        dictionary.total_word_count(),
        source,
        dictionary.total_unrecognized_count(),
    )
    return dictionary
