"""Remote word-list retrieval over HTTP."""

from __future__ import annotations

import os
import random
from typing import Optional

import requests

from ..core.exceptions import DictionaryLoadError
from ..data.dictionary import WordDictionary
from ..data.parser import parse_text
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

TIMEOUT_ENV = "FRAZE_WORDS_URL_TIMEOUT"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _timeout_from_env(default: float) -> float:
    raw = os.environ.get(TIMEOUT_ENV)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-numeric %s=%r", TIMEOUT_ENV, raw)
        return default


def fetch_word_list(url: str, timeout_seconds: Optional[float] = None) -> str:
    """Download a raw ``<word> <tag>`` list and return it as text."""

    timeout = timeout_seconds if timeout_seconds is not None else _timeout_from_env(DEFAULT_TIMEOUT_SECONDS)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DictionaryLoadError(f"Word list request failed: {exc}") from exc

    # Without an explicit charset requests falls back to ISO-8859-1.
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8-sig"
    text = response.text
    if not text.strip():
        LOGGER.warning("Word list at %s is empty", url)
    return text


def load_remote_dictionary(
    url: str,
    timeout_seconds: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> WordDictionary:
    dictionary = parse_text(fetch_word_list(url, timeout_seconds), rng=rng)
    LOGGER.info("Loaded %d words from %s", dictionary.total_word_count(), url)
    return dictionary
