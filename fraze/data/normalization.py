"""Shared helpers for Romanian word normalization."""

from __future__ import annotations

from typing import Dict

# Substitutions applied to every raw entry before it enters the dictionary.
# Word lists saved without UTF-8 can be repaired by adding mojibake pairs here.
CHARACTER_FIXES: Dict[str, str] = {
    "'": "",
}


def fix_characters(word: str) -> str:
    """Return ``word`` with every ``CHARACTER_FIXES`` substitution applied."""

    for broken, fixed in CHARACTER_FIXES.items():
        word = word.replace(broken, fixed)
    return word


def capitalize_first_letter(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    ``str.upper`` is applied to a single character so Romanian letters such as
    ``ț`` or ``î`` are handled the same as ASCII ones.
    """

    if not text:
        return text
    return text[0].upper() + text[1:]


__all__ = ["CHARACTER_FIXES", "capitalize_first_letter", "fix_characters"]
