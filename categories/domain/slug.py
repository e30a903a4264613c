"""Slug derivation for category names.

Names are lower-cased, split on Unicode (UAX #29) word boundaries and joined
with hyphens. A token whose first character is outside ASCII is replaced by
the transliteration of that *first* character only: plain pinyin for Han
ideographs, a general Latin transliteration for every other script. Han
ideographs already segment one character per word (``"中文"`` ->
``"zhong-wen"``), while ``"москва"`` becomes ``"m"``. Tokens that start with
an ASCII character (``"café"``) are kept as they are.
"""

from __future__ import annotations

from typing import List

from pypinyin import Style, lazy_pinyin
from uniseg.wordbreak import words
from unidecode import unidecode


def word_tokens(text: str) -> List[str]:
    """Word-boundary segments that contain at least one alphanumeric character."""
    return [w for w in words(text) if any(ch.isalnum() for ch in w)]


def transliterate_char(ch: str) -> str:
    syllables = lazy_pinyin(ch, style=Style.NORMAL, errors="ignore")
    if syllables:
        return syllables[0]
    return unidecode(ch).strip().lower()


def transliterate_token(token: str) -> str:
    if token[0].isascii():
        return token
    # characters unidecode has no mapping for keep the original token
    return transliterate_char(token[0]) or token


def derive_slug(name: str) -> str:
    """Derive the URL slug stored with a category created under ``name``."""
    return "-".join(transliterate_token(t) for t in word_tokens(name.lower()))
