"""Script based language detection."""

from __future__ import annotations

import re

from .models import LanguageCode

_KANA_RE = re.compile(r"[\u3040-\u30ff]")
_KANJI_RE = re.compile(r"[\u4e00-\u9fff]")


def contains_kana(text: str) -> bool:
    """Return ``True`` when ``text`` holds any Hiragana or Katakana."""

    return bool(text) and _KANA_RE.search(text) is not None


def contains_kanji(text: str) -> bool:
    return bool(text) and _KANJI_RE.search(text) is not None


def detect_language(text: str) -> LanguageCode:
    """Classify ``text`` by the scripts it contains.

    Kana is decisive for Japanese. Ideographs without kana default to Chinese,
    and everything else (including empty input) is treated as English.
    """

    text = (text or "").strip()
    if not text:
        return "en"
    if contains_kana(text):
        return "ja"
    if contains_kanji(text):
        return "zh"
    return "en"


__all__ = ["contains_kana", "contains_kanji", "detect_language"]
