"""Phonetic transliteration helpers."""

from __future__ import annotations

from pykakasi import kakasi
from pypinyin import Style, lazy_pinyin


class KanaRomanizer:
    """Convert Japanese text to Hepburn romaji using :mod:`pykakasi`."""

    def __init__(self) -> None:
        self._kakasi = kakasi()

    def romanize(self, text: str) -> str:
        if not text:
            return ""
        parts = self._kakasi.convert(text)
        return "".join(part.get("hepburn") or part.get("orig", "") for part in parts)


class PinyinGenerator:
    """Generate tone-marked pinyin using :mod:`pypinyin`."""

    def __init__(self, separator: str = " ") -> None:
        self.separator = separator

    def reading_for(self, text: str) -> str:
        if not text:
            return ""
        syllables = lazy_pinyin(text, style=Style.TONE)
        return self.separator.join(syllable.strip() for syllable in syllables if syllable.strip())


__all__ = ["KanaRomanizer", "PinyinGenerator"]
