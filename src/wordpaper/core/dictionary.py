"""Lookups against the bundled Japanese and Chinese dictionaries."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .language import contains_kana
from .lexicon import CHINESE_WORDS, JAPANESE_WORDS
from .models import ChineseDictEntry, JapaneseDictEntry, WordEntry
from .transliteration import KanaRomanizer, PinyinGenerator

logger = logging.getLogger(__name__)


class JapaneseLookup:
    """Match user input against the romaji-keyed Japanese dictionary.

    Returns ``None`` on a miss so the caller can choose its own fallback.
    """

    def __init__(
        self,
        words: Mapping[str, JapaneseDictEntry] | None = None,
        romanizer: KanaRomanizer | None = None,
    ) -> None:
        self.words = JAPANESE_WORDS if words is None else words
        self._romanizer = romanizer

    @property
    def romanizer(self) -> KanaRomanizer:
        if self._romanizer is None:
            self._romanizer = KanaRomanizer()
        return self._romanizer

    def lookup(self, text: str) -> Optional[WordEntry]:
        entry = self.find(text)
        if entry is None:
            return None
        return entry.to_word_entry()

    def find(self, text: str) -> Optional[JapaneseDictEntry]:
        surface = (text or "").strip()
        if not surface:
            return None
        lowered = surface.lower()
        entry = self.words.get(lowered)
        if entry is not None:
            return entry
        entry = self._scan(surface, lowered)
        if entry is not None:
            return entry
        if not contains_kana(surface):
            return None
        try:
            romaji = self.romanizer.romanize(surface).lower()
        except Exception:
            logger.warning("Romanizing %r failed", surface, exc_info=True)
            return None
        return self.words.get(romaji)

    def _scan(self, surface: str, lowered: str) -> Optional[JapaneseDictEntry]:
        for entry in self.words.values():
            if entry.kanji == surface or entry.kana == surface or entry.romaji.lower() == lowered:
                return entry
        return None


class ChineseLookup:
    """Match user input against the hanzi-keyed Chinese dictionary.

    Unlike :class:`JapaneseLookup` this never returns ``None``: unknown input
    comes back with generated pinyin and an empty definition.
    """

    def __init__(
        self,
        words: Mapping[str, ChineseDictEntry] | None = None,
        pinyin: PinyinGenerator | None = None,
    ) -> None:
        self.words = CHINESE_WORDS if words is None else words
        self.pinyin = pinyin or PinyinGenerator()

    def lookup(self, text: str) -> WordEntry:
        surface = (text or "").strip()
        entry = self.words.get(surface)
        if entry is not None:
            return entry.to_word_entry()
        return WordEntry(
            word=surface,
            language="zh",
            characters=surface,
            reading=self.pinyin.reading_for(surface),
            definition="",
        )


_default_japanese: JapaneseLookup | None = None
_default_chinese: ChineseLookup | None = None


def lookup_japanese(text: str) -> Optional[WordEntry]:
    global _default_japanese
    if _default_japanese is None:
        _default_japanese = JapaneseLookup()
    return _default_japanese.lookup(text)


def lookup_chinese(text: str) -> WordEntry:
    global _default_chinese
    if _default_chinese is None:
        _default_chinese = ChineseLookup()
    return _default_chinese.lookup(text)


__all__ = ["ChineseLookup", "JapaneseLookup", "lookup_chinese", "lookup_japanese"]
