"""Turn arbitrary user input plus a language tag into a :class:`WordEntry`."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import AppConfig
from ..core.dictionary import ChineseLookup, JapaneseLookup
from ..core.english import EnglishDictionary, EnglishDictionaryClient
from ..core.language import contains_kana, contains_kanji
from ..core.models import LanguageCode, WordEntry
from ..core.transliteration import KanaRomanizer

logger = logging.getLogger(__name__)


@dataclass
class ResolverDependencies:
    """Convenience container for the collaborating lookups."""

    japanese: JapaneseLookup
    chinese: ChineseLookup
    english: EnglishDictionary
    romanizer: KanaRomanizer


class WordResolver:
    """Resolve input through the local dictionaries first, then per language.

    Script detection misfiles romanized Japanese as English, so both local
    dictionaries are consulted before the requested ``language`` is looked at.
    """

    def __init__(self, config: AppConfig | None = None, deps: ResolverDependencies | None = None) -> None:
        self.config = config or AppConfig()
        self.japanese = deps.japanese if deps else JapaneseLookup()
        self.chinese = deps.chinese if deps else ChineseLookup()
        self.english = deps.english if deps else EnglishDictionaryClient(self.config.english)
        self.romanizer = deps.romanizer if deps else self.japanese.romanizer

    async def resolve(self, text: str, language: LanguageCode) -> WordEntry:
        trimmed = (text or "").strip()
        if not trimmed:
            return WordEntry(word="", language=language, definition="")

        try:
            entry = await self._resolve(trimmed, language)
        except Exception:
            logger.exception("Resolving %r (%s) failed", trimmed, language)
            entry = None
        if entry is not None:
            return entry
        return WordEntry(word=trimmed, language=language, definition="")

    async def _resolve(self, text: str, language: LanguageCode) -> WordEntry | None:
        japanese = self.japanese.lookup(text)
        if japanese is not None and japanese.definition:
            return japanese

        chinese = self.chinese.lookup(text)
        if chinese.definition:
            return chinese

        if language == "ja":
            return self._japanese_fallback(text)
        if language == "zh":
            return chinese
        if language == "en":
            return await self.english.fetch(text)
        return None

    def _japanese_fallback(self, text: str) -> WordEntry | None:
        if contains_kana(text):
            romaji = self.romanizer.romanize(text)
            return WordEntry(
                word=romaji,
                language="ja",
                characters=text,
                reading_native=text,
                reading=romaji,
                definition="",
            )
        if contains_kanji(text):
            return WordEntry(word=text, language="ja", characters=text, definition="")
        logger.debug("Japanese-tagged input %r has no Japanese script", text)
        return None


__all__ = ["ResolverDependencies", "WordResolver"]
