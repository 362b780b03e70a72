"""The word, meaning, category and random search modes."""

from __future__ import annotations

import logging
from typing import Optional, Set

from ..config import AppConfig
from ..core.language import detect_language
from ..core.meaning_search import MeaningSearch, MeaningSearchClient
from ..core.models import LanguageCode, WordEntry
from ..core.picker import PickerRegistry
from ..exceptions import (
    NoCandidatesError,
    NoValidDefinitionError,
    RandomWordError,
    WordNotFoundError,
)
from .resolver import WordResolver

logger = logging.getLogger(__name__)


class WordFinder:
    """Coordinate resolver, meaning search and pickers for each search mode.

    Candidates are always resolved one at a time, in order, stopping at the
    first entry with a definition.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        resolver: WordResolver | None = None,
        meaning_search: MeaningSearch | None = None,
        pickers: PickerRegistry | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.resolver = resolver or WordResolver(self.config)
        self.meaning_search = meaning_search or MeaningSearchClient(self.config.meaning_search)
        self.pickers = pickers or PickerRegistry(
            global_config=self.config.global_picker,
            category_config=self.config.category_picker,
        )

    async def find_word(self, text: str, language: Optional[LanguageCode] = None) -> WordEntry:
        """Resolve typed input; entries without a definition are still returned."""

        trimmed = (text or "").strip()
        if not trimmed:
            raise WordNotFoundError("Please enter a word")
        effective = language or detect_language(trimmed)
        entry = await self.resolver.resolve(trimmed, effective)
        if not entry.word:
            raise WordNotFoundError(f'Word "{trimmed}" not found')
        return entry

    async def find_by_meaning(self, phrase: str) -> WordEntry:
        candidates = await self.meaning_search.search(phrase)
        if not candidates:
            raise NoCandidatesError("No words found for this meaning")
        for candidate in candidates:
            entry = await self.resolver.resolve(candidate, "en")
            if entry.is_complete:
                return entry
            logger.debug("Meaning candidate %r has no definition", candidate)
        raise NoValidDefinitionError("Found words but none have valid definitions")

    async def find_in_category(self, category_id: str) -> WordEntry:
        pool = self.pickers.category_picker(category_id).words
        if not pool:
            raise NoCandidatesError("No words available for this category")
        tried: Set[str] = set()
        for _ in range(len(pool) * 2):
            if len(tried) >= len(pool):
                break
            word = self.pickers.draw_category(category_id)
            if word is None:
                break
            if word in tried:
                continue
            tried.add(word)
            entry = await self.resolver.resolve(word, detect_language(word))
            if entry.is_complete:
                self.pickers.mark_category_used(category_id, word)
                return entry
            logger.debug("Category word %r has no definition", word)
        raise NoValidDefinitionError(
            "Words found but none have valid definitions. Please try another category."
        )

    async def find_random(self) -> WordEntry:
        attempts = self.config.finder.random_max_attempts
        for attempt in range(attempts):
            word = self.pickers.draw_global()
            if word is None:
                raise RandomWordError("Unable to get a random word. Please try again.")
            entry = await self.resolver.resolve(word, detect_language(word))
            if entry.is_complete:
                self.pickers.mark_global_used(word)
                return entry
            logger.debug("Random attempt %d/%d: %r has no definition", attempt + 1, attempts, word)
        raise RandomWordError("Unable to find a word with a valid definition. Please try again.")


__all__ = ["WordFinder"]
