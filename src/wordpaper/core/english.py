"""Client for the free English dictionary API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Protocol
from urllib.parse import quote

import httpx

from ..config import EnglishDictionaryConfig
from .models import WordEntry

logger = logging.getLogger(__name__)


class EnglishDictionary(Protocol):
    """Common interface for English dictionary backends."""

    async def fetch(self, word: str) -> Optional[WordEntry]:
        """Return an entry for ``word`` or ``None`` when nothing usable was found."""


class EnglishDictionaryClient:
    """Fetch and normalise entries from ``dictionaryapi.dev``.

    Every failure mode (not found, HTTP error, broken payload) is reported as
    ``None``; only the logging level differs.
    """

    def __init__(
        self,
        config: EnglishDictionaryConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or EnglishDictionaryConfig()
        self._client = client

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            yield client

    def _url_for(self, word: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{quote(word.lower(), safe='')}"

    async def fetch(self, word: str) -> Optional[WordEntry]:
        word = (word or "").strip()
        if not word:
            return None
        try:
            async with self._session() as client:
                response = await client.get(self._url_for(word))
            if response.status_code == 404:
                logger.debug("No English entry for %r", word)
                return None
            response.raise_for_status()
            return self._parse(word, response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("English dictionary lookup for %r failed: %s", word, exc)
            return None

    @staticmethod
    def _parse(word: str, payload: Any) -> Optional[WordEntry]:
        """Normalise the first entry of a response; a malformed body raises ``ValueError``."""

        if not isinstance(payload, list):
            raise ValueError(f"expected a list of entries, got {type(payload).__name__}")
        if not payload:
            return None
        entry = _expect(payload[0], dict, "entry")
        meanings = _expect(entry.get("meanings") or [], list, "meanings")
        first_meaning = _expect(meanings[0], dict, "meaning") if meanings else {}
        definitions = _expect(first_meaning.get("definitions") or [], list, "definitions")
        definition = ""
        if definitions:
            text = _expect(definitions[0], dict, "definition").get("definition")
            if isinstance(text, str):
                definition = text.strip()
        part_of_speech = first_meaning.get("partOfSpeech")
        headword = entry.get("word")
        return WordEntry(
            word=headword if isinstance(headword, str) and headword else word,
            language="en",
            reading=EnglishDictionaryClient._extract_phonetic(entry),
            part_of_speech=part_of_speech if isinstance(part_of_speech, str) and part_of_speech else None,
            definition=definition,
        )

    @staticmethod
    def _extract_phonetic(entry: dict) -> str | None:
        phonetic = entry.get("phonetic")
        if isinstance(phonetic, str) and phonetic:
            return phonetic
        for item in _expect(entry.get("phonetics") or [], list, "phonetics"):
            if not isinstance(item, dict):
                continue
            text = item.get("text")
            if isinstance(text, str) and text:
                return text
        return None


def _expect(value: Any, kind: type, label: str) -> Any:
    if not isinstance(value, kind):
        raise ValueError(f"unexpected {label} payload: {type(value).__name__}")
    return value


__all__ = ["EnglishDictionary", "EnglishDictionaryClient"]
