"""Reverse dictionary search ("words that mean roughly X")."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Protocol

import httpx

from ..config import MeaningSearchConfig

logger = logging.getLogger(__name__)


class MeaningSearch(Protocol):
    async def search(self, phrase: str) -> List[str]:
        """Return candidate words ranked by the backend."""


class MeaningSearchClient:
    """Query the Datamuse ``ml`` endpoint and return the ranked words."""

    def __init__(
        self,
        config: MeaningSearchConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or MeaningSearchConfig()
        self._client = client

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            yield client

    async def search(self, phrase: str) -> List[str]:
        phrase = (phrase or "").strip()
        if not phrase:
            return []
        params = {"ml": phrase, "max": self.config.max_results}
        try:
            async with self._session() as client:
                response = await client.get(self.config.base_url, params=params)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Meaning search for %r failed: %s", phrase, exc)
            return []
        if not isinstance(payload, list):
            logger.warning("Unexpected meaning search payload for %r", phrase)
            return []
        words: List[str] = []
        for item in payload:
            if not isinstance(item, dict):
                continue
            word = item.get("word")
            if isinstance(word, str) and word:
                words.append(word)
        return words[: self.config.max_results]


__all__ = ["MeaningSearch", "MeaningSearchClient"]
