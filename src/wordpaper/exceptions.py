"""User-visible failures raised by the search modes."""

from __future__ import annotations


class WordpaperError(Exception):
    """Base class for failures that are reported to the end user verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WordNotFoundError(WordpaperError):
    """A typed word could not be resolved to any entry."""


class NoCandidatesError(WordpaperError):
    """A meaning search or category produced nothing to try."""


class NoValidDefinitionError(WordpaperError):
    """Candidates existed but none resolved to an entry with a definition."""


class RandomWordError(WordpaperError):
    """Random mode gave up after its bounded number of attempts."""


__all__ = [
    "NoCandidatesError",
    "NoValidDefinitionError",
    "RandomWordError",
    "WordNotFoundError",
    "WordpaperError",
]
