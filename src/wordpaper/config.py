"""Application level configuration objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class EnglishDictionaryConfig:
    """Configuration for the remote English dictionary service."""

    base_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    """Endpoint prefix; the lowercased word is appended as a path segment."""

    timeout: float = 10.0
    """Request timeout in seconds."""


@dataclass(slots=True)
class MeaningSearchConfig:
    """Configuration for the "words that mean roughly X" service."""

    base_url: str = "https://api.datamuse.com/words"
    max_results: int = 10
    timeout: float = 10.0


@dataclass(slots=True)
class PickerConfig:
    """Tuning for a single vocabulary picker."""

    avoid_window: int = 5
    """Number of most recently confirmed words that must not be drawn again."""

    history_size: int = 10
    """Capacity of the confirmed-words ring buffer."""

    max_attempts: int = 50
    """Upper bound on the forward scan performed by a single draw."""

    @classmethod
    def global_defaults(cls) -> "PickerConfig":
        return cls(avoid_window=5, history_size=10, max_attempts=50)

    @classmethod
    def category_defaults(cls) -> "PickerConfig":
        return cls(avoid_window=3, history_size=5, max_attempts=20)


@dataclass(slots=True)
class FinderConfig:
    """Retry limits for the caller-facing search modes."""

    random_max_attempts: int = 5


@dataclass(slots=True)
class AppConfig:
    """Top level configuration container that can be expanded later."""

    english: EnglishDictionaryConfig = field(default_factory=EnglishDictionaryConfig)
    meaning_search: MeaningSearchConfig = field(default_factory=MeaningSearchConfig)
    global_picker: PickerConfig = field(default_factory=PickerConfig.global_defaults)
    category_picker: PickerConfig = field(default_factory=PickerConfig.category_defaults)
    finder: FinderConfig = field(default_factory=FinderConfig)


__all__ = [
    "AppConfig",
    "EnglishDictionaryConfig",
    "FinderConfig",
    "MeaningSearchConfig",
    "PickerConfig",
]
