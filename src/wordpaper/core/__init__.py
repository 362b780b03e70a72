"""Core domain services for detecting, looking up and picking words."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "ChineseDictEntry",
    "ChineseLookup",
    "EnglishDictionaryClient",
    "JapaneseDictEntry",
    "JapaneseLookup",
    "KanaRomanizer",
    "LayoutSettings",
    "MeaningSearchClient",
    "PickerRegistry",
    "PinyinGenerator",
    "VocabularyPicker",
    "WordEntry",
    "detect_language",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - thin lazy import layer
    if name in __all__:
        module_map = {
            "ChineseLookup": "dictionary",
            "JapaneseLookup": "dictionary",
            "EnglishDictionaryClient": "english",
            "MeaningSearchClient": "meaning_search",
            "KanaRomanizer": "transliteration",
            "PinyinGenerator": "transliteration",
            "PickerRegistry": "picker",
            "VocabularyPicker": "picker",
            "detect_language": "language",
            "ChineseDictEntry": "models",
            "JapaneseDictEntry": "models",
            "LayoutSettings": "models",
            "WordEntry": "models",
        }
        module_name = module_map[name]
        module = import_module(f"{__name__}.{module_name}")
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:  # pragma: no cover - aids interactive use
    return sorted(__all__ + list(globals().keys()))
