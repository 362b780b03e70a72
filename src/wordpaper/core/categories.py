"""Thematic vocabulary used by the category and random modes."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .lexicon import CHINESE_WORDS, JAPANESE_WORDS

CATEGORY_LABELS: Dict[str, str] = {
    "aesthetics": "Aesthetics & Japanese concepts",
    "emotions": "Emotions & feelings",
    "nature": "Nature & seasons",
    "philosophy": "Philosophy & meaning",
    "productivity": "Focus & habits",
}

ENGLISH_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "aesthetics": ("wabi-sabi", "ikigai", "mono no aware", "hiraeth", "sonder"),
    "emotions": ("melancholy", "euphoria", "serenity", "awe", "equanimity"),
    "nature": ("solstice", "equinox", "zenith", "horizon", "canopy"),
    "philosophy": ("stoicism", "absurdism", "ethos", "telos", "existence"),
    "productivity": ("focus", "momentum", "consistency", "discipline", "flow"),
}

# Romaji keys into JAPANESE_WORDS.
JAPANESE_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "aesthetics": ("wabi-sabi", "ikigai", "mono no aware", "kintsugi", "yugen"),
    "emotions": ("mono no aware",),
    "nature": ("komorebi", "shinrin-yoku"),
    "philosophy": ("ikigai", "yugen"),
    "productivity": ("tsundoku",),
}

# Hanzi keys into CHINESE_WORDS.
CHINESE_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    "aesthetics": ("和", "静"),
    "emotions": ("心",),
    "nature": ("气",),
    "philosophy": ("無常", "道", "禅", "空"),
    "productivity": (),
}


def _unique(words) -> List[str]:
    return list(dict.fromkeys(words))


def category_ids() -> List[str]:
    return list(CATEGORY_LABELS)


def category_label(category_id: str) -> str | None:
    return CATEGORY_LABELS.get(category_id)


def english_words(category_id: str) -> List[str]:
    return list(ENGLISH_BY_CATEGORY.get(category_id, ()))


def words_for_category(category_id: str) -> List[str]:
    """Return the English, Japanese and Chinese seeds of a category in that order.

    Seeds shared between lists (``"wabi-sabi"`` is both an English loanword and
    a Japanese key) appear once.
    """

    return _unique(
        [
            *ENGLISH_BY_CATEGORY.get(category_id, ()),
            *JAPANESE_BY_CATEGORY.get(category_id, ()),
            *CHINESE_BY_CATEGORY.get(category_id, ()),
        ]
    )


def all_words() -> List[str]:
    """The de-duplicated multilingual vocabulary across every category."""

    english = [word for words in ENGLISH_BY_CATEGORY.values() for word in words]
    return _unique([*english, *JAPANESE_WORDS.keys(), *CHINESE_WORDS.keys()])


__all__ = [
    "CATEGORY_LABELS",
    "CHINESE_BY_CATEGORY",
    "ENGLISH_BY_CATEGORY",
    "JAPANESE_BY_CATEGORY",
    "all_words",
    "category_ids",
    "category_label",
    "english_words",
    "words_for_category",
]
