"""Hand-authored Japanese and Chinese entries bundled with the application."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import ChineseDictEntry, JapaneseDictEntry


def _japanese(*entries: JapaneseDictEntry) -> Mapping[str, JapaneseDictEntry]:
    return MappingProxyType({entry.romaji.lower(): entry for entry in entries})


def _chinese(*entries: ChineseDictEntry) -> Mapping[str, ChineseDictEntry]:
    return MappingProxyType({entry.hanzi: entry for entry in entries})


JAPANESE_WORDS: Mapping[str, JapaneseDictEntry] = _japanese(
    JapaneseDictEntry(
        kanji="侘寂",
        kana="わびさび",
        romaji="wabi-sabi",
        definition="a Japanese aesthetic centered on the beauty of imperfection and impermanence",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="生き甲斐",
        kana="いきがい",
        romaji="ikigai",
        definition="a reason for being; that which makes life feel worthwhile",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="物の哀れ",
        kana="もののあわれ",
        romaji="mono no aware",
        definition="a gentle sadness or sensitivity to the transience of things",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="金継ぎ",
        kana="きんつぎ",
        romaji="kintsugi",
        definition="the art of repairing broken pottery with gold, embracing flaws",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="幽玄",
        kana="ゆうげん",
        romaji="yugen",
        definition="a profound awareness of the universe that triggers deep emotional response",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="木漏れ日",
        kana="こもれび",
        romaji="komorebi",
        definition="sunlight filtering through trees",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="積ん読",
        kana="つんどく",
        romaji="tsundoku",
        definition="the act of acquiring books but letting them pile up unread",
        part_of_speech="n.",
    ),
    JapaneseDictEntry(
        kanji="森林浴",
        kana="しんりんよく",
        romaji="shinrin-yoku",
        definition="forest bathing; the practice of spending time in forests for health",
        part_of_speech="n.",
    ),
)
"""Japanese entries keyed by lowercase romaji."""

CHINESE_WORDS: Mapping[str, ChineseDictEntry] = _chinese(
    ChineseDictEntry(
        hanzi="無常",
        pinyin="wúcháng",
        definition="impermanence; the transient nature of all things",
        part_of_speech="n.",
    ),
    ChineseDictEntry(hanzi="气", pinyin="qì", definition="vital energy or life force", part_of_speech="n."),
    ChineseDictEntry(
        hanzi="道",
        pinyin="dào",
        definition="the way; the path; the principle underlying all things",
        part_of_speech="n.",
    ),
    ChineseDictEntry(
        hanzi="禅",
        pinyin="chán",
        definition="meditation; zen; a state of deep contemplation",
        part_of_speech="n.",
    ),
    ChineseDictEntry(
        hanzi="空",
        pinyin="kōng",
        definition="emptiness; void; the concept of non-being",
        part_of_speech="n.",
    ),
    ChineseDictEntry(hanzi="和", pinyin="hé", definition="harmony; peace; balance", part_of_speech="n."),
    ChineseDictEntry(hanzi="静", pinyin="jìng", definition="stillness; quiet; tranquility", part_of_speech="n."),
    ChineseDictEntry(
        hanzi="心",
        pinyin="xīn",
        definition="heart; mind; the center of consciousness",
        part_of_speech="n.",
    ),
)
"""Chinese entries keyed by their exact hanzi."""


__all__ = ["CHINESE_WORDS", "JAPANESE_WORDS"]
