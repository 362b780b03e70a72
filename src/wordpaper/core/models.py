"""Data models shared across the application."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Literal, Optional

LanguageCode = Literal["en", "ja", "zh", "other"]
"""Language tag attached to every resolved entry."""

TextAlignment = Literal["left", "center", "right"]
VerticalAlignment = Literal["top", "middle", "bottom"]

LANGUAGE_CODES: tuple[str, ...] = ("en", "ja", "zh", "other")


@dataclass(slots=True)
class WordEntry:
    """A display-ready dictionary entry.

    ``definition`` is always a string; the empty string marks an entry that
    still needs a definition (typed in manually by the user, for example).
    """

    word: str
    language: LanguageCode
    definition: str = ""
    characters: Optional[str] = None
    reading: Optional[str] = None
    reading_native: Optional[str] = None
    part_of_speech: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.word) and bool(self.definition)


@dataclass(frozen=True, slots=True)
class JapaneseDictEntry:
    """Hand-authored Japanese entry keyed by lowercase romaji."""

    kana: str
    romaji: str
    definition: str
    kanji: Optional[str] = None
    part_of_speech: Optional[str] = None

    def to_word_entry(self) -> WordEntry:
        return WordEntry(
            word=self.romaji,
            language="ja",
            characters=self.kanji or self.kana,
            reading_native=self.kana,
            reading=self.romaji,
            part_of_speech=self.part_of_speech,
            definition=self.definition,
        )


@dataclass(frozen=True, slots=True)
class ChineseDictEntry:
    """Hand-authored Chinese entry keyed by its hanzi."""

    hanzi: str
    pinyin: str
    definition: str
    part_of_speech: Optional[str] = None

    def to_word_entry(self) -> WordEntry:
        return WordEntry(
            word=self.hanzi,
            language="zh",
            characters=self.hanzi,
            reading=self.pinyin,
            definition=self.definition,
            part_of_speech=self.part_of_speech,
        )


_ALIGNMENTS = ("left", "center", "right")
_VERTICAL_ALIGNMENTS = ("top", "middle", "bottom")


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """Presentation settings handed to the wallpaper renderer with an entry."""

    word_scale: float = 1.0
    alignment: TextAlignment = "center"
    vertical_alignment: VerticalAlignment = "middle"
    definition_width: float = 0.75
    """Fraction of the container width used by the definition block."""

    text_color: str = "#fafafa"
    background_color: str = "#18181b"
    background_image: Optional[str] = None

    def __post_init__(self) -> None:
        if not 0.5 <= self.word_scale <= 2.0:
            raise ValueError(f"word_scale must be within [0.5, 2.0], got {self.word_scale}")
        if not 0.3 <= self.definition_width <= 1.0:
            raise ValueError(
                f"definition_width must be within [0.3, 1.0], got {self.definition_width}"
            )
        if self.alignment not in _ALIGNMENTS:
            raise ValueError(f"unknown alignment {self.alignment!r}")
        if self.vertical_alignment not in _VERTICAL_ALIGNMENTS:
            raise ValueError(f"unknown vertical alignment {self.vertical_alignment!r}")

    def with_overrides(self, **changes) -> "LayoutSettings":
        known = {item.name for item in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"unknown layout settings: {', '.join(unknown)}")
        return replace(self, **changes)


DEFAULT_LAYOUT_SETTINGS = LayoutSettings()


__all__ = [
    "ChineseDictEntry",
    "DEFAULT_LAYOUT_SETTINGS",
    "JapaneseDictEntry",
    "LANGUAGE_CODES",
    "LanguageCode",
    "LayoutSettings",
    "TextAlignment",
    "VerticalAlignment",
    "WordEntry",
]
