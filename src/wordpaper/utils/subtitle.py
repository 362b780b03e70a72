"""Subtitle line shown under the headword on the wallpaper."""

from __future__ import annotations

from typing import Iterable, List

from ..core.models import LanguageCode, WordEntry

SEPARATOR = " • "

_LABELS = {"ja": "Japanese", "zh": "Chinese", "en": "English"}


def language_label(language: LanguageCode) -> str:
    return _LABELS.get(language, "")


def _join(parts: Iterable[str | None]) -> str:
    seen: List[str] = []
    for part in parts:
        if part and part.strip() and part not in seen:
            seen.append(part)
    return SEPARATOR.join(seen)


def build_subtitle(entry: WordEntry) -> str:
    """Compose the reading and language label line for ``entry``.

    Japanese shows ``kana • JAPANESE • ROMAJI`` (romaji only when it differs
    from the kana), Chinese and English show the label followed by the reading.
    """

    label = language_label(entry.language).upper()
    if entry.language == "ja":
        romaji = None
        if entry.reading and entry.reading != entry.reading_native:
            romaji = entry.reading.upper()
        return _join([entry.reading_native, label, romaji])
    if entry.language in ("zh", "en"):
        return _join([label, entry.reading])
    return _join([label])


__all__ = ["SEPARATOR", "build_subtitle", "language_label"]
