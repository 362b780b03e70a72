"""Shuffled, repetition-avoiding word pickers for the random and category modes."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Callable, Deque, Dict, Iterable, List, Optional, Sequence

from ..config import PickerConfig
from . import categories

logger = logging.getLogger(__name__)


class VocabularyPicker:
    """Walk a shuffled permutation of ``words`` without visible repeats.

    Drawing and committing are separate steps: :meth:`draw` proposes a word and
    only :meth:`mark_used` feeds the avoid-window, so a candidate that failed to
    resolve can come up again later.
    """

    def __init__(
        self,
        words: Iterable[str],
        config: PickerConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.words: List[str] = list(dict.fromkeys(words))
        self.config = config or PickerConfig.global_defaults()
        self._rng = rng or random.Random()
        self._order: Optional[List[str]] = None
        self._cursor = 0
        self._history: Deque[str] = deque(maxlen=max(1, self.config.history_size))

    @property
    def recently_used(self) -> List[str]:
        return list(self._history)

    def reset(self) -> None:
        self._order = None
        self._cursor = 0
        self._history.clear()

    def draw(self) -> Optional[str]:
        if not self.words:
            return None
        if len(self.words) == 1:
            return self.words[0]

        avoid = self._avoid_set()
        attempts = min(len(self.words), self.config.max_attempts)
        for _ in range(attempts):
            if self._order is None or self._cursor >= len(self._order):
                self._shuffle()
            candidate = self._order[self._cursor]
            self._cursor += 1
            if candidate not in avoid:
                return candidate

        remaining = [word for word in self.words if word not in avoid]
        if not remaining:
            most_recent = self._history[-1]
            remaining = [word for word in self.words if word != most_recent]
        choice = self._rng.choice(remaining)
        logger.debug("Forward scan exhausted, picked %r from %d alternatives", choice, len(remaining))
        return choice

    def mark_used(self, word: str) -> None:
        if not word:
            return
        if word in self._history:
            self._history.remove(word)
        self._history.append(word)

    def _avoid_set(self) -> set[str]:
        window = self.config.avoid_window
        if window <= 0:
            return set()
        return set(list(self._history)[-window:])

    def _shuffle(self) -> None:
        order = list(self.words)
        self._rng.shuffle(order)
        self._order = order
        self._cursor = 0


class PickerRegistry:
    """One global picker over the full vocabulary plus one picker per category."""

    def __init__(
        self,
        global_config: PickerConfig | None = None,
        category_config: PickerConfig | None = None,
        rng: random.Random | None = None,
        vocabulary: Sequence[str] | None = None,
        category_words: Callable[[str], List[str]] = categories.words_for_category,
    ) -> None:
        self._rng = rng or random.Random()
        self.category_config = category_config or PickerConfig.category_defaults()
        self._category_words = category_words
        self.global_picker = VocabularyPicker(
            categories.all_words() if vocabulary is None else vocabulary,
            global_config or PickerConfig.global_defaults(),
            rng=self._rng,
        )
        self._category_pickers: Dict[str, VocabularyPicker] = {}
        self._empty_picker = VocabularyPicker((), self.category_config, rng=self._rng)

    def category_picker(self, category_id: str) -> VocabularyPicker:
        picker = self._category_pickers.get(category_id)
        if picker is not None:
            return picker
        words = self._category_words(category_id)
        if not words:
            # Unknown ids are never cached.
            return self._empty_picker
        picker = VocabularyPicker(words, self.category_config, rng=self._rng)
        self._category_pickers[category_id] = picker
        return picker

    def draw_global(self) -> Optional[str]:
        return self.global_picker.draw()

    def draw_category(self, category_id: str) -> Optional[str]:
        return self.category_picker(category_id).draw()

    def mark_global_used(self, word: str) -> None:
        self.global_picker.mark_used(word)

    def mark_category_used(self, category_id: str, word: str) -> None:
        picker = self.category_picker(category_id)
        if picker.words:
            picker.mark_used(word)


__all__ = ["PickerRegistry", "VocabularyPicker"]
