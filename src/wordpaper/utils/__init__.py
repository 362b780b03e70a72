"""Shared utility helpers."""

from .subtitle import build_subtitle, language_label

__all__ = ["build_subtitle", "language_label"]
