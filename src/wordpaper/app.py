"""Application bootstrapper."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import AppConfig
from .core.categories import CATEGORY_LABELS
from .core.models import LANGUAGE_CODES, WordEntry
from .exceptions import WordpaperError
from .services.finder import WordFinder
from .utils.subtitle import build_subtitle

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordpaper",
        description="Resolve a word, meaning, category or random pick into a wallpaper entry.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="mode", required=True)

    word = sub.add_parser("word", help="look up a word")
    word.add_argument("text")
    word.add_argument(
        "--language",
        choices=["auto", *LANGUAGE_CODES],
        default="auto",
        help="language of the input (default: detect from script)",
    )

    meaning = sub.add_parser("meaning", help="find a word for a described meaning")
    meaning.add_argument("phrase")

    category = sub.add_parser("category", help="pick a word from a category")
    category.add_argument("category_id", choices=list(CATEGORY_LABELS))

    sub.add_parser("random", help="pick a random word from every category")
    sub.add_parser("categories", help="list the available categories")
    return parser


def format_entry(entry: WordEntry) -> str:
    lines = [entry.characters or entry.word]
    if entry.characters and entry.characters != entry.word:
        lines.append(entry.word)
    subtitle = build_subtitle(entry)
    if subtitle:
        lines.append(subtitle)
    if entry.part_of_speech:
        lines.append(f"({entry.part_of_speech})")
    lines.append(entry.definition or "[no definition found; add one manually]")
    return "\n".join(lines)


async def run(args: argparse.Namespace, finder: WordFinder) -> WordEntry:
    if args.mode == "word":
        language = None if args.language == "auto" else args.language
        return await finder.find_word(args.text, language)
    if args.mode == "meaning":
        return await finder.find_by_meaning(args.phrase)
    if args.mode == "category":
        return await finder.find_in_category(args.category_id)
    return await finder.find_random()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point used by both console scripts and ``python -m``."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    if args.mode == "categories":
        for category_id, label in CATEGORY_LABELS.items():
            print(f"{category_id}\t{label}")
        return 0

    finder = WordFinder(AppConfig())
    try:
        entry = asyncio.run(run(args, finder))
    except WordpaperError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    print(format_entry(entry))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
