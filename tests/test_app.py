import asyncio

import pytest

from wordpaper.app import build_parser, format_entry, main, run
from wordpaper.core.models import WordEntry


class _RecordingFinder:
    def __init__(self):
        self.calls = []

    async def find_word(self, text, language=None):
        self.calls.append(("word", text, language))
        return WordEntry(word=text, language=language or "en")

    async def find_by_meaning(self, phrase):
        self.calls.append(("meaning", phrase))
        return WordEntry(word="joy", language="en", definition="happiness")

    async def find_in_category(self, category_id):
        self.calls.append(("category", category_id))
        return WordEntry(word="awe", language="en", definition="wonder")

    async def find_random(self):
        self.calls.append(("random",))
        return WordEntry(word="awe", language="en", definition="wonder")


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["word", "awe"], ("word", "awe", None)),
        (["word", "道", "--language", "zh"], ("word", "道", "zh")),
        (["meaning", "feeling good"], ("meaning", "feeling good")),
        (["category", "nature"], ("category", "nature")),
        (["random"], ("random",)),
    ],
)
def test_run_dispatches_modes(argv, expected):
    finder = _RecordingFinder()

    asyncio.run(run(build_parser().parse_args(argv), finder))

    assert finder.calls == [expected]


def test_parser_rejects_unknown_category():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["category", "astronomy"])


def test_categories_command_lists_labels(capsys):
    assert main(["categories"]) == 0

    out = capsys.readouterr().out
    assert "nature\tNature & seasons" in out


def test_format_entry_for_japanese_word():
    entry = WordEntry(
        word="ikigai",
        language="ja",
        characters="生き甲斐",
        reading="ikigai",
        reading_native="いきがい",
        part_of_speech="n.",
        definition="a reason for being",
    )

    assert format_entry(entry).splitlines() == [
        "生き甲斐",
        "ikigai",
        "いきがい • JAPANESE • IKIGAI",
        "(n.)",
        "a reason for being",
    ]


def test_format_entry_flags_missing_definition():
    text = format_entry(WordEntry(word="xyzzy", language="en"))

    assert text.splitlines()[-1].startswith("[no definition found")
