from wordpaper.core.dictionary import ChineseLookup, JapaneseLookup, lookup_chinese, lookup_japanese
from wordpaper.core.models import ChineseDictEntry


class _MappingRomanizer:
    def __init__(self, mapping):
        self.mapping = mapping
        self.calls = []

    def romanize(self, text: str) -> str:
        self.calls.append(text)
        return self.mapping.get(text, "")


class _FailingRomanizer:
    def romanize(self, text: str) -> str:
        raise RuntimeError("converter unavailable")


class _FixedPinyin:
    def reading_for(self, text: str) -> str:
        return f"<{text}>"


def test_japanese_lookup_matches_romaji_key_case_insensitively():
    lookup = JapaneseLookup(romanizer=_MappingRomanizer({}))

    entry = lookup.lookup("  IkiGai ")

    assert entry is not None
    assert entry.word == "ikigai"
    assert entry.language == "ja"
    assert entry.characters == "生き甲斐"
    assert entry.reading_native == "いきがい"
    assert entry.reading == "ikigai"
    assert entry.part_of_speech == "n."
    assert entry.definition.startswith("a reason for being")


def test_japanese_lookup_matches_kanji_and_kana_fields():
    romanizer = _MappingRomanizer({})
    lookup = JapaneseLookup(romanizer=romanizer)

    assert lookup.lookup("侘寂").word == "wabi-sabi"
    assert lookup.lookup("わびさび").word == "wabi-sabi"
    assert romanizer.calls == []


def test_japanese_lookup_retries_with_romanized_kana():
    romanizer = _MappingRomanizer({"コモレビ": "komorebi"})
    lookup = JapaneseLookup(romanizer=romanizer)

    entry = lookup.lookup("コモレビ")

    assert romanizer.calls == ["コモレビ"]
    assert entry is not None
    assert entry.characters == "木漏れ日"
    assert entry.reading_native == "こもれび"


def test_japanese_lookup_returns_none_on_miss():
    lookup = JapaneseLookup(romanizer=_MappingRomanizer({}))

    assert lookup.lookup("serendipity") is None
    assert lookup.lookup("") is None
    assert lookup.lookup("なにか") is None


def test_japanese_lookup_treats_romanizer_failure_as_miss():
    lookup = JapaneseLookup(romanizer=_FailingRomanizer())

    assert lookup.lookup("なにか") is None


def test_chinese_lookup_returns_dictionary_entry():
    entry = ChineseLookup(pinyin=_FixedPinyin()).lookup(" 無常 ")

    assert entry.word == "無常"
    assert entry.characters == "無常"
    assert entry.reading == "wúcháng"
    assert entry.definition == "impermanence; the transient nature of all things"
    assert entry.part_of_speech == "n."


def test_chinese_lookup_always_returns_an_entry():
    entry = ChineseLookup(pinyin=_FixedPinyin()).lookup("你好")

    assert entry.word == "你好"
    assert entry.language == "zh"
    assert entry.characters == "你好"
    assert entry.reading == "<你好>"
    assert entry.definition == ""


def test_chinese_lookup_uses_custom_words():
    words = {"茶": ChineseDictEntry(hanzi="茶", pinyin="chá", definition="tea")}

    entry = ChineseLookup(words=words, pinyin=_FixedPinyin()).lookup("茶")

    assert entry.reading == "chá"
    assert entry.definition == "tea"


def test_default_chinese_lookup_generates_tone_marked_pinyin():
    entry = lookup_chinese("你好")

    assert entry.reading == "nǐ hǎo"
    assert entry.definition == ""


def test_default_japanese_lookup_matches_bundled_entries():
    entry = lookup_japanese("Shinrin-Yoku")

    assert entry is not None
    assert entry.characters == "森林浴"
    assert lookup_japanese("serendipity") is None
