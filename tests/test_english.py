import asyncio

import httpx

from wordpaper.config import EnglishDictionaryConfig
from wordpaper.core.english import EnglishDictionaryClient

SERENDIPITY = [
    {
        "word": "serendipity",
        "phonetic": "/ˌserənˈdipitē/",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "the occurrence and development of events by chance "
                        "in a happy or beneficial way"
                    }
                ],
            }
        ],
    }
]


def _fetch(handler, word: str):
    async def _run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await EnglishDictionaryClient(client=client).fetch(word)

    return asyncio.run(_run())


def test_fetch_normalises_successful_response():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=SERENDIPITY)

    entry = _fetch(handler, "Serendipity")

    assert requests[0].url.path == "/api/v2/entries/en/serendipity"
    assert entry is not None
    assert entry.word == "serendipity"
    assert entry.language == "en"
    assert entry.reading == "/ˌserənˈdipitē/"
    assert entry.part_of_speech == "noun"
    assert entry.definition.startswith("the occurrence and development")


def test_fetch_returns_none_for_not_found():
    entry = _fetch(lambda request: httpx.Response(404, json={"title": "No Definitions Found"}), "xyzzy")

    assert entry is None


def test_fetch_returns_none_for_server_error():
    assert _fetch(lambda request: httpx.Response(500), "word") is None


def test_fetch_returns_none_for_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert _fetch(handler, "word") is None


def test_fetch_returns_none_for_invalid_json_or_empty_list():
    assert _fetch(lambda request: httpx.Response(200, content=b"<html>"), "word") is None
    assert _fetch(lambda request: httpx.Response(200, json=[]), "word") is None
    assert _fetch(lambda request: httpx.Response(200, json={"word": "x"}), "word") is None


def test_fetch_falls_back_to_phonetics_list_and_empty_definition():
    payload = [
        {
            "word": "awe",
            "phonetics": [{"audio": "awe.mp3"}, {"text": "/ɔː/"}],
            "meanings": [{"partOfSpeech": "noun", "definitions": []}],
        }
    ]

    entry = _fetch(lambda request: httpx.Response(200, json=payload), "awe")

    assert entry is not None
    assert entry.reading == "/ɔː/"
    assert entry.definition == ""
    assert not entry.is_complete


def test_blank_word_skips_request():
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("no request expected")

    assert _fetch(handler, "   ") is None


def test_base_url_is_configurable():
    client = EnglishDictionaryClient(EnglishDictionaryConfig(base_url="https://dict.test/en/"))

    assert client._url_for("Mono No Aware") == "https://dict.test/en/mono%20no%20aware"


def test_fetch_returns_none_for_malformed_entries():
    payloads = [
        [{"word": "x", "meanings": {"noun": 1}}],
        [{"word": "x", "meanings": [], "phonetics": 5}],
        [{"word": "x", "meanings": [{"definitions": {"a": 1}}]}],
        [{"word": "x", "meanings": ["noun"]}],
        ["x"],
    ]

    for payload in payloads:
        assert _fetch(lambda request, body=payload: httpx.Response(200, json=body), "x") is None


def test_fetch_ignores_non_string_fields():
    payload = [
        {
            "word": 42,
            "phonetic": ["/x/"],
            "meanings": [{"partOfSpeech": {"name": "noun"}, "definitions": [{"definition": 7}]}],
        }
    ]

    entry = _fetch(lambda request: httpx.Response(200, json=payload), "Thing")

    assert entry is not None
    assert entry.word == "Thing"
    assert entry.part_of_speech is None
    assert entry.reading is None
    assert entry.definition == ""
