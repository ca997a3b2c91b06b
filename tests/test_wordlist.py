from pathlib import Path

import httpx
import pytest

from passgen import wordlist
from passgen.exceptions import ResourceUnavailable
from passgen.wordlist import (
    bip39_wordlist,
    fetch_wordlist,
    load_wordlist,
    parse_wordlist,
)

from conftest import EFF_SAMPLE, SAMPLE_WORDS


def test_parse_wordlist_strips_dice_prefix_and_title_cases():
    assert parse_wordlist(["11111\tabacus\n", "11112\tabdomen\r\n"]) == ("Abacus", "Abdomen")


def test_parse_wordlist_skips_blank_and_prefix_only_lines():
    lines = ["11111\tabacus", "", "   ", "11112\t", "11113\tabide"]
    assert parse_wordlist(lines) == ("Abacus", "Abide")


def test_parse_wordlist_honours_prefix_width():
    assert parse_wordlist(["abacus", "abide"], prefix_width=0) == ("Abacus", "Abide")


def test_load_wordlist_reads_local_file(wordlist_file: Path, make_settings):
    words = load_wordlist(wordlist_file, settings=make_settings())
    assert words == SAMPLE_WORDS


def test_load_wordlist_caches_by_path(wordlist_file: Path, make_settings):
    settings = make_settings()
    first = load_wordlist(wordlist_file, settings=settings)
    wordlist_file.write_text("11111\tchanged\n", encoding="utf-8")
    second = load_wordlist(wordlist_file, settings=settings)
    assert second is first


def test_load_wordlist_missing_without_fetch_raises(tmp_path: Path, make_settings):
    with pytest.raises(ResourceUnavailable):
        load_wordlist(tmp_path / "absent.txt", settings=make_settings())


def test_load_wordlist_empty_file_raises(tmp_path: Path, make_settings):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(ResourceUnavailable):
        load_wordlist(path, settings=make_settings())


def test_load_wordlist_unreadable_file_raises(tmp_path: Path, make_settings):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa\x00garbage")
    with pytest.raises(ResourceUnavailable):
        load_wordlist(path, settings=make_settings())


def test_load_wordlist_fetches_missing_file_once(tmp_path: Path, make_settings):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(200, text="\n".join(EFF_SAMPLE))

    transport = httpx.MockTransport(handler)
    path = tmp_path / "cache" / "eff_large_wordlist.txt"
    settings = make_settings(WORDLIST_FETCH_ENABLED=True)

    words = load_wordlist(path, "https://example.test/eff.txt", settings=settings, transport=transport)
    again = load_wordlist(path, "https://example.test/eff.txt", settings=settings, transport=transport)

    assert words == SAMPLE_WORDS
    assert again is words
    assert calls == ["https://example.test/eff.txt"]
    assert path.exists()


def test_load_wordlist_fetch_failure_raises_and_leaves_no_file(tmp_path: Path, make_settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(404))
    path = tmp_path / "eff_large_wordlist.txt"
    settings = make_settings(WORDLIST_FETCH_ENABLED=True)

    with pytest.raises(ResourceUnavailable):
        load_wordlist(path, "https://example.test/eff.txt", settings=settings, transport=transport)

    assert not path.exists()


def test_fetch_wordlist_wraps_transport_errors(tmp_path: Path):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ResourceUnavailable) as exc:
        fetch_wordlist("https://example.test/eff.txt", tmp_path / "w.txt",
                       transport=httpx.MockTransport(handler))

    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_load_wordlist_uses_bip39_source(make_settings):
    words = load_wordlist(settings=make_settings(WORDLIST_SOURCE="bip39"))
    assert len(words) == 2048
    assert words[0] == "Abandon"


def test_bip39_wordlist_is_title_cased():
    words = bip39_wordlist()
    assert all(word[0].isupper() for word in words)


def test_failed_fetch_is_not_retried_during_cool_down(tmp_path: Path, make_settings, monkeypatch):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(503)

    transport = httpx.MockTransport(handler)
    path = tmp_path / "eff_large_wordlist.txt"
    settings = make_settings(WORDLIST_FETCH_ENABLED=True)

    for _ in range(5):
        with pytest.raises(ResourceUnavailable):
            load_wordlist(path, "https://example.test/eff.txt", settings=settings, transport=transport)
    assert len(calls) == 1

    now = wordlist.time.monotonic()
    monkeypatch.setattr(wordlist.time, "monotonic", lambda: now + wordlist.FETCH_RETRY_SECONDS + 1)
    with pytest.raises(ResourceUnavailable):
        load_wordlist(path, "https://example.test/eff.txt", settings=settings, transport=transport)
    assert len(calls) == 2
