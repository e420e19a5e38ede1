import asyncio
import json
from pathlib import Path

import pytest

from kanadle.datasets import (
    AnswerEntry, WordListCache, load_word_list, read_word_list, word_list_path,
)
from kanadle.errors import LoadError


def test_word_list_path_naming(tmp_path: Path):
    assert word_list_path("か", tmp_path) == tmp_path / "katakana_data_か行.json"


def test_read_word_list(data_dir: Path):
    entries = read_word_list("か", data_dir)
    assert entries[0] == AnswerEntry("かまきり", "蟷螂")
    assert entries[0].symbols == ("か", "ま", "き", "り")
    assert entries[0].leading == "か"
    assert len(entries[0]) == 4


@pytest.mark.parametrize("content", [
    "not json",
    '{"kana": "かまきり"}',
    '[{"word": "蟷螂"}]',
])
def test_read_word_list_bad_content(tmp_path: Path, content):
    word_list_path("か", tmp_path).write_text(content, encoding="utf-8")
    with pytest.raises(LoadError):
        read_word_list("か", tmp_path)


def test_load_word_list_missing_raises(tmp_path: Path):
    with pytest.raises(LoadError) as exc:
        asyncio.run(load_word_list("ぬ", tmp_path))
    assert exc.value.symbol == "ぬ"


def test_cache_single_load_for_concurrent_requests():
    calls = []

    async def loader(sym):
        calls.append(sym)
        await asyncio.sleep(0)
        return [AnswerEntry("かまきり", "蟷螂")]

    async def go():
        cache = WordListCache(loader=loader)
        results = await asyncio.gather(*(cache.get("か") for _ in range(5)))
        again = await cache.get("か")
        return cache, results, again

    cache, results, again = asyncio.run(go())
    assert calls == ["か"]
    assert cache.load_count == 1
    assert all(r == results[0] for r in results)
    assert again == results[0]


def test_cache_failed_load_is_empty_and_memoized(tmp_path: Path):
    async def go():
        cache = WordListCache(tmp_path)
        first = await cache.get("ぬ")
        second = await cache.get("ぬ")
        return cache, first, second

    cache, first, second = asyncio.run(go())
    assert first == [] and second == []
    assert cache.load_count == 1
    assert cache.cached_symbols() == ["ぬ"]


def test_cache_contains_and_load_all(data_dir: Path):
    async def go():
        cache = WordListCache(data_dir)
        hit = await cache.contains("か", "かまきり")
        miss = await cache.contains("か", "さかなや")
        lists = await cache.load_all(["あ", "か", "ぬ"])
        return hit, miss, lists

    hit, miss, lists = asyncio.run(go())
    assert hit is True and miss is False
    assert [e.kana for e in lists["あ"]] == ["あさがお", "あおぞら"]
    assert lists["ぬ"] == []


def test_write_word_list_keeps_kana_readable(tmp_path: Path):
    from kanadle.datasets import write_word_list
    p = write_word_list([AnswerEntry("まつたけ", "松茸")], "ま", tmp_path)
    text = Path(p).read_text(encoding="utf-8")
    assert "まつたけ" in text
    assert json.loads(text) == [{"kana": "まつたけ", "word": "松茸"}]


def test_cache_survives_caller_timeout():
    from kanadle.session import PuzzleSession, SessionState, validate_guess

    async def slow_loader(sym):
        await asyncio.sleep(0.05)
        return [AnswerEntry("かまきり", "蟷螂")]

    async def go():
        cache = WordListCache(loader=slow_loader)
        s = PuzzleSession(cache=cache, answer=AnswerEntry("かまきり", "蟷螂"),
                          state=SessionState.IN_PROGRESS)
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(validate_guess(s, "かまきり"), 0.01)
        ok = await validate_guess(s, "かまきり")
        return cache, ok

    cache, ok = asyncio.run(go())
    assert ok is True
    assert cache.load_count == 1


def test_cache_loader_exception_is_empty_and_memoized():
    calls = []

    async def loader(sym):
        calls.append(sym)
        raise ConnectionError("network down")

    async def go():
        cache = WordListCache(loader=loader)
        return await cache.get("か"), await cache.get("か")

    first, second = asyncio.run(go())
    assert first == [] and second == []
    assert calls == ["か"]


def test_cache_corrupt_file_is_empty(tmp_path: Path):
    word_list_path("か", tmp_path).write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    with pytest.raises(LoadError):
        read_word_list("か", tmp_path)
    assert asyncio.run(WordListCache(tmp_path).get("か")) == []
