import pytest

from kanadle.kana import (
    EXCLUDED_LEADING, ROMAJI_TABLE, SMALL_SYMBOLS, SYMBOLS,
    feed, is_symbol, leading_symbols, lookup, transliterate,
)


def test_alphabet_shape():
    assert len(SYMBOLS) == 71
    assert len(set(SYMBOLS)) == 71
    assert EXCLUDED_LEADING <= set(SYMBOLS)
    assert not set(SMALL_SYMBOLS) & set(SYMBOLS)
    assert SYMBOLS[:5] == ("あ", "い", "う", "え", "お")
    assert SYMBOLS[-1] == "ぽ"


def test_leading_symbols_skip_reserved():
    lead = leading_symbols()
    assert len(lead) == 68
    assert not EXCLUDED_LEADING & set(lead)


@pytest.mark.parametrize("raw,expected", [
    ("ka", "か"),
    ("ti", "ち"), ("chi", "ち"), ("ci", "ち"),
    ("tu", "つ"), ("tsu", "つ"),
    ("hu", "ふ"), ("fu", "ふ"),
    ("zi", "じ"), ("ji", "じ"),
    ("nn", "ん"),
    ("xtu", "っ"), ("xtsu", "っ"),
    ("xya", "ゃ"),
    ("q", None), ("kya", None), ("", None),
])
def test_lookup(raw, expected):
    assert lookup(raw) == expected


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ROMAJI_TABLE["la"] = "ら"


def test_is_symbol():
    assert is_symbol("あ") and is_symbol("っ")
    assert not is_symbol("a") and not is_symbol("ア") and not is_symbol("かき")


@pytest.mark.parametrize("buffer,value,advance", [
    ("k", "k", False),
    ("ka", "か", True),
    ("か", "か", True),          # already a symbol: advance without lookup
    ("n", "n", False),           # 'n' triggers a lookup that misses
    ("nn", "ん", True),
    ("ts", "ts", False),
    ("tsu", "つ", True),
    ("kya", "kya", False),       # vowel ending but unknown spelling
    (" ka ", "か", True),
])
def test_feed_policy(buffer, value, advance):
    step = feed(buffer)
    assert (step.value, step.advance) == (value, advance)


def test_transliterate_words():
    assert transliterate("sakura") == ["さ", "く", "ら"]
    assert transliterate("kinnko") == ["き", "ん", "こ"]
    assert transliterate("hikouki") == ["ひ", "こ", "う", "き"]
    assert transliterate("maxtutake") == ["ま", "っ", "た", "け"]
    assert transliterate("さくら") == ["さ", "く", "ら"]


def test_transliterate_leftover_raises():
    with pytest.raises(ValueError):
        transliterate("kinko")
    with pytest.raises(ValueError):
        transliterate("ky")
