"""
Hiragana alphabet and the romaji -> hiragana transliteration table.

Conventions:
  - A Symbol is one hiragana character (str of length 1).
  - SYMBOLS is the 71-symbol answer alphabet, in gojuon order:
      46 seion (incl. を and ん) + 20 dakuon + 5 handakuon.
  - SMALL_SYMBOLS are the nine small kana typed with an 'x' prefix. They can
    appear inside words, but no word list is partitioned by them.
  - Several romanizations may map to the same Symbol (ti/chi/ci -> ち).

The table is built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

# Insertion order matters: SYMBOLS is derived from the first appearance of
# each value, so this also fixes the alphabet order.
_ROMAJI: Dict[str, str] = {
    # あ行
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    # か行
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    # さ行
    "sa": "さ", "si": "し", "su": "す", "se": "せ", "so": "そ",
    # た行
    "ta": "た", "ti": "ち", "chi": "ち", "ci": "ち", "tsu": "つ", "tu": "つ",
    "te": "て", "to": "と",
    # な行
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    # は行
    "ha": "は", "hi": "ひ", "hu": "ふ", "fu": "ふ", "he": "へ", "ho": "ほ",
    # ま行
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    # や行
    "ya": "や", "yu": "ゆ", "yo": "よ",
    # ら行
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    # わ行
    "wa": "わ", "wo": "を", "nn": "ん",
    # が行
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    # ざ行
    "za": "ざ", "zi": "じ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    # だ行
    "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
    # ば行
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    # ぱ行
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    # small kana
    "xa": "ぁ", "xi": "ぃ", "xu": "ぅ", "xe": "ぇ", "xo": "ぉ",
    "xya": "ゃ", "xyu": "ゅ", "xyo": "ょ", "xtu": "っ", "xtsu": "っ",
}

ROMAJI_TABLE: Mapping[str, str] = MappingProxyType(_ROMAJI)

SMALL_SYMBOLS: Tuple[str, ...] = ("ぁ", "ぃ", "ぅ", "ぇ", "ぉ", "ゃ", "ゅ", "ょ", "っ")

SYMBOLS: Tuple[str, ...] = tuple(
    s for s in dict.fromkeys(_ROMAJI.values()) if s not in SMALL_SYMBOLS
)

# No word starts with these, so they never key an answer's word list.
EXCLUDED_LEADING: FrozenSet[str] = frozenset({"づ", "を", "ん"})

INPUT_SYMBOLS: FrozenSet[str] = frozenset(SYMBOLS) | frozenset(SMALL_SYMBOLS)


def lookup(raw: str) -> Optional[str]:
    """Return the Symbol spelled by `raw` (lowercase romaji), or None if unknown."""
    return ROMAJI_TABLE.get(raw)


def is_symbol(s: str) -> bool:
    """True if `s` is a single valid input Symbol (answer alphabet or small kana)."""
    return s in INPUT_SYMBOLS


def leading_symbols(exclude=EXCLUDED_LEADING) -> Tuple[str, ...]:
    """Symbols an answer may start with, in alphabet order."""
    return tuple(s for s in SYMBOLS if s not in exclude)
