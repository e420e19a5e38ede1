"""
Keystroke input policy for a single cell of a guess row.

After every keystroke the UI hands the cell's buffer to `feed` and gets back
the (possibly transliterated) value plus whether focus should move on:

  - buffer already a valid Symbol        -> keep it, advance
  - buffer ends in a vowel or 'n'        -> try the table; hit replaces the
                                            buffer and advances, miss waits
  - anything else                        -> keep typing
"""

from __future__ import annotations

from typing import List, NamedTuple

from .table import is_symbol, lookup

TRIGGER_ENDINGS = ("a", "i", "u", "e", "o", "n")


class InputStep(NamedTuple):
    value: str
    advance: bool


def feed(buffer: str) -> InputStep:
    buf = buffer.strip()
    if is_symbol(buf):
        return InputStep(buf, True)
    if buf.endswith(TRIGGER_ENDINGS):
        sym = lookup(buf)
        if sym is not None:
            return InputStep(sym, True)
    return InputStep(buf, False)


def transliterate(text: str) -> List[str]:
    """
    Convert a whole romaji (or already-hiragana) string into Symbols by typing
    it one character at a time through `feed`.

    Examples:
      transliterate("sakura")   -> ["さ", "く", "ら"]
      transliterate("kinnko")   -> ["き", "ん", "こ"]

    Raises ValueError if characters are left over that never form a Symbol.
    """
    out: List[str] = []
    buf = ""
    for ch in text.strip().lower():
        if ch.isspace():
            continue
        buf += ch
        step = feed(buf)
        if step.advance:
            out.append(step.value)
            buf = ""
    if buf:
        raise ValueError(f"cannot transliterate trailing input {buf!r} in {text!r}")
    return out
