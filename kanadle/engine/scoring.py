"""
Wordle-style scoring (feedback) for a single (answer, guess) pair of Symbols.

Verdicts:
  - EXACT   (2) : right symbol in the right position        -> 'G'
  - PRESENT (1) : symbol is in the answer, other position   -> 'Y'
  - ABSENT  (0) : symbol not in the answer (or already used) -> '-'

Algorithm (two-pass, duplicate-safe):
  1) Mark every exact position and consume that answer slot.
  2) For each remaining guess position, scan the answer's unconsumed slots
     left to right; the first match is PRESENT and consumes the slot.

So for every symbol s: #EXACT(s) + #PRESENT(s) <= count of s in the answer.

Inputs are sequences of Symbols; a joined kana string works too, since each
hiragana Symbol is one character.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Sequence


class Verdict(IntEnum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2

    @property
    def char(self) -> str:
        return _PATTERN_CHARS[self]


_PATTERN_CHARS = {Verdict.EXACT: "G", Verdict.PRESENT: "Y", Verdict.ABSENT: "-"}


def evaluate(answer: Sequence[str], guess: Sequence[str]) -> List[Verdict]:
    """
    Compute per-position verdicts for `guess` against `answer`.

    Raises:
      ValueError if the two sequences differ in length.

    Examples:
      evaluate("あいあう", "ああかか") -> [EXACT, PRESENT, ABSENT, ABSENT]
    """
    answer = list(answer)
    guess = list(guess)
    if len(answer) != len(guess):
        raise ValueError(f"answer and guess must be the same length "
                         f"({len(answer)} != {len(guess)})")

    verdicts: List[Verdict] = [Verdict.ABSENT] * len(guess)
    # Working copy of the answer; None marks a consumed slot.
    slots: List[Optional[str]] = list(answer)

    # Pass 1: exact matches.
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            verdicts[i] = Verdict.EXACT
            slots[i] = None

    # Pass 2: leftmost unconsumed slot wins.
    for i, g in enumerate(guess):
        if verdicts[i] is Verdict.EXACT:
            continue
        for j, a in enumerate(slots):
            if a is not None and a == g:
                verdicts[i] = Verdict.PRESENT
                slots[j] = None
                break

    return verdicts


def to_pattern(verdicts: Sequence[Verdict]) -> str:
    """Render verdicts as a 'G'/'Y'/'-' string."""
    return "".join(Verdict(v).char for v in verdicts)


def score(guess: Sequence[str], answer: Sequence[str]) -> str:
    """
    Pattern string for `guess` against `answer` (note the argument order,
    which matches the solver/constraint code).

      score("ああかか", "あいあう") -> "GY--"
    """
    return to_pattern(evaluate(answer, guess))


def is_win(verdicts: Sequence[Verdict]) -> bool:
    return len(verdicts) > 0 and all(v is Verdict.EXACT for v in verdicts)
