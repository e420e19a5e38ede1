from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AnswerEntry:
    """One word: its kana spelling (SymbolSequence) and its display form."""
    kana: str   # joined Symbols, e.g. "さくらんぼ"
    word: str   # display rendering, e.g. "桜桃"

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self.kana)

    @property
    def leading(self) -> str:
        return self.kana[:1]

    def __len__(self) -> int:
        return len(self.kana)
