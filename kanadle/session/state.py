"""
Puzzle session value types.

A PuzzleSession owns everything one game needs: the answer, the attempt
counter, the locked attempts and the current state. Nothing lives at module
scope; every operation in `kanadle.session.game` takes the session explicitly.

State machine (session.state):

    AWAITING_ANSWER -> IN_PROGRESS -> WON
                            |
                            v
                          LOST          (only with max_attempts set)

Each submit_guess call reports an AttemptStatus: INVALID_WORD (nothing
changed), CONTINUING (row locked, next row open, still IN_PROGRESS), WON
or LOST.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from kanadle.datasets import AnswerEntry, WordListCache
from kanadle.engine import Verdict, to_pattern


class SessionState(str, Enum):
    AWAITING_ANSWER = "awaiting_answer"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class AttemptStatus(str, Enum):
    INVALID_WORD = "invalid_word"
    CONTINUING = "continuing"
    WON = "won"
    LOST = "lost"


TERMINAL_STATES = frozenset({SessionState.WON, SessionState.LOST})


@dataclass(frozen=True)
class Attempt:
    index: int                      # 1-based row number
    guess: Tuple[str, ...]
    verdicts: Tuple[Verdict, ...]
    locked: bool = True

    @property
    def kana(self) -> str:
        return "".join(self.guess)

    @property
    def pattern(self) -> str:
        return to_pattern(self.verdicts)


@dataclass(frozen=True)
class AttemptResult:
    status: AttemptStatus
    attempt: Optional[Attempt] = None
    # Filled in once the session is over, for the victory / defeat display.
    answer: Optional[AnswerEntry] = None

    @property
    def accepted(self) -> bool:
        return self.status is not AttemptStatus.INVALID_WORD


@dataclass(frozen=True)
class RowView:
    """What a renderer needs for one row of the board."""
    index: int
    guess: Tuple[str, ...]
    verdicts: Tuple[Verdict, ...]
    locked: bool


@dataclass
class PuzzleSession:
    cache: WordListCache
    word_length: int = 4
    max_attempts: Optional[int] = None
    answer: Optional[AnswerEntry] = None
    attempt: int = 1
    attempts: List[Attempt] = field(default_factory=list)
    state: SessionState = SessionState.AWAITING_ANSWER

    @property
    def is_over(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def won(self) -> bool:
        return self.state is SessionState.WON

    @property
    def active_row(self) -> Optional[int]:
        """Index of the single unlocked row, or None once the game is over."""
        if self.is_over or self.answer is None:
            return None
        return self.attempt

    def rows(self) -> List[RowView]:
        views = [RowView(a.index, a.guess, a.verdicts, a.locked) for a in self.attempts]
        if self.active_row is not None:
            views.append(RowView(self.active_row, (), (), False))
        return views
