"""
Positional Symbol Frequency.

Count, per position, how often each symbol appears among the words still
consistent with the board, and guess the word whose symbols are most common
at their positions. Repeated symbols in a guess are penalized a little so
early guesses cover more of the alphabet. Ties are broken by the seeded rng.
"""

from __future__ import annotations

from collections import Counter
from typing import List

from kanadle.session import PuzzleSession
from .base import Solver, solver


@solver("positional_freq")
class PositionalFreqSolver(Solver):
    DUPLICATE_PENALTY = 0.25

    def _score(self, word: str, columns: List[Counter]) -> float:
        total = sum(columns[i][sym] for i, sym in enumerate(word))
        return total - self.DUPLICATE_PENALTY * (len(word) - len(set(word)))

    def next_guess(self, session: PuzzleSession) -> str:
        pool = self.candidates(session)
        if not pool:
            raise ValueError("no known word agrees with the board")

        columns = [Counter(w[i] for w in pool) for i in range(session.word_length)]
        scores = [self._score(w, columns) for w in pool]
        top = max(scores)
        best = [w for w, s in zip(pool, scores) if s == top]
        return best[self.rng.randrange(len(best))]
