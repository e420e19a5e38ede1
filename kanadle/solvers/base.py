"""
Solvers play a PuzzleSession: they read the locked attempts on the board and
propose the next kana word from a fixed pool of known words.
"""

from __future__ import annotations

import random
from typing import Callable, Dict, List, Sequence, Set, Type

from kanadle.engine import filter_candidates
from kanadle.session import PuzzleSession

_SOLVERS: Dict[str, Type["Solver"]] = {}


def solver(solver_id: str) -> Callable[[Type["Solver"]], Type["Solver"]]:
    """Class decorator registering a Solver subclass under `solver_id`."""
    def wrap(cls: Type["Solver"]) -> Type["Solver"]:
        if solver_id in _SOLVERS:
            raise ValueError(f"solver {solver_id!r} registered twice")
        cls.id = solver_id
        _SOLVERS[solver_id] = cls
        return cls
    return wrap


def available_solvers() -> List[str]:
    return sorted(_SOLVERS)


def create_solver(solver_id: str, words: Sequence[str], seed: int | None = None) -> "Solver":
    cls = _SOLVERS.get(solver_id)
    if cls is None:
        raise ValueError(f"unknown solver {solver_id!r}; choose from "
                         f"{', '.join(available_solvers())}")
    return cls(words, seed=seed)


class Solver:
    id = "base"

    def __init__(self, words: Sequence[str], seed: int | None = None):
        self.words: List[str] = list(words)
        self.rng = random.Random(seed)
        # Words the session refused; they stay invalid whatever the answer is.
        self.rejected: Set[str] = set()

    def reject(self, kana: str) -> None:
        self.rejected.add(kana)

    def candidates(self, session: PuzzleSession) -> List[str]:
        """Known words still consistent with every locked attempt of `session`."""
        pool = [w for w in self.words if w not in self.rejected]
        return filter_candidates(pool, session.attempts, session.word_length)

    def next_guess(self, session: PuzzleSession) -> str:
        raise NotImplementedError
