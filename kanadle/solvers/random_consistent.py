"""
Random Consistent solver: any word that still agrees with the board,
chosen uniformly (seeded, so runs are reproducible).
"""

from __future__ import annotations

from kanadle.session import PuzzleSession
from .base import Solver, solver


@solver("random_consistent")
class RandomConsistentSolver(Solver):

    def next_guess(self, session: PuzzleSession) -> str:
        pool = self.candidates(session)
        if not pool:
            raise ValueError("no known word agrees with the board")
        return pool[self.rng.randrange(len(pool))]
