"""
Candidate filtering given the locked attempts of a session.

A word is still a possible answer iff evaluating each past guess against it
reproduces exactly the verdicts that guess received. Solvers use this to
keep proposing words that agree with the board.

Attempts are anything with `.guess` (Symbols) and `.verdicts`, normally
`kanadle.session.Attempt`.
"""

from typing import Iterable, List

from .scoring import evaluate


def is_consistent(word: str, attempts: Iterable) -> bool:
    return all(tuple(evaluate(word, a.guess)) == tuple(a.verdicts) for a in attempts)


def filter_candidates(words: Iterable[str], attempts: Iterable, N: int) -> List[str]:
    """Words of N symbols consistent with every attempt, in input order."""
    attempts = list(attempts)
    return [w for w in words if len(w) == N and is_consistent(w, attempts)]
