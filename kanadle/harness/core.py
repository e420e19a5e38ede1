"""
Self-play harness.

- collect_words: the guess pool, every playable word of every answer list.
- run_case:      let a solver play one PuzzleSession.
- run_batch:     start and play many sessions from one WordListCache.
- summarize:     numpy summary of a batch (win rate, guess distribution).

The game itself has no attempt cap, so the harness enforces its own turn
budget (`max_turns`) to keep a weak solver from looping forever.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from kanadle.datasets import WordListCache
from kanadle.kana import leading_symbols
from kanadle.session import PuzzleSession, start_session, submit_guess
from kanadle.solvers import Solver, create_solver

DEFAULT_MAX_TURNS = 20


@dataclass
class GameRecord:
    """One finished (or abandoned) self-play game."""
    game: int
    solver_id: str
    session: PuzzleSession
    invalid: int = 0
    time_ms: float = 0.0

    @property
    def won(self) -> bool:
        return self.session.won

    @property
    def guesses(self) -> int:
        return len(self.session.attempts)


async def collect_words(cache: WordListCache, N: int) -> List[str]:
    lists = await cache.load_all(leading_symbols())
    return sorted({e.kana for entries in lists.values() for e in entries if len(e) == N})


async def run_case(solver: Solver, session: PuzzleSession, *, game: int = 1,
                   max_turns: int = DEFAULT_MAX_TURNS) -> GameRecord:
    record = GameRecord(game=game, solver_id=solver.id, session=session)
    t0 = time.perf_counter()
    for _ in range(max_turns):
        if session.is_over:
            break
        guess = solver.next_guess(session)
        result = await submit_guess(session, guess)
        if not result.accepted:
            solver.reject(guess)
            record.invalid += 1
    record.time_ms = (time.perf_counter() - t0) * 1000.0
    return record


async def run_batch(
        solver_id: str,
        cache: WordListCache,
        *,
        games: int,
        N: int = 4,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
        progress: Optional[Callable[[int], None]] = None,
) -> List[GameRecord]:
    """
    Play `games` sessions with one solver instance. Answer selection and the
    solver's tie-breaks are both seeded from `seed`, so a batch is
    reproducible. `progress`, if given, is called with the game number after
    every game.
    """
    words = await collect_words(cache, N)
    player = create_solver(solver_id, words, seed=seed)
    rng = random.Random(seed)

    records: List[GameRecord] = []
    for game in range(1, games + 1):
        session = await start_session(cache, rng=rng, word_length=N)
        records.append(await run_case(player, session, game=game, max_turns=max_turns))
        if progress is not None:
            progress(game)
    return records


def summarize(records: List[GameRecord]) -> Dict:
    """Win rate plus guess statistics over the games that were won."""
    if not records:
        return {"games": 0, "win_rate": 0.0, "mean": None, "median": None, "p90": None,
                "max": None, "distribution": {}}

    won = np.array([r.won for r in records], dtype=bool)
    guesses = np.array([r.guesses for r in records], dtype=int)[won]

    distribution: Dict[int, int] = {}
    if guesses.size:
        values, counts = np.unique(guesses, return_counts=True)
        distribution = {int(v): int(c) for v, c in zip(values, counts)}

    return {
        "games": len(records),
        "win_rate": float(won.mean()),
        "mean": float(guesses.mean()) if guesses.size else None,
        "median": float(np.median(guesses)) if guesses.size else None,
        "p90": float(np.percentile(guesses, 90)) if guesses.size else None,
        "max": int(guesses.max()) if guesses.size else None,
        "distribution": distribution,
    }
