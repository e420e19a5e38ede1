"""
Puzzle session operations: start a game, validate and submit guesses.

All three are coroutines because word lists load lazily through the
session's WordListCache. Failed operations never touch session state.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Sequence

from kanadle.config import settings
from kanadle.datasets import AnswerEntry, WordListCache
from kanadle.engine import evaluate, is_well_formed
from kanadle.errors import DataUnavailable, InvalidWord, SessionOver
from kanadle.kana import EXCLUDED_LEADING, SYMBOLS
from .state import Attempt, AttemptResult, AttemptStatus, PuzzleSession, SessionState

logger = logging.getLogger(__name__)


def _as_symbols(candidate: Sequence[str] | str) -> tuple:
    # a joined kana string splits into one Symbol per character
    return tuple(candidate)


async def pick_answer(cache: WordListCache, symbol: str, N: int,
                      rng: random.Random) -> AnswerEntry:
    """
    Choose an answer uniformly from the list keyed by `symbol`.

    Raises DataUnavailable if the list is empty, failed to load, or has no
    word of N symbols.
    """
    entries = [e for e in await cache.get(symbol) if len(e) == N]
    if not entries:
        raise DataUnavailable(symbol)
    return entries[rng.randrange(len(entries))]


async def start_session(
        cache: WordListCache,
        *,
        exclude: Iterable[str] = EXCLUDED_LEADING,
        rng: Optional[random.Random] = None,
        word_length: Optional[int] = None,
        max_attempts: Optional[int] = None,
        retries: Optional[int] = None,
) -> PuzzleSession:
    """
    Start a new game: pick a random leading Symbol outside `exclude` (the
    reserved symbols are always excluded), then a random answer from that
    symbol's word list.

    An unavailable list is retried with another, not yet tried, symbol up to
    `retries` times (Settings.START_RETRIES by default; None tries every
    eligible symbol once).

    Raises:
      DataUnavailable when no answer could be found within the retry budget.
    """
    rng = rng or random.Random()
    N = word_length or settings.WORD_LENGTH
    retries = settings.START_RETRIES if retries is None else retries
    excluded = EXCLUDED_LEADING | frozenset(exclude)
    pool = [s for s in SYMBOLS if s not in excluded]

    session = PuzzleSession(cache=cache, word_length=N,
                            max_attempts=max_attempts if max_attempts is not None
                            else settings.MAX_ATTEMPTS)

    tried = []
    budget = len(pool) if retries is None else retries + 1
    for _ in range(budget):
        remaining = [s for s in pool if s not in tried]
        if not remaining:
            break
        symbol = remaining[rng.randrange(len(remaining))]
        tried.append(symbol)
        try:
            answer = await pick_answer(cache, symbol, N, rng)
        except DataUnavailable:
            logger.warning("No answer available for %s, picking another symbol", symbol)
            continue
        session.answer = answer
        session.state = SessionState.IN_PROGRESS
        logger.info("Session started with leading symbol %s", symbol)
        logger.debug("Answer selected: %s (%s)", answer.kana, answer.word)
        return session

    raise DataUnavailable(message=f"no answer available after trying {len(tried)} "
                                  f"symbol(s): {''.join(tried)}")


async def validate_guess(session: PuzzleSession, candidate: Sequence[str] | str) -> bool:
    """
    A guess is valid iff it is well formed and appears verbatim in the word
    list keyed by the guess's own leading Symbol (not the answer's).
    """
    symbols = _as_symbols(candidate)
    if not is_well_formed(symbols, session.word_length):
        return False
    return await session.cache.contains(symbols[0], "".join(symbols))


async def require_valid(session: PuzzleSession, candidate: Sequence[str] | str) -> None:
    """Like `validate_guess` but raises InvalidWord."""
    if not await validate_guess(session, candidate):
        raise InvalidWord("".join(_as_symbols(candidate)))


async def submit_guess(session: PuzzleSession, candidate: Sequence[str] | str) -> AttemptResult:
    """
    Evaluate and record one guess.

    Returns an AttemptResult whose status is INVALID_WORD (nothing changed),
    WON, LOST (attempt cap reached) or CONTINUING (next row is open).

    Raises:
      SessionOver if the session already ended.
      DataUnavailable if the session has no answer yet.
    """
    if session.is_over:
        raise SessionOver(f"session already {session.state.value}")
    if session.answer is None:
        raise DataUnavailable(message="session has no answer; call start_session first")

    symbols = _as_symbols(candidate)
    if not await validate_guess(session, symbols):
        logger.warning("Received an invalid answer: %s", "".join(symbols))
        return AttemptResult(AttemptStatus.INVALID_WORD)

    verdicts = tuple(evaluate(session.answer.symbols, symbols))
    record = Attempt(index=session.attempt, guess=symbols, verdicts=verdicts)
    session.attempts.append(record)

    if record.kana == session.answer.kana:
        session.state = SessionState.WON
        logger.info("Solved %s in %d attempt(s)", session.answer.kana, record.index)
        return AttemptResult(AttemptStatus.WON, record, session.answer)

    if session.max_attempts is not None and record.index >= session.max_attempts:
        session.state = SessionState.LOST
        logger.info("Out of attempts; answer was %s", session.answer.kana)
        return AttemptResult(AttemptStatus.LOST, record, session.answer)

    session.attempt += 1
    session.state = SessionState.IN_PROGRESS
    return AttemptResult(AttemptStatus.CONTINUING, record)
