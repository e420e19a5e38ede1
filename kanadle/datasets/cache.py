"""
WordListCache: per-session memo of word lists keyed by leading Symbol.

The first request for a symbol schedules one load task and stores it before
awaiting, so every later or concurrent request for the same symbol awaits
that same task. Callers await it through a shield: a caller that gives up
(timeout, cancellation) never cancels the shared load. Any failed load is
logged and memoized as an empty list.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional

from kanadle.errors import LoadError
from .io import load_word_list
from .models import AnswerEntry

logger = logging.getLogger(__name__)

Loader = Callable[[str], Awaitable[List[AnswerEntry]]]


class WordListCache:
    def __init__(self, data_dir: Path | str | None = None, loader: Optional[Loader] = None):
        self.data_dir = data_dir
        self._loader: Loader = loader or (lambda sym: load_word_list(sym, self.data_dir))
        self._tasks: Dict[str, asyncio.Task] = {}
        self.load_count = 0

    async def _load(self, symbol: str) -> List[AnswerEntry]:
        self.load_count += 1
        try:
            entries = await self._loader(symbol)
        except LoadError as e:
            logger.warning("%s", e)
            return []
        except Exception as e:
            # CancelledError is not an Exception and still propagates.
            logger.warning("failed to load word list for %r: %r", symbol, e)
            return []
        logger.info("Loaded %d words for %s", len(entries), symbol)
        return list(entries)

    async def get(self, symbol: str) -> List[AnswerEntry]:
        task = self._tasks.get(symbol)
        if task is None or task.cancelled():
            task = asyncio.ensure_future(self._load(symbol))
            self._tasks[symbol] = task
        return await asyncio.shield(task)

    async def contains(self, symbol: str, kana: str) -> bool:
        """True if `kana` appears verbatim in the list keyed by `symbol`."""
        return any(e.kana == kana for e in await self.get(symbol))

    async def load_all(self, symbols) -> Dict[str, List[AnswerEntry]]:
        symbols = list(symbols)
        lists = await asyncio.gather(*(self.get(s) for s in symbols))
        return dict(zip(symbols, lists))

    def cached_symbols(self) -> List[str]:
        return list(self._tasks)
