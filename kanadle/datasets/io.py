"""
Word-list files.

Layout: one JSON file per leading Symbol inside a data directory,

    <data_dir>/katakana_data_<symbol>行.json

each holding an array of {"kana": "...", "word": "..."} records.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Iterable, List

from kanadle.config import settings
from kanadle.errors import LoadError
from .models import AnswerEntry

logger = logging.getLogger(__name__)

FILE_TEMPLATE = "katakana_data_{symbol}行.json"


def word_list_path(symbol: str, data_dir: Path | str | None = None) -> Path:
    return Path(data_dir or settings.DATA_DIR) / FILE_TEMPLATE.format(symbol=symbol)


def _parse_records(symbol: str, path: Path, data) -> List[AnswerEntry]:
    if not isinstance(data, list):
        raise LoadError(symbol, path, "top-level JSON value is not an array")
    entries: List[AnswerEntry] = []
    for i, rec in enumerate(data):
        if not isinstance(rec, dict) or not isinstance(rec.get("kana"), str):
            raise LoadError(symbol, path, f"record {i} has no string 'kana' field")
        entries.append(AnswerEntry(kana=rec["kana"].strip(), word=str(rec.get("word", ""))))
    return entries


def read_word_list(symbol: str, data_dir: Path | str | None = None) -> List[AnswerEntry]:
    """
    Read the word list for `symbol`.

    Raises LoadError if the file is missing, is not valid JSON, or has
    malformed records.
    """
    p = word_list_path(symbol, data_dir)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as e:
        raise LoadError(symbol, p, str(e)) from e
    return _parse_records(symbol, p, data)


async def load_word_list(symbol: str, data_dir: Path | str | None = None) -> List[AnswerEntry]:
    """Async wrapper around `read_word_list`; the file read runs in a worker thread."""
    entries = await asyncio.to_thread(read_word_list, symbol, data_dir)
    logger.debug("read %d entries for %s", len(entries), symbol)
    return entries


def write_word_list(entries: Iterable[AnswerEntry], symbol: str,
                    data_dir: Path | str | None = None) -> str:
    """Write entries as a JSON word list for `symbol`. Returns the path written."""
    p = word_list_path(symbol, data_dir)
    p.parent.mkdir(parents=True, exist_ok=True)
    records = [{"kana": e.kana, "word": e.word} for e in entries]
    p.write_text(json.dumps(records, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return str(p)
