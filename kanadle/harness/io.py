"""
Reports for self-play runs: a CSV with one row per locked attempt, and a
JSON manifest. Kana is written as-is (UTF-8, no \\u escapes).
"""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable

from kanadle.engine import Verdict
from .core import GameRecord

ATTEMPT_FIELDS = ["game", "solver", "answer", "word", "row", "guess", "pattern",
                  "exact", "present", "outcome"]


def run_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def attempt_rows(record: GameRecord) -> Iterable[Dict]:
    session = record.session
    for a in session.attempts:
        yield {
            "game": record.game,
            "solver": record.solver_id,
            "answer": session.answer.kana,
            "word": session.answer.word,
            "row": a.index,
            "guess": a.kana,
            # leading apostrophe keeps spreadsheets from reading "-G--" as a formula
            "pattern": "'" + a.pattern,
            "exact": a.verdicts.count(Verdict.EXACT),
            "present": a.verdicts.count(Verdict.PRESENT),
            "outcome": session.state.value,
        }


def write_attempts_csv(records: Iterable[GameRecord], path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=ATTEMPT_FIELDS)
        w.writeheader()
        for record in records:
            w.writerows(attempt_rows(record))
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return str(p)
