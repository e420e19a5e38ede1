"""
Dataset validator for kanadle word lists.

What this module does:
- Check every expected word-list file in a data directory (one per leading
  Symbol that can start an answer).
- Enforce record rules: a 'kana' string made only of input Symbols, starting
  with the file's own leading Symbol, non-empty 'word'.
- Count entries of the game's word length (the playable answers), detect
  duplicates and invalid records, compute SHA-256 of the raw files.
- Return a machine-readable dict (for manifests) and a pretty one-liner.

Typical use:
    from kanadle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("json", N=4)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Sequence
import hashlib
import json

from kanadle.kana import is_symbol, leading_symbols
from .io import word_list_path


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    symbol: str           # leading Symbol this file is keyed by
    path: str
    exists: bool
    count: int            # valid records
    playable: int         # valid records with exactly N symbols
    sha256: str           # SHA-256 of raw bytes (empty if missing)
    unique_count: int     # unique kana among valid records
    invalid_records: int  # malformed records (or 1 if the file doesn't parse)
    misplaced: int        # records whose first symbol is not `symbol`


@dataclass
class ValidationReport:
    """Top-level validation result for a whole data directory."""
    N: int
    data_dir: str
    files: List[FileReport] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    playable_total: int = 0
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_file(symbol: str, path: Path, N: int) -> FileReport:
    if not path.exists():
        return FileReport(symbol, str(path), False, 0, 0, "", 0, 0, 0)

    sha = _sha256_file(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError:
        return FileReport(symbol, str(path), True, 0, 0, sha, 0, 1, 0)
    if not isinstance(data, list):
        return FileReport(symbol, str(path), True, 0, 0, sha, 0, 1, 0)

    valid: List[str] = []
    invalid = 0
    misplaced = 0
    for rec in data:
        kana = rec.get("kana") if isinstance(rec, dict) else None
        word = rec.get("word") if isinstance(rec, dict) else None
        if not isinstance(kana, str) or not kana or not word \
                or not all(is_symbol(s) for s in kana):
            invalid += 1
            continue
        if kana[0] != symbol:
            misplaced += 1
            continue
        valid.append(kana)

    return FileReport(
        symbol=symbol,
        path=str(path),
        exists=True,
        count=len(valid),
        playable=sum(1 for k in valid if len(k) == N),
        sha256=sha,
        unique_count=len(set(valid)),
        invalid_records=invalid,
        misplaced=misplaced,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(data_dir: str, N: int = 4,
                       symbols: Sequence[str] | None = None) -> Dict:
    """
    Validate the word lists under `data_dir`.

    Parameters
    ----------
    data_dir : str
        Directory holding katakana_data_<symbol>行.json files.
    N : int
        Word length of a playable answer (4 for the game).
    symbols : sequence of str, optional
        Leading Symbols to check; defaults to every symbol an answer may start with.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` requires at least one
        playable answer, no invalid or misplaced records and no duplicates.
        Missing files are reported but do not fail validation: the game
        retries with another symbol when a list is unavailable.
    """
    symbols = list(symbols) if symbols is not None else list(leading_symbols())
    rep = ValidationReport(N=N, data_dir=str(data_dir))

    for sym in symbols:
        fr = _check_file(sym, word_list_path(sym, data_dir), N)
        rep.files.append(fr)
        if not fr.exists:
            rep.missing.append(sym)
            continue
        if fr.invalid_records:
            rep.issues.append(f"{sym}: {fr.invalid_records} invalid record(s)")
        if fr.misplaced:
            rep.issues.append(f"{sym}: {fr.misplaced} record(s) start with another symbol")
        if fr.count != fr.unique_count:
            rep.issues.append(f"{sym}: duplicate kana entries")

    rep.playable_total = sum(fr.playable for fr in rep.files)
    if rep.missing:
        # Surface a few examples (limit to 5 for brevity)
        rep.issues.append(f"{len(rep.missing)} word list(s) missing (e.g., {rep.missing[:5]})")
    if rep.playable_total == 0:
        rep.issues.append(f"no playable {N}-symbol answers found")

    rep.passed = rep.playable_total > 0 and not any(
        fr.invalid_records or fr.misplaced or fr.count != fr.unique_count
        for fr in rep.files
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        N=4 | files=68/68 | words=51234 (playable=9876) | missing=0 | OK
    """
    files = report["files"]
    present = sum(1 for f in files if f["exists"])
    words = sum(f["count"] for f in files)
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | files={present}/{len(files)} "
        f"| words={words} (playable={report['playable_total']}) "
        f"| missing={len(report['missing'])} | {status}"
    )
