# apps/cli/run.py
"""
CLI entry point for kanadle self-play experiments.

This script:
  1) Validates the word lists (prints counts, playable answers, missing files).
  2) Plays a batch of sessions with a live progress indicator and writes:
       - CSV:  one row per locked attempt (guess, pattern, outcome)
       - JSON: manifest with config, word-list report and summary

Run from the repository root:
    python -m apps.cli.run --solver positional_freq --games 200 --data json
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from kanadle.config import settings
from kanadle.datasets import WordListCache, validate_wordlists, pretty_summary
from kanadle.errors import DataUnavailable
from kanadle.harness import run_batch, summarize, write_attempts_csv, write_manifest
from kanadle.harness.core import DEFAULT_MAX_TURNS
from kanadle.harness.io import run_id as make_run_id
from kanadle.log import setup_logging
from kanadle.solvers import available_solvers

logger = logging.getLogger("kanadle.cli.run")


def _plain_progress(total: int):
    start = time.time()
    last_print = [0.0]

    def report(idx: int) -> None:
        now = time.time()
        if (now - last_print[0] >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print[0] = now

    return report


def main():
    solver_choices = ", ".join(available_solvers())

    ap = argparse.ArgumentParser(description="kanadle — run solver self-play experiments")
    ap.add_argument("--solver", default="random_consistent", choices=available_solvers(),
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--games", type=int, default=100, help="number of sessions to play")
    ap.add_argument("--data", default=settings.DATA_DIR, help="word-list directory")
    ap.add_argument("--N", type=int, default=settings.WORD_LENGTH, help="word length in symbols")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="harness turn budget per game")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    setup_logging()

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.data, N=args.N)
    print(pretty_summary(rep))

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    bar = tqdm(total=args.games, ncols=80, desc=args.solver, unit="game") if mode == "bar" else None
    if bar is not None:
        progress = lambda idx: bar.update(1)  # noqa: E731
    elif mode == "plain":
        progress = _plain_progress(args.games)
    else:
        progress = None

    # 3) Play the batch
    cache = WordListCache(args.data)
    try:
        results = asyncio.run(run_batch(
            args.solver, cache, games=args.games, N=args.N,
            max_turns=args.max_turns, seed=args.seed, progress=progress,
        ))
    except DataUnavailable as e:
        logger.error("%s", e)
        print(f"No playable answers under {args.data}: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if bar is not None:
            bar.close()
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)
    print(f"win_rate={summary['win_rate']:.3f} mean={summary['mean']} "
          f"median={summary['median']} p90={summary['p90']} max={summary['max']}")

    # 4) Write outputs (CSV + manifest)
    run_id = make_run_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_attempts_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": args.solver,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
