# apps/cli/play.py
"""
Play kanadle in the terminal.

Type each guess in romaji (or hiragana); it is converted symbol by symbol
with the same rules a cell-based UI uses ("nn" for ん, "xtu" for っ).
Exact symbols show green, present ones yellow, absent ones gray.

Run from the repository root:
    python -m apps.cli.play --data json
"""

from __future__ import annotations

import argparse
import asyncio
import random
import sys

from kanadle.config import settings
from kanadle.datasets import WordListCache
from kanadle.engine import Verdict
from kanadle.errors import DataUnavailable
from kanadle.kana import transliterate
from kanadle.log import setup_logging
from kanadle.session import AttemptStatus, start_session, submit_guess

_COLORS = {
    Verdict.EXACT: "\033[30;102m",    # light green
    Verdict.PRESENT: "\033[30;103m",  # yellow
    Verdict.ABSENT: "\033[30;47m",    # light gray
}
_RESET = "\033[0m"


def render_row(guess, verdicts, color: bool = True) -> str:
    if not color:
        return " ".join(f"{s}{v.char}" for s, v in zip(guess, verdicts))
    return " ".join(f"{_COLORS[v]} {s} {_RESET}" for s, v in zip(guess, verdicts))


async def play(args) -> int:
    cache = WordListCache(args.data)
    rng = random.Random(args.seed)
    try:
        session = await start_session(cache, rng=rng, max_attempts=args.max_attempts)
    except DataUnavailable as e:
        print(f"Could not load a word list: {e}", file=sys.stderr)
        return 1

    color = sys.stdout.isatty() and not args.no_color
    print(f"{session.word_length}文字の言葉を当ててください。 (:q で終了)")

    while not session.is_over:
        try:
            raw = input(f"{session.attempt:>2}> ")
        except EOFError:
            print()
            return 0
        if raw.strip() == ":q":
            print(f"答えは「{session.answer.kana}({session.answer.word})」でした。")
            return 0

        try:
            guess = transliterate(raw)
        except ValueError:
            print("  ひらがなに変換できません")
            continue
        if len(guess) != session.word_length:
            print(f"  {session.word_length}文字で入力してください")
            continue

        result = await submit_guess(session, guess)
        if result.status is AttemptStatus.INVALID_WORD:
            print("  無効な単語です")
            continue

        print("    " + render_row(result.attempt.guess, result.attempt.verdicts, color))
        if result.status is AttemptStatus.WON:
            print(f"正解！答えは「{result.answer.kana}({result.answer.word})」でした！")
        elif result.status is AttemptStatus.LOST:
            print(f"残念！答えは「{result.answer.kana}({result.answer.word})」でした。")
    return 0


def main():
    ap = argparse.ArgumentParser(description="kanadle — guess the 4-kana word")
    ap.add_argument("--data", default=settings.DATA_DIR, help="word-list directory")
    ap.add_argument("--seed", type=int, help="RNG seed for answer selection")
    ap.add_argument("--max-attempts", type=int, default=settings.MAX_ATTEMPTS,
                    help="end the game after this many guesses (default: unlimited)")
    ap.add_argument("--no-color", action="store_true", help="print G/Y/- instead of colors")
    args = ap.parse_args()

    setup_logging()
    sys.exit(asyncio.run(play(args)))


if __name__ == "__main__":
    main()
