"""
Clean up one kanadle word-list file.

Features:
- Removes duplicate kana entries, keeping the first (stable dedupe).
- Drops records whose first symbol doesn't match the file's leading symbol.
- Optional --only-playable keeps just the N-symbol words.
- Optional sorting AFTER dedupe (by kana); otherwise keep input order.
- Overwrite in place by default, or write into a separate --out-dir.

Usage:
    python -m script.dedupe_wordlist --symbol さ --data json --sort
"""

import argparse

from kanadle.datasets import read_word_list, write_word_list, word_list_path


def unique_preserve_order(entries, key=None):
    seen, out = set(), []
    for e in entries:
        k = key(e) if key else e
        if k not in seen:
            seen.add(k)
            out.append(e)
    return out


def main():
    ap = argparse.ArgumentParser(description="Remove duplicate and misplaced word-list records.")
    ap.add_argument("--symbol", required=True, help="leading symbol of the file to clean")
    ap.add_argument("--data", default="json", help="word-list directory")
    ap.add_argument("--out-dir", help="output directory (default: overwrite input)")
    ap.add_argument("--only-playable", type=int, metavar="N",
                    help="keep only words with exactly N symbols")
    ap.add_argument("--sort", action="store_true", help="sort by kana after dedupe")
    args = ap.parse_args()

    entries = read_word_list(args.symbol, args.data)
    kept = [e for e in entries if e.leading == args.symbol]
    if args.only_playable:
        kept = [e for e in kept if len(e) == args.only_playable]

    out = unique_preserve_order(kept, key=lambda e: e.kana)
    if args.sort:
        out = sorted(out, key=lambda e: e.kana)

    outp = write_word_list(out, args.symbol, args.out_dir or args.data)
    print(f"Input: {word_list_path(args.symbol, args.data)} ({len(entries)} records) "
          f"→ Output: {outp} ({len(out)} kept)")


if __name__ == "__main__":
    main()
