"""
Prepare a dictionary file for wordladder.

The ladder engine takes words exactly as given (case-sensitive, duplicates
kept), so any clean-up happens here, before the graph is built.

Features:
- Keep only words of the requested length(s) (--lengths 4 5).
- Optional lowercasing (treat 'Cold' == 'cold').
- Optional alphabetic-only filter (drops "o'clock", "x-ray", digits).
- Stable dedupe by default; --keep-duplicates to skip it.
- Optional sorting AFTER filtering; otherwise keep input order.

Usage:
    python -m script.prepare_wordlist --in /usr/share/dict/words \
        --out data/words4.txt --lengths 4 --lower --alpha-only
"""

import argparse
from pathlib import Path

from wordladder.datasets.io import read_lines, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def prepare(lines: list[str], *, lengths=None, lower=False, alpha_only=False,
            dedupe=True, sort=False) -> list[str]:
    words = [s.strip() for s in lines if s.strip()]
    if lower:
        words = [w.lower() for w in words]
    if alpha_only:
        words = [w for w in words if w.isalpha()]
    if lengths:
        keep = set(lengths)
        words = [w for w in words if len(w) in keep]
    if dedupe:
        words = unique_preserve_order(words)
    if sort:
        words = sorted(words)
    return words


def main(argv=None):
    ap = argparse.ArgumentParser(description="Filter and clean a word list for wordladder.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", required=True, help="output .txt file")
    ap.add_argument("--lengths", type=int, nargs="*", help="word lengths to keep (default: all)")
    ap.add_argument("--lower", action="store_true", help="lowercase every word")
    ap.add_argument("--alpha-only", action="store_true", help="drop words with non-letters")
    ap.add_argument("--keep-duplicates", action="store_true", help="do not dedupe")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after filtering")
    args = ap.parse_args(argv)

    lines = read_lines(Path(args.inp))
    out = prepare(lines, lengths=args.lengths, lower=args.lower, alpha_only=args.alpha_only,
                  dedupe=not args.keep_duplicates, sort=args.sort)
    write_lines(out, args.out)
    print(f"Input: {args.inp} ({len(lines)} lines) -> Output: {args.out} ({len(out)} words)")


if __name__ == "__main__":
    main()
