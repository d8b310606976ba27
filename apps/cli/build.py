# apps/cli/build.py
"""
Build the neighbor graph from a word list and save it as a snapshot.

This script:
  1) Validates the word list (counts, lengths, SHA) and prints a one-liner.
  2) Builds the graph on a thread pool with a live progress indicator.
  3) Saves a versioned snapshot that apps.cli.run can load instead of rebuilding.

Usage:
    python -m apps.cli.build --words data/words.txt --out reports/graph.wlad
"""

from __future__ import annotations

import argparse
import logging

from wordladder.builder import build_graph, DEFAULT_WORKERS, DEFAULT_SCANNER
from wordladder.datasets import validate_wordlist, pretty_summary, load_words
from wordladder.engine import WordLadderError
from wordladder.harness import timed
from wordladder.harness.progress import make_progress, PROGRESS_MODES
from wordladder.scanners import get_scanner_ids
from wordladder.store import save_map, snapshot_info


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordladder: build and save the neighbor graph")
    ap.add_argument("--words", required=True, help="word list, one word per line")
    ap.add_argument("--out", default="reports/graph.wlad", help="snapshot path to write")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="build thread pool size")
    ap.add_argument("--scanner", default=DEFAULT_SCANNER, choices=get_scanner_ids())
    ap.add_argument("--strict", action="store_true",
                    help="refuse to build when word list validation fails")
    ap.add_argument("--progress", choices=PROGRESS_MODES, default="auto")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate and summarize
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if args.strict and not rep["passed"]:
        print("Validation failed; fix the word list before building.")
        return 2

    # 2) Build
    callback, close = make_progress(args.progress)
    try:
        words = load_words(args.words)
        with timed("build") as t:
            graph = build_graph(words, workers=args.workers, scanner=args.scanner,
                                progress=callback)
    except WordLadderError as e:
        print(f"error: {e}")
        return 2
    finally:
        close()

    # 3) Save
    try:
        save_map(graph, args.out)
        info = snapshot_info(args.out)
    except WordLadderError as e:
        print(f"error: {e}")
        return 2

    print(f"Built {info['words']} words / {info['edges']} edges in {t['ms']:.0f}ms")
    print(f"Wrote: {args.out} ({info['bytes']} bytes, v{info['version']})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
