# apps/cli/run.py
"""
CLI entry point: find one word ladder.

This script:
  1) Loads the neighbor graph from a snapshot, or builds it from a word list
     (optionally saving a snapshot for next time).
  2) Finds the shortest ladder between --start and --end.
  3) Prints the ladder ("cold -> cord -> card -> ward -> warm") and the time taken.

Exit codes:
  0  ladder found
  1  no ladder (or a word is not in the dictionary)
  2  bad input (different lengths, unreadable word list, corrupt snapshot)

Usage:
    python -m apps.cli.run --words data/words.txt --start cold --end warm
    python -m apps.cli.run --snapshot reports/graph.wlad --start code --end band
"""

from __future__ import annotations

import argparse
import logging
import time

from wordladder.builder import DEFAULT_WORKERS, DEFAULT_SCANNER
from wordladder.engine import find_path, format_path, WordLadderError
from wordladder.harness import load_or_build
from wordladder.harness.progress import make_progress, PROGRESS_MODES
from wordladder.scanners import get_scanner_ids

DEFAULT_SNAPSHOT = "reports/graph.wlad"

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordladder: find the shortest word ladder")
    ap.add_argument("--start", required=True, help="first word of the ladder")
    ap.add_argument("--end", required=True, help="last word of the ladder")
    ap.add_argument("--words", help="word list, one word per line (used when no snapshot)")
    ap.add_argument("--snapshot", default=DEFAULT_SNAPSHOT,
                    help="graph snapshot to load (and to write with --save)")
    ap.add_argument("--rebuild", action="store_true",
                    help="ignore an existing snapshot and rebuild from --words")
    ap.add_argument("--save", action="store_true", help="save the built graph to --snapshot")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help="build thread pool size")
    ap.add_argument("--scanner", default=DEFAULT_SCANNER, choices=get_scanner_ids(),
                    help="neighbor scanning strategy used while building")
    ap.add_argument("--progress", choices=PROGRESS_MODES, default="auto",
                    help="Show build progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, get the graph, search, print. Returns the exit code.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    callback, close = make_progress(args.progress)
    try:
        graph, origin = load_or_build(
            words_path=args.words,
            snapshot_path=args.snapshot,
            rebuild=args.rebuild,
            save=args.save,
            workers=args.workers,
            scanner=args.scanner,
            progress=callback,
        )
    except (WordLadderError, ValueError) as e:
        print(f"error: {e}")
        return EXIT_BAD_INPUT
    finally:
        close()

    t0 = time.perf_counter_ns()
    try:
        path = find_path(graph, args.start, args.end)
    except WordLadderError as e:
        print(f"error: {e}")
        return EXIT_BAD_INPUT
    t1 = time.perf_counter_ns()

    print(format_path(path))
    print(f"Time taken: {(t1 - t0) / 1_000_000.0:.3f}ms (graph: {origin}, {len(graph)} words)")
    return EXIT_FOUND if path is not None else EXIT_NOT_FOUND


if __name__ == "__main__":
    raise SystemExit(main())
