# apps/cli/run_multi.py
"""
Run many ladder queries in one shot against a single graph.

Reads a pairs file ("start end" per line), runs every query, and writes:
    <outdir>/run_<timestamp>.csv + run_<timestamp>_manifest.json
"""

from __future__ import annotations
import argparse, logging
from pathlib import Path

from wordladder.builder import DEFAULT_WORKERS, DEFAULT_SCANNER
from wordladder.datasets import validate_wordlist, pretty_summary
from wordladder.engine import WordLadderError
from wordladder.harness import load_or_build, run_batch, read_pairs, write_csv, write_manifest
from wordladder.harness.io import timestamp_id, git_commit_or_unknown
from wordladder.harness.progress import make_progress, PROGRESS_MODES
from wordladder.scanners import get_scanner_ids


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordladder: run a batch of ladder queries")
    ap.add_argument("--pairs", required=True, help="file of 'start end' lines")
    ap.add_argument("--words", help="word list (used when no snapshot)")
    ap.add_argument("--snapshot", default="reports/graph.wlad")
    ap.add_argument("--rebuild", action="store_true")
    ap.add_argument("--save", action="store_true")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    ap.add_argument("--scanner", default=DEFAULT_SCANNER, choices=get_scanner_ids())
    ap.add_argument("--sample", type=int, help="run only the first K pairs")
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=PROGRESS_MODES, default="auto")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) word list summary (only meaningful when we may build from it)
    rep = None
    if args.words:
        rep = validate_wordlist(args.words)
        print(pretty_summary(rep))

    # 2) graph + queries
    callback, close = make_progress(args.progress)
    try:
        graph, origin = load_or_build(
            words_path=args.words, snapshot_path=args.snapshot, rebuild=args.rebuild,
            save=args.save, workers=args.workers, scanner=args.scanner, progress=callback,
        )
    except (WordLadderError, ValueError) as e:
        print(f"error: {e}")
        return 2
    finally:
        close()

    try:
        pairs = read_pairs(args.pairs)
    except (WordLadderError, ValueError) as e:
        print(f"error: {e}")
        return 2

    results = run_batch(graph, pairs, sample=args.sample)

    # 3) outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "graph": {"origin": origin, "words": len(graph)},
        "wordlist": rep,
        "num_queries": len(results),
        "num_found": sum(1 for r in results if r["found"]),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"{manifest['num_found']}/{len(results)} ladders found")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
