"""
I/O utilities for ladder runs.

Responsibilities:
- read_pairs:     parse a "start end" per line query file.
- write_csv:      flatten per-query results into a tidy CSV (one row per query).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv
import json
import subprocess
import datetime as dt

from wordladder.datasets.io import read_lines


def read_pairs(path: Path | str) -> List[Tuple[str, str]]:
    """
    Read query pairs, one "start end" per line. Blank lines and lines starting
    with '#' are skipped. Raises ValueError on a line without exactly two words.
    """
    pairs: List[Tuple[str, str]] = []
    for lineno, ln in enumerate(read_lines(path), start=1):
        s = ln.strip()
        if not s or s.startswith("#"):
            continue
        parts = s.split()
        if len(parts) != 2:
            raise ValueError(f"{path}:{lineno}: expected 'start end', got {s!r}")
        pairs.append((parts[0], parts[1]))
    return pairs


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of query results to CSV.

    Schema (columns):
      start, end, found, steps, time_ms, path, error

    `path` is the ladder joined with spaces (empty when not found).
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["start", "end", "found", "steps", "time_ms", "path", "error"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            w.writerow({
                "start": r["start"],
                "end": r["end"],
                "found": r["found"],
                "steps": "" if r["steps"] is None else r["steps"],
                "time_ms": round(float(r["time_ms"]), 3),
                "path": " ".join(r["path"] or []),
                "error": r.get("error") or "",
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words, snapshot, workers, scanner, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_queries, num_found
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
