"""
Query harness primitives.

- run_query: find one ladder and time it.
- run_batch: run many (start, end) queries in sequence (optionally a sample prefix).
- timed:     context manager logging how long a phase took.
- load_or_build: NeighborMap from a snapshot, or built from a word list.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Tuple

from wordladder.builder import build_graph, DEFAULT_WORKERS, DEFAULT_SCANNER
from wordladder.builder.core import ProgressFn
from wordladder.datasets.io import load_words
from wordladder.engine import find_path, InvalidInputError, NeighborMap
from wordladder.store import load_map, save_map

logger = logging.getLogger(__name__)


@contextmanager
def timed(label: str) -> Iterator[Dict[str, float]]:
    """
    Time a block; the elapsed milliseconds are logged at INFO and left in
    the yielded dict under "ms".

        with timed("build") as t:
            graph = build_graph(words)
        print(t["ms"])
    """
    out: Dict[str, float] = {"ms": 0.0}
    t0 = time.perf_counter()
    try:
        yield out
    finally:
        out["ms"] = (time.perf_counter() - t0) * 1000.0
        logger.info(f"{label}: {out['ms']:.1f} ms")


def run_query(neighbor_map: NeighborMap, start: str, end: str) -> Dict:
    """
    Find a ladder from `start` to `end` and record the outcome.

    Returns:
        dict with keys:
            start, end, found (bool), path (list[str] | None),
            steps (edge count or None), time_ms (float),
            error (str | None; set when the words have different lengths)
    """
    error = None
    path = None
    t0 = time.perf_counter_ns()
    try:
        path = find_path(neighbor_map, start, end)
    except InvalidInputError as e:
        # Recorded per row so one bad pair does not abort a whole batch.
        logger.warning(f"invalid query {start!r} -> {end!r}: {e}")
        error = str(e)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "start": start,
        "end": end,
        "found": path is not None,
        "path": path,
        "steps": None if path is None else len(path) - 1,
        "time_ms": dt,
        "error": error,
    }


def run_batch(
        neighbor_map: NeighborMap,
        pairs: Iterable[Tuple[str, str]],
        *,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many queries back-to-back. If 'sample' is provided, only the first K
    pairs are used to speed up quick experiments.
    """
    pool = list(pairs)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = [run_query(neighbor_map, s, e) for s, e in pool]
    found = sum(1 for r in out if r["found"])
    logger.info(f"batch: {len(out)} queries, {found} found")
    return out


def load_or_build(
        *,
        words_path: str | None,
        snapshot_path: str | None,
        rebuild: bool = False,
        save: bool = False,
        workers: int = DEFAULT_WORKERS,
        scanner: str = DEFAULT_SCANNER,
        progress: ProgressFn | None = None,
) -> Tuple[Dict[str, List[str]], str]:
    """
    Get a NeighborMap for a run.

    Order of preference:
      1) the snapshot at `snapshot_path` (unless `rebuild`)
      2) a fresh build from `words_path`, saved to `snapshot_path` if `save`

    Returns:
        (neighbor_map, origin) where origin is "snapshot" or "built".

    Raises:
        ValueError:             neither a usable snapshot nor a word list.
        SourceUnavailableError: the word list cannot be read.
        PersistenceError:       the snapshot is corrupt or cannot be written.
    """
    if snapshot_path and not rebuild:
        graph = load_map(snapshot_path)
        if graph is not None:
            if words_path:
                logger.warning(f"using existing snapshot {snapshot_path}; word list {words_path} "
                               f"ignored{', save skipped' if save else ''}; rebuild to replace it")
            return graph, "snapshot"

    if not words_path:
        raise ValueError("no snapshot available and no word list given")

    words = load_words(words_path)
    graph = build_graph(words, workers=workers, scanner=scanner, progress=progress)

    if save and snapshot_path:
        save_map(graph, snapshot_path)
    return graph, "built"
