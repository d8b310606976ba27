"""
Parallel construction of the word-adjacency graph (NeighborMap).

- build_graph: for every word, the ordered list of corpus words one letter
  away from it, computed on a bounded thread pool.

How the work is split:
  - one task per distinct word; each task is a pure function of
    (word, prepared scanner) and never reads another task's output
  - results come back through futures and are written into the map by the
    calling thread only (single collector, no locks around the map)
  - the executor's context manager waits for every task before the map is
    returned, so callers never see a partial graph

Result shape:
  - keys follow first-occurrence order of the input, values follow corpus
    order (repeats kept when the corpus repeats a word)
  - every distinct word gets a key; words without neighbors map to []
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Sequence

from wordladder.scanners import create_scanner

logger = logging.getLogger(__name__)

# Pool size is a tunable constant, never derived from the input size.
DEFAULT_WORKERS = 8

DEFAULT_SCANNER = "vectorized"

ProgressFn = Callable[[int, int], None]


def _is_well_formed(words: Sequence) -> bool:
    """All items must be str (no bytes/str mixes, no None)."""
    return all(isinstance(w, str) for w in words)


def _unique_preserve_order(words: Sequence[str]) -> List[str]:
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def build_graph(
        words: Sequence[str],
        *,
        workers: int = DEFAULT_WORKERS,
        scanner: str = DEFAULT_SCANNER,
        progress: Optional[ProgressFn] = None,
) -> Dict[str, List[str]]:
    """
    Build the NeighborMap for `words`.

    Args:
        words:    ordered corpus; duplicates are NOT removed from neighbor lists
        workers:  thread pool size (must be >= 1)
        scanner:  scanner id (see wordladder.scanners.get_scanner_ids())
        progress: optional callback(done, total), called from this thread

    Returns:
        dict word -> list of neighbor words. Best-effort: an empty corpus or
        a corpus with non-str items gives {} (logged), never an exception.

    Raises:
        ValueError: workers < 1 or unknown scanner id.
        Any exception raised inside a task propagates; no partial graph.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")

    words = list(words)
    if not words:
        logger.warning("empty word list; returning empty graph")
        return {}
    if not _is_well_formed(words):
        logger.warning("word list contains non-str items; returning empty graph")
        return {}

    t0 = time.perf_counter()
    sc = create_scanner(scanner)
    sc.prepare(words)

    keys = _unique_preserve_order(words)
    total = len(keys)
    graph: Dict[str, List[str]] = {}

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordladder-build") as pool:
        # map() yields results in submission order, so the map's key order is
        # deterministic whatever order the workers finish in.
        for done, (word, neighbours) in enumerate(
                zip(keys, pool.map(sc.neighbors, keys)), start=1):
            graph[word] = neighbours
            if progress is not None:
                progress(done, total)

    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    edges = sum(len(v) for v in graph.values())
    logger.info(f"built graph: {total} words, {edges} edges, scanner={scanner}, "
                f"workers={workers}, {elapsed_ms:.1f} ms")
    return graph
