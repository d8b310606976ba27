"""
Build progress reporting for the CLI apps.

Modes:
  - bar:   tqdm progress bar on stderr
  - plain: "\r[done/total] pct | elapsed | ETA" line, refreshed at most once a second
  - off:   nothing
  - auto:  bar when stderr is a TTY, else plain
"""

from __future__ import annotations

import sys
import time
from typing import Callable, List, Optional, Tuple

from tqdm import tqdm

from wordladder.builder.core import ProgressFn

PROGRESS_MODES = ["auto", "bar", "plain", "off"]


def progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def make_progress(mode: str, desc: str = "Building") -> Tuple[Optional[ProgressFn], Callable[[], None]]:
    """
    Return (callback, close). Pass the callback to build_graph(progress=...)
    and call close() once the build returns.
    """
    mode = progress_mode(mode)

    if mode == "bar":
        # created on the first callback, so runs served from a snapshot print nothing
        bars: List[tqdm] = []

        def _bar(done: int, total: int) -> None:
            if not bars:
                bars.append(tqdm(total=total, ncols=80, desc=desc, unit="word"))
            bars[0].update(1)

        def _close_bar() -> None:
            for bar in bars:
                bar.close()

        return _bar, _close_bar

    if mode == "plain":
        start = time.time()
        last_print = [0.0]

        def _plain(done: int, total: int) -> None:
            now = time.time()
            if (now - last_print[0] >= 1.0) or (done == total):
                elapsed = now - start
                rate = (done / elapsed) if elapsed > 0 else 0.0
                remaining = (total - done) / rate if rate > 0 else 0.0
                pct = 100.0 * done / max(1, total)
                sys.stderr.write(
                    f"\r[{desc}] {done}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print[0] = now

        def _close() -> None:
            sys.stderr.write("\n")
            sys.stderr.flush()

        return _plain, _close

    return None, lambda: None
