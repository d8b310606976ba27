"""
Neighbor scanners used by the graph builder.

A scanner indexes the corpus once (prepare) and then answers, for one word at
a time, which corpus words are one letter away. build_graph picks one by id:

  - linear:     full-corpus scan, the reference result
  - bucketed:   scan only words of the same length
  - vectorized: numpy row comparison per length bucket (default)

Every scanner must give the same neighbor lists, in corpus order.
"""

from __future__ import annotations
from typing import List
from .base import BaseScanner, REGISTRY, register

from . import linear  # noqa: F401
from . import bucketed  # noqa: F401
from . import vectorized  # noqa: F401


def create_scanner(scanner_id: str) -> BaseScanner:
    """
    Instantiate an (unprepared) scanner by id; the builder calls prepare()
    on it with the word list before handing neighbors() to the thread pool.
    """
    try:
        cls = REGISTRY[scanner_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown scanner id: {scanner_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_scanner_ids() -> List[str]:
    """Scanner ids for the CLIs' --scanner choices (sorted)."""
    return sorted(REGISTRY.keys())
