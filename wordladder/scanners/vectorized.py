"""
Vectorized scanner (numpy), the default for graph builds.

Main idea:
  - Bucket the corpus by length (like the bucketed scanner).
  - Store each bucket as an (n_words, L) uint32 matrix of code points.
  - One word's scan is a single row comparison:
        mismatches = (bucket != row).sum(axis=1)
    and its neighbors are the rows where mismatches == 1.

Identical words have 0 mismatches, so self-loops (and duplicates of the word
itself) are excluded exactly as the predicate excludes them. np.flatnonzero
returns indices in ascending order, which keeps the input order of the
corpus.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np

from .base import BaseScanner, register
from .bucketed import bucket_by_length


def _encode(words: List[str], L: int) -> np.ndarray:
    """Code-point matrix of shape (len(words), L)."""
    if not words:
        return np.zeros((0, L), dtype=np.uint32)
    return np.array([[ord(ch) for ch in w] for w in words], dtype=np.uint32).reshape(len(words), L)


@register
class VectorizedScanner(BaseScanner):
    id = "vectorized"
    name = "Vectorized (numpy row comparison per length bucket)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.buckets: Dict[int, List[str]] = {}
        self.matrices: Dict[int, np.ndarray] = {}
        # word -> row of its first occurrence inside its bucket
        self.rows: Dict[str, int] = {}

    def prepare(self, words: Iterable[str]) -> None:
        super().prepare(words)
        self.buckets = bucket_by_length(self.words)
        self.matrices = {L: _encode(bucket, L) for L, bucket in self.buckets.items()}
        self.rows = {}
        for bucket in self.buckets.values():
            for i, w in enumerate(bucket):
                self.rows.setdefault(w, i)

    def neighbors(self, word: str) -> List[str]:
        L = len(word)
        bucket = self.buckets.get(L)
        if not bucket or L == 0:
            return []

        mat = self.matrices[L]
        row = self.rows.get(word)
        target = mat[row] if row is not None else _encode([word], L)[0]

        mismatches = (mat != target).sum(axis=1)
        return [bucket[i] for i in np.flatnonzero(mismatches == 1)]
