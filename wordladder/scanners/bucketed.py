"""
Length-bucketed scanner.

Strategy:
  - prepare() groups the corpus by word length, keeping input order inside
    each bucket.
  - neighbors() only scans the bucket of the word's own length, since words
    of any other length can never be one step away.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List
from .base import BaseScanner, register
from wordladder.engine.neighbors import one_step_neighbors


def bucket_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
    """Group words by length; order inside each bucket follows the input."""
    buckets: Dict[int, List[str]] = defaultdict(list)
    for w in words:
        buckets[len(w)].append(w)
    return dict(buckets)


@register
class BucketedScanner(BaseScanner):
    id = "bucketed"
    name = "Bucketed (scan same-length words only)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.buckets: Dict[int, List[str]] = {}

    def prepare(self, words: Iterable[str]) -> None:
        super().prepare(words)
        self.buckets = bucket_by_length(self.words)

    def neighbors(self, word: str) -> List[str]:
        return one_step_neighbors(word, self.buckets.get(len(word), ()))
