"""
Linear scanner.

Strategy:
  - Compare the word against EVERY word of the corpus with is_one_step.
  - O(n * L) per word, O(n^2 * L) for a whole build.

Notes:
  - Reference behavior; the other scanners must return exactly what this one
    returns (same words, same order, repeats kept).
"""

from __future__ import annotations

from typing import List
from .base import BaseScanner, register
from wordladder.engine.neighbors import one_step_neighbors


@register
class LinearScanner(BaseScanner):
    id = "linear"
    name = "Linear (full corpus scan)"
    version = "1.0.0"

    def neighbors(self, word: str) -> List[str]:
        return one_step_neighbors(word, self.words)
