"""
Legal-transformation predicate for word ladders.

Two words are neighbors iff:
  - they are not the same word (exact, case-sensitive equality)
  - they have the same length
  - they differ in exactly ONE character position

Examples:
  is_one_step("cat", "cot") -> True
  is_one_step("cat", "cat") -> False   (no self-loops)
  is_one_step("cat", "dog") -> False
  is_one_step("cat", "cats") -> False
"""

from typing import Iterable, List


def is_one_step(w1: str, w2: str) -> bool:
    """
    Return True if `w2` is one letter away from `w1`.

    The position scan stops at the second mismatch; the answer is the same
    as a full scan.
    """
    if w1 == w2:
        return False
    if len(w1) != len(w2):
        return False

    diff = 0
    for a, b in zip(w1, w2):
        if a != b:
            diff += 1
            if diff > 1:
                return False
    return diff == 1


def one_step_neighbors(word: str, words: Iterable[str]) -> List[str]:
    """All words in `words` (input order, repeats kept) one step from `word`."""
    return [w for w in words if is_one_step(word, w)]
