from __future__ import annotations
from typing import Dict, Iterable, List, Type

# ---- Global scanner registry ----
REGISTRY: Dict[str, Type["BaseScanner"]] = {}


def register(cls: Type["BaseScanner"]) -> Type["BaseScanner"]:
    """
    Decorator: @register on a scanner class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate scanner id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that scanners inherit ----
class BaseScanner:
    """
    A scanner answers "which corpus words are one step from this word?".

    prepare() is called once, on one thread, before any neighbors() call.
    After that the scanner is read-only, so neighbors() may be called from
    many worker threads at once.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.words: List[str] = []

    def prepare(self, words: Iterable[str]) -> None:
        self.words = list(words)

    def neighbors(self, word: str) -> List[str]:
        raise NotImplementedError("Override in subclass")
