"""
Word source: read and write line-delimited word lists.

A word list that cannot be read is an error (SourceUnavailableError), never
an empty list; building a graph from a silently truncated corpus would give
wrong ladders with no warning.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from wordladder.engine.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises SourceUnavailableError if the file is missing, unreadable or not UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise SourceUnavailableError(f"word list not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(f"cannot read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Load a word list: one word per line, surrounding whitespace trimmed,
    blank lines dropped. Order and duplicates are kept; case is untouched.
    """
    words = [ln.strip() for ln in read_lines(p) if ln.strip()]
    logger.info(f"loaded {len(words)} words from {p}")
    return words


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
