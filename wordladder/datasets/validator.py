"""
Word-list validator for wordladder.

What this module does:
- Inspect a single word list (one word per line) before a graph is built.
- Count words, unique words and blank lines; compute the SHA-256 of the raw file.
- Build a histogram of word lengths (ladders only ever connect same-length words).
- Flag words containing internal whitespace (almost always a formatting bug).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordladder.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.txt")
    print(pretty_summary(rep))

Duplicates are reported but are not a failure: the graph builder keeps them.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str                 # file path (as given)
    exists: bool              # did the file exist on disk?
    count: int                # number of non-blank words
    unique_count: int         # distinct words
    blank_lines: int          # empty/whitespace-only lines
    invalid_lines: int        # words with internal whitespace
    sha256: str               # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int] = field(default_factory=dict)   # word length -> count
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a word list file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema). `passed` is
        strict: the file must exist, decode as UTF-8, hold at least one word and
        contain no words with internal whitespace.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, 0, 0, 0, 0, "",
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    issues: List[str] = []
    words: List[str] = []
    blank = 0
    invalid = 0
    readable = True

    try:
        with p.open("r", encoding="utf-8") as f:
            for raw in f:
                w = raw.strip()
                if not w:
                    blank += 1
                    continue
                if any(ch.isspace() for ch in w):
                    invalid += 1
                    continue
                words.append(w)
    except UnicodeDecodeError as e:
        readable = False
        issues.append(f"word list is not valid UTF-8: {e}")
    except OSError as e:
        readable = False
        issues.append(f"cannot read word list: {e}")

    lengths = Counter(len(w) for w in words)
    unique_count = len(set(words))

    if not words:
        issues.append("word list contains 0 words")
    if invalid:
        issues.append(f"word list has {invalid} line(s) with internal whitespace")
    if blank:
        issues.append(f"word list has {blank} blank line(s)")
    if unique_count != len(words):
        issues.append(f"word list contains {len(words) - unique_count} duplicate line(s)")

    # Blank lines and duplicates are tolerated by the loader; they are only reported.
    passed = readable and bool(words) and invalid == 0

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique_count,
        blank_lines=blank,
        invalid_lines=invalid,
        sha256=_sha256_file(p) if readable else "",
        lengths=dict(sorted(lengths.items())),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=5757 (uniq=5757, sha=abc123def456) | lengths=5:5757 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    lengths = ",".join(f"{k}:{v}" for k, v in report.get("lengths", {}).items()) or "-"
    return (
        f"words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| lengths={lengths} | {status}"
    )
