"""
Download a word list page and write a clean dictionary file.

What it does:
- Downloads the page (plain text or HTML).
- Parses visible text with BeautifulSoup (works for .txt too: no tags, same text).
- Captures alphabetic tokens, optionally only those of the requested length.
- Lowercases, de-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt \
        --length 4 --out data/words4.txt
"""

from __future__ import annotations

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup  # pip install beautifulsoup4 requests

WORD_RE = re.compile(r"\b[A-Za-z]+\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(html: str, length: int | None = None) -> list[str]:
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    words = [m.group(0).lower() for m in WORD_RE.finditer(text)]
    if length is not None:
        words = [w for w in words if len(w) == length]
    return unique_preserve_order(words)


def fetch_words(url: str, length: int | None = None) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, length)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for wordladder")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/words.txt")
    ap.add_argument("--length", type=int, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length)
    if args.sort:
        words = sorted(words)

    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} unique words -> {args.out}")

if __name__ == "__main__":
    main()
