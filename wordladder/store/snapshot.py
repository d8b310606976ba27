"""
NeighborMap snapshots: save a built graph, load it back instead of rebuilding.

Layout (version 1, all integers big-endian unsigned):

    magic      4 bytes   b"WLAD"
    version    u16       SNAPSHOT_VERSION
    entries    u32       number of keys
    entries x:
        key        u32 byte length + UTF-8 bytes (surrogatepass, so any str round-trips)
        neighbors  u32 count, then count x (u32 byte length + UTF-8 bytes)
    digest     32 bytes  SHA-256 of everything above

Round trips are exact: same keys, same neighbor lists, same order.
"""

from __future__ import annotations

import hashlib
import logging
import os
import struct
import tempfile
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from wordladder.engine.errors import PersistenceError

logger = logging.getLogger(__name__)

MAGIC = b"WLAD"
SNAPSHOT_VERSION = 1

_HEADER = struct.Struct(">4sHI")
_U32 = struct.Struct(">I")
_DIGEST_LEN = hashlib.sha256().digest_size


def _pack_str(s: str) -> bytes:
    b = s.encode("utf-8", "surrogatepass")
    return _U32.pack(len(b)) + b


def encode_map(neighbor_map: Mapping[str, Sequence[str]]) -> bytes:
    """Serialize a NeighborMap to snapshot bytes (digest included)."""
    parts: List[bytes] = [_HEADER.pack(MAGIC, SNAPSHOT_VERSION, len(neighbor_map))]
    for word, neighbours in neighbor_map.items():
        parts.append(_pack_str(word))
        parts.append(_U32.pack(len(neighbours)))
        parts.extend(_pack_str(n) for n in neighbours)
    body = b"".join(parts)
    return body + hashlib.sha256(body).digest()


class _Reader:
    """Cursor over the snapshot body; every read is bounds-checked."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    def u32(self) -> int:
        (v,) = _U32.unpack_from(self.data, self.offset)
        self.offset += _U32.size
        return v

    def text(self) -> str:
        n = self.u32()
        end = self.offset + n
        if end > len(self.data):
            raise PersistenceError("snapshot truncated inside a word")
        s = self.data[self.offset:end].decode("utf-8", "surrogatepass")
        self.offset = end
        return s


def _parse_header(data: bytes) -> Tuple[int, int]:
    if len(data) < _HEADER.size + _DIGEST_LEN:
        raise PersistenceError("snapshot too short")
    magic, version, entries = _HEADER.unpack_from(data, 0)
    if magic != MAGIC:
        raise PersistenceError(f"not a wordladder snapshot (magic={magic!r})")
    if version != SNAPSHOT_VERSION:
        raise PersistenceError(
            f"unsupported snapshot version {version}; expected {SNAPSHOT_VERSION}")
    return version, entries


def decode_map(data: bytes) -> Dict[str, List[str]]:
    """
    Parse snapshot bytes back into a NeighborMap.
    Raises PersistenceError on bad magic, version, digest or structure.
    """
    _, entries = _parse_header(data)

    body, digest = data[:-_DIGEST_LEN], data[-_DIGEST_LEN:]
    if hashlib.sha256(body).digest() != digest:
        raise PersistenceError("snapshot checksum mismatch (file is corrupt)")

    reader = _Reader(body, _HEADER.size)
    out: Dict[str, List[str]] = {}
    try:
        for _ in range(entries):
            word = reader.text()
            count = reader.u32()
            out[word] = [reader.text() for _ in range(count)]
    except (struct.error, UnicodeDecodeError) as e:
        raise PersistenceError(f"malformed snapshot: {e}") from e

    if reader.offset != len(body):
        raise PersistenceError(
            f"malformed snapshot: {len(body) - reader.offset} trailing byte(s)")
    return out


def save_map(neighbor_map: Mapping[str, Sequence[str]], path: Path | str) -> str:
    """
    Write a snapshot atomically (temp file in the same directory, then rename).
    Returns the string path written. Raises PersistenceError on I/O failure.
    """
    p = Path(path)
    data = encode_map(neighbor_map)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=p.name + ".", suffix=".tmp", dir=str(p.parent))
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp, p)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
    except OSError as e:
        raise PersistenceError(f"cannot write snapshot {p}: {e}") from e

    logger.info(f"saved snapshot {p} ({len(neighbor_map)} words, {len(data)} bytes)")
    return str(p)


def load_map(path: Path | str) -> Optional[Dict[str, List[str]]]:
    """
    Load a snapshot. Returns None if the file does not exist (nothing saved yet);
    raises PersistenceError if it exists but cannot be read or parsed.
    """
    p = Path(path)
    if not p.exists():
        logger.debug(f"no snapshot at {p}")
        return None
    try:
        data = p.read_bytes()
    except OSError as e:
        raise PersistenceError(f"cannot read snapshot {p}: {e}") from e

    graph = decode_map(data)
    logger.info(f"loaded snapshot {p} ({len(graph)} words)")
    return graph


def snapshot_info(path: Path | str) -> Dict:
    """Version, word count and edge count of a snapshot on disk."""
    graph = load_map(path)
    if graph is None:
        raise PersistenceError(f"snapshot not found: {path}")
    return {
        "path": str(path),
        "version": SNAPSHOT_VERSION,
        "words": len(graph),
        "edges": sum(len(v) for v in graph.values()),
        "bytes": Path(path).stat().st_size,
    }
