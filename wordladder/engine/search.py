"""
Shortest word ladder via breadth-first search.

The search expands whole paths rather than single nodes:
  - the queue holds partial paths (start ... frontier word)
  - a word is marked visited the moment it is ENQUEUED, so only the first
    path discovered to any word is ever extended
  - the first path that reaches `end` is returned, which is a shortest one

Tie-breaks between equally short ladders follow the neighbor-list order
stored in the map plus FIFO expansion; the result is deterministic for a
given map but which of several shortest ladders is chosen is not part of
the contract.

Each call owns its queue and visited set, so any number of threads can
search the same (read-only) map at once.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Mapping, Optional, Sequence, Set

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

NeighborMap = Mapping[str, Sequence[str]]

NO_PATH_MESSAGE = "No path found!"


def find_path(neighbor_map: NeighborMap, start: str, end: str) -> Optional[List[str]]:
    """
    Return the shortest ladder from `start` to `end`, or None if none exists.

    Raises:
        InvalidInputError: if the words have different lengths.

    Notes:
        - A word missing from the map (start or end) means None, not an error.
        - start == end (and present) gives the one-word ladder [start].
        - Neighbors that are absent from the map or map to [] are dead ends.
    """
    if len(start) != len(end):
        raise InvalidInputError(
            f"words must be the same length: {start!r} ({len(start)}) vs {end!r} ({len(end)})"
        )

    if start not in neighbor_map or end not in neighbor_map:
        logger.debug(f"{start!r} or {end!r} not in graph")
        return None

    if start == end:
        return [start]

    visited: Set[str] = {start}
    queue: Deque[List[str]] = deque([[start]])

    while queue:
        path = queue.popleft()
        current = path[-1]

        for child in neighbor_map.get(current, ()):
            if child in visited:
                continue
            visited.add(child)
            new_path = path + [child]
            if child == end:
                logger.debug(f"ladder {start!r} -> {end!r}: {len(new_path) - 1} step(s), "
                             f"{len(visited)} word(s) visited")
                return new_path
            queue.append(new_path)

    logger.debug(f"no ladder {start!r} -> {end!r} after visiting {len(visited)} word(s)")
    return None


def format_path(path: Optional[Sequence[str]]) -> str:
    """
    Render a ladder as "cat -> cot -> dot -> dog".
    None renders as NO_PATH_MESSAGE.
    """
    if path is None:
        return NO_PATH_MESSAGE
    return " -> ".join(path)
