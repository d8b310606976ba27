from .neighbors import is_one_step, one_step_neighbors
from .search import find_path, format_path, NeighborMap
from .errors import WordLadderError, InvalidInputError, SourceUnavailableError, PersistenceError

__all__ = [
    "is_one_step", "one_step_neighbors", "find_path", "format_path", "NeighborMap",
    "WordLadderError", "InvalidInputError", "SourceUnavailableError", "PersistenceError",
]
