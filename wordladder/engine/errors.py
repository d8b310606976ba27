"""
Error taxonomy for wordladder.

  - InvalidInputError:      caller broke the contract (start/end lengths differ)
  - SourceUnavailableError: the word list could not be read
  - PersistenceError:       a snapshot is corrupt, has the wrong version, or
                            could not be written

"No path" is NOT an error: find_path returns None for it.
"""


class WordLadderError(Exception):
    """Base class for every error raised by wordladder."""


class InvalidInputError(WordLadderError, ValueError):
    pass


class SourceUnavailableError(WordLadderError, OSError):
    pass


class PersistenceError(WordLadderError):
    pass
