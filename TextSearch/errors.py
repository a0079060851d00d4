"""
Exceptions raised by the TextSearch core.
None of them terminate the process; presentation layers decide how to report them.
"""


class TextSearchError(Exception):
    """Base class for all TextSearch errors."""


class SourceUnavailableError(TextSearchError):
    """The document source could not be enumerated or read."""


class NotIndexedError(TextSearchError):
    """A search was requested before any index was built."""


class AlreadyIndexedError(TextSearchError):
    """A second index build was requested while re-indexing is rejected."""


class DimensionMismatchError(TextSearchError):
    """Two vectors of different length were compared."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Vector lengths differ: {left} != {right}")
        self.left = left
        self.right = right


class EmptyVectorError(TextSearchError):
    """Cosine similarity was requested for an all-zero vector."""
