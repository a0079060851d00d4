"""
TextSearch - vector space model search over a directory of plain-text documents.
Documents are ranked against free-text queries by cosine similarity of term-frequency vectors.
"""
from .errors import (
    TextSearchError,
    SourceUnavailableError,
    NotIndexedError,
    AlreadyIndexedError,
    DimensionMismatchError,
    EmptyVectorError
)
from .vector_search.vector_search import VectorSearchEngine

__version__ = "0.1.0"
