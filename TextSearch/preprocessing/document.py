from typing import Sequence, Tuple

from ..vector_search.similarity import compute_cosine_similarity


class Document:
    """
    A named vector over the vocabulary.
    Used both for indexed documents (relative term frequencies) and for queries
    (binary term presence).
    """

    def __init__(self, name: str, vector: Sequence[float]):
        """
        Initialize a document.

        Args:
            name: File name of an indexed document, or the query text
            vector: One value per vocabulary term, in vocabulary order
        """
        self.name = name
        self.vector: Tuple[float, ...] = tuple(vector)

    def similarity(self, other: 'Document') -> float:
        """
        Cosine similarity between this document and another one.

        Raises:
            DimensionMismatchError: If the vectors differ in length
            EmptyVectorError: If either vector is all zeros
        """
        return compute_cosine_similarity(self.vector, other.vector)

    def __len__(self):
        return len(self.vector)

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self.name == other.name and self.vector == other.vector

    def __repr__(self):
        return f"Document(name={self.name!r}, dims={len(self.vector)})"
