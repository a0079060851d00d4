import math
from typing import Sequence

from ..errors import DimensionMismatchError, EmptyVectorError


def is_zero_vector(vector: Sequence[float]) -> bool:
    return not any(vector)


def compute_cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector of the same length

    Returns:
        Cosine similarity score

    Raises:
        DimensionMismatchError: If the vectors differ in length
        EmptyVectorError: If either vector has zero magnitude
    """
    if len(vec1) != len(vec2):
        raise DimensionMismatchError(len(vec1), len(vec2))

    dot_product = sum(a * b for a, b in zip(vec1, vec2))

    magnitude1 = math.sqrt(sum(a ** 2 for a in vec1))
    magnitude2 = math.sqrt(sum(b ** 2 for b in vec2))

    if magnitude1 == 0 or magnitude2 == 0:
        raise EmptyVectorError("Cosine similarity is undefined for an all-zero vector")

    return dot_product / (magnitude1 * magnitude2)
