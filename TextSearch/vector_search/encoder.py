"""
Encoding of documents and queries as vectors aligned to the vocabulary.
"""
from typing import Dict, Tuple

from ..build_vocabulary import Vocabulary
from ..preprocessing.tokenizer import Tokenizer


def encode_document(tf_table: Dict[str, float], vocabulary: Vocabulary) -> Tuple[float, ...]:
    """
    Encode a term frequency table as a document vector.

    Args:
        tf_table: Dictionary {word: relative frequency}
        vocabulary: Vocabulary of the index

    Returns:
        Vector with the frequency of each vocabulary term, 0.0 for absent terms
    """
    return tuple(tf_table.get(term, 0.0) for term in vocabulary)


def encode_query(text: str, vocabulary: Vocabulary, tokenizer: Tokenizer) -> Tuple[float, ...]:
    """
    Encode a query as a binary presence vector.

    Args:
        text: Raw query text
        vocabulary: Vocabulary of the index
        tokenizer: Tokenizer used when the index was built

    Returns:
        Vector with 1.0 for each vocabulary term present in the query, else 0.0
    """
    query_terms = set(tokenizer.tokenize(text))
    return tuple(1.0 if term in query_terms else 0.0 for term in vocabulary)
