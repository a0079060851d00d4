import logging
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from TextSearch.preprocessing.source import DocumentSource
from TextSearch.preprocessing.tokenizer import RegexSplitTokenizer, Tokenizer

logger = logging.getLogger(__name__)


class Vocabulary:
    """
    Sorted, deduplicated list of every term seen while indexing.
    The position of a term is the vector slot it occupies.
    """

    def __init__(self, terms: Iterable[str]):
        self._terms = tuple(sorted(set(terms)))
        self._positions = {term: i for i, term in enumerate(self._terms)}

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    def position(self, term: str) -> Optional[int]:
        """Vector slot of a term, or None if the term is not in the vocabulary."""
        return self._positions.get(term)

    def __contains__(self, term):
        return term in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self):
        return len(self._terms)

    def __getitem__(self, index):
        return self._terms[index]

    def __eq__(self, other):
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self):
        return f"Vocabulary({len(self._terms)} terms)"


def compute_term_frequencies(tokens: List[str]) -> Dict[str, float]:
    """
    Compute relative term frequencies of a token list.
    TF(t,d) = count(t,d) / len(d)

    Args:
        tokens: Tokens of one document, duplicates included

    Returns:
        Dictionary mapping each distinct token to its relative frequency;
        empty for a document without tokens
    """
    total = len(tokens)
    if total == 0:
        return {}

    counts = Counter(tokens)
    return {token: count / total for token, count in counts.items()}


class VocabularyBuilder:
    """Builds the shared vocabulary and per-document term frequency tables."""

    def __init__(self, tokenizer: Tokenizer = None):
        self.tokenizer = tokenizer or RegexSplitTokenizer()

    def build(self, source: DocumentSource) -> Tuple[Vocabulary, Dict[str, Dict[str, float]]]:
        """
        Tokenize every document of a source.

        Args:
            source: Document source to enumerate

        Returns:
            Tuple of (vocabulary, {document name: term frequency table}) with
            tables in source enumeration order

        Raises:
            SourceUnavailableError: If the source cannot be enumerated or read
        """
        terms = set()
        tables = {}

        for name, text in source.documents():
            tokens = self.tokenizer.tokenize(text)
            terms.update(tokens)

            if name in tables:
                logger.warning("Duplicate document name %r, keeping the last one", name)
                del tables[name]
            tables[name] = compute_term_frequencies(tokens)

            if not tokens:
                logger.debug("Document %r has no tokens", name)

        vocabulary = Vocabulary(terms)
        logger.info("Built vocabulary of %d terms from %d documents", len(vocabulary), len(tables))
        return vocabulary, tables
