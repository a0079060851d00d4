"""
Vector space model search engine.
Documents are encoded as relative term frequency vectors over a shared vocabulary
and ranked against binary query vectors by cosine similarity.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from ..build_vocabulary import Vocabulary, VocabularyBuilder
from ..config import REINDEX_POLICIES, resolve_config
from ..errors import AlreadyIndexedError, NotIndexedError
from ..interface import SearchEngine
from ..preprocessing.document import Document
from ..preprocessing.source import DirectorySource, DocumentSource
from ..preprocessing.tokenizer import RegexSplitTokenizer
from .encoder import encode_document, encode_query
from .similarity import is_zero_vector

logger = logging.getLogger(__name__)


class VectorSearchEngine(SearchEngine):
    """Cosine similarity search engine over term frequency vectors"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the search engine.

        Args:
            config: Configuration dictionary; missing keys fall back to defaults,
                None loads the packaged config.json
        """
        self.config = resolve_config(config)

        search_config = self.config["search"]
        self.reindex_policy = search_config.get("reindex", "replace")
        if self.reindex_policy not in REINDEX_POLICIES:
            raise ValueError(
                f"Unknown reindex policy {self.reindex_policy!r}, expected one of {REINDEX_POLICIES}"
            )
        self.default_top_k = search_config.get("top_k", 0)

        self.tokenizer = RegexSplitTokenizer(
            keep_empty_tokens=self.config["tokenizer"].get("keep_empty_tokens", False)
        )

        self._vocabulary: Optional[Vocabulary] = None
        self._documents: List[Document] = []

    @property
    def is_indexed(self) -> bool:
        return self._vocabulary is not None

    @property
    def vocabulary(self) -> Vocabulary:
        if self._vocabulary is None:
            raise NotIndexedError("Index has not been built yet")
        return self._vocabulary

    @property
    def document_names(self) -> Tuple[str, ...]:
        return tuple(document.name for document in self._documents)

    def __len__(self):
        return len(self._documents)

    def _make_source(self, source) -> DocumentSource:
        if isinstance(source, DocumentSource):
            return source

        source_config = self.config["source"]
        return DirectorySource(
            source,
            extensions=source_config.get("extensions"),
            encoding=source_config.get("encoding", "utf-8"),
            errors=source_config.get("errors", "replace")
        )

    def build_index(self, source) -> None:
        """
        Build the index from a document source.

        Args:
            source: Directory path or DocumentSource instance

        Raises:
            SourceUnavailableError: If the documents cannot be read
            AlreadyIndexedError: If an index exists and re-indexing is rejected
        """
        if self.is_indexed and self.reindex_policy == "reject":
            raise AlreadyIndexedError("Index already built and re-indexing is disabled")

        document_source = self._make_source(source)
        builder = VocabularyBuilder(self.tokenizer)
        vocabulary, tf_tables = builder.build(document_source)

        documents = [
            Document(name, encode_document(tf_table, vocabulary))
            for name, tf_table in tf_tables.items()
        ]

        # Swap only once the new index is complete
        if self.is_indexed:
            logger.info("Replacing index of %d documents", len(self._documents))
        self._vocabulary = vocabulary
        self._documents = documents
        logger.info("Indexed %d documents from %s", len(documents), document_source)

    def search(self, query: str, top_k: Optional[int] = None) -> List[Tuple[str, float]]:
        """
        Search for documents matching the query.

        Args:
            query: Free-text query string
            top_k: Maximum number of results; None uses the configured default,
                0 or less means unlimited

        Returns:
            List of (document name, similarity score) tuples with score > 0,
            sorted by descending score; empty if no query term is in the vocabulary

        Raises:
            NotIndexedError: If build_index() has not been called
        """
        if not self.is_indexed:
            raise NotIndexedError("Call build_index() before searching")

        request = Document(query, encode_query(query, self._vocabulary, self.tokenizer))
        if is_zero_vector(request.vector):
            logger.debug("No term of query %r is in the vocabulary", query)
            return []

        return self._rank_documents(request, self.default_top_k if top_k is None else top_k)

    def _rank_documents(self, request: Document, top_k: int) -> List[Tuple[str, float]]:
        """
        Rank indexed documents by similarity to a query vector.

        Args:
            request: Encoded query
            top_k: Number of top results to return, 0 or less for all

        Returns:
            List of (document name, similarity score) tuples
        """
        similarities = []

        for document in self._documents:
            if is_zero_vector(document.vector):
                continue
            similarity = request.similarity(document)
            if similarity > 0:
                similarities.append((document.name, similarity))

        # Stable sort keeps index order for equal scores
        similarities.sort(key=lambda x: x[1], reverse=True)
        logger.debug("Query %r matched %d documents", request.name, len(similarities))

        if top_k and top_k > 0:
            return similarities[:top_k]
        return similarities

