"""
Document sources yielding (name, raw text) pairs for indexing.
"""
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from ..errors import SourceUnavailableError

logger = logging.getLogger(__name__)


class DocumentSource(ABC):
    @abstractmethod
    def documents(self) -> Iterator[Tuple[str, str]]:
        raise NotImplementedError()


class DirectorySource(DocumentSource):
    """
    Every regular file directly inside a directory is one document.
    Subdirectories are not descended into.
    """

    def __init__(self, path: Union[str, os.PathLike], extensions: Optional[Sequence[str]] = None,
                 encoding: str = "utf-8", errors: str = "replace"):
        """
        Initialize a directory source.

        Args:
            path: Directory containing the documents
            extensions: Optional file suffixes to accept (e.g. [".txt"]); empty means every file
            encoding: Text encoding of the files
            errors: Decode error policy passed to open()
        """
        self.path = os.fspath(path)
        self.extensions = tuple(ext.lower() for ext in extensions or ())
        self.encoding = encoding
        self.errors = errors

    def _accepts(self, name: str) -> bool:
        if not self.extensions:
            return True
        return name.lower().endswith(self.extensions)

    def documents(self) -> Iterator[Tuple[str, str]]:
        """
        Yield (file name, file content) pairs sorted by file name.

        Raises:
            SourceUnavailableError: If the directory cannot be listed or a file cannot be read
        """
        if not os.path.isdir(self.path):
            raise SourceUnavailableError(f"Document directory not found: {self.path}")

        try:
            names = sorted(os.listdir(self.path))
        except OSError as e:
            raise SourceUnavailableError(f"Cannot list {self.path}: {e}") from e

        for name in names:
            file_path = os.path.join(self.path, name)
            if not os.path.isfile(file_path):
                logger.debug("Skipping non-file entry %s", file_path)
                continue
            if not self._accepts(name):
                logger.debug("Skipping %s (extension filter)", file_path)
                continue

            try:
                with open(file_path, "r", encoding=self.encoding, errors=self.errors) as f:
                    text = f.read()
            except OSError as e:
                raise SourceUnavailableError(f"Cannot read {file_path}: {e}") from e

            yield name, text

    def __repr__(self):
        return f"DirectorySource({self.path!r})"


class InMemorySource(DocumentSource):
    """Documents given directly as (name, text) pairs or a name -> text mapping."""

    def __init__(self, documents: Union[Dict[str, str], Iterable[Tuple[str, str]]]):
        if isinstance(documents, dict):
            documents = documents.items()
        self._documents = [(name, text) for name, text in documents]

    def documents(self) -> Iterator[Tuple[str, str]]:
        return iter(self._documents)

    def __len__(self):
        return len(self._documents)
