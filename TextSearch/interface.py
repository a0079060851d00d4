from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class SearchEngine(ABC):
    @abstractmethod
    def build_index(self, source) -> None:
        raise NotImplementedError()

    @abstractmethod
    def search(self, query: str, top_k: Optional[int] = None) -> List[Tuple[str, float]]:
        raise NotImplementedError()
