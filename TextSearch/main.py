import argparse
import logging
import sys
from typing import List, Optional, Tuple

from TextSearch.config import load_config
from TextSearch.errors import TextSearchError
from TextSearch.vector_search.vector_search import VectorSearchEngine


class TextSearchApp:
    """
    Plain console interface around the vector search engine.
    Keeps the engine usable across queries; errors are reported, never fatal.
    """
    def __init__(self, config_path: Optional[str] = None, extensions: Optional[List[str]] = None):
        self.config = load_config(config_path)
        if extensions:
            self.config["source"]["extensions"] = extensions
        self.engine = VectorSearchEngine(config=self.config)

    def load_documents(self, documents_path: str) -> bool:
        """
        Index the documents of a directory.

        Args:
            documents_path: Directory with plain-text documents

        Returns:
            bool: True if indexing was successful, False otherwise
        """
        print(f"Indexing documents from: {documents_path}")
        try:
            self.engine.build_index(documents_path)
        except TextSearchError as e:
            print(f"Error indexing documents: {e}")
            return False

        print(f"Indexed {len(self.engine)} documents, {len(self.engine.vocabulary)} distinct words.")
        return True

    def search(self, query: str, top_k: Optional[int] = None) -> Optional[List[Tuple[str, float]]]:
        """
        Run a query.

        Args:
            query: Free-text query string
            top_k: Maximum number of results to return

        Returns:
            List of (document name, score) tuples, or None if the search failed
        """
        try:
            return self.engine.search(query, top_k=top_k)
        except TextSearchError as e:
            print(f"Error during search: {e}")
            return None


def format_results(query: str, results: List[Tuple[str, float]]) -> List[str]:
    """Render search results as output lines."""
    if not results:
        return ["No results found."]

    lines = [f"Results for query '{query}':"]
    for i, (name, score) in enumerate(results, 1):
        lines.append(f"{i}. {name} - relevance {score:.4f}")
    return lines


def display_results(query: str, results: List[Tuple[str, float]]):
    """Display search results"""
    for line in format_results(query, results):
        print(line)


def main(argv: Optional[List[str]] = None):
    # Parse command-line arguments
    parser = argparse.ArgumentParser(
        description='TextSearch - vector space model search over plain-text documents'
    )
    parser.add_argument('--documents', required=True, help='Directory with documents to index')
    parser.add_argument('--query', help='Query string to search for')
    parser.add_argument('--top', type=int, help='Number of top results to display (0 = all)')
    parser.add_argument('--extensions', nargs='*', help='Only index files with these suffixes')
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--interactive', action='store_true', help='Run in interactive mode')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging')
    args = parser.parse_args(argv)

    retriever = TextSearchApp(config_path=args.config, extensions=args.extensions)

    level = logging.DEBUG if args.verbose else retriever.config["logging"].get("level", "WARNING")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not retriever.load_documents(args.documents):
        sys.exit(1)

    if args.query:
        results = retriever.search(args.query, args.top)
        if results is None:
            sys.exit(1)
        display_results(args.query, results)

    # Interactive mode
    if args.interactive or not args.query:
        print("\nTextSearch Interactive Mode")
        print("Type 'quit' to exit")

        while True:
            try:
                query = input("\nEnter search query: ")
            except EOFError:
                break

            if query.lower() == 'quit':
                break
            if not query.strip():
                print("Empty query. Please try again.")
                continue

            results = retriever.search(query, args.top)
            if results is not None:
                display_results(query, results)


if __name__ == "__main__":
    main()
