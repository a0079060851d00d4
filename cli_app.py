#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
TextSearch - Enhanced CLI Interface
A rich command-line interface for the TextSearch vector space search engine
"""

import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn
from rich.table import Table

from TextSearch.config import load_config
from TextSearch.errors import TextSearchError
from TextSearch.vector_search.vector_search import VectorSearchEngine

# Initialize rich console
console = Console()


def setup_logging(level="WARNING"):
    """Route log records through the rich console"""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True
    )


class TextSearchCLI:
    def __init__(self, config_path: Optional[str] = None, extensions: Optional[List[str]] = None):
        """Initialize the CLI interface"""
        self.config = load_config(config_path)
        if extensions:
            self.config["source"]["extensions"] = extensions
        self.engine = VectorSearchEngine(config=self.config)
        self.documents_path = None

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]TextSearch[/bold blue] [yellow]Vector Space Search[/yellow]",
            border_style="blue",
            subtitle="Cosine similarity over term frequencies",
            width=80
        ))

    def load_documents(self, documents_path: str) -> bool:
        """Index every document of a directory"""
        console.print(f"Indexing documents from: [cyan]{escape(str(documents_path))}[/cyan]")

        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TimeElapsedColumn(),
                console=console
            ) as progress:
                task = progress.add_task("Building index...", total=None)
                self.engine.build_index(documents_path)
                progress.update(task, completed=True)

        except TextSearchError as e:
            console.print(f"[bold red]Error indexing documents:[/bold red] {escape(str(e))}")
            return False

        self.documents_path = documents_path
        console.print(
            f"[green]Indexed [bold]{len(self.engine)}[/bold] documents "
            f"with [bold]{len(self.engine.vocabulary)}[/bold] distinct words[/green]"
        )
        return True

    def search(self, query: str, top_k: Optional[int] = None) -> Optional[List[Tuple[str, float]]]:
        """Run a query, returning None when the search failed"""
        console.print(f"Executing search: '[cyan]{escape(query)}[/cyan]'")

        try:
            start_time = time.time()
            results = self.engine.search(query, top_k=top_k)
            execution_time = time.time() - start_time
        except TextSearchError as e:
            console.print(f"[bold red]Error during search:[/bold red] {escape(str(e))}")
            return None

        console.print(f"[green]Found {len(results)} documents in {execution_time:.6f} seconds[/green]")
        return results

    def display_results(self, query: str, results: List[Tuple[str, float]]):
        """Display search results in a formatted way"""
        if not results:
            console.print(f"[yellow]No results found for '{escape(query)}'.[/yellow]")
            return

        timestamp = time.strftime("%H:%M:%S")
        console.print(f"\n[bold cyan]SEARCH RESULTS [dim]({timestamp})[/dim]:[/bold cyan]")

        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=f"[bold]{len(results)} document(s) ranked by relevance[/bold]",
            title_style="yellow"
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Document", style="cyan bold")
        table.add_column("Score", style="yellow", width=10)

        for i, (name, score) in enumerate(results):
            # Highlight the row for the top result
            row_style = "on blue" if i == 0 else ""

            score_str = f"{score:.4f}"
            if score > 0.7:
                score_display = f"[bold green]{score_str}[/bold green]"
            elif score > 0.4:
                score_display = f"[yellow]{score_str}[/yellow]"
            else:
                score_display = f"[dim]{score_str}[/dim]"

            table.add_row(str(i + 1), escape(name), score_display, style=row_style)

        console.print(table)
        console.print("[dim]Tip: Higher scores indicate more relevant results.[/dim]")

    def prompt(self, text: str) -> Optional[str]:
        """Read a line of input, None once the input stream is closed"""
        try:
            return console.input(text)
        except EOFError:
            console.print()
            return None

    def interactive_mode(self, top_k: Optional[int] = None):
        """Run the application in interactive mode"""
        while True:
            console.rule("[bold blue]TextSearch[/bold blue]")

            if not self.engine.is_indexed:
                documents_path = self.prompt("\n[bold cyan]Enter path to documents directory: [/bold cyan]")
                if documents_path is None:
                    return
                if not documents_path:
                    console.print("[bold red]No document path provided. Exiting.[/bold red]")
                    return
                self.load_documents(documents_path)
                continue

            menu_table = Table(show_header=False, box=box.SIMPLE)
            menu_table.add_column("Option", style="dim")
            menu_table.add_column("Description", style="yellow")

            menu_table.add_row("1", "Search")
            menu_table.add_row("2", "Index another directory")
            menu_table.add_row("3", "Quit")

            console.print("\n[bold cyan]Available Actions:[/bold cyan]")
            console.print(menu_table)

            choice = self.prompt("\n[bold cyan]Enter choice (1-3): [/bold cyan]")
            if choice is None:
                break

            if choice == '3' or choice.lower() == 'quit':
                break

            if choice == '2':
                documents_path = self.prompt("\n[bold cyan]Enter path to documents directory: [/bold cyan]")
                if documents_path is None:
                    break
                if documents_path:
                    self.load_documents(documents_path)
                continue

            if choice != '1':
                console.print("[bold red]Invalid choice. Please enter a number between 1 and 3.[/bold red]")
                continue

            query = self.prompt("\nEnter search query: ")
            if query is None:
                break
            if not query.strip():
                console.print("[bold red]Empty query. Please try again.[/bold red]")
                continue

            results = self.search(query, top_k)
            if results is not None:
                self.display_results(query, results)


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description='TextSearch - vector space model search over plain-text documents'
    )
    parser.add_argument('--documents', help='Directory with documents to index')
    parser.add_argument('--query', help='Query string to search for')
    parser.add_argument('--top', type=int,
                        help='Number of top results to display (0 = all)')
    parser.add_argument('--extensions', nargs='*',
                        help='Only index files with these suffixes, e.g. .txt .md')
    parser.add_argument('--config', help='Path to a JSON configuration file')
    parser.add_argument('--interactive', action='store_true',
                        help='Run in interactive mode')
    parser.add_argument('--verbose', action='store_true',
                        help='Show debug logging')
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else "WARNING")

    cli = TextSearchCLI(config_path=args.config, extensions=args.extensions)
    if not args.verbose:
        logging.getLogger().setLevel(cli.config["logging"].get("level", "WARNING"))

    console.print("\n")
    console.rule("[bold blue]TextSearch[/bold blue]", style="blue")
    cli.print_header()
    console.rule(style="blue")

    if args.documents and not cli.load_documents(args.documents):
        sys.exit(1)

    # Run in interactive mode if specified or if there is nothing to query
    if args.interactive or not args.query:
        cli.interactive_mode(args.top)
        return

    if not cli.engine.is_indexed:
        console.print("[bold red]No documents indexed. Use --documents to select a directory.[/bold red]")
        sys.exit(1)

    console.rule("[bold yellow]Query Search[/bold yellow]", style="yellow")
    results = cli.search(args.query, args.top)
    if results is None:
        sys.exit(1)
    cli.display_results(args.query, results)


if __name__ == "__main__":
    main()
