import argparse
import sys
import time

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from LittleSearch.build_inverted_index import InvertedIndexBuilder
from LittleSearch.config import load_config
from LittleSearch.top5_search.parser import QuerySyntaxError
from LittleSearch.top5_search.top5_search import NO_RESULTS, Top5SearchEngine

console = Console()


class LittleSearch:
    """
    Builds the keyword index from files on disk and runs top-5 searches over it.
    """
    def __init__(self, config=None):
        self.config = config if config is not None else load_config()
        self.builder = InvertedIndexBuilder(config=self.config)
        self.engine = None

    def make_index(self, docs_file: str, noise_words_file: str) -> bool:
        """
        Index all documents listed in docs_file.

        Returns:
            bool: True if indexing was successful, False otherwise
        """
        try:
            self.builder.build_from_files(docs_file, noise_words_file)
            self.engine = Top5SearchEngine.from_builder(self.builder)
        except FileNotFoundError as e:
            console.print(f"[bold red]One of the files was not found:[/bold red] {getattr(e, 'document', None) or e.filename or e}")
            return False
        except ValueError as e:
            console.print(f"[bold red]Could not build index:[/bold red] {e}")
            return False

        return True

    def search(self, kw1: str, kw2: str):
        start_time = time.time()
        results = self.engine.search(kw1, kw2)
        execution_time = time.time() - start_time
        console.print(f"[green]Searched '{kw1} OR {kw2}' in {execution_time:.6f} seconds[/green]")
        return results

    def search_query(self, query: str):
        start_time = time.time()
        results = self.engine.search_query(query)
        execution_time = time.time() - start_time
        console.print(f"[green]Searched '{query}' in {execution_time:.6f} seconds[/green]")
        return results


def display_results(results):
    """Display ranked document names as a table"""
    if results is NO_RESULTS:
        console.print("[yellow]No documents contain these keywords.[/yellow]")
        return

    table = Table(
        box=box.HEAVY_EDGE,
        show_header=True,
        header_style="bold magenta",
        title=f"[bold]Top {len(results)} document(s)[/bold]",
        title_style="yellow"
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Document", style="cyan bold", no_wrap=True)

    for i, document in enumerate(results):
        table.add_row(str(i + 1), document)

    console.print(table)


def run_interactive(retriever: LittleSearch):
    console.print("Type a query like [cyan]war OR alice[/cyan], or [cyan]quit[/cyan] to exit")
    while True:
        try:
            query = console.input("\n[bold cyan]Query: [/bold cyan]").strip()
        except EOFError:
            break

        if query.lower() in ("quit", "exit", "q"):
            break
        if not query:
            console.print("[yellow]Empty query. Please try again.[/yellow]")
            continue

        try:
            display_results(retriever.search_query(query))
        except QuerySyntaxError as e:
            console.print(f"[bold red]Invalid query:[/bold red] {e}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='LittleSearch - top 5 documents for "keyword OR keyword" queries'
    )
    parser.add_argument('--docs', default='docs.txt',
                        help='File listing the document file names')
    parser.add_argument('--noise', default='noisewords.txt',
                        help='File listing the noise words')
    parser.add_argument('--config', help='Path to a config JSON file')
    parser.add_argument('--query', help='Query string, e.g. "war OR alice"')
    parser.add_argument('--kw1', help='First keyword')
    parser.add_argument('--kw2', default='', help='Second keyword')
    parser.add_argument('--sample', type=int, default=0,
                        help='Print this many keywords of the built index')
    parser.add_argument('--interactive', action='store_true',
                        help='Run in interactive mode')
    args = parser.parse_args(argv)

    console.print(Panel(
        "[bold blue]LittleSearch[/bold blue] [yellow]Top 5 Search[/yellow]",
        border_style="blue",
        width=80
    ))

    retriever = LittleSearch(config=load_config(args.config))
    if not retriever.make_index(args.docs, args.noise):
        return 1

    if args.sample:
        retriever.builder.print_sample(args.sample)

    if args.interactive:
        run_interactive(retriever)
        return 0

    try:
        if args.query:
            display_results(retriever.search_query(args.query))
        elif args.kw1:
            display_results(retriever.search(args.kw1, args.kw2))
    except QuerySyntaxError as e:
        console.print(f"[bold red]Invalid query:[/bold red] {e}")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
