"""Sift CLI: build an inverted index from a corpus file and query it.

Three commands: index, query, search.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from engine.indexer import Index, index_corpus, summarize
from engine.query import sorted_matches

app = typer.Typer(help="Sift: boolean keyword search over a line-paired corpus.")
console = Console()

DEFAULT_CORPUS_ENV = "SIFT_CORPUS"
PROMPT = "Enter query sentence (press enter to quit)"


def _corpus_argument():
    return typer.Argument(
        ...,
        envvar=DEFAULT_CORPUS_ENV,
        help="Corpus file of alternating identifier/body lines",
    )


def _print_matches(matches: list[str]) -> None:
    console.print(f"Found {len(matches)} matching pages")
    for page in matches:
        console.print(page, markup=False, highlight=False, soft_wrap=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(corpus_path: str = _corpus_argument()):
    """Build the index for a corpus and report its size."""
    with console.status("[bold blue]Indexing corpus..."):
        idx, pages = index_corpus(corpus_path)

    if pages == 0:
        console.print(Panel("[bold red]✗ Invalid filename.[/bold red]", border_style="red"))
        raise typer.Exit(code=1)

    summary = summarize(idx, pages)
    table = Table(title="Indexing Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Pages", str(summary["pages"]))
    table.add_row("Unique Terms", str(summary["terms"]))
    table.add_row("Postings", str(summary["postings"]))
    console.print(table)


# ── query ───────────────────────────────────────────────────────────


@app.command()
def query(
    corpus_path: str = _corpus_argument(),
    q: str = typer.Option("", "--q", help="Query sentence, e.g. 'fish +red -blue'"),
):
    """Run a single query and print the matching identifiers."""
    if not q.strip():
        console.print("[red]Error: --q is required[/red]")
        raise typer.Exit(code=1)

    idx, pages = index_corpus(corpus_path)
    if pages == 0:
        console.print("[red]Invalid filename.[/red]")
        raise typer.Exit(code=1)

    console.print(f'[bold]Query:[/bold] "{escape(q)}"', highlight=False)
    _print_matches(sorted_matches(idx, q))


# ── search ──────────────────────────────────────────────────────────


def run_shell(idx: Index) -> None:
    """Prompt for queries until an empty line or end of input."""
    while True:
        try:
            sentence = typer.prompt(PROMPT, default="", show_default=False)
        except typer.Abort:
            sentence = ""
            console.print()
        if not sentence:
            console.print("Thank you for searching!")
            return
        _print_matches(sorted_matches(idx, sentence))
        console.print()


@app.command()
def search(corpus_path: str = _corpus_argument()):
    """Index a corpus, then answer queries interactively."""
    console.print("Stand by while building index...")
    idx, pages = index_corpus(corpus_path)
    if pages == 0:
        console.print("[red]Invalid filename.[/red]")

    console.print(f"Indexed {pages} pages containing {len(idx)} unique terms\n")
    run_shell(idx)


if __name__ == "__main__":
    app()
