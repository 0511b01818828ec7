"""lilsearch CLI — build a keyword index over a small corpus and query it.

Four commands: validate, index, keyword, query.
Uses typer for argument parsing and rich for formatted terminal output.
The index lives in memory only, so every command rebuilds it.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from lse.indexer import KeywordIndex, make_index
from lse.searcher import rank_occurrences
from lse.store import DocumentSource, NotFoundError
from lse.text import get_keyword
from lse.validator import (
    DEFAULT_MANIFEST,
    DEFAULT_NOISE_WORDS,
    default_collection,
    load_collection,
    validate_config,
)

app = typer.Typer(help="lilsearch: two-keyword search over a small document collection.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log indexing details"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _build_index(
    config_path: str | None, docs: str, noise_words: str
) -> tuple[dict, KeywordIndex]:
    try:
        if config_path is not None:
            collection = load_collection(config_path)
        else:
            collection = default_collection(docs, noise_words)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error: invalid config: {e}[/red]")
        raise typer.Exit(code=1)

    try:
        index = make_index(
            collection["manifest"],
            collection["noise_words"],
            DocumentSource(collection["documents_dir"]),
        )
    except NotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    return collection, index


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(config_path: str = typer.Argument(..., help="Path to collection JSON")):
    """Check a collection config for missing fields and files."""
    passed, errors = validate_config(config_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {err}")
        raise typer.Exit(code=1)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(
    config_path: str = typer.Argument(None, help="Path to collection JSON"),
    docs: str = typer.Option(DEFAULT_MANIFEST, "--docs", help="Manifest of document files"),
    noise_words: str = typer.Option(
        DEFAULT_NOISE_WORDS, "--noise-words", help="Noise word list"
    ),
):
    """Build the index and summarize it."""
    collection, idx = _build_index(config_path, docs, noise_words)
    summary = idx.stats()

    table = Table(title=f"Indexing Summary ({collection['name']})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Documents", str(summary["documents"]))
    table.add_row("Keywords", str(summary["keywords"]))
    table.add_row("Occurrences", str(summary["occurrences"]))
    table.add_row("Noise Words", str(summary["noise_words"]))
    console.print(table)


# ── keyword ─────────────────────────────────────────────────────────


@app.command()
def keyword(
    word: str = typer.Argument(..., help="Word to look up"),
    config_path: str = typer.Argument(None, help="Path to collection JSON"),
    docs: str = typer.Option(DEFAULT_MANIFEST, "--docs", help="Manifest of document files"),
    noise_words: str = typer.Option(
        DEFAULT_NOISE_WORDS, "--noise-words", help="Noise word list"
    ),
):
    """Show a keyword's occurrence list, highest frequency first."""
    _, idx = _build_index(config_path, docs, noise_words)

    kw = get_keyword(word, idx.noise_words)
    if kw is None:
        console.print(f'[yellow]"{word}" is not a keyword (noise word or invalid).[/yellow]')
        raise typer.Exit(code=1)

    occurrences = idx.occurrences(kw)
    if not occurrences:
        console.print(f'No documents contain "{kw}".')
        return

    table = Table(title=f'Occurrences of "{kw}"')
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", min_width=30)
    table.add_column("Frequency", justify="right", width=10)
    for i, occ in enumerate(occurrences, 1):
        table.add_row(str(i), occ.document, str(occ.frequency))
    console.print(table)


# ── query ───────────────────────────────────────────────────────────


@app.command()
def query(
    config_path: str = typer.Argument(None, help="Path to collection JSON"),
    kw1: str = typer.Option("", "--kw1", help="First search word"),
    kw2: str = typer.Option("", "--kw2", help="Second search word"),
    docs: str = typer.Option(DEFAULT_MANIFEST, "--docs", help="Manifest of document files"),
    noise_words: str = typer.Option(
        DEFAULT_NOISE_WORDS, "--noise-words", help="Noise word list"
    ),
):
    """Find the top 5 documents containing either of two words."""
    _, idx = _build_index(config_path, docs, noise_words)

    if not kw1:
        kw1 = typer.prompt("Enter word 1")
    if not kw2:
        kw2 = typer.prompt("Enter word 2")

    k1 = get_keyword(kw1, idx.noise_words)
    k2 = get_keyword(kw2, idx.noise_words)
    for raw, kw in ((kw1, k1), (kw2, k2)):
        if kw is None:
            console.print(f'[yellow]Ignoring "{raw}": not a keyword.[/yellow]')

    results = rank_occurrences(idx, k1, k2)

    console.print(f'\n[bold]Query:[/bold] "{k1 or kw1}" or "{k2 or kw2}"')
    if not results:
        console.print("No matching documents.")
        return

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", min_width=30)
    table.add_column("Frequency", justify="right", width=10)
    for i, occ in enumerate(results, 1):
        table.add_row(str(i), occ.document, str(occ.frequency))
    console.print(table)
    console.print(f"\n{len(results)} results returned")


if __name__ == "__main__":
    app()
