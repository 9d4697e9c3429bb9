"""Open command implementation."""

import webbrowser

import typer
from rich.console import Console

from ..config import Config
from .display import load_last_fetch

console = Console()


def open_command(
    index: int = typer.Argument(1, help="Position of the article in the last fetch", min=1),
) -> None:
    """Open an article from the last fetch in the browser."""
    config = Config()
    articles = load_last_fetch(config.last_fetch_path)

    if not articles:
        console.print("[red]No fetched articles. Run 'localnews fetch' first.[/red]")
        raise typer.Exit(1)

    if index > len(articles):
        console.print(f"[red]Only {len(articles)} articles in the last fetch.[/red]")
        raise typer.Exit(1)

    url = articles[index - 1].url
    if not url:
        console.print("[yellow]This article has no URL.[/yellow]")
        raise typer.Exit(1)

    if webbrowser.open(url):
        console.print(f"Opened: {url}")
    else:
        console.print(f"URL: {url}")
        console.print("[yellow]Note: no browser available to open it[/yellow]")
