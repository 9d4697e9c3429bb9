"""Fetch, headlines and saved commands."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..db import ArticleStore, create_connection_pool, validate_connection
from ..errors import LocalNewsError
from ..pipeline import FetchState, build_orchestrator, create_news_client
from .display import print_articles, print_share, save_last_fetch

console = Console()


def notify(message: str) -> None:
    """Show a short-lived notification."""
    console.print(f"[bold yellow]🔔 {message}[/bold yellow]")


def fetch_command(
    save: bool = typer.Option(False, "--save", help="Save the fetched articles for offline use"),
    share: bool = typer.Option(False, "--share", help="Share the first fetched article"),
    offline: bool = typer.Option(False, "--offline", help="Skip the network and show saved articles"),
) -> None:
    """Fetch news for your current location."""
    try:
        config = Config()

        console.print("[dim]Checking database connection...[/dim]")
        with create_connection_pool(config.get_db_config()) as pool:
            if not validate_connection(pool):
                console.print("[red]❌ Database connection failed![/red]")
                console.print("Please check your database configuration and ensure Postgres is running.")
                raise typer.Exit(1)

            orchestrator = build_orchestrator(
                config,
                pool,
                notify=notify,
                share=print_share,
                is_connected=(lambda: False) if offline else None,
            )

            if not orchestrator.location_resolver.request_permission():
                console.print("[yellow]Location access is off. Enable it with 'localnews init --allow-location'.[/yellow]")

            with console.status("Fetching news..."):
                run = asyncio.run(orchestrator.fetch_news())

            if run.state == FetchState.FAILED:
                console.print(f"[red]Fetch failed: {run.error}[/red]")
                raise typer.Exit(1)

            source = "online" if run.online and not run.error else "offline"
            location = f" for [bold]{run.city}[/bold]" if run.city else ""
            console.print(
                f"[dim]{len(orchestrator.articles)} {source} articles{location} "
                f"in {run.duration:.1f}s[/dim]"
            )
            print_articles(orchestrator.articles)
            save_last_fetch(orchestrator.articles, config.last_fetch_path)

            if save:
                orchestrator.save_news()
            if share and orchestrator.share_news() is None:
                console.print("[yellow]Nothing to share.[/yellow]")

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Fetch interrupted by user[/yellow]")
        raise typer.Exit(1)
    except LocalNewsError as e:
        console.print(f"[red]Fetch failed: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise typer.Exit(1)


def headlines_command(
    country: Optional[str] = typer.Option(None, "--country", help="Two letter country code. Default: from config"),
) -> None:
    """Show top headlines for a country."""
    try:
        config = Config()
        if country is None:
            country = config.config.news.default_country

        client = create_news_client(config, notify=notify)
        with console.status(f"Fetching top headlines for {country}..."):
            articles = asyncio.run(client.top_headlines(country))

        if not articles:
            notify("No articles available")
            return

        print_articles(articles)
        save_last_fetch(articles, config.last_fetch_path)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        raise typer.Exit(1)


def saved_command() -> None:
    """List articles saved for offline reading."""
    try:
        config = Config()
        with create_connection_pool(config.get_db_config()) as pool:
            stored = ArticleStore(pool).get_all()
    except LocalNewsError as e:
        console.print(f"[red]Could not read saved articles: {e}[/red]")
        raise typer.Exit(1)

    if not stored:
        console.print("[yellow]No saved articles.[/yellow]")
        return

    table = Table(title="Saved Articles")
    table.add_column("ID", style="cyan")
    table.add_column("Source", style="magenta")
    table.add_column("Title", style="bold")
    table.add_column("Published", style="green")
    table.add_column("URL", style="blue")

    for article in stored:
        table.add_row(
            str(article.id),
            article.source_name or "-",
            article.title or "-",
            article.published_at or "-",
            article.url or "-",
        )

    console.print(table)
