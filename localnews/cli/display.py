"""Terminal rendering of article lists."""

import json
from pathlib import Path
from typing import List, Optional

import pendulum
from rich.console import Console
from rich.panel import Panel

from ..models import Article, ShareRequest

console = Console()


def format_published(published_at: Optional[str]) -> str:
    """Render a publication timestamp relative to now when it parses."""
    if not published_at:
        return "-"
    try:
        published = pendulum.parse(published_at)
    except ValueError:
        return published_at
    if not isinstance(published, pendulum.DateTime):
        return published_at
    return f"{published.to_datetime_string()} ({published.diff_for_humans()})"


def print_articles(articles: List[Article]) -> None:
    """Print one card per article."""
    for index, article in enumerate(articles, start=1):
        lines = []
        if article.source and article.source.name:
            lines.append(f"[bold]Source:[/bold] {article.source.name}")
        lines.append(f"Author: {article.author}")
        lines.append(f"Description: {article.description}")
        if article.url:
            lines.append(f"URL: [blue link={article.url}]{article.url}[/blue link]")
        if article.image_url:
            lines.append(f"Image: {article.image_url}")
        lines.append(f"Published At: {format_published(article.published_at)}")
        lines.append(f"Content: {article.content}")

        console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{index}. {article.title or '-'}[/bold]",
                title_align="left",
            )
        )


def print_share(request: ShareRequest) -> None:
    """Show a share request as copyable text."""
    console.print(
        Panel(
            f"[bold]{request.subject}[/bold]\n{request.text}",
            title=request.chooser_title,
            style="cyan",
        )
    )


def save_last_fetch(articles: List[Article], path: Path) -> None:
    """Remember the displayed list for later commands."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [article.model_dump(by_alias=True) for article in articles]
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_last_fetch(path: Path) -> List[Article]:
    """Load the list displayed by the last fetch."""
    if not path.exists():
        return []
    data = json.loads(path.read_text(encoding="utf-8"))
    return [Article.model_validate(item) for item in data]
