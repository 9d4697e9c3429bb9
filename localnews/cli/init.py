"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, save_config
from ..db import create_connection_pool, init_database, validate_connection

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".config" / "localnews",
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    workspace: Path = typer.Option(
        Path.home() / "LocalNews",
        "--workspace",
        "-w",
        help="Workspace root directory",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("localnews", "--db-name", help="Database name"),
    db_user: str = typer.Option("localnews_user", "--db-user", help="Database user"),
    latitude: Optional[float] = typer.Option(None, "--lat", help="Fixed latitude for location lookups"),
    longitude: Optional[float] = typer.Option(None, "--lon", help="Fixed longitude for location lookups"),
    allow_location: bool = typer.Option(
        False,
        "--allow-location/--deny-location",
        help="Grant access to the configured location",
    ),
) -> None:
    """Initialize Local News configuration and database."""
    console.print(Panel.fit("📰 Local News - Initialization", style="bold blue"))

    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"

    config = ConfigModel(
        workspace_root=str(workspace),
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": "LOCALNEWS_DB_PASSWORD",
        },
        location={
            "latitude": latitude,
            "longitude": longitude,
            "permission_granted": allow_location,
        },
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    workspace.mkdir(parents=True, exist_ok=True)
    console.print(f"✅ Created workspace: {workspace}")

    console.print("\n[bold]Testing database connection...[/bold]")
    db_config = config.postgres.model_dump()

    with create_connection_pool(db_config) as pool:
        if not validate_connection(pool):
            console.print(
                "[red]❌ Database connection failed![/red]\n"
                "Please ensure Postgres is running and credentials are correct.\n"
                "Set the password via environment variable: "
                "[bold]export LOCALNEWS_DB_PASSWORD=your_password[/bold]"
            )
            raise typer.Exit(1)

        console.print("✅ Database connection successful")

        console.print("\n[bold]Initializing database schema...[/bold]")
        try:
            init_database(pool)
        except Exception as e:
            console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
            raise typer.Exit(1)

    console.print(
        Panel(
            f"[green]✅ Local News initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Workspace: {workspace}\n\n"
            f"Next steps:\n"
            f"1. Set database password: [bold]export LOCALNEWS_DB_PASSWORD=your_password[/bold]\n"
            f"2. Set API keys: [bold]export LOCALNEWS_GEOAPIFY_KEY=... LOCALNEWS_NEWSAPI_KEY=...[/bold]\n"
            f"3. Run: [bold]localnews fetch[/bold]",
            style="green",
        )
    )
