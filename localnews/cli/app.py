"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .fetch import fetch_command, headlines_command, saved_command
from .init import init_command
from .open import open_command

app = typer.Typer(
    name="localnews",
    help="Local News - news for where you are, with an offline cache",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("fetch")(fetch_command)
app.command("headlines")(headlines_command)
app.command("saved")(saved_command)
app.command("open")(open_command)


if __name__ == "__main__":
    app()
