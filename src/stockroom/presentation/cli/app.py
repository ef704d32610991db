"""Stockroom command line.

    stockroom secrets generate   fresh values for the .env file
    stockroom db init            create missing tables
    stockroom serve              run the HTTP API with uvicorn
"""

import asyncio
import secrets
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.rule import Rule

app = typer.Typer(
    name="stockroom",
    help="Stockroom - product catalog backend",
    no_args_is_help=True,
)
secrets_app = typer.Typer(name="secrets", help="Generate configuration secrets", no_args_is_help=True)
db_app = typer.Typer(name="db", help="Database schema management", no_args_is_help=True)
app.add_typer(secrets_app)
app.add_typer(db_app)

console = Console()

# variable name -> generator; the JWT key gets 64 bytes of entropy for HS256
SECRET_GENERATORS: dict[str, Callable[[], str]] = {
    "JWT_SECRET_KEY": lambda: secrets.token_urlsafe(64),
    "POSTGRES_PASSWORD": lambda: secrets.token_urlsafe(32),
}


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Print new secrets as KEY=value lines for config/.env or config/.env.dev."""
    console.print(Rule("[bold green]Stockroom secrets[/bold green]"))
    for name, generate in SECRET_GENERATORS.items():
        console.print(f"[cyan]{name}[/cyan]={generate()}", soft_wrap=True)
    console.print(Rule())
    console.print("[yellow]Store these outside version control.[/yellow]")


@db_app.command("init")
def init_db() -> None:
    """Create any missing tables. Existing tables and rows are untouched."""
    from stockroom.presentation.api.dependencies import create_tables, get_engine

    async def _init() -> None:
        engine = get_engine()
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_init())
    console.print("[green]Database schema is up to date.[/green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address [default: API_HOST]"),
    port: Optional[int] = typer.Option(None, help="Port [default: API_PORT]"),
    reload: bool = typer.Option(False, help="Restart on code changes"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from stockroom_config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "stockroom.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_config=None,
    )


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
