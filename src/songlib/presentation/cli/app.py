"""songlib CLI application using Typer.

This module provides command-line utilities for the songlib backend:
running the catalog API, running the stand-in upstream service,
initializing the database schema and inspecting the effective settings.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from songlib_config.settings import get_settings

app = typer.Typer(
    name="songlib",
    help="songlib - Music Library CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the song catalog API."""
    settings = get_settings()
    uvicorn.run(
        "songlib.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("serve-upstream")
def serve_upstream(
    host: str | None = typer.Option(None, help="Bind address"),
    port: int | None = typer.Option(None, help="Bind port"),
) -> None:
    """Run the stand-in song info service backed by the enrichment file.

    Point EXTERNAL_API_URL of the catalog API at this service to look up
    songs without the real upstream.
    """
    settings = get_settings()
    uvicorn.run(
        "songlib.presentation.api.upstream_app:create_upstream_app",
        factory=True,
        host=host or settings.upstream_host,
        port=port or settings.upstream_port,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db(
    reset: bool = typer.Option(
        False, "--reset", help="Drop all tables first (deletes every song)"
    ),
) -> None:
    """Create missing database tables."""
    from songlib.presentation.api.dependencies import (
        create_tables,
        drop_tables,
        get_engine,
    )

    if reset:
        typer.confirm("This deletes the whole catalog. Continue?", abort=True)

    async def _run() -> None:
        try:
            if reset:
                await drop_tables()
            await create_tables()
        finally:
            await get_engine().dispose()

    asyncio.run(_run())
    console.print(
        f"[bold green]Database schema ready[/bold green] "
        f"({get_settings().database_type})"
    )


@app.command("show-config")
def show_config() -> None:
    """Print the effective settings (secrets masked)."""
    settings = get_settings()

    table = Table(title=f"{settings.app_name} configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    values = settings.model_dump(exclude={"database_url"})
    password = settings.postgres_password.get_secret_value()
    values["postgres_password"] = "********" if password else ""
    if settings.database_url_override is None:
        values["database_url"] = "(built from POSTGRES_* settings)"
    else:
        values["database_url"] = settings.database_url_override
    values.pop("database_url_override", None)

    for key in sorted(values):
        value = values[key]
        table.add_row(key, "" if value is None else str(value))

    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
