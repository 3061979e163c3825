"""Swish CLI application using Typer.

This module provides command-line utilities for the Swish backend:
secret generation for deployment configuration, running the API server
and preparing the database schema.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from swish_config.settings import get_settings

app = typer.Typer(
    name="swish",
    help="Swish - campus social network backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Swish configuration.

    Generates three required secrets:
    - JWT_SECRET_KEY: Secret for signing session tokens
    - ADMIN_ACCESS_CODE: Code required to register admin accounts
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Swish Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes is plenty for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    admin_code = secrets.token_urlsafe(12)
    console.print(f"[cyan]ADMIN_ACCESS_CODE[/cyan]={admin_code}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(
        f"[bold green]{settings.app_name}[/bold green] API on "
        f"[cyan]http://{host}:{port}/api[/cyan] ({settings.campus_name})"
    )
    uvicorn.run(
        "swish.presentation.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@db_app.command("init")
def init_db() -> None:
    """Create any missing database tables. Existing data is left alone."""
    # Imported here so `swish secrets generate` works without DB drivers
    from swish.presentation.api.dependencies import create_tables, get_engine

    settings = get_settings()
    engine = get_engine(settings.database_url)

    async def _init() -> None:
        try:
            await create_tables(engine)
        finally:
            await engine.dispose()

    asyncio.run(_init())
    console.print("[green]Database schema is up to date.[/green]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
