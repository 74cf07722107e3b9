"""Main CLI entry point using Typer."""

import logging
from typing import Optional

import typer
from rich.console import Console

from cryptomania.config import PRODUCT_NAME, PRODUCT_TAGLINE, PRODUCT_VERSION, get_settings

settings = get_settings()

console = Console()
app = typer.Typer(
    name="cryptomania",
    help=f"{PRODUCT_NAME} - {PRODUCT_TAGLINE}",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
):
    """Configure logging."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Import and add subcommands
from cryptomania.cli.portfolio import app as portfolio_app

app.add_typer(portfolio_app, name="portfolio", help="Inspect portfolio CSV files")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: from settings)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: from settings)"),
):
    """Run the API server."""
    import uvicorn

    from cryptomania.api.app import app as api_app

    uvicorn.run(api_app, host=host or settings.host, port=port or settings.port)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]{PRODUCT_NAME}[/] {PRODUCT_VERSION}")
    console.print(f"[bold]Tagline:[/] {PRODUCT_TAGLINE}")


if __name__ == "__main__":
    app()
