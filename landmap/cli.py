"""Command-line interface for the landmark map."""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import get_config

console = Console()


@click.group()
@click.version_option(version=__version__)
def main():
    """Landmap - place, annotate and browse landmarks on a map."""
    pass


@main.command()
@click.option("--host", default=None, help="Bind address (default from config)")
@click.option("--port", type=int, default=None, help="Port (default from config)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
@click.option("--log-level", default="info", type=click.Choice(["debug", "info", "warning", "error"]))
def serve(host: Optional[str], port: Optional[int], reload: bool, log_level: str):
    """Run the API server."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console.print(f"[bold]Serving Landmap[/bold] on http://{host}:{port}")
    if config.static_dir:
        console.print(f"[dim]Client directory:[/dim] {config.static_dir}")

    uvicorn.run(
        "landmap.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


@main.command(name="config")
def show_config():
    """Show the effective configuration."""
    config = get_config()

    table = Table(title="Landmap configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for name, value in config.model_dump().items():
        table.add_row(name, "-" if value is None else str(value))

    console.print(table)


if __name__ == "__main__":
    main()
