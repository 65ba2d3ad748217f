"""Typer CLI root application with serve command."""

import typer

from legislator_lookup.core.config import get_settings
from legislator_lookup.core.logging import setup_logging

app = typer.Typer(name="legislator-lookup", help="State legislator lookup CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
    host: str = typer.Option("0.0.0.0", "--host", help="Bind host"),  # noqa: S104
    port: int = typer.Option(8000, "--port", help="Bind port"),
) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run(
        "legislator_lookup.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _register_subcommands() -> None:
    """Register all CLI subcommands."""
    from legislator_lookup.cli.lookup_cmd import lookup

    app.command("lookup")(lookup)


_register_subcommands()
