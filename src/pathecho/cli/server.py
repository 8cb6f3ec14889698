"""Server commands: run the echo service and inspect its configuration."""
from __future__ import annotations

import typer
import uvicorn

from pathecho.cli.base import app, console, create_table, print_info
from pathecho.core.settings import get_settings


@app.command("run-server")  # type: ignore[misc]
def run_server(
    host: str = typer.Option(None, help="Bind host (defaults to PATHECHO_HOST)"),
    port: int = typer.Option(None, help="Bind port (defaults to PATHECHO_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the pathecho server with uvicorn."""
    settings = get_settings()
    if host is None:
        host = settings.host
    if port is None:
        port = settings.port
    print_info(f"Serving pathecho on http://{host}:{port}")
    uvicorn.run(
        "pathecho.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("health")  # type: ignore[misc]
def health() -> None:
    """Show basic health / config info."""
    settings = get_settings()
    table = create_table("pathecho Health", ["Key", "Value"])
    table.add_row("environment", settings.environment)
    table.add_row("debug", str(settings.debug))
    table.add_row("api_prefix", settings.api_prefix or "/")
    table.add_row("log_level", settings.log_level)
    console.print(table)
