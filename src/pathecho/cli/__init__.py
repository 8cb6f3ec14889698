"""CLI commands for pathecho."""
# Import all command modules to register them with the main app
from pathecho.cli import server  # noqa: F401
from pathecho.cli.base import app

__all__ = ["app", "server"]
