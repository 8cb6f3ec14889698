"""pathecho: a FastAPI service that echoes a URL path segment."""
__version__ = "0.1.0"

from pathecho.main import create_app  # noqa: E402

__all__ = ["__version__", "create_app"]
