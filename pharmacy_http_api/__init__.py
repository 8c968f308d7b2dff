"""
pharmacy_http_api
-----------------

HTTP API for the pharmacy inventory and billing service.

This package exposes:

- ``create_app()``: application factory returning a FastAPI instance.
"""

from importlib import metadata as _metadata

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

try:
    __version__: str = _metadata.version("pharmacy-http-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


from .main import create_app  # noqa: E402

__all__ = ["__version__", "create_app"]
