"""
Runtime settings for the catalog MCP server.

Values are plain module-level constants read from the environment with
sensible defaults. The catalog directory is the exception: it is
resolved on every call of :func:`catalog_dir` so that it follows the
process working directory (and any ``CATALOG_DIR`` override) at the
time a request is served rather than at import time.
"""

from __future__ import annotations

import os
from pathlib import Path

# Server identity
SERVER_NAME = "catalog-mcp"
SERVER_VERSION = "0.0.1"

# Catalog source
DEFAULT_CATALOG_DIR = "catalog"
CATALOG_FILE_SUFFIX = ".json"
CATALOG_ITEMS_KEY = "items"

# Request limits
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# HTTP mirror
HTTP_HOST = os.getenv("HTTP_HOST", "127.0.0.1")
HTTP_PORT = int(os.getenv("HTTP_PORT", "8000"))


def catalog_dir() -> Path:
    """Return the catalog directory for the current request.

    ``CATALOG_DIR`` may be absolute or relative; relative values (and
    the default) are resolved against the current working directory.
    """
    return Path.cwd() / os.getenv("CATALOG_DIR", DEFAULT_CATALOG_DIR)
