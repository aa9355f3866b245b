"""
Catalog package: loading, searching and rendering catalog records.

Records live in JSON files under a ``catalog/`` folder and are read on
every request. ``store`` loads them, ``search`` scores, filters and
sorts them, ``widget`` holds the HTML used by the host to display
results, and ``router`` exposes the same search over plain HTTP.
"""

from .router import router as catalog_router  # noqa: F401
