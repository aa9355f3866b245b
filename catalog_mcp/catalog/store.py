"""
File-backed data store for the catalog.

The catalog is a directory of JSON documents. Each document is either
an array of records or an object with an ``items`` array. Nothing is
cached: :func:`load_catalog` reads the directory again on every call,
so edits to the files show up on the next search.

Unreadable or malformed files are skipped with a warning and a missing
directory simply yields an empty catalog; loading never fails.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Union

from ..config import CATALOG_FILE_SUFFIX, CATALOG_ITEMS_KEY, catalog_dir
from .schemas import CatalogItem, SearchRequest
from .search import search_items


logger = logging.getLogger(__name__)


def _items_from_document(data: Any) -> List[CatalogItem]:
    """Extract the records of one parsed document.

    Arrays are taken as-is, objects contribute their ``items`` array
    and every other shape contributes nothing.
    """
    if isinstance(data, list):
        return list(data)
    if isinstance(data, dict) and isinstance(data.get(CATALOG_ITEMS_KEY), list):
        return list(data[CATALOG_ITEMS_KEY])
    return []


def _load_file(path: Path) -> List[CatalogItem]:
    """Load the records of a single catalog file.

    Returns an empty list if the file cannot be read or parsed.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        logger.warning("Skipping catalog file %s: %s", path, exc)
        return []
    return _items_from_document(data)


def load_catalog(directory: Optional[Union[str, Path]] = None) -> List[CatalogItem]:
    """Read every ``*.json`` file directly inside the catalog directory.

    Parameters
    ----------
    directory : Optional[Union[str, Path]]
        Directory to read. Defaults to :func:`config.catalog_dir`.

    Returns
    -------
    List[CatalogItem]
        Records in directory-listing order, then in-file order. Empty
        when the directory is missing or cannot be listed.
    """
    root = Path(directory) if directory is not None else catalog_dir()
    items: List[CatalogItem] = []
    files = 0
    try:
        with os.scandir(root) as entries:
            for entry in entries:
                if not entry.name.endswith(CATALOG_FILE_SUFFIX):
                    continue
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                items.extend(_load_file(Path(entry.path)))
                files += 1
    except FileNotFoundError:
        logger.debug("Catalog directory %s does not exist", root)
        return []
    except OSError as exc:
        logger.warning("Cannot list catalog directory %s: %s", root, exc)
        return []
    logger.debug("Loaded %d item(s) from %d file(s) in %s", len(items), files, root)
    return items


def search_catalog(
    request: SearchRequest,
    directory: Optional[Union[str, Path]] = None,
) -> List[CatalogItem]:
    """Load the catalog and run the search pipeline for ``request``."""
    return search_items(load_catalog(directory), request)
