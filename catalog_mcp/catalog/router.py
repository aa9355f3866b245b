"""
Route definitions for the catalog HTTP API.

Endpoints under /api/catalog mirror the MCP surface so the catalog can
be inspected with a browser or curl:
- GET  /search       : same pipeline as the ``search_catalog`` tool
- GET  /widget       : the results widget markup
- GET  /debug/local  : what the loader currently sees on disk
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from ..config import DEFAULT_LIMIT, MAX_LIMIT, catalog_dir
from .schemas import SearchOutput, SearchRequest, SortField, SortOrder
from .store import load_catalog, search_catalog
from .widget import WIDGET_HTML

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/search", response_model=SearchOutput)
def search(
    q: str = Query(default="", description="Full-text query across title/name/description"),
    category: Optional[str] = Query(default=None, description="Filter by category"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Max items"),
    sort_by: SortField = Query(default="relevance", alias="sortBy", description="Sort key"),
    order: SortOrder = Query(default="asc", description="Sort direction"),
) -> SearchOutput:
    request = SearchRequest(q=q, category=category, limit=limit, sort_by=sort_by, order=order)
    return SearchOutput(items=search_catalog(request))


@router.get("/widget", response_class=HTMLResponse)
def widget() -> str:
    return WIDGET_HTML


@router.get("/debug/local")
def debug_local():
    """
    Debug endpoint to check which records the loader picks up.
    Visit: http://127.0.0.1:8000/api/catalog/debug/local
    """
    items = load_catalog()
    sample = [
        {k: item.get(k) for k in ("id", "title", "category")}
        for item in items[:5]
        if isinstance(item, dict)
    ]
    return {
        "directory": str(catalog_dir()),
        "count": len(items),
        "sample": sample,
    }
