# catalog_mcp/api.py
from fastapi import FastAPI

from .catalog import catalog_router
from .config import SERVER_VERSION


app = FastAPI(
    title="Catalog MCP (HTTP)",
    description=(
        "HTTP mirror of the search_catalog MCP tool, reading the JSON "
        "files of the catalog/ folder on every request."
    ),
    version=SERVER_VERSION,
)


@app.get("/")
def health_check():
    return {"status": "ok", "message": "catalog search live"}


app.include_router(catalog_router)
