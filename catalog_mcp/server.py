"""
MCP server exposing the catalog.

One tool (``search_catalog``) and one resource (the results widget)
are registered on a low-level ``mcp`` server. Tool calls and resource
reads are handled with full control over the response so that the
tool result carries both a text summary and ``structuredContent``, and
the widget contents carry their ``_meta`` hints.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from .catalog.schemas import SearchOutput, SearchRequest
from .catalog.search import summarize
from .catalog.store import search_catalog
from .catalog.widget import (
    WIDGET_DESCRIPTION,
    WIDGET_HTML,
    WIDGET_META,
    WIDGET_MIME_TYPE,
    WIDGET_NAME,
    WIDGET_TITLE,
    WIDGET_URI,
)
from .config import SERVER_NAME, SERVER_VERSION


logger = logging.getLogger(__name__)

SEARCH_TOOL_NAME = "search_catalog"

SEARCH_TOOL = types.Tool(
    name=SEARCH_TOOL_NAME,
    title="Search catalog",
    description="Search JSON files in the catalog/ folder for items.",
    inputSchema=SearchRequest.model_json_schema(),
    outputSchema=SearchOutput.model_json_schema(),
    _meta={
        "openai/outputTemplate": WIDGET_URI,
        "openai/toolInvocation/invoking": "Searching the catalog…",
        "openai/toolInvocation/invoked": "Showing catalog results",
        "openai/widgetAccessible": True,
    },
)

WIDGET_RESOURCE = types.Resource(
    uri=WIDGET_URI,
    name=WIDGET_NAME,
    title=WIDGET_TITLE,
    description=WIDGET_DESCRIPTION,
    mimeType=WIDGET_MIME_TYPE,
    _meta=WIDGET_META,
)

server = Server(SERVER_NAME, version=SERVER_VERSION)


@server.list_tools()
async def list_tools() -> List[types.Tool]:
    return [SEARCH_TOOL]


@server.list_resources()
async def list_resources() -> List[types.Resource]:
    return [WIDGET_RESOURCE]


def _tool_error(message: str) -> types.ServerResult:
    return types.ServerResult(
        types.CallToolResult(
            content=[types.TextContent(type="text", text=message)],
            isError=True,
        )
    )


async def handle_read_resource(req: types.ReadResourceRequest) -> types.ServerResult:
    """Return the widget markup; any other URI is an invalid request."""
    uri = str(req.params.uri)
    if uri != WIDGET_URI:
        raise McpError(
            types.ErrorData(code=types.INVALID_PARAMS, message=f"Unknown resource: {uri}")
        )
    contents = [
        types.TextResourceContents(
            uri=WIDGET_URI,
            mimeType=WIDGET_MIME_TYPE,
            text=WIDGET_HTML,
            _meta=WIDGET_META,
        )
    ]
    return types.ServerResult(types.ReadResourceResult(contents=contents))


async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
    """Validate the arguments, search the catalog and package the result.

    Invalid arguments are reported as a tool error before the catalog
    is read.
    """
    name = req.params.name
    if name != SEARCH_TOOL_NAME:
        return _tool_error(f"Unknown tool: {name}")

    try:
        request = SearchRequest.model_validate(req.params.arguments or {})
    except ValidationError as exc:
        logger.info("Rejected %s call: %s", name, exc)
        return _tool_error(f"Invalid arguments for {name}: {exc}")

    # File reads happen off the event loop
    items = await asyncio.to_thread(search_catalog, request)
    summary = summarize(items)
    logger.debug("%s q=%r category=%r -> %s", name, request.q, request.category, summary)
    return types.ServerResult(
        types.CallToolResult(
            content=[types.TextContent(type="text", text=summary)],
            structuredContent={"items": items},
        )
    )


server.request_handlers[types.ReadResourceRequest] = handle_read_resource
server.request_handlers[types.CallToolRequest] = handle_call_tool
