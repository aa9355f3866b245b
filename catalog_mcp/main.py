# catalog_mcp/main.py
import argparse
import asyncio
import logging
import os
import signal
import sys
from typing import List, Optional

from mcp.server.stdio import stdio_server

from .config import HTTP_HOST, HTTP_PORT, LOG_LEVEL, SERVER_NAME
from .server import server


logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    # stdout carries the MCP stream, so logs must go to stderr
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _shutdown(sig: signal.Signals) -> None:
    """Leave the process at once.

    The stdin reader runs in a worker thread blocked on ``readline`` that
    cannot be cancelled, so cancelling the serve task would not return
    until the host writes or closes the pipe.
    """
    logger.info("[%s] received %s, shutting down", SERVER_NAME, sig.name)
    sys.stdout.flush()
    logging.shutdown()
    os._exit(0)


async def serve_stdio() -> None:
    """Serve MCP over stdin/stdout until the stream closes or a signal arrives."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _shutdown, sig)

    async with stdio_server() as (read_stream, write_stream):
        logger.info("[%s] connected on stdio", SERVER_NAME)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
    logger.info("[%s] stdin closed, shutting down", SERVER_NAME)


def serve_http(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("catalog_mcp.api:app", host=host, port=port)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="Catalog search MCP server (stdio by default).",
    )
    parser.add_argument(
        "--catalog-dir",
        help="Folder of JSON catalog files (default: ./catalog or $CATALOG_DIR)",
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Serve the HTTP API instead of MCP over stdio",
    )
    parser.add_argument("--host", default=HTTP_HOST)
    parser.add_argument("--port", type=int, default=HTTP_PORT)
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level.upper())

    if args.catalog_dir:
        os.environ["CATALOG_DIR"] = args.catalog_dir

    try:
        if args.http:
            serve_http(args.host, args.port)
        else:
            asyncio.run(serve_stdio())
    except Exception:
        logger.exception("[%s] fatal error", SERVER_NAME)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
