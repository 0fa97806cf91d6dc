"""
PlainTasks MCP server entry point.

Startup sequence:
1. Read LOG_LEVEL, TIMESTAMP_FORMAT, API_ENABLED and API_PORT from environment
2. Start REST API server in background thread (if API_ENABLED)
3. Register all MCP tools
4. Run MCP server (stdio transport)
"""

import logging
import os
import sys
import threading

from mcp.server.fastmcp import FastMCP

from plaintasks.tools.todo_tools import register_todo_tools
from plaintasks.utils.dates import DEFAULT_TIMESTAMP_FORMAT

log = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    # stdout carries the MCP transport
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not isinstance(level, int):
        log.error("LOG_LEVEL is not a valid logging level: %s", level_name)
        sys.exit(1)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


def _start_api_server(port: int, timestamp_format: str) -> None:
    """Run the FastAPI/uvicorn server in a daemon thread."""
    import uvicorn

    from plaintasks.api.app import create_app

    app = create_app(timestamp_format)
    log.info("Starting REST API on port %d", port)
    uvicorn.run(app, host="127.0.0.1", port=port, log_level="warning")


def main() -> None:
    _configure_logging()

    timestamp_format = os.environ.get("TIMESTAMP_FORMAT", DEFAULT_TIMESTAMP_FORMAT)

    if _env_flag("API_ENABLED", "false"):
        raw_port = os.environ.get("API_PORT", "9400")
        try:
            api_port = int(raw_port)
        except ValueError:
            log.error("API_PORT is not a valid port number: %s", raw_port)
            sys.exit(1)
        api_thread = threading.Thread(
            target=_start_api_server, args=(api_port, timestamp_format), daemon=True
        )
        api_thread.start()

    mcp = FastMCP("plaintasks")
    register_todo_tools(mcp, timestamp_format=timestamp_format)

    log.info("Starting plaintasks server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
