"""ABOUTME: MCP server launcher - picks the transport and bind address from the environment.

MCP_TRANSPORT selects "stdio" (default, for local agents) or "streamable-http"
(binds HOST:PORT, default 0.0.0.0:3000, for Docker networking).
"""

import logging
import os
import sys

# Setup logging early
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def run_server(transport: str = "stdio", host: str = "0.0.0.0", port: int = 3000) -> None:
    """Run the weather MCP server.

    Args:
        transport: Transport protocol ("stdio" or "streamable-http")
        host: Host to bind to for streamable-http (default: 0.0.0.0 for Docker)
        port: Port to bind to for streamable-http
    """
    logger.info(f"Loading MCP server: weather (transport: {transport})")

    from weather import server as weather_server

    try:
        weather_server.run(transport=transport, host=host, port=port)
    except ValueError as e:
        logger.error(f"Failed to start weather server: {e}")
        sys.exit(1)


def main() -> None:
    transport = os.getenv("MCP_TRANSPORT", "stdio")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))

    run_server(transport, host, port)


if __name__ == "__main__":
    main()
