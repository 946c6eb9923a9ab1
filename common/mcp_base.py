"""ABOUTME: Base class for MCP servers with common initialization, logging, and transport patterns.

Uses the low-level server of the official MCP SDK (modelcontextprotocol/python-sdk)
so tool arguments reach our own validation untouched.
"""

import contextlib
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

import anyio
import uvicorn
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp import types
from mcp.types import CallToolResult, TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

ToolLister = Callable[[], Sequence[Tool]]
ToolCaller = Callable[[str, Optional[Dict[str, Any]]], Awaitable[CallToolResult]]


def setup_logging(logger_name: str, level: int = logging.INFO) -> logging.Logger:
    """Configure logging for an MCP server.

    Args:
        logger_name: Name of the logger (typically __name__)
        level: Logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logging.basicConfig(level=level)
    return logging.getLogger(logger_name)


class MCPServerBase:
    """Base class for MCP servers with common patterns.

    Provides:
    - Standard MCP server initialization
    - Tool catalog and dispatcher registration
    - Consistent logging setup
    - stdio and streamable HTTP transports (with /health)
    """

    def __init__(self, server_name: str, version: Optional[str] = None):
        """Initialize MCP server base.

        Args:
            server_name: Name of the MCP server (e.g., "mcp-weather")
            version: Server version reported during initialization
        """
        self.server_name = server_name
        self.server = Server(server_name, version=version)
        self.logger = setup_logging(__name__)

    def get_logger(self) -> logging.Logger:
        """Get the logger instance.

        Returns:
            Configured logger for this server
        """
        return self.logger

    def get_server(self) -> Server:
        """Get the low-level MCP server instance."""
        return self.server

    def register_tools(self, list_tools: ToolLister, call_tool: ToolCaller) -> None:
        """Register the tool catalog and the dispatcher with the MCP server.

        The call handler is registered on the raw request so absent arguments
        reach ``call_tool`` as None; the SDK decorator would turn them into {}
        and validate them itself.

        Args:
            list_tools: Returns the tool catalog
            call_tool: Handles (tool name, arguments) and returns the result envelope
        """

        @self.server.list_tools()
        async def handle_list_tools() -> List[Tool]:
            return list(list_tools())

        async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
            result = await call_tool(request.params.name, request.params.arguments)
            return types.ServerResult(result)

        self.server.request_handlers[types.CallToolRequest] = handle_call_tool

    def run(self, transport: str = "stdio", host: str = "0.0.0.0", port: int = 3000) -> None:
        """Run the MCP server.

        Args:
            transport: Transport protocol ("stdio" or "streamable-http")
            host: Host to bind to for streamable-http
            port: Port to bind to for streamable-http

        Raises:
            ValueError: If the transport is not supported
        """
        if transport == "stdio":
            self.logger.info(f"{self.server_name} running on stdio")
            anyio.run(self._run_stdio)
        elif transport == "streamable-http":
            self.logger.info(f"{self.server_name} running on http://{host}:{port}/mcp")
            uvicorn.run(self.get_streamable_http_app(), host=host, port=port)
        else:
            raise ValueError(f"Unknown transport: {transport}. Supported: stdio, streamable-http")

    async def _run_stdio(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )

    def get_streamable_http_app(self) -> Starlette:
        """Get the Starlette ASGI app for the streamable-http transport.

        Stateless mode: every request gets a fresh transport, MCP endpoint at
        /mcp and a liveness probe at /health.

        Returns:
            Starlette ASGI application instance
        """
        session_manager = StreamableHTTPSessionManager(app=self.server, stateless=True)

        async def handle_mcp(scope, receive, send) -> None:
            await session_manager.handle_request(scope, receive, send)

        async def health(request: Request) -> JSONResponse:
            return JSONResponse({"status": "ok", "server": self.server_name})

        @contextlib.asynccontextmanager
        async def lifespan(app: Starlette):
            async with session_manager.run():
                yield

        return Starlette(
            routes=[
                Route("/health", health, methods=["GET"]),
                Mount("/mcp", app=handle_mcp),
            ],
            lifespan=lifespan,
        )

    def create_success_result(self, lines: Sequence[str]) -> CallToolResult:
        """Create standardized success result, one text item per line.

        Examples:
            >>> result = server.create_success_result(["Line 1", "Line 2"])
        """
        return CallToolResult(content=[TextContent(type="text", text=line) for line in lines])

    def log_tool_start(self, tool_name: str, **params) -> None:
        """Log tool invocation with parameters.

        Examples:
            >>> server.log_tool_start("weather-get_daily", location="Paris", days=5)
        """
        if params:
            param_str = ", ".join(f"{k}={v}" for k, v in params.items())
            self.logger.info(f"{tool_name} started: {param_str}")
        else:
            self.logger.info(f"{tool_name} started")

    def log_tool_complete(self, tool_name: str, **metrics) -> None:
        """Log tool completion with execution metrics.

        Examples:
            >>> server.log_tool_complete("weather-get_hourly", items=12)
        """
        if metrics:
            metric_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
            self.logger.info(f"{tool_name} completed: {metric_str}")
        else:
            self.logger.info(f"{tool_name} completed")

    def log_tool_error(
        self,
        tool_name: str,
        error_code: str,
        error_message: str,
        **context
    ) -> None:
        """Log tool error with context.

        Args:
            tool_name: Name of the tool that failed
            error_code: Machine-readable error code
            error_message: Human-readable error message
            **context: Additional error context
        """
        context_str = ", ".join(f"{k}={v}" for k, v in context.items()) if context else ""
        if context_str:
            self.logger.error(f"{tool_name} error [{error_code}]: {error_message} ({context_str})")
        else:
            self.logger.error(f"{tool_name} error [{error_code}]: {error_message}")
