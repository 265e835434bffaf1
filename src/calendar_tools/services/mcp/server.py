from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from starlette.middleware import Middleware

from ...api import ApiFunction, call_api, get_api_functions
from ...config import ServerSettings, get_settings
from ...security import TransportGuardMiddleware
from ...validation import ToolArgumentError
from ..calendar import CalendarProviderNotConfiguredError

INSTRUCTIONS = (
    "Calendar tools for listing and searching events. Tools that take calendarId accept "
    "a single ID or a JSON array string of up to 50 IDs."
)
MCP_PATH = "/mcp"

logger = logging.getLogger(__name__)


class RegisteredTool(Tool):
    """MCP tool backed by a registry entry; arguments go through the registry's validation."""

    @classmethod
    def from_api_function(cls, api_function: ApiFunction) -> "RegisteredTool":
        return cls(
            name=api_function.name,
            description=api_function.description,
            parameters=api_function.parameter_schema,
            tags=set(api_function.tags),
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        try:
            result = call_api(self.name, **arguments)
        except (ToolArgumentError, CalendarProviderNotConfiguredError) as exc:
            raise ToolError(str(exc)) from exc
        return ToolResult(structured_content=result)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="calendar-tools", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.add_tool(RegisteredTool.from_api_function(api_function))
    return server


def build_http_app(server: FastMCP, settings: ServerSettings) -> Any:
    return server.http_app(
        path=MCP_PATH,
        middleware=[Middleware(TransportGuardMiddleware, auth_token=settings.auth_token)],
    )


def run_mcp_server(
    host: str = "127.0.0.1",
    port: int = 3000,
    *,
    transport: str = "http",
    settings: Optional[ServerSettings] = None,
) -> None:
    server = build_mcp_server()
    if transport == "stdio":
        server.run("stdio")
        return

    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    settings = settings or get_settings().server
    if not settings.auth_enabled:
        logger.warning("MCP_AUTH_TOKEN is not set; the MCP endpoint accepts unauthenticated local requests.")

    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving MCP on http://%s:%s%s", host, port, MCP_PATH)
    asyncio.run(serve(build_http_app(server, settings), config))
