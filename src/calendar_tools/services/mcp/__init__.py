"""MCP server exposing the registered calendar tools."""

from .server import build_http_app, build_mcp_server, run_mcp_server

__all__ = ["build_http_app", "build_mcp_server", "run_mcp_server"]
