"""MCP server module for the MSFS SDK documentation tools."""

from .config import MCPServerConfig
from .server import MCPServer, create_server_from_config

__all__ = ["MCPServer", "MCPServerConfig", "create_server_from_config"]
