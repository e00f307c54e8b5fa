"""
Name: MCP Configuration classes.
Description: Shared configuration types for the MCP server implementation to avoid circular imports.
"""

from typing import Literal

from pydantic import BaseModel, Field

from ..constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SERVER_NAME, DEFAULT_TRANSPORT


class MCPServerConfig(BaseModel):
    """Configuration for running the MCP server."""

    name: str = DEFAULT_SERVER_NAME
    transport: Literal["stdio", "sse"] = DEFAULT_TRANSPORT
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    debug: bool = False
