"""
Name: Server manager.
Description: Builds the documentation service and MCP server from configuration and runs them over stdio or as an HTTP/SSE application.
"""

import logging
from typing import Optional

from .constants import SSE_MOUNT_PATH
from .documentation.service import DocumentationService
from .mcp.config import MCPServerConfig
from .mcp.server import MCPServer, create_server_from_config
from .utils import ServiceConfig

logger = logging.getLogger(__name__)


def create_server(
    server_config: MCPServerConfig,
    service_config: Optional[ServiceConfig] = None,
) -> MCPServer:
    """Create the MCP server and its documentation service.

    Args:
        server_config: MCP server configuration
        service_config: Documentation site configuration

    Returns:
        MCP server ready to run
    """
    service = DocumentationService(config=service_config or ServiceConfig())
    return create_server_from_config(server_config, service=service)


def create_sse_app(server: MCPServer):
    """Create the FastAPI application that serves the MCP server over SSE.

    Args:
        server: MCP server to mount

    Returns:
        FastAPI application
    """
    from fastapi import FastAPI

    app = FastAPI(
        title="MSFS SDK MCP Server",
        description="MCP server for the MSFS SDK documentation",
    )

    # Add health check endpoint
    @app.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "server": server.config.name,
            "base_url": server.service.config.base_url,
        }

    # Mount the FastMCP SSE sub-application
    app.mount(SSE_MOUNT_PATH, server.sse_app())
    logger.info(f"Mounted MCP server {server.config.name} at {SSE_MOUNT_PATH}")

    return app


def start_mcp_server(
    server_config: MCPServerConfig,
    service_config: Optional[ServiceConfig] = None,
):
    """Start the MCP server.

    Args:
        server_config: MCP server configuration
        service_config: Documentation site configuration
    """
    server = create_server(server_config, service_config)

    if server_config.transport == "stdio":
        server.run_stdio()
        return

    import uvicorn

    logger.info(
        f"Starting MCP server on {server_config.host}:{server_config.port}"
    )
    app = create_sse_app(server)
    uvicorn.run(
        app,
        host=server_config.host,
        port=server_config.port,
        log_level="debug" if server_config.debug else "warning",
    )
