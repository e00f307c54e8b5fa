"""
Name: MCP Server.
Description: Provides the MCP Server implementation for the MSFS SDK documentation tools. Creates the FastMCP instance and routes each tool call to the DocumentationService.
"""

import logging
from typing import Optional

from fastmcp import FastMCP

from ..documentation.service import DocumentationService
from ..models import OperationResult
from .config import MCPServerConfig

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Search and read the Microsoft Flight Simulator SDK documentation at "
    "docs.flightsimulator.com."
)


class MCPServer:
    """MCP Server implementation."""

    def __init__(
        self,
        config: Optional[MCPServerConfig] = None,
        service: Optional[DocumentationService] = None,
    ):
        """Initialize an MCP server.

        Args:
            config: Server configuration
            service: Documentation service that performs the tool calls
        """
        self.config = config or MCPServerConfig()
        self.service = service or DocumentationService()

        # Create FastMCP instance
        self.mcp = self._create_mcp_instance()

    def _create_mcp_instance(self) -> FastMCP:
        """Create a FastMCP instance for this server.

        Returns:
            FastMCP instance
        """
        mcp = FastMCP(self.config.name, instructions=SERVER_INSTRUCTIONS)

        mcp.tool(
            name="search_msfs_docs",
            description="Search MSFS SDK documentation for specific topics",
        )(self.search_msfs_docs)
        mcp.tool(
            name="get_doc_content",
            description="Get detailed content from a specific MSFS SDK documentation page",
        )(self.get_doc_content)
        mcp.tool(
            name="list_categories",
            description="List all available MSFS SDK documentation categories",
        )(self.list_categories)
        mcp.tool(
            name="natural_language_query",
            description='Process natural language queries like "Search livery op msfs sdk"',
        )(self.natural_language_query)
        mcp.tool(
            name="list_category_items",
            description="Returns all items for a given documentation category",
        )(self.list_category_items)

        logger.debug(f"Registered documentation tools on {self.config.name}")
        return mcp

    @staticmethod
    def _render(tool_name: str, result: OperationResult) -> str:
        if not result.ok:
            logger.warning(
                f"{tool_name} failed ({result.error_kind.value}): {result.error.message}"
            )
        return result.text

    async def search_msfs_docs(
        self, query: str, category: str = "all", limit: int = 10
    ) -> str:
        """Search the documentation.

        Args:
            query: Search query for MSFS SDK documentation
            category: Optional category filter: contents, index, glossary or all
            limit: Maximum number of results to return (1-20)
        """
        result = await self.service.search(query, category, limit)
        return self._render("search_msfs_docs", result)

    async def get_doc_content(self, url: str, section: Optional[str] = None) -> str:
        """Get the content of a documentation page.

        Args:
            url: URL of the documentation page to retrieve
            section: Specific section to extract (e.g. "overview", "examples", "api-reference")
        """
        result = await self.service.get_content(url, section)
        return self._render("get_doc_content", result)

    async def list_categories(self) -> str:
        """List the documentation search categories."""
        result = await self.service.list_categories()
        return self._render("list_categories", result)

    async def natural_language_query(self, query: str) -> str:
        """Run a natural language command.

        Args:
            query: Natural language query (e.g. "Search livery op msfs sdk")
        """
        result = await self.service.run_command(query)
        return self._render("natural_language_query", result)

    async def list_category_items(self, category: str) -> str:
        """List all items of a documentation category.

        Args:
            category: Category to list items from (index, contents, or glossary)
        """
        result = await self.service.list_category_items(category)
        return self._render("list_category_items", result)

    def run_stdio(self) -> None:
        """Serve the tools over stdio until the client disconnects."""
        logger.info(f"{self.config.name} running on stdio")
        self.mcp.run()

    def sse_app(self):
        """Return the ASGI application serving the tools over SSE."""
        return self.mcp.http_app(transport="sse")


def create_server_from_config(
    config: MCPServerConfig,
    service: Optional[DocumentationService] = None,
) -> "MCPServer":
    """Create an MCP server from a configuration object.

    Args:
        config: MCP server configuration
        service: Documentation service (defaults to one with default settings)

    Returns:
        MCP server
    """
    return MCPServer(config=config, service=service)
