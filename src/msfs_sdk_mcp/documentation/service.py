"""
Name: Documentation service.
Description: The operation surface of the server: search, page content, category listings and free-text commands. Every operation returns an OperationResult; failures are reported as values, never raised across this boundary.
"""

import logging
from typing import Any, Optional

from ..constants import DEFAULT_SEARCH_LIMIT
from ..exceptions import NetworkError, ParseFailure, ValidationError
from ..intent import IntentParser
from ..models import CommandTool, OperationResult, ParsedCommand, ScopeCategory
from ..utils import ServiceConfig
from .catalog import CATEGORY_ITEMS
from .client import DocumentationClient
from .content import ContentExtractor
from .extractor import ResultExtractor
from .formatting import (
    format_categories,
    format_category_items,
    format_no_results,
    format_page,
    format_search_results,
)
from .query import build_search_request

logger = logging.getLogger(__name__)


class DocumentationService:
    """Searches and reads the MSFS SDK documentation site."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        client: Optional[DocumentationClient] = None,
        intent_parser: Optional[IntentParser] = None,
    ):
        """Initialize the service.

        Args:
            config: Service configuration
            client: HTTP client (defaults to one built from config)
            intent_parser: Parser for free-text commands
        """
        self.config = config or ServiceConfig()
        self.client = client or DocumentationClient(self.config)
        self.intent_parser = intent_parser or IntentParser()
        self.result_extractor = ResultExtractor(base_url=self.config.base_url)
        self.content_extractor = ContentExtractor(base_url=self.config.base_url)

    async def search(
        self,
        query: str,
        category: Optional[str] = ScopeCategory.ALL.value,
        limit: Any = DEFAULT_SEARCH_LIMIT,
    ) -> OperationResult:
        """Search the documentation site.

        An empty result set is a success carrying a "No results" message.

        Args:
            query: Search query
            category: Search scope; unknown values behave like "all"
            limit: Maximum number of results, clamped to [1, 20]

        Returns:
            OperationResult with the rendered results
        """
        if not query or not str(query).strip():
            return OperationResult.failure(
                ValidationError("Query parameter is required")
            )

        category = category or ScopeCategory.ALL.value
        request = build_search_request(
            query, category, limit, search_url=self.config.search_url
        )
        logger.info(f"Searching MSFS docs: {request.full_url}")

        try:
            html = await self.client.fetch(request.full_url)
        except NetworkError as e:
            logger.error(f"Search error: {e}")
            return OperationResult.failure(
                NetworkError(
                    f"Error searching MSFS documentation: {e.message}. "
                    "Please try a different search term or check your internet connection.",
                    status_code=e.status_code,
                )
            )

        results = self.result_extractor.extract(html, query, request.limit)
        if not results:
            return OperationResult.success(format_no_results(query, category))
        return OperationResult.success(format_search_results(results, query, category))

    async def get_content(
        self, url: str, section: Optional[str] = None
    ) -> OperationResult:
        """Fetch a page and extract its content.

        Args:
            url: Absolute URL of the documentation page
            section: Optional section id, class name or data-section value

        Returns:
            OperationResult with the rendered page
        """
        if not url or not str(url).strip():
            return OperationResult.failure(ValidationError("URL parameter is required"))

        try:
            html = await self.client.fetch(url)
        except NetworkError as e:
            logger.error(f"Content error for {url}: {e}")
            return OperationResult.failure(
                NetworkError(
                    f"Failed to get documentation content: {e.message}",
                    status_code=e.status_code,
                )
            )

        page = self.content_extractor.extract(html, section=section, page_url=url)
        return OperationResult.success(format_page(page, url))

    async def list_categories(self) -> OperationResult:
        """List the search scopes with usage examples."""
        return OperationResult.success(format_categories())

    async def list_category_items(self, category: str) -> OperationResult:
        """List the embedded section titles or glossary terms of a category.

        Args:
            category: One of index, contents or glossary

        Returns:
            OperationResult with one item per line, or a ValidationError
        """
        if not category:
            return OperationResult.failure(
                ValidationError("Category parameter is required")
            )
        if category not in CATEGORY_ITEMS:
            return OperationResult.failure(
                ValidationError(
                    f"Invalid category: {category}. "
                    f"Must be one of: {', '.join(CATEGORY_ITEMS)}"
                )
            )
        return OperationResult.success(format_category_items(CATEGORY_ITEMS[category]))

    def parse_intent(self, command: str) -> Optional[ParsedCommand]:
        """Parse a free-text command without running it."""
        return self.intent_parser.parse(command)

    async def run_command(self, command: str) -> OperationResult:
        """Parse a free-text command and run the operation it names.

        Args:
            command: Free-text command, e.g. "Search livery op msfs sdk"

        Returns:
            OperationResult of the dispatched operation, or a ParseFailure
        """
        if not command or not str(command).strip():
            return OperationResult.failure(
                ValidationError("Query parameter is required")
            )

        parsed = self.parse_intent(command)
        if parsed is None:
            return OperationResult.failure(
                ParseFailure(f"Could not parse natural language query: {command}")
            )

        logger.info(f"Running {parsed.tool.value} for command {command!r}")
        arguments = parsed.arguments
        if parsed.tool == CommandTool.SEARCH:
            return await self.search(
                arguments["query"],
                arguments.get("category", ScopeCategory.ALL.value),
                arguments.get("limit", DEFAULT_SEARCH_LIMIT),
            )
        if parsed.tool == CommandTool.GET_CONTENT:
            return await self.get_content(arguments["url"], arguments.get("section"))
        return await self.list_categories()
