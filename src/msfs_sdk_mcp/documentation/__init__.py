"""Documentation search and extraction module for the MSFS SDK MCP server."""

from .client import DocumentationClient
from .content import ContentExtractor
from .extractor import ExtractionStrategy, ResultExtractor
from .query import build_search_request
from .service import DocumentationService
from .urls import classify_path, normalize_href

__all__ = [
    "ContentExtractor",
    "DocumentationClient",
    "DocumentationService",
    "ExtractionStrategy",
    "ResultExtractor",
    "build_search_request",
    "classify_path",
    "normalize_href",
]
